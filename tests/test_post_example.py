import sys
from pathlib import Path

from fastapi.testclient import TestClient

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from routing_demo.web_app import server  # noqa: E402

app = server.app


def test_post_example_echoes_form_fields():
    form = {"your_name": "Foo", "your_email": "fb1258@nyu.edu", "agree": "true"}
    with TestClient(app) as client:
        resp = client.post("/post-example", data=form)
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/json"
    data = resp.json()
    assert data["status"] == "amazing success!"
    assert data["message"] == "congratulations on sending us this data!"
    assert data["your_data"] == {"name": "Foo", "email": "fb1258@nyu.edu", "agree": "true"}


def test_post_example_accepts_json():
    payload = {"your_name": "Foo", "your_email": "fb1258@nyu.edu", "agree": True}
    with TestClient(app) as client:
        resp = client.post("/post-example", json=payload)
    assert resp.status_code == 200
    assert resp.json()["your_data"] == {
        "name": "Foo",
        "email": "fb1258@nyu.edu",
        "agree": True,
    }


def test_post_example_missing_fields_are_null():
    with TestClient(app) as client:
        resp = client.post("/post-example", data={"your_name": "Foo"})
    assert resp.json()["your_data"] == {"name": "Foo", "email": None, "agree": None}


def test_post_example_rejects_malformed_json():
    with TestClient(app) as client:
        resp = client.post(
            "/post-example",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Malformed JSON body"
