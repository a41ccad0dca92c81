import re
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from routing_demo.config import Settings, get_settings  # noqa: E402
from routing_demo.web_app import server  # noqa: E402

app = server.app

REJECTED = {"status": "you fail!!!", "message": "rejected your files... try harder"}


@pytest.fixture
def upload_dir(tmp_path):
    target = tmp_path / "uploads"
    app.dependency_overrides[get_settings] = lambda: Settings(
        upload_dir=target, max_upload_bytes=64
    )
    yield target
    app.dependency_overrides.clear()


def _files(count, content=b"payload"):
    return [
        ("my_files", (f"file{i}.txt", content, "text/plain")) for i in range(count)
    ]


def test_upload_without_files_is_rejected_with_200(upload_dir):
    with TestClient(app) as client:
        resp = client.post("/upload-example")
    assert resp.status_code == 200
    assert resp.json() == REJECTED


def test_upload_more_than_three_files_is_rejected_with_200(upload_dir):
    with TestClient(app) as client:
        resp = client.post("/upload-example", files=_files(4))
    assert resp.status_code == 200
    assert resp.json() == REJECTED
    assert not upload_dir.exists() or not any(upload_dir.iterdir())


@pytest.mark.parametrize("count", [1, 2, 3])
def test_upload_accepts_up_to_three_files(upload_dir, count):
    with TestClient(app) as client:
        resp = client.post("/upload-example", files=_files(count))
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "all good"
    assert data["message"] == "files were uploaded!!!"
    assert len(data["files"]) == count
    assert len(list(upload_dir.iterdir())) == count


def test_uploaded_file_descriptor(upload_dir):
    with TestClient(app) as client:
        resp = client.post(
            "/upload-example",
            files=[("my_files", ("donkey.jpg", b"\xff\xd8data", "image/jpeg"))],
        )
    descriptor = resp.json()["files"][0]
    assert descriptor["fieldname"] == "my_files"
    assert descriptor["originalname"] == "donkey.jpg"
    assert descriptor["mimetype"] == "image/jpeg"
    assert descriptor["size"] == 6
    assert re.fullmatch(r"donkey-\d+\.jpg", descriptor["filename"])
    stored = Path(descriptor["path"])
    assert stored.parent == upload_dir
    assert stored.read_bytes() == b"\xff\xd8data"


def test_oversized_upload_is_rejected_and_cleaned(upload_dir):
    files = [
        ("my_files", ("small.txt", b"ok", "text/plain")),
        ("my_files", ("big.txt", b"x" * 100, "text/plain")),
    ]
    with TestClient(app) as client:
        resp = client.post("/upload-example", files=files)
    assert resp.status_code == 200
    assert resp.json() == REJECTED
    assert list(upload_dir.iterdir()) == []


def test_upload_path_traversal_is_sanitized(upload_dir, tmp_path):
    with TestClient(app) as client:
        resp = client.post(
            "/upload-example",
            files=[("my_files", ("../../secret.txt", b"payload", "text/plain"))],
        )
    descriptor = resp.json()["files"][0]
    assert Path(descriptor["path"]).resolve().parent == upload_dir.resolve()
    assert descriptor["filename"].startswith("secret-")


def test_upload_with_no_file_chosen_is_rejected_with_200(upload_dir):
    # так браузер отправляет форму без выбранного файла
    with TestClient(app) as client:
        resp = client.post(
            "/upload-example",
            files=[("my_files", ("", b"", "application/octet-stream"))],
        )
    assert resp.status_code == 200
    assert resp.json() == REJECTED


def test_upload_with_text_field_is_rejected_with_200(upload_dir):
    with TestClient(app) as client:
        resp = client.post("/upload-example", data={"my_files": "x"})
    assert resp.status_code == 200
    assert resp.json() == REJECTED


def test_text_fields_are_ignored_next_to_files(upload_dir):
    with TestClient(app) as client:
        resp = client.post(
            "/upload-example",
            data={"my_files": "x"},
            files=_files(1),
        )
    assert resp.status_code == 200
    assert len(resp.json()["files"]) == 1
