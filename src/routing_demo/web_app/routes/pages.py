from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse, HTMLResponse

from ...config import PUBLIC_DIR
from ...models import JsonExample

router = APIRouter()

MIDDLEWARE_FALLBACK = "Sorry, the middleware did not work!"


@router.get("/", response_class=HTMLResponse)
async def root():
    return HTMLResponse("Goodbye world!")


@router.get("/html-example")
async def html_example():
    """Отдать статическую HTML-страницу."""
    return FileResponse(PUBLIC_DIR / "some-page.html", media_type="text/html")


@router.get("/json-example", response_model=JsonExample)
async def json_example():
    return JsonExample(
        title="Hello!",
        heading="Hello!",
        message="Welcome to this JSON document, served up by FastAPI",
        imagePath="/static/images/donkey.jpg",
    )


@router.get("/middleware-example", response_class=HTMLResponse)
async def middleware_example(request: Request):
    """Вернуть текст, накопленный цепочкой middleware."""
    message = getattr(request.state, "added_stuff", None) or MIDDLEWARE_FALLBACK
    return HTMLResponse(message)
