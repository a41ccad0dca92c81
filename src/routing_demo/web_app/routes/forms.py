from __future__ import annotations

import logging
from typing import Any, Mapping

from fastapi import APIRouter, HTTPException, Request

from ...models import PostExampleResponse, SubmittedData

router = APIRouter()
logger = logging.getLogger(__name__)


async def read_body(request: Request) -> Mapping[str, Any]:
    """Разобрать тело запроса как JSON или как форму."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            data = await request.json()
        except ValueError as exc:
            logger.warning("Malformed JSON body on %s", request.url.path)
            raise HTTPException(status_code=400, detail="Malformed JSON body") from exc
        if not isinstance(data, dict):
            raise HTTPException(status_code=400, detail="JSON body must be an object")
        return data
    return await request.form()


@router.post("/post-example", response_model=PostExampleResponse)
async def post_example(request: Request):
    """Вернуть клиенту присланные данные."""
    body = await read_body(request)
    return PostExampleResponse(
        your_data=SubmittedData(
            name=body.get("your_name"),
            email=body.get("your_email"),
            agree=body.get("agree"),
        )
    )
