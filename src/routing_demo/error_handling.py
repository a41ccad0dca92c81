from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .services.animals import AnimalApiError

logger = logging.getLogger(__name__)


def log_exception(exc: Exception, *, path: str | None = None) -> None:
    """Записать исключение в лог с опциональным путём запроса."""
    if path:
        logger.error("Error handling %s", path, exc_info=exc)
    else:
        logger.error("Unhandled exception", exc_info=exc)


async def animal_api_error_handler(request: Request, exc: AnimalApiError) -> JSONResponse:
    """Общий обработчик сбоев внешнего API."""
    log_exception(exc, path=request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": str(exc), "upstream": exc.to_dict()},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Подключить обработчики ошибок к приложению."""
    app.add_exception_handler(AnimalApiError, animal_api_error_handler)


__all__ = ["log_exception", "animal_api_error_handler", "register_error_handlers"]
