from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from ..config import PUBLIC_DIR, get_settings
from ..error_handling import register_error_handlers
from .middleware import AccessLogMiddleware, build_demo_chain
from .routes import forms, pages, proxy, upload

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Собрать приложение: статика, middleware, обработчики ошибок, маршруты."""
    settings = get_settings()
    application = FastAPI(title="Routing demo")

    # --------- Статика ----------
    if PUBLIC_DIR.exists():
        application.mount("/static", StaticFiles(directory=PUBLIC_DIR), name="static")
    else:  # pragma: no cover
        logger.warning(
            "Static directory %s does not exist; static files will not be served.",
            PUBLIC_DIR,
        )

    # --------- Middleware ----------
    build_demo_chain().install(application)
    if settings.access_log:
        # добавлен последним, поэтому выполняется первым
        application.add_middleware(AccessLogMiddleware)

    register_error_handlers(application)

    # --------- Подключение маршрутов ----------
    application.include_router(pages.router)
    application.include_router(forms.router)
    application.include_router(upload.router)
    application.include_router(proxy.router)
    return application


app = create_app()
