"""Входная точка для запуска учебного сервера.

Запускает приложение FastAPI из модуля ``web_app.server``. Адрес, порт,
уровень логирования и прочие параметры берутся из настроек
(переменные окружения, ``.env``, ``config.yml``).
"""

from __future__ import annotations

import logging
import sys

import uvicorn

from .config import get_settings
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """Точка входа для запуска сервера."""
    settings = get_settings()

    # Настраиваем логирование согласно конфигу
    setup_logging(
        settings.log_level,
        settings.log_file,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )
    logger.info("Starting FastAPI server on %s:%s", settings.host, settings.port)

    try:
        uvicorn.run(
            "routing_demo.web_app.server:app",
            host=settings.host,
            port=settings.port,
            reload=settings.reload,
            log_config=None,
        )
    except Exception:
        logger.exception("Failed to start server")
        sys.exit(1)


if __name__ == "__main__":
    main()
