"""Учебный веб-сервер: маршруты, middleware, формы, загрузка файлов и прокси."""

__version__ = "1.0.0"

__all__ = ["__version__"]
