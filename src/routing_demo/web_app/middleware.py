from __future__ import annotations

import logging
import time
from typing import Awaitable, Callable, List, Tuple

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

access_logger = logging.getLogger("routing_demo.access")

DispatchFunction = Callable[[Request, RequestResponseEndpoint], Awaitable[Response]]

def path_matches(prefix: str, path: str) -> bool:
    """Проверить, что *path* совпадает с *prefix* или лежит под ним."""
    prefix = prefix.rstrip("/")
    if not prefix:
        return True
    return path == prefix or path.startswith(prefix + "/")


class ScopedMiddleware(BaseHTTPMiddleware):
    """Запускает *dispatch* только для путей под заданным префиксом."""

    def __init__(self, app: ASGIApp, prefix: str, dispatch: DispatchFunction) -> None:
        super().__init__(app)
        self.prefix = prefix
        self.scoped_dispatch = dispatch

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if not path_matches(self.prefix, request.url.path):
            return await call_next(request)
        return await self.scoped_dispatch(request, call_next)


class MiddlewareChain:
    """Набор функций промежуточной обработки, привязанных к префиксам.

    Функции выполняются в порядке регистрации.
    """

    def __init__(self) -> None:
        self._steps: List[Tuple[str, DispatchFunction]] = []

    def __len__(self) -> int:
        return len(self._steps)

    def use(self, prefix: str) -> Callable[[DispatchFunction], DispatchFunction]:
        """Зарегистрировать функцию для префикса.

        Функция получает ``(request, call_next)`` и обязана вызвать
        ``call_next``, чтобы передать управление дальше.
        """

        def decorator(func: DispatchFunction) -> DispatchFunction:
            self._steps.append((prefix, func))
            return func

        return decorator

    def install(self, app: FastAPI) -> None:
        """Подключить зарегистрированные функции к приложению."""
        # Starlette оборачивает последним добавленный middleware снаружи
        for prefix, func in reversed(self._steps):
            app.add_middleware(ScopedMiddleware, prefix=prefix, dispatch=func)


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Одна строка лога на каждый запрос: метод, путь, статус, время."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        access_logger.info(
            "%s %s %s %.3f ms - %s",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            response.headers.get("content-length", "-"),
        )
        return response


async def first_middleware(request: Request, call_next: RequestResponseEndpoint) -> Response:
    request.state.added_stuff = "First middleware function run!"
    return await call_next(request)


async def second_middleware(request: Request, call_next: RequestResponseEndpoint) -> Response:
    request.state.added_stuff += " Second middleware function run!"
    return await call_next(request)


def build_demo_chain() -> MiddlewareChain:
    """Цепочка из двух шагов для ``/middleware-example``."""
    chain = MiddlewareChain()
    chain.use("/middleware-example")(first_middleware)
    chain.use("/middleware-example")(second_middleware)
    return chain


__all__ = [
    "AccessLogMiddleware",
    "MiddlewareChain",
    "ScopedMiddleware",
    "build_demo_chain",
    "path_matches",
]
