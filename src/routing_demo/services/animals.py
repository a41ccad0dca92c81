"""Клиент внешнего API с данными о животных."""

from __future__ import annotations

from typing import Any, Dict, Optional
import logging

import httpx


logger = logging.getLogger(__name__)


class AnimalApiError(RuntimeError):
    """Исключение при обращении к API животных."""

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        status: Optional[int] = None,
        url: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.status = status
        self.url = url

    def to_dict(self) -> Dict[str, Any]:
        """Представить ошибку в виде JSON-совместимого словаря."""
        return {
            "name": type(self).__name__,
            "message": str(self),
            "code": self.code,
            "status": self.status,
            "url": self.url,
        }


async def fetch_animals(
    base_url: Optional[str],
    api_key: Optional[str],
    *,
    num: int,
    animal_id: Optional[str] = None,
    timeout: float = 10.0,
) -> Any:
    """Запросить данные о животных и вернуть тело ответа без изменений."""

    if not base_url:
        raise AnimalApiError("API_BASE_URL is not configured", code="ERR_CONFIG")
    if not api_key:
        raise AnimalApiError("API_SECRET_KEY is not configured", code="ERR_CONFIG")

    params: Dict[str, Any] = {"key": api_key, "num": num}
    if animal_id is not None:
        params["id"] = animal_id

    async with httpx.AsyncClient(timeout=timeout) as client:
        try:
            response = await client.get(base_url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.error("Animal API request failed: %s", status)
            raise AnimalApiError(
                f"Request failed with status code {status}",
                code="ERR_BAD_RESPONSE",
                status=status,
                url=str(exc.request.url),
            ) from exc
        except httpx.InvalidURL as exc:
            logger.error("Invalid animal API URL %r: %s", base_url, exc)
            raise AnimalApiError(
                f"Invalid API_BASE_URL: {exc}",
                code="ERR_CONFIG",
                url=base_url,
            ) from exc
        except httpx.HTTPError as exc:
            logger.error("HTTP error during animal API request: %s", exc)
            raise AnimalApiError(
                str(exc) or type(exc).__name__,
                code=type(exc).__name__,
                url=base_url,
            ) from exc

    try:
        return response.json()
    except ValueError:
        # тело не JSON: отдаём текст как есть
        logger.warning("Animal API returned non-JSON response from %s", response.request.url)
        return response.text


__all__ = ["fetch_animals", "AnimalApiError"]
