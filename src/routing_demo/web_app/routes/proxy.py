from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from ...config import Settings, get_settings
from ...models import DotenvError, ParameterExampleResponse, UpstreamErrorBody
from ...services import animals
from ...services.animals import AnimalApiError

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/proxy-example")
async def proxy_example(settings: Settings = Depends(get_settings)):
    """Передать клиенту ответ внешнего API без изменений.

    Ошибки уходят в общий обработчик ``AnimalApiError``.
    """
    return await animals.fetch_animals(
        settings.proxy_api_url,
        settings.proxy_api_key,
        num=10,
        timeout=settings.upstream_timeout,
    )


@router.get("/dotenv-example")
async def dotenv_example(settings: Settings = Depends(get_settings)):
    """То же, что ``/proxy-example``, но адрес и ключ берутся из настроек."""
    try:
        return await animals.fetch_animals(
            settings.api_base_url,
            settings.api_secret_key,
            num=10,
            timeout=settings.upstream_timeout,
        )
    except AnimalApiError:
        logger.exception("dotenv-example upstream call failed")
        return DotenvError()


@router.get(
    "/parameter-example/{animalId}",
    response_model=ParameterExampleResponse | UpstreamErrorBody,
)
async def parameter_example(animalId: str, settings: Settings = Depends(get_settings)):
    """Запросить данные одного животного по параметру пути."""
    try:
        animal = await animals.fetch_animals(
            settings.api_base_url,
            settings.api_secret_key,
            num=1,
            animal_id=animalId,
            timeout=settings.upstream_timeout,
        )
    except AnimalApiError as exc:
        logger.exception("parameter-example upstream call failed for %s", animalId)
        return UpstreamErrorBody(**exc.to_dict())
    return ParameterExampleResponse(
        message=f"Imagine we got the data from the API for animal #{animalId}",
        animalId=animalId,
        animal=animal,
    )
