from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from starlette.datastructures import UploadFile

from ...config import Settings, get_settings
from ...models import UploadAccepted, UploadRejected, UploadResult, UploadedFile
from ...storage import UploadTooLarge, discard, ensure_upload_dir, save_upload

router = APIRouter()

logger = logging.getLogger(__name__)

FIELD_NAME = "my_files"


def collect_files(values: list) -> list[UploadFile]:
    """Оставить только настоящие файлы.

    Браузер присылает пустую часть с ``filename=""``, если файл не выбран;
    обычные текстовые поля с тем же именем тоже пропускаются.
    """
    return [v for v in values if isinstance(v, UploadFile) and v.filename]


@router.post("/upload-example", response_model=UploadResult)
async def upload_example(request: Request, settings: Settings = Depends(get_settings)):
    """Сохранить от одного до ``max_upload_files`` файлов.

    Отказ тоже возвращается с кодом 200, отличается только тело ответа.
    """
    async with request.form() as form:
        files = collect_files(form.getlist(FIELD_NAME))
        if not files or len(files) > settings.max_upload_files:
            logger.info(
                "Rejected upload of %s files (limit %s)", len(files), settings.max_upload_files
            )
            return UploadRejected()

        destination = ensure_upload_dir(settings.upload_path)
        stored: list[UploadedFile] = []
        try:
            for upload in files:
                stored.append(
                    await save_upload(
                        upload,
                        destination,
                        fieldname=FIELD_NAME,
                        max_bytes=settings.max_upload_bytes,
                    )
                )
        except UploadTooLarge:
            discard(stored)
            return UploadRejected()
    return UploadAccepted(files=stored)
