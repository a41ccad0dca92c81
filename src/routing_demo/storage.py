from __future__ import annotations

import logging
import tempfile
import time
from pathlib import Path

from starlette.datastructures import UploadFile

from .models import UploadedFile

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


def _now_ms() -> int:
    return int(time.time() * 1000)


class UploadTooLarge(ValueError):
    """Файл превысил допустимый размер."""


def ensure_upload_dir(path: Path) -> Path:
    """Создать каталог загрузок.

    При нехватке прав используется временный каталог, чтобы приложение
    оставалось работоспособным.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError:
        fallback = Path(tempfile.gettempdir()) / "uploads"
        logger.warning("Cannot create %s, falling back to %s", path, fallback)
        fallback.mkdir(parents=True, exist_ok=True)
        return fallback
    return path


def build_stored_name(original: str, timestamp_ms: int) -> str:
    """Вставить метку времени между именем файла и расширением.

    ``donkey.jpg`` -> ``donkey-1700000000000.jpg``. Компоненты пути
    отбрасываются, чтобы файл нельзя было записать вне каталога загрузок.
    """
    name = Path(original.replace("\\", "/")).name
    if name in {"", ".", ".."}:
        name = "upload"
    suffix = Path(name).suffix
    stem = name[: len(name) - len(suffix)] if suffix else name
    return f"{stem}-{timestamp_ms}{suffix}"


async def save_upload(
    upload: UploadFile,
    destination: Path,
    *,
    fieldname: str,
    max_bytes: int | None = None,
) -> UploadedFile:
    """Сохранить загруженный файл на диск и вернуть его описание."""
    original = upload.filename or ""
    timestamp = _now_ms()
    stored_name = build_stored_name(original, timestamp)
    # одинаковые имена в пределах одной миллисекунды
    while (destination / stored_name).exists():
        timestamp += 1
        stored_name = build_stored_name(original, timestamp)
    target = destination / stored_name

    size = 0
    with open(target, "wb") as dest:
        while True:
            chunk = await upload.read(CHUNK_SIZE)
            if not chunk:
                break
            size += len(chunk)
            if max_bytes is not None and size > max_bytes:
                break
            dest.write(chunk)

    if max_bytes is not None and size > max_bytes:
        target.unlink(missing_ok=True)
        logger.warning("Rejected %s: larger than %s bytes", original, max_bytes)
        raise UploadTooLarge(f"{original} exceeds {max_bytes} bytes")

    logger.info("Stored upload %s as %s (%s bytes)", original, target, size)
    return UploadedFile(
        fieldname=fieldname,
        originalname=original,
        mimetype=upload.content_type,
        destination=str(destination),
        filename=stored_name,
        path=str(target),
        size=size,
    )


def discard(files: list[UploadedFile]) -> None:
    """Удалить уже сохранённые файлы отклонённого запроса."""
    for item in files:
        Path(item.path).unlink(missing_ok=True)


__all__ = [
    "CHUNK_SIZE",
    "UploadTooLarge",
    "build_stored_name",
    "discard",
    "ensure_upload_dir",
    "save_upload",
]
