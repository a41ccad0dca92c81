from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Tuple, Type

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

# Каталог со статикой, который отдаётся по префиксу ``/static``
PUBLIC_DIR = Path(__file__).resolve().parent / "public"


class Settings(BaseSettings):
    """Настройки приложения.

    Источники в порядке приоритета: переменные окружения, файл ``.env``,
    YAML-файл (``config.yml`` или путь из ``CONFIG_PATH``), значения по
    умолчанию.
    """

    # Внешний API с данными о животных
    api_base_url: Optional[str] = None
    api_secret_key: Optional[str] = None
    proxy_api_url: str = "https://my.api.mockaroo.com/animals.json"
    proxy_api_key: str = "d9ddfc40"
    upstream_timeout: float = 10.0

    # Загрузка файлов
    upload_dir: Optional[Path] = None
    max_upload_files: int = 3
    max_upload_bytes: int = 10 * 1024 * 1024

    # Логирование
    log_level: str = "INFO"
    log_file: Optional[Path] = None
    log_max_bytes: int = 1024 * 1024
    log_backup_count: int = 3
    access_log: bool = True

    # Сервер
    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        yaml_path = Path(os.getenv("CONFIG_PATH", "config.yml"))
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls, yaml_file=yaml_path),
            file_secret_settings,
        )

    @property
    def upload_path(self) -> Path:
        """Каталог для сохранения загруженных файлов."""
        return self.upload_dir or PUBLIC_DIR / "uploads"


def get_settings() -> Settings:
    """Прочитать настройки заново; используется как зависимость FastAPI."""
    return Settings()


__all__ = ["PUBLIC_DIR", "Settings", "get_settings"]
