import logging
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_FALSY_STORAGE_KEYS = {"", "0", "false", "no", "off"}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Locale resolution
    intl_default_locale: str = "zh-CN"
    intl_device_info: bool = False

    # Persistence (False disables it)
    intl_storage_key: str | Literal[False] = "locale"
    intl_storage_backend: Literal["file", "redis", "memory"] = "file"
    intl_storage_path: str = "./.intlkit/locale.json"

    # Redis
    redis_url: str = "redis://localhost:6379/0"

    # App
    app_name: str = "intlkit"
    debug: bool = False

    @field_validator("intl_storage_key", mode="before")
    @classmethod
    def _disable_storage_key(cls, value):
        if value is False or (isinstance(value, str) and value.strip().lower() in _FALSY_STORAGE_KEYS):
            return False
        return value


settings = Settings()

_log = logging.getLogger(__name__)
if not settings.intl_default_locale:
    _log.warning("INTL_DEFAULT_LOCALE is empty, the primary locale will be used.")
