from __future__ import annotations

from dotenv import find_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .tags import BASE_LOCALE, normalize

# Nearest .env upwards from the working directory, read by pydantic-settings
ENV_FILE_NAME = ".env"
ENV_FILE = find_dotenv(ENV_FILE_NAME, usecwd=True) or ENV_FILE_NAME


class Settings(BaseSettings):
    DEFAULT_LOCALE: str = ""  # empty: use the platform locale
    FALLBACK_LOCALE: str = BASE_LOCALE
    BUNDLE_PACKAGE: str = "localizer.locales"
    LOG_LEVEL: str = "INFO"

    @field_validator("DEFAULT_LOCALE", mode="before")
    @classmethod
    def parse_default_locale(cls, v):  # type: ignore
        if v in (None, ""):
            return ""
        return normalize(str(v))

    @field_validator("FALLBACK_LOCALE", mode="before")
    @classmethod
    def parse_fallback_locale(cls, v):  # type: ignore
        return normalize(str(v or BASE_LOCALE))

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def parse_log_level(cls, v):  # type: ignore
        return str(v or "INFO").strip().upper()

    model_config = SettingsConfigDict(
        env_prefix="LOCALIZER_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
