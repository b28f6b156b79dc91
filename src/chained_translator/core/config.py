"""Translator configuration loaded from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class TranslatorConfig(BaseSettings):
    """Locations and conventions of the canonical and override language trees."""

    model_config = {"env_prefix": "CHAINED_TRANSLATOR_"}

    lang_path: Path = Path("resources/lang")
    override_path: Path = Path("resources/lang-custom")
    fallback_locale: str = "en"
    group_extension: str = "yml"
    locale_extension: str = "json"
    directory_mode: int = Field(default=0o755, ge=0, le=0o777)
    log_level: str = "INFO"

    @field_validator("group_extension", "locale_extension")
    @classmethod
    def _strip_dot(cls, value: str) -> str:
        return value.lstrip(".").lower()

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()
