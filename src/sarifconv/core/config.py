# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Application configuration via environment variables and .env files."""

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sarifconv.core.constants import SARIF_SCHEMA_URI
from sarifconv.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SARIFCONV_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"  # "text" or "json"

    @field_validator("log_format", mode="before")
    @classmethod
    def _parse_log_format(cls, v: object) -> str:
        value = str(v).strip().lower()
        if value not in {"text", "json"}:
            raise ValueError(f"log_format must be 'text' or 'json', got {v!r}")
        return value

    # Output
    json_indent: int = 2
    schema_uri: str = SARIF_SCHEMA_URI

    # Conversion policy
    keep_unlocated_results: bool = True
    include_fixes: bool = True


def get_settings() -> Settings:
    """Load settings; invalid values surface as :class:`ConfigurationError`."""
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc
