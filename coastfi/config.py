"""Runtime settings for the Coast FI API, read from COASTFI_* environment variables."""

from __future__ import annotations

import os
from typing import List, Mapping, Optional

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator

ENV_PREFIX = "COASTFI_"

DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]


class ConfigurationError(Exception):
    """Raised when the environment settings cannot be parsed."""


class Settings(BaseModel):
    cors_origins: List[str] = Field(
        default_factory=lambda: list(DEFAULT_CORS_ORIGINS),
        description="Origins allowed to call /api/* from a browser.",
    )
    log_level: str = Field("INFO", description="loguru level name.")
    host: str = "127.0.0.1"
    port: int = Field(5000, ge=1, le=65535)
    debug: bool = False

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, value):
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("log_level")
    @classmethod
    def normalise_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level '{value}'")
        return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from COASTFI_CORS_ORIGINS, COASTFI_LOG_LEVEL, COASTFI_HOST, COASTFI_PORT, COASTFI_DEBUG."""
    environ = os.environ if environ is None else environ

    raw = {
        name: environ[ENV_PREFIX + name.upper()]
        for name in Settings.model_fields
        if ENV_PREFIX + name.upper() in environ
    }
    try:
        settings = Settings.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid {ENV_PREFIX}* settings: {e}") from e

    logger.debug(f"Loaded settings from environment keys: {sorted(raw)}")
    return settings
