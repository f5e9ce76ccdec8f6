"""
Configuration for attrschema.

Settings are read from environment variables with the ``ATTRSCHEMA_``
prefix. Nothing here is required: every setting has a default suitable for
library use.

Example:
    $ ATTRSCHEMA_STRICT_DECODE=true ATTRSCHEMA_LOG_LEVEL=debug python app.py
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

import json_log_formatter
from pydantic import Field
from pydantic_settings import BaseSettings

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    """attrschema configuration."""

    log_level: str = Field(default="INFO")
    log_format: Literal["text", "json"] = Field(default="text")

    # Reject unknown top-level fields when decoding a schema
    strict_decode: bool = Field(default=False)

    model_config = {"env_prefix": "ATTRSCHEMA_"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the settings loaded from the environment."""
    return Settings()


def reset_settings() -> None:
    """Drop cached settings (for testing only)."""
    get_settings.cache_clear()


def setup_logging(settings: Settings | None = None) -> None:
    """Configure root logging from settings.

    Applications call this once at startup; the library never does.

    Args:
        settings: Settings to apply (loaded from env if not provided)
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    if settings.log_format == "json":
        formatter = json_log_formatter.JSONFormatter()
    else:
        formatter = logging.Formatter(TEXT_FORMAT)

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]
