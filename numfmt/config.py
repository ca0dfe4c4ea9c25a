"""Library configuration management."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from numfmt.constants import SMALL_AMOUNT_LABEL, SMALL_PERCENTAGE_LABEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    """Display configuration loaded from environment or `.env`."""

    model_config = SettingsConfigDict(
        env_file=(".env",),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    small_amount_label: str = Field(
        default=SMALL_AMOUNT_LABEL,
        alias="NUMFMT_SMALL_AMOUNT_LABEL",
        min_length=1,
    )
    small_percentage_label: str = Field(
        default=SMALL_PERCENTAGE_LABEL,
        alias="NUMFMT_SMALL_PERCENTAGE_LABEL",
        min_length=1,
    )

    log_level: str = Field(default="WARNING", alias="NUMFMT_LOG_LEVEL")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Return cached Settings instance, raising a helpful message on failure."""
    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid configuration: {exc}") from exc


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging for host applications that want it.

    The library itself never calls this; importing ``numfmt`` leaves
    logging untouched.
    """
    settings = settings or load_settings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    logging.getLogger("numfmt").setLevel(settings.log_level)


__all__ = ["Settings", "load_settings", "configure_logging"]
