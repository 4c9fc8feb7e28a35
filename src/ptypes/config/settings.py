# src/ptypes/config/settings.py
# Copyright (c) Ptypes.
# SPDX-License-Identifier: MIT
"""Ptypes Configuration (Pydantic Settings, v2)

Summary:
    Typed, validated process configuration. Only :mod:`ptypes.bootstrap` reads
    it; value types receive their choices as arguments.

Design:
    - Pydantic v2 BaseSettings with `extra='forbid'` to catch unknown init keys.
    - Explicit field declarations with env aliases.
    - Singleton accessor `get_settings()` with LRU cache.
    - Safe, structured logging (no secrets).
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ptypes.domain.enums.encoding import Base64Alphabet

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Typed process configuration for ptypes.

    Attributes:
        base64_alphabet:
            Alphabet used by ``Base64urlUInt`` when no alphabet is given.
        log_level:
            Optional log level override.
        service_name:
            Optional service name added to JSON log lines.
    """

    base64_alphabet: Base64Alphabet = Field(
        default=Base64Alphabet.URL_SAFE_NO_PAD,
        description=(
            "Default base64 alphabet for unsigned integers. The two alphabets are "
            "not interchangeable; a deployment picks one."
        ),
        validation_alias="PTYPES_BASE64_ALPHABET",
    )

    log_level: str | None = Field(
        default=None,
        description="Override log level (e.g., 'DEBUG', 'INFO'). If not set, defaults are used.",
        validation_alias="LOG_LEVEL",
    )

    service_name: str | None = Field(
        default=None,
        description="Logical service name for logging.",
        validation_alias="SERVICE_NAME",
    )

    model_config = SettingsConfigDict(
        extra="forbid",
        case_sensitive=False,
        populate_by_name=True,
    )

    @field_validator("base64_alphabet", mode="before")
    @classmethod
    def _normalize_alphabet(cls, v: object) -> object:
        """Accept alphabet names case-insensitively (``URL_SAFE_NO_PAD`` too)."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {v!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton `Settings` instance.

    Returns:
        Settings: Validated settings.

    Raises:
        RuntimeError: If configuration is invalid.
    """
    try:
        settings = Settings()
    except ValidationError as exc:
        logger.exception("Invalid ptypes configuration")
        raise RuntimeError(f"Invalid configuration: {exc}") from exc

    logger.info(
        "ptypes.settings.initialized",
        extra={
            "extra": {
                "base64_alphabet": settings.base64_alphabet.value,
                "log_level": settings.log_level,
                "service_name_set": bool(settings.service_name),
            }
        },
    )
    return settings
