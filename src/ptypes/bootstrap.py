# src/ptypes/bootstrap.py
# Copyright (c) Ptypes.
# SPDX-License-Identifier: MIT
"""Process bootstrap.

Summary:
    Apply :class:`~ptypes.config.settings.Settings` once at startup: configure
    JSON logging and select the process-wide default base64 alphabet.

Typical usage:
    from ptypes.bootstrap import bootstrap

    settings = bootstrap()
"""

from __future__ import annotations

from ptypes.config.settings import Settings, get_settings
from ptypes.domain.services.base64_codec import set_default_alphabet
from ptypes.infrastructure.logging.logger import configure_root_logging, get_json_logger

__all__ = ["bootstrap"]

logger = get_json_logger(__name__)


def bootstrap(settings: Settings | None = None) -> Settings:
    """Configure logging and codec defaults from settings.

    Args:
        settings: Explicit settings; defaults to :func:`get_settings`.

    Returns:
        Settings: The settings that were applied.
    """
    resolved = settings if settings is not None else get_settings()
    configure_root_logging(resolved.log_level, service=resolved.service_name)
    set_default_alphabet(resolved.base64_alphabet)
    logger.info(
        "ptypes.bootstrap.applied",
        extra={"extra": {"base64_alphabet": resolved.base64_alphabet.value}},
    )
    return resolved
