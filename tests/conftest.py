# tests/conftest.py
from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

from ptypes.config.settings import get_settings
from ptypes.domain.enums.encoding import Base64Alphabet
from ptypes.domain.services.base64_codec import set_default_alphabet
from ptypes.infrastructure.logging.logger import _JsonFormatter


def _json_handlers(logger: logging.Logger) -> list[logging.Handler]:
    """Return handlers on ``logger`` that use the JSON formatter."""
    return [h for h in logger.handlers if isinstance(h.formatter, _JsonFormatter)]


@pytest.fixture(autouse=True)
def _reset_process_defaults() -> Generator[None, None, None]:
    """Restore the default alphabet and drop cached settings around every test."""
    get_settings.cache_clear()
    set_default_alphabet(Base64Alphabet.URL_SAFE_NO_PAD)
    yield
    set_default_alphabet(Base64Alphabet.URL_SAFE_NO_PAD)
    get_settings.cache_clear()


@pytest.fixture()
def isolated_root_logger() -> Generator[logging.Logger, None, None]:
    """Give a test a root logger without JSON handlers, removing any it installs."""
    root = logging.getLogger()
    saved_level = root.level
    for handler in _json_handlers(root):
        root.removeHandler(handler)
    try:
        yield root
    finally:
        for handler in _json_handlers(root):
            root.removeHandler(handler)
        root.setLevel(saved_level)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove ptypes-related environment variables for deterministic settings."""
    for key in ("PTYPES_BASE64_ALPHABET", "LOG_LEVEL", "SERVICE_NAME"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
