# src/ptypes/application/services/json_codec.py
# Copyright (c) Ptypes.
# SPDX-License-Identifier: MIT
"""JSON boundary service (application layer).

Purpose:
    Load and dump JSON documents whose fields use the ptypes value types, and
    surface validation failures as a single document-level parse error.

Layer:
    application/services

Notes:
    - Validation is delegated to pydantic ``TypeAdapter`` instances, cached per
      target type.
    - Failures are logged with error locations and types only. Input values are
      never logged because documents may carry key material.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, NoReturn, TypeVar, cast

from pydantic import TypeAdapter, ValidationError

from ptypes.domain.exceptions.base import PtypesError

__all__ = [
    "DocumentParseError",
    "load_json",
    "load_python",
    "dump_json",
    "to_json_value",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DocumentParseError(PtypesError):
    """Raised when a JSON document does not match the expected shape.

    Attributes:
        details:
            ``{"type": <target type name>, "errors": [{"loc": ..., "type": ...,
            "msg": ...}, ...]}``.
    """

    code = "DOCUMENT_PARSE_ERROR"


@lru_cache(maxsize=128)
def _adapter(tp: Any) -> TypeAdapter[Any]:
    return TypeAdapter(tp)


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", None) or repr(tp)


def _raise_parse_error(tp: Any, exc: ValidationError) -> NoReturn:
    errors = [
        {"loc": list(err["loc"]), "type": err["type"], "msg": err["msg"]}
        for err in exc.errors(include_url=False, include_input=False)
    ]
    type_name = _type_name(tp)
    logger.warning(
        "ptypes.json_codec.parse_failed",
        extra={"extra": {"type": type_name, "error_count": len(errors)}},
    )
    raise DocumentParseError(
        f"Document does not match {type_name}",
        details={"type": type_name, "errors": errors},
    ) from exc


def load_json(tp: type[T], text: str | bytes) -> T:
    """Validate a JSON document against ``tp``.

    Args:
        tp:
            Target type, e.g. a pydantic model or ``OneOrMany[str]``.
        text:
            JSON text.

    Returns:
        The validated value.

    Raises:
        DocumentParseError:
            If the document is not valid JSON or does not match ``tp``.
    """
    try:
        return cast(T, _adapter(tp).validate_json(text))
    except ValidationError as exc:
        _raise_parse_error(tp, exc)


def load_python(tp: type[T], data: Any) -> T:
    """Validate already-decoded JSON data (dicts, lists, strings) against ``tp``.

    Raises:
        DocumentParseError:
            If ``data`` does not match ``tp``.
    """
    try:
        return cast(T, _adapter(tp).validate_python(data))
    except ValidationError as exc:
        _raise_parse_error(tp, exc)


def dump_json(tp: Any, value: Any) -> str:
    """Serialize ``value`` as JSON text, preserving each type's wire shape."""
    return _adapter(tp).dump_json(value).decode("utf-8")


def to_json_value(tp: Any, value: Any) -> Any:
    """Return the JSON-compatible Python form of ``value`` (str, list, dict, ...)."""
    return _adapter(tp).dump_python(value, mode="json")
