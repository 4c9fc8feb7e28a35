# src/ptypes/domain/value_objects/string_or_uri.py
# Copyright (c) Ptypes.
# SPDX-License-Identifier: MIT
"""StringOrUri value object.

Purpose:
    Identifier that is either an opaque string or a validated URI, as used by
    JWT claims such as ``iss`` and ``sub`` and by linked-data identifiers.

Design:
    - The tag is derived from the stored value: a :class:`Uri` makes it a URI
      identifier, a plain ``str`` a string identifier.
    - Text containing ``':'`` must validate as a URI; text without one is a
      plain string. The colon test is a syntactic shortcut, narrower than the
      RFC 7519 StringOrURI grammar, and is kept for wire compatibility.
    - The wire form is the bare text; decoding re-derives the tag.

Layer:
    domain/value_objects
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from ptypes.domain.enums.encoding import IdentifierKind
from ptypes.domain.value_objects.uri import Uri

__all__ = ["StringOrUri"]


@dataclass(frozen=True, slots=True)
class StringOrUri:
    """Identifier holding either a plain string or a :class:`Uri`.

    Attributes:
        value:
            A :class:`Uri`, or a ``str``. Strings containing ``':'`` are
            converted to :class:`Uri` during construction.

    Raises:
        TypeError:
            If ``value`` is neither ``str`` nor :class:`Uri`.
        InvalidUri:
            If ``value`` contains ``':'`` but is not a valid URI.
    """

    value: str | Uri

    def __post_init__(self) -> None:
        if isinstance(self.value, Uri):
            return
        if not isinstance(self.value, str):
            raise TypeError(f"identifier must be str or Uri, not {type(self.value).__name__}")
        if ":" in self.value:
            object.__setattr__(self, "value", Uri(self.value))

    @classmethod
    def parse(cls, text: str) -> StringOrUri:
        """Build an identifier from text using the colon rule."""
        return cls(text)

    @classmethod
    def from_uri(cls, uri: Uri) -> StringOrUri:
        """Wrap an already validated URI."""
        return cls(uri)

    @property
    def kind(self) -> IdentifierKind:
        return IdentifierKind.URI if isinstance(self.value, Uri) else IdentifierKind.STRING

    @property
    def is_uri(self) -> bool:
        return isinstance(self.value, Uri)

    def as_uri(self) -> Uri | None:
        """Return the URI for a URI identifier, else ``None``."""
        return self.value if isinstance(self.value, Uri) else None

    def as_str(self) -> str:
        """Return the underlying text for either variant."""
        return str(self.value)

    def __str__(self) -> str:
        return self.as_str()

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from_str = core_schema.no_info_after_validator_function(cls, core_schema.str_schema())
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [
                    core_schema.is_instance_schema(cls),
                    core_schema.no_info_after_validator_function(
                        cls, core_schema.is_instance_schema(Uri)
                    ),
                    from_str,
                ]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(cls.as_str),
        )
