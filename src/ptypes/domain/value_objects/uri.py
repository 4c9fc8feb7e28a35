# src/ptypes/domain/value_objects/uri.py
# Copyright (c) Ptypes.
# SPDX-License-Identifier: MIT
"""Validated URI value object.

Purpose:
    Wrap text that has passed generic URI syntax validation, keeping the
    original text verbatim for comparison, hashing and display.

Design:
    - Validation happens in ``__post_init__``; there is no unchecked
      constructor.
    - Syntax only, no network access and no scheme-specific rules. The text
      must match the RFC 3986 ``URI`` production (section 3, appendix A):
      a scheme, a hierarchical part, and optional query and fragment.
    - The parsed view is not stored; :meth:`Uri.as_uri` re-parses on demand
      with the same grammar.

Layer:
    domain/value_objects
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Final, NamedTuple

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from ptypes.domain.exceptions.values import InvalidUri

__all__ = ["Uri", "UriComponents"]

# RFC 3986 appendix A, assembled bottom-up.
_UNRESERVED = r"A-Za-z0-9\-._~"
_SUB_DELIMS = r"!$&'()*+,;="
_PCT_ENCODED = r"%[0-9A-Fa-f]{2}"
_PCHAR = r"(?:[" + _UNRESERVED + _SUB_DELIMS + r":@]|" + _PCT_ENCODED + r")"
_SEGMENT = _PCHAR + r"*"
_SEGMENT_NZ = _PCHAR + r"+"

_H16 = r"[0-9A-Fa-f]{1,4}"
_DEC_OCTET = r"(?:25[0-5]|2[0-4][0-9]|1[0-9]{2}|[1-9][0-9]|[0-9])"
_IPV4 = _DEC_OCTET + r"(?:\." + _DEC_OCTET + r"){3}"
_LS32 = r"(?:" + _H16 + r":" + _H16 + r"|" + _IPV4 + r")"


def _h16_prefix(n: int) -> str:
    """Optional run of up to ``n + 1`` h16 groups before ``::``."""
    return r"(?:(?:" + _H16 + r":){0," + str(n) + r"}" + _H16 + r")?"


_IPV6 = (
    r"(?:"
    + r"|".join(
        [
            r"(?:" + _H16 + r":){6}" + _LS32,
            r"::(?:" + _H16 + r":){5}" + _LS32,
            _h16_prefix(0) + r"::(?:" + _H16 + r":){4}" + _LS32,
            _h16_prefix(1) + r"::(?:" + _H16 + r":){3}" + _LS32,
            _h16_prefix(2) + r"::(?:" + _H16 + r":){2}" + _LS32,
            _h16_prefix(3) + r"::" + _H16 + r":" + _LS32,
            _h16_prefix(4) + r"::" + _LS32,
            _h16_prefix(5) + r"::" + _H16,
            _h16_prefix(6) + r"::",
        ]
    )
    + r")"
)
_IPV_FUTURE = r"v[0-9A-Fa-f]+\.[" + _UNRESERVED + _SUB_DELIMS + r":]+"
_IP_LITERAL = r"\[(?:" + _IPV6 + r"|" + _IPV_FUTURE + r")\]"
# reg-name also covers IPv4address.
_REG_NAME = r"(?:[" + _UNRESERVED + _SUB_DELIMS + r"]|" + _PCT_ENCODED + r")*"
_USERINFO = r"(?:[" + _UNRESERVED + _SUB_DELIMS + r":]|" + _PCT_ENCODED + r")*"

_AUTHORITY = (
    r"(?:(?P<userinfo>" + _USERINFO + r")@)?"
    r"(?P<host>" + _IP_LITERAL + r"|" + _REG_NAME + r")"
    r"(?::(?P<port>[0-9]*))?"
)
_PATH_ABEMPTY = r"(?:/" + _SEGMENT + r")*"
# path-absolute / path-rootless / path-empty
_PATH_NO_AUTHORITY = (
    r"(?:/(?:" + _SEGMENT_NZ + _PATH_ABEMPTY + r")?|" + _SEGMENT_NZ + _PATH_ABEMPTY + r")?"
)
_QUERY_OR_FRAGMENT = r"(?:" + _PCHAR + r"|[/?])*"

_URI: Final[re.Pattern[str]] = re.compile(
    r"(?P<scheme>[A-Za-z][A-Za-z0-9+\-.]*):"
    r"(?:"
    r"//(?P<authority>" + _AUTHORITY + r")(?P<abempty>" + _PATH_ABEMPTY + r")"
    r"|(?P<path>" + _PATH_NO_AUTHORITY + r")"
    r")"
    r"(?:\?(?P<query>" + _QUERY_OR_FRAGMENT + r"))?"
    r"(?:#(?P<fragment>" + _QUERY_OR_FRAGMENT + r"))?"
)


class UriComponents(NamedTuple):
    """Components of a URI as split by the RFC 3986 grammar.

    Absent components are ``None``; present but empty ones are ``""``.

    Attributes:
        scheme: Scheme, as written.
        authority: Authority without the leading ``//``.
        userinfo: User information before ``@``.
        host: Registered name or bracketed IP literal.
        port: Port digits (may be empty).
        path: Path, possibly empty.
        query: Query without the leading ``?``.
        fragment: Fragment without the leading ``#``.
    """

    scheme: str
    authority: str | None
    userinfo: str | None
    host: str | None
    port: str | None
    path: str
    query: str | None
    fragment: str | None


def _parse(text: str) -> UriComponents:
    """Split ``text`` into components or raise ``InvalidUri``."""
    match = _URI.fullmatch(text)
    if match is None:
        raise InvalidUri()
    groups = match.groupdict()
    has_authority = groups["authority"] is not None
    return UriComponents(
        scheme=groups["scheme"],
        authority=groups["authority"],
        userinfo=groups["userinfo"],
        host=groups["host"],
        port=groups["port"],
        path=groups["abempty"] if has_authority else groups["path"],
        query=groups["query"],
        fragment=groups["fragment"],
    )


@dataclass(frozen=True, slots=True)
class Uri:
    """Syntactically valid URI, stored as its original text.

    Attributes:
        value:
            Original URI text, unchanged.

    Raises:
        TypeError:
            If ``value`` is not a ``str``.
        InvalidUri:
            If ``value`` is not a syntactically valid URI.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"URI must be str, not {type(self.value).__name__}")
        _parse(self.value)

    @classmethod
    def from_str(cls, text: str) -> Uri:
        """Alias of the constructor for symmetry with other parse helpers."""
        return cls(text)

    def as_uri(self) -> UriComponents:
        """Return a structured view (scheme, host, path, ...) of the stored text.

        Raises:
            AssertionError:
                If the stored text no longer parses. Construction validated it,
                so this is an internal invariant violation.
        """
        try:
            return _parse(self.value)
        except InvalidUri as exc:
            raise AssertionError("stored URI text must re-parse") from exc

    def __str__(self) -> str:
        return self.value

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from_str = core_schema.no_info_after_validator_function(cls, core_schema.str_schema())
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema([core_schema.is_instance_schema(cls), from_str]),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )
