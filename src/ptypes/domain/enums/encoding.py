# src/ptypes/domain/enums/encoding.py
# Copyright (c) Ptypes.
# SPDX-License-Identifier: MIT
"""Encoding and identifier enumerations.

Purpose:
    Define the closed sets of options used by the value types: the base64
    alphabet a deployment decodes with, the reasons a base64 decode can fail,
    and the tag of a string-or-URI identifier.

Layer:
    domain

Notes:
    - Values are lower-case string identifiers suitable for JSON and for
      environment configuration.
    - The two alphabets are mutually exclusive. Text produced under one is not
      guaranteed to decode under the other.
"""

from __future__ import annotations

from enum import Enum

__all__ = ["Base64Alphabet", "Base64DecodeReason", "IdentifierKind"]


class Base64Alphabet(str, Enum):
    """Base64 alphabet variants, both without ``=`` padding (RFC 4648).

    Attributes:
        STANDARD_NO_PAD:
            Section 4 alphabet (``+`` and ``/``).
        URL_SAFE_NO_PAD:
            Section 5 URL- and filename-safe alphabet (``-`` and ``_``).
    """

    STANDARD_NO_PAD = "standard_no_pad"
    URL_SAFE_NO_PAD = "url_safe_no_pad"

    @property
    def altchars(self) -> bytes:
        """Return the two characters used for values 62 and 63."""
        if self is Base64Alphabet.URL_SAFE_NO_PAD:
            return b"-_"
        return b"+/"


class Base64DecodeReason(str, Enum):
    """Why a base64 text was rejected."""

    INVALID_SYMBOL = "invalid_symbol"
    INVALID_LENGTH = "invalid_length"
    INVALID_PADDING = "invalid_padding"
    INVALID_LAST_SYMBOL = "invalid_last_symbol"


class IdentifierKind(str, Enum):
    """Tag of a :class:`~ptypes.domain.value_objects.string_or_uri.StringOrUri`."""

    STRING = "string"
    URI = "uri"
