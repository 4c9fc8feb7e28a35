# src/ptypes/domain/exceptions/values.py
# Copyright (c) Ptypes.
# SPDX-License-Identifier: MIT
"""Value-type validation exceptions.

Purpose:
    Errors raised when constructing a value type from untrusted text.

Layer:
    domain

Notes:
    - Both errors also derive from ``ValueError`` so pydantic reports them as
      ordinary validation failures when the types are embedded in models.
    - Construction is all-or-nothing; there is no partial result to recover.
"""

from __future__ import annotations

from typing import Any

from ptypes.domain.enums.encoding import Base64Alphabet, Base64DecodeReason
from ptypes.domain.exceptions.base import PtypesError

__all__ = ["InvalidUri", "Base64DecodeError"]


class InvalidUri(PtypesError, ValueError):
    """Raised when text is not a syntactically valid URI."""

    code = "INVALID_URI"

    def __init__(
        self, message: str = "Invalid URI", *, details: dict[str, Any] | None = None
    ) -> None:
        super().__init__(message, details=details)


class Base64DecodeError(PtypesError, ValueError):
    """Raised when text is not canonical unpadded base64 for an alphabet.

    Attributes:
        kind:
            Error family, always ``"malformed-base64"``.
        reason:
            Specific rejection reason.
        alphabet:
            Alphabet the text was decoded against.
        offset:
            Index of the offending character, when one applies.
    """

    code = "MALFORMED_BASE64"
    kind = "malformed-base64"

    def __init__(
        self,
        message: str,
        *,
        reason: Base64DecodeReason,
        alphabet: Base64Alphabet,
        offset: int | None = None,
    ) -> None:
        details: dict[str, Any] = {"reason": reason.value, "alphabet": alphabet.value}
        if offset is not None:
            details["offset"] = offset
        super().__init__(message, details=details)
        self.reason = reason
        self.alphabet = alphabet
        self.offset = offset
