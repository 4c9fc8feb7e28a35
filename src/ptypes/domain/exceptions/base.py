# src/ptypes/domain/exceptions/base.py
# Copyright (c) Ptypes.
# SPDX-License-Identifier: MIT
"""Base Domain Exceptions.

Summary:
    Canonical base class for every error raised by the value types and the
    JSON boundary, so callers can catch one family and map it deterministically
    to parse failures of the enclosing document.

Layer:
    domain/exceptions
"""

from __future__ import annotations

from typing import Any

__all__ = ["PtypesError"]


class PtypesError(Exception):
    """Base class for all ptypes exceptions.

    Attributes:
        code:
            Stable error code suitable for logs and for mapping at the boundary.
        message:
            Human-readable error message.
        details:
            Optional machine-readable diagnostic payload for logs and callers.
    """

    code: str = "PTYPES_ERROR"

    def __init__(self, message: str = "", *, details: dict[str, Any] | None = None) -> None:
        """Initialize a PtypesError instance.

        Args:
            message:
                Human-readable error message.
            details:
                Optional structured diagnostic payload.

        """
        super().__init__(message)
        self.message = message
        self.details: dict[str, Any] = details or {}

    def __str__(self) -> str:
        """Return the human-readable message for this error."""
        # Details may carry offending input; keep them out of the message.
        return self.message
