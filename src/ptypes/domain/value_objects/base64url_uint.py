# src/ptypes/domain/value_objects/base64url_uint.py
# Copyright (c) Ptypes.
# SPDX-License-Identifier: MIT
"""Base64urlUInt value object.

Purpose:
    Hold a big-endian unsigned integer magnitude (typically a key component
    such as an RSA modulus or an EC coordinate) and exchange it as canonical,
    padding-free base64 text.

Design:
    - One type for both alphabets: the :class:`Base64Alphabet` is resolved once
      when an instance is built (explicit argument, else the process default)
      and is kept for encoding and display.
    - The bytes live in a private ``bytearray`` that is zeroed by :meth:`wipe`,
      on ``with`` block exit, and when the instance is finalized. Temporary
      buffers created while decoding are zeroed on every exit path.
    - ``repr()`` never shows the bytes.
    - Pydantic integration: plain ``Base64urlUInt`` fields decode with the
      process default alphabet; ``Annotated[Base64urlUInt, UIntAlphabet(...)]``
      pins one.

Layer:
    domain/value_objects
"""

from __future__ import annotations

import hmac
from collections.abc import Iterable
from dataclasses import dataclass
from types import TracebackType
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from ptypes.domain.enums.encoding import Base64Alphabet
from ptypes.domain.services.base64_codec import (
    bytes_to_uint,
    decode_unpadded,
    encode_unpadded,
    resolve_alphabet,
    uint_to_bytes,
    wipe,
)

__all__ = ["Base64urlUInt", "UIntAlphabet"]


class Base64urlUInt:
    """Big-endian unsigned integer exchanged as unpadded base64 text.

    Args:
        data:
            Raw big-endian bytes (copied). Leading zero bytes are significant
            and survive encoding.
        alphabet:
            Alphabet used for encoding; ``None`` selects the process default.

    Attributes:
        alphabet:
            Alphabet resolved at construction.
    """

    __slots__ = ("_buffer", "_alphabet")

    def __init__(
        self,
        data: bytes | bytearray | Iterable[int] = b"",
        *,
        alphabet: Base64Alphabet | str | None = None,
    ) -> None:
        self._alphabet = resolve_alphabet(alphabet)
        self._buffer = bytearray(data)

    # ------------------------------------------------------------------ #
    # Construction                                                       #
    # ------------------------------------------------------------------ #
    @classmethod
    def decode(cls, text: str, alphabet: Base64Alphabet | str | None = None) -> Base64urlUInt:
        """Build an instance from canonical unpadded base64 text.

        Args:
            text:
                Base64 text without padding.
            alphabet:
                Alphabet the text must use; ``None`` selects the process default.

        Returns:
            Base64urlUInt: The decoded value.

        Raises:
            Base64DecodeError:
                If the text is not canonical unpadded base64 for the alphabet.
        """
        resolved = resolve_alphabet(alphabet)
        buffer = decode_unpadded(text, resolved)
        try:
            return cls(buffer, alphabet=resolved)
        finally:
            wipe(buffer)

    @classmethod
    def from_int(cls, value: int, alphabet: Base64Alphabet | str | None = None) -> Base64urlUInt:
        """Build an instance from a non-negative integer (minimal length).

        Raises:
            ValueError:
                If ``value`` is negative.
        """
        buffer = uint_to_bytes(value)
        try:
            return cls(buffer, alphabet=alphabet)
        finally:
            wipe(buffer)

    # ------------------------------------------------------------------ #
    # Accessors                                                          #
    # ------------------------------------------------------------------ #
    @property
    def alphabet(self) -> Base64Alphabet:
        return self._alphabet

    @property
    def data(self) -> bytes:
        """Return a copy of the stored bytes."""
        return bytes(self._buffer)

    def encode(self) -> str:
        """Return the canonical unpadded text for the stored bytes."""
        return encode_unpadded(self._buffer, self._alphabet)

    def to_int(self) -> int:
        """Return the stored magnitude as a non-negative integer."""
        return bytes_to_uint(self._buffer)

    def with_alphabet(self, alphabet: Base64Alphabet | str) -> Base64urlUInt:
        """Return a copy of this value that encodes with ``alphabet``."""
        return type(self)(self._buffer, alphabet=alphabet)

    # ------------------------------------------------------------------ #
    # Sensitive-buffer lifecycle                                         #
    # ------------------------------------------------------------------ #
    def wipe(self) -> None:
        """Zero the stored bytes in place."""
        wipe(self._buffer)

    def __enter__(self) -> Base64urlUInt:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.wipe()

    def __del__(self) -> None:
        # __init__ may have failed before the buffer existed.
        buffer = getattr(self, "_buffer", None)
        if buffer is not None:
            wipe(buffer)

    # ------------------------------------------------------------------ #
    # Dunder protocol                                                    #
    # ------------------------------------------------------------------ #
    def __str__(self) -> str:
        return self.encode()

    def __repr__(self) -> str:
        return f"Base64urlUInt(<{len(self._buffer)} bytes>, alphabet={self._alphabet.value!r})"

    def __int__(self) -> int:
        return self.to_int()

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self._buffer)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Base64urlUInt):
            return NotImplemented
        return hmac.compare_digest(self._buffer, other._buffer)

    def __hash__(self) -> int:
        return hash(bytes(self._buffer))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return _uint_core_schema(None)


@dataclass(frozen=True, slots=True)
class UIntAlphabet:
    """``Annotated`` marker pinning the alphabet of a :class:`Base64urlUInt` field.

    Attributes:
        alphabet:
            Alphabet used to decode the field.
    """

    alphabet: Base64Alphabet

    def __post_init__(self) -> None:
        object.__setattr__(self, "alphabet", Base64Alphabet(self.alphabet))

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return _uint_core_schema(self.alphabet)


def _uint_core_schema(alphabet: Base64Alphabet | None) -> core_schema.CoreSchema:
    """Build the wire schema: a bare string decoded at validation time."""

    def from_text(text: str) -> Base64urlUInt:
        return Base64urlUInt.decode(text, alphabet)

    from_str = core_schema.no_info_after_validator_function(from_text, core_schema.str_schema())
    return core_schema.json_or_python_schema(
        json_schema=from_str,
        python_schema=core_schema.union_schema(
            [core_schema.is_instance_schema(Base64urlUInt), from_str]
        ),
        serialization=core_schema.plain_serializer_function_ser_schema(Base64urlUInt.encode),
    )
