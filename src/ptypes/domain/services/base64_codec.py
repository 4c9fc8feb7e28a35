# src/ptypes/domain/services/base64_codec.py
# Copyright (c) Ptypes.
# SPDX-License-Identifier: MIT
"""Unpadded base64 codec for big-endian unsigned integers.

Purpose:
    Convert between byte sequences and canonical, padding-free base64 text in
    either the standard or the URL-safe alphabet, and between byte sequences
    and non-negative Python integers.

Layer:
    domain/services

Notes:
    - Decoding is strict: padding, foreign symbols, impossible lengths and
      non-zero trailing bits are all rejected, so ``encode(decode(t)) == t``
      holds for every accepted ``t``.
    - Encoding is total and keeps leading zero bytes.
    - The URL-safe path uses the python-jose helpers (the same ones used for
      JWK/JWS segments); the standard path uses :mod:`base64`.
    - Decoded buffers are returned as ``bytearray`` so the owner can wipe them.
"""

from __future__ import annotations

import base64
import string

from jose.utils import base64url_decode, base64url_encode

from ptypes.domain.enums.encoding import Base64Alphabet, Base64DecodeReason
from ptypes.domain.exceptions.values import Base64DecodeError

__all__ = [
    "get_default_alphabet",
    "set_default_alphabet",
    "resolve_alphabet",
    "encode_unpadded",
    "decode_unpadded",
    "bytes_to_uint",
    "uint_to_bytes",
    "wipe",
]

_BASE_SYMBOLS = string.ascii_letters + string.digits
_SYMBOLS: dict[Base64Alphabet, frozenset[str]] = {
    alphabet: frozenset(_BASE_SYMBOLS + alphabet.altchars.decode("ascii"))
    for alphabet in Base64Alphabet
}

# Process-wide choice; set once at bootstrap from Settings.
_default_alphabet: Base64Alphabet = Base64Alphabet.URL_SAFE_NO_PAD


def get_default_alphabet() -> Base64Alphabet:
    """Return the alphabet used when a caller does not pick one."""
    return _default_alphabet


def set_default_alphabet(alphabet: Base64Alphabet | str) -> None:
    """Set the process-wide default alphabet.

    Args:
        alphabet:
            A :class:`Base64Alphabet` member or its string value.

    Raises:
        ValueError:
            If ``alphabet`` is not a known alphabet value.
    """
    global _default_alphabet
    _default_alphabet = Base64Alphabet(alphabet)


def resolve_alphabet(alphabet: Base64Alphabet | str | None) -> Base64Alphabet:
    """Return ``alphabet`` as an enum member, or the default when ``None``."""
    if alphabet is None:
        return _default_alphabet
    return Base64Alphabet(alphabet)


def encode_unpadded(data: bytes | bytearray, alphabet: Base64Alphabet) -> str:
    """Encode ``data`` as canonical unpadded base64 text.

    Args:
        data:
            Raw bytes; leading zero bytes are preserved.
        alphabet:
            Alphabet to encode with.

    Returns:
        str: ASCII text without ``=`` padding.
    """
    if alphabet is Base64Alphabet.URL_SAFE_NO_PAD:
        return base64url_encode(bytes(data)).decode("ascii")
    return base64.b64encode(data).rstrip(b"=").decode("ascii")


def decode_unpadded(text: str, alphabet: Base64Alphabet) -> bytearray:
    """Decode canonical unpadded base64 text.

    Args:
        text:
            Candidate base64 text.
        alphabet:
            Alphabet the text must use.

    Returns:
        bytearray: Decoded bytes, owned by the caller.

    Raises:
        TypeError:
            If ``text`` is not a ``str``.
        Base64DecodeError:
            If the text contains padding or a symbol outside ``alphabet``, has a
            length no base64 text can have, or is not the canonical encoding of
            its bytes.
    """
    if not isinstance(text, str):
        raise TypeError(f"base64 text must be str, not {type(text).__name__}")

    symbols = _SYMBOLS[alphabet]
    for offset, char in enumerate(text):
        if char == "=":
            raise Base64DecodeError(
                "Padding is not allowed",
                reason=Base64DecodeReason.INVALID_PADDING,
                alphabet=alphabet,
                offset=offset,
            )
        if char not in symbols:
            raise Base64DecodeError(
                f"Invalid symbol at offset {offset}",
                reason=Base64DecodeReason.INVALID_SYMBOL,
                alphabet=alphabet,
                offset=offset,
            )

    # A single trailing symbol carries 6 bits: never a whole byte.
    if len(text) % 4 == 1:
        raise Base64DecodeError(
            "Invalid input length",
            reason=Base64DecodeReason.INVALID_LENGTH,
            alphabet=alphabet,
        )

    raw = text.encode("ascii")
    if alphabet is Base64Alphabet.URL_SAFE_NO_PAD:
        buffer = bytearray(base64url_decode(raw))
    else:
        buffer = bytearray(base64.b64decode(raw + b"=" * (-len(raw) % 4), validate=True))

    if encode_unpadded(buffer, alphabet) != text:
        wipe(buffer)
        raise Base64DecodeError(
            "Non-zero trailing bits in last symbol",
            reason=Base64DecodeReason.INVALID_LAST_SYMBOL,
            alphabet=alphabet,
            offset=len(text) - 1,
        )
    return buffer


def bytes_to_uint(data: bytes | bytearray) -> int:
    """Interpret ``data`` as a big-endian unsigned magnitude (empty is zero)."""
    return int.from_bytes(data, "big", signed=False)


def uint_to_bytes(value: int) -> bytearray:
    """Return the minimal big-endian encoding of a non-negative integer.

    Zero encodes as a single zero byte.

    Raises:
        ValueError:
            If ``value`` is negative.
    """
    if value < 0:
        raise ValueError("value must be >= 0")
    length = max(1, (value.bit_length() + 7) // 8)
    return bytearray(value.to_bytes(length, "big", signed=False))


def wipe(buffer: bytearray) -> None:
    """Overwrite ``buffer`` with zeros in place."""
    buffer[:] = bytes(len(buffer))
