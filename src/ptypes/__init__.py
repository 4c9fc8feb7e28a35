"""Particular types for JSON-based specifications such as JOSE and JSON-LD.

Public surface:
    * :class:`OneOrMany` (:class:`One`, :class:`Many`): a property holding one
      value or an array of values.
    * :class:`Uri` and :class:`StringOrUri`: validated identifiers.
    * :class:`Base64urlUInt`: big-endian unsigned integers as unpadded base64.
    * :class:`ObjectWithId`: property bag with a URI ``id``.

Example:
    >>> from ptypes import Many, One
    >>> One("one").length(), Many(["one", "two"]).length()
    (1, 2)
"""

from __future__ import annotations

from ptypes.domain.entities.object_with_id import ObjectWithId
from ptypes.domain.enums.encoding import Base64Alphabet, Base64DecodeReason, IdentifierKind
from ptypes.domain.exceptions.base import PtypesError
from ptypes.domain.exceptions.values import Base64DecodeError, InvalidUri
from ptypes.domain.value_objects.base64url_uint import Base64urlUInt, UIntAlphabet
from ptypes.domain.value_objects.one_or_many import Many, One, OneOrMany
from ptypes.domain.value_objects.string_or_uri import StringOrUri
from ptypes.domain.value_objects.uri import Uri, UriComponents

__all__ = [
    "Base64Alphabet",
    "Base64DecodeError",
    "Base64DecodeReason",
    "Base64urlUInt",
    "IdentifierKind",
    "InvalidUri",
    "Many",
    "ObjectWithId",
    "One",
    "OneOrMany",
    "PtypesError",
    "StringOrUri",
    "UIntAlphabet",
    "Uri",
    "UriComponents",
]
