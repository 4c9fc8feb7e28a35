# src/ptypes/domain/entities/object_with_id.py
# Copyright (c) Ptypes.
# SPDX-License-Identifier: MIT
"""ObjectWithId entity.

Purpose:
    Generic JSON object carrying a validated ``id`` URI plus arbitrary named
    properties, the shape used for linked-data nodes such as a credential
    subject or an issuer object.

Layer:
    domain/entities

Notes:
    - Properties other than ``id`` are kept as pydantic extras and must be JSON
      values. Core value types are embedded by converting them to their wire
      form first (see :mod:`ptypes.application.services.json_codec`).
    - Setting ``id`` through the property interface re-validates it as a URI.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, JsonValue, TypeAdapter

from ptypes.domain.value_objects.uri import Uri

__all__ = ["ObjectWithId"]

_JSON_VALUE: TypeAdapter[JsonValue] = TypeAdapter(JsonValue)


class ObjectWithId(BaseModel):
    """JSON object with an ``id`` and free-form properties.

    Attributes:
        id: Validated URI identifying the object.
    """

    model_config = ConfigDict(
        title="ObjectWithId",
        extra="allow",
        validate_assignment=True,
        json_schema_extra={
            "examples": [
                {"id": "did:example:ebfeb1f712ebc6f1c276e12ec21", "name": "Jayden Doe"},
            ]
        },
    )

    id: Uri = Field(..., description="URI identifying the object.")

    # -------------------------------------------------------------------------
    # Property bag
    # -------------------------------------------------------------------------
    def set_property(self, name: str, value: JsonValue) -> None:
        """Set a named property to a JSON value.

        Args:
            name: Property name. ``"id"`` replaces the identifier.
            value: JSON value; for ``"id"`` it must be URI text.

        Raises:
            InvalidUri: If ``name`` is ``"id"`` and ``value`` is not a valid URI.
            pydantic.ValidationError: If ``value`` is not a JSON value.
        """
        if name == "id":
            self.id = Uri(value) if isinstance(value, str) else value  # type: ignore[assignment]
            return
        extra = self._extra()
        extra[name] = _JSON_VALUE.validate_python(value)

    def get_property(self, name: str) -> JsonValue | None:
        """Return a named property, or ``None`` when it is absent."""
        if name == "id":
            return str(self.id)
        return self._extra().get(name)

    def remove_property(self, name: str) -> JsonValue | None:
        """Remove and return a named property; ``id`` cannot be removed.

        Raises:
            ValueError: If ``name`` is ``"id"``.
        """
        if name == "id":
            raise ValueError("id is required and cannot be removed")
        return self._extra().pop(name, None)

    def properties(self) -> dict[str, Any]:
        """Return a shallow copy of the non-``id`` properties."""
        return dict(self._extra())

    def _extra(self) -> dict[str, Any]:
        if self.__pydantic_extra__ is None:
            self.__pydantic_extra__ = {}
        return self.__pydantic_extra__
