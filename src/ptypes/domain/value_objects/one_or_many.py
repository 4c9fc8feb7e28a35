# src/ptypes/domain/value_objects/one_or_many.py
# Copyright (c) Ptypes.
# SPDX-License-Identifier: MIT
"""OneOrMany container.

Purpose:
    Represent JSON properties that hold either a single value or an array of
    values of the same kind, for example the ``type`` and ``@context``
    properties of a verifiable credential or the ``aud`` claim of a JWT.

Design:
    - Tagged union of :class:`One` and :class:`Many`. ``Many`` may be empty or
      hold a single element; the tag alone says nothing about emptiness.
    - Equality is structural and tag-sensitive: ``One(1) != Many([1])``.
    - The only in-place mutation is on the single logical element
      (:meth:`OneOrMany.set_single`, or mutating what
      :meth:`OneOrMany.to_single_mut` returns).
    - Wire form has no discriminant. Decoding tries a JSON array first and a
      bare value second, and fails only when both shapes fail; encoding
      reproduces the shape of the variant.

Layer:
    domain/value_objects
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, get_args

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

__all__ = ["OneOrMany", "One", "Many"]

T = TypeVar("T")


class OneOrMany(ABC, Generic[T]):
    """Single value or sequence of values with uniform accessors.

    Concrete state lives on the two variants.

    Attributes:
        One.value:
            The single value of a :class:`One`.
        Many.values:
            The stored list of a :class:`Many`.
    """

    __slots__ = ()

    @staticmethod
    def of(value: T | list[T]) -> OneOrMany[T]:
        """Return ``Many`` for a list and ``One`` for anything else."""
        if isinstance(value, list):
            return Many(list(value))
        return One(value)

    @abstractmethod
    def _items(self) -> Sequence[T]: ...

    # ------------------------------------------------------------------ #
    # Queries                                                            #
    # ------------------------------------------------------------------ #
    def any(self, predicate: Callable[[T], bool]) -> bool:
        """Return True if ``predicate`` holds for any element (short-circuits)."""
        return any(predicate(item) for item in self._items())

    def length(self) -> int:
        """Return 1 for ``One`` and the element count for ``Many``."""
        return len(self._items())

    def is_empty(self) -> bool:
        """Return True only for an empty ``Many``."""
        return not self._items()

    def contains(self, x: T) -> bool:
        """Return True if ``x`` equals the value, or any element."""
        return x in self._items()

    def first(self) -> T | None:
        """Return the value, the first element, or ``None`` for an empty ``Many``."""
        items = self._items()
        return items[0] if items else None

    def to_single(self) -> T | None:
        """Return the element when exactly one is present, else ``None``."""
        items = self._items()
        return items[0] if len(items) == 1 else None

    def to_single_mut(self) -> T | None:
        """Return the stored element itself when exactly one is present.

        The returned object is the one held by the container, so mutable
        elements can be changed in place. Use :meth:`set_single` to replace an
        immutable element.
        """
        return self.to_single()

    @abstractmethod
    def set_single(self, value: T) -> bool:
        """Replace the single logical element in place.

        Returns:
            bool: True if the element was replaced; False when the container
            does not hold exactly one element.
        """

    # ------------------------------------------------------------------ #
    # Iteration                                                          #
    # ------------------------------------------------------------------ #
    def __iter__(self) -> Iterator[T]:
        return iter(self._items())

    def into_iter(self) -> Iterator[T]:
        """Iterate over a snapshot that later mutations do not affect."""
        return iter(list(self._items()))

    def to_list(self) -> list[T]:
        return list(self._items())

    def __len__(self) -> int:
        return self.length()

    def __contains__(self, x: object) -> bool:
        return x in self._items()

    # ------------------------------------------------------------------ #
    # Pydantic                                                           #
    # ------------------------------------------------------------------ #
    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        args = get_args(source_type)
        item_schema = handler.generate_schema(args[0] if args else Any)

        many_shape = core_schema.no_info_after_validator_function(
            Many, core_schema.list_schema(item_schema)
        )
        one_shape = core_schema.no_info_after_validator_function(One, item_schema)
        # Ordered attempt: array first, bare value second.
        shapes = core_schema.union_schema([many_shape, one_shape], mode="left_to_right")

        # Existing containers keep their variant but every item is re-validated.
        from_many = core_schema.chain_schema(
            [
                core_schema.is_instance_schema(Many),
                core_schema.no_info_plain_validator_function(_many_items),
                many_shape,
            ]
        )
        from_one = core_schema.chain_schema(
            [
                core_schema.is_instance_schema(One),
                core_schema.no_info_plain_validator_function(_one_item),
                one_shape,
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=shapes,
            python_schema=core_schema.union_schema(
                [from_many, from_one, shapes], mode="left_to_right"
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                _to_wire,
                return_schema=core_schema.union_schema(
                    [core_schema.list_schema(item_schema), item_schema]
                ),
            ),
        )


@dataclass(slots=True)
class One(OneOrMany[T]):
    """Exactly one value.

    Attributes:
        value:
            The contained value.
    """

    value: T

    def _items(self) -> Sequence[T]:
        return (self.value,)

    def set_single(self, value: T) -> bool:
        self.value = value
        return True


@dataclass(slots=True)
class Many(OneOrMany[T]):
    """Zero or more values, in stored order.

    Attributes:
        values:
            The contained values. Any iterable is copied into a list.
    """

    values: list[T] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.values = list(self.values)

    def _items(self) -> Sequence[T]:
        return self.values

    def set_single(self, value: T) -> bool:
        if len(self.values) != 1:
            return False
        self.values[0] = value
        return True


def _to_wire(container: OneOrMany[Any]) -> Any:
    if isinstance(container, Many):
        return container.values
    if isinstance(container, One):
        return container.value
    raise TypeError(f"unexpected OneOrMany variant {type(container).__name__}")


def _many_items(container: Many[Any]) -> list[Any]:
    return list(container.values)


def _one_item(container: One[Any]) -> Any:
    return container.value
