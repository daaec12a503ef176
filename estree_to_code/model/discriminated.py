"""
Two-case tagged value with an explicit empty state.

Used wherever a single field may hold one of two unrelated node shapes, such as
a for-loop initializer (declaration or expression) or a property key (literal or
identifier). The empty state is a legitimate value of its own, distinct from
either case holding None.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any, Generic, TypeVar

A = TypeVar("A")
B = TypeVar("B")
R = TypeVar("R")


class Case(Enum):
    """Which alternative a Discriminated value holds."""

    EMPTY = 0
    FIRST = 1
    SECOND = 2


class Discriminated(Generic[A, B]):
    """Immutable value holding an A, a B, or nothing."""

    __slots__ = ("_case", "_value")

    def __init__(self, case: Case = Case.EMPTY, value: Any = None):
        if case is Case.EMPTY and value is not None:
            raise ValueError("An empty Discriminated value cannot carry a payload")
        if case is not Case.EMPTY and value is None:
            raise ValueError(f"A {case.name.lower()} Discriminated value requires a payload")
        object.__setattr__(self, "_case", case)
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Discriminated values are immutable")

    @classmethod
    def first(cls, value: A) -> Discriminated[A, B]:
        return cls(Case.FIRST, value)

    @classmethod
    def second(cls, value: B) -> Discriminated[A, B]:
        return cls(Case.SECOND, value)

    @classmethod
    def empty(cls) -> Discriminated[A, B]:
        return cls()

    @classmethod
    def of(cls, value: Any, first_type: type | tuple[type, ...], second_type: type | tuple[type, ...]) -> Discriminated[A, B]:
        """Classify ``value`` by type.

        Args:
            value: Payload to wrap, or None for the empty state
            first_type: Type(s) accepted as the first case
            second_type: Type(s) accepted as the second case

        Returns:
            A Discriminated value in the matching state

        Raises:
            TypeError: If the value matches neither case
        """
        if value is None:
            return cls()
        if isinstance(value, Discriminated):
            return value
        if isinstance(value, first_type):
            return cls(Case.FIRST, value)
        if isinstance(value, second_type):
            return cls(Case.SECOND, value)
        raise TypeError(f"{type(value).__name__} is neither {_type_names(first_type)} nor {_type_names(second_type)}")

    @property
    def case(self) -> Case:
        return self._case

    @property
    def is_first(self) -> bool:
        return self._case is Case.FIRST

    @property
    def is_second(self) -> bool:
        return self._case is Case.SECOND

    @property
    def is_empty(self) -> bool:
        return self._case is Case.EMPTY

    @property
    def value(self) -> A | B | None:
        """The payload of whichever case is held, None when empty."""
        return self._value

    @property
    def first_value(self) -> A:
        if self._case is not Case.FIRST:
            raise ValueError(f"Discriminated value holds {self._case.name.lower()}, not first")
        return self._value

    @property
    def second_value(self) -> B:
        if self._case is not Case.SECOND:
            raise ValueError(f"Discriminated value holds {self._case.name.lower()}, not second")
        return self._value

    def match(
        self,
        on_first: Callable[[A], R],
        on_second: Callable[[B], R],
        on_empty: Callable[[], R],
    ) -> R:
        if self._case is Case.FIRST:
            return on_first(self._value)
        if self._case is Case.SECOND:
            return on_second(self._value)
        return on_empty()

    def __bool__(self) -> bool:
        return self._case is not Case.EMPTY

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Discriminated):
            return NotImplemented
        return self._case is other._case and self._value == other._value

    # Payloads are mutable nodes
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._case is Case.EMPTY:
            return "Discriminated.empty()"
        return f"Discriminated.{self._case.name.lower()}({self._value!r})"


def _type_names(types: type | tuple[type, ...]) -> str:
    if isinstance(types, tuple):
        return " or ".join(t.__name__ for t in types)
    return types.__name__
