"""Arithmetic that wraps around at the width of the type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def _wrapping_op(lhs: Any, rhs: Any, name: str) -> Any:
    if type(lhs) is not type(rhs):
        raise TypeError(
            f"cannot combine {type(lhs).__name__} with {type(rhs).__name__}"
        )
    method = getattr(type(lhs), name, None)
    if method is None:
        raise TypeError(f"{type(lhs).__name__} does not support {name}")
    return method(lhs, rhs)


@dataclass(frozen=True, eq=False)
class Wrapping(Generic[T]):
    """A value whose arithmetic discards overflow."""

    value: T

    def __add__(self, other: Wrapping[T]) -> Wrapping[T]:
        if not isinstance(other, Wrapping):
            return NotImplemented
        return Wrapping(_wrapping_op(self.value, other.value, "wrapping_add"))

    def __sub__(self, other: Wrapping[T]) -> Wrapping[T]:
        if not isinstance(other, Wrapping):
            return NotImplemented
        return Wrapping(_wrapping_op(self.value, other.value, "wrapping_sub"))

    def __mul__(self, other: Wrapping[T]) -> Wrapping[T]:
        if not isinstance(other, Wrapping):
            return NotImplemented
        return Wrapping(_wrapping_op(self.value, other.value, "wrapping_mul"))

    def __and__(self, other: Wrapping[T]) -> Wrapping[T]:
        if not isinstance(other, Wrapping):
            return NotImplemented
        if type(self.value) is not type(other.value):
            raise TypeError("cannot combine values of different types")
        return Wrapping(self.value & other.value)

    def __or__(self, other: Wrapping[T]) -> Wrapping[T]:
        if not isinstance(other, Wrapping):
            return NotImplemented
        if type(self.value) is not type(other.value):
            raise TypeError("cannot combine values of different types")
        return Wrapping(self.value | other.value)

    def __invert__(self) -> Wrapping[T]:
        return Wrapping(~self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Wrapping):
            return NotImplemented
        return type(self.value) is type(other.value) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Wrapping, self.value))