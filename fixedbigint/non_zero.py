"""Wrapper for integers that are known not to be zero."""

from __future__ import annotations

from functools import total_ordering
from typing import Any, Generic, TypeVar

from fixedbigint.array import from_be_byte_array, from_le_byte_array
from fixedbigint.ctoption import Choice, CtOption
from fixedbigint.uint import UInt

T = TypeVar("T")


def _as_choice(choice: Choice | bool | int) -> Choice:
    return choice if isinstance(choice, Choice) else Choice(choice)


@total_ordering
class NonZero(Generic[T]):
    """An integer (Limb or UInt) that is guaranteed to be non-zero.

    Build one with ``NonZero.new`` or ``NonZero.from_uint``.
    """

    __slots__ = ("_value",)

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        raise TypeError("use NonZero.new() or NonZero.from_uint() to build a NonZero")

    @classmethod
    def _wrap(cls, value: T) -> NonZero[T]:
        obj = object.__new__(cls)
        obj._value = value
        return obj

    @classmethod
    def new(cls, value: T) -> CtOption[NonZero[T]]:
        """Wrap ``value``; the result is empty when ``value`` is zero."""
        is_zero = value.is_zero()  # type: ignore[attr-defined]
        return CtOption(cls._wrap(value), ~is_zero)

    @classmethod
    def from_uint(cls, value: UInt) -> NonZero[UInt]:
        """Wrap a UInt, raising ValueError if it is zero."""
        if not isinstance(value, UInt):
            raise TypeError(f"expected a UInt, got {type(value).__name__}")
        if not any(limb.value for limb in value.limbs()):
            raise ValueError("found zero")
        return cls._wrap(value)

    @classmethod
    def from_be_bytes(cls, value_type: type, data: bytes) -> CtOption[NonZero[Any]]:
        """Decode a ``value_type`` from big-endian bytes and wrap it."""
        if isinstance(value_type, type) and issubclass(value_type, UInt):
            value = from_be_byte_array(value_type, data)
        else:
            value = value_type.from_be_bytes(data)
        return cls.new(value)

    @classmethod
    def from_le_bytes(cls, value_type: type, data: bytes) -> CtOption[NonZero[Any]]:
        """Decode a ``value_type`` from little-endian bytes and wrap it."""
        if isinstance(value_type, type) and issubclass(value_type, UInt):
            value = from_le_byte_array(value_type, data)
        else:
            value = value_type.from_le_bytes(data)
        return cls.new(value)

    def get(self) -> T:
        """The wrapped integer."""
        return self._value

    def ct_eq(self, other: NonZero[T]) -> Choice:
        """Choice(1) if both wrapped values are equal."""
        return self._value.ct_eq(other._value)  # type: ignore[attr-defined]

    @staticmethod
    def conditional_select(
        a: NonZero[T], b: NonZero[T], choice: Choice | bool | int
    ) -> NonZero[T]:
        """Return ``b`` when ``choice`` is set, otherwise ``a``."""
        inner_type = type(a._value)
        selected = inner_type.conditional_select(a._value, b._value, _as_choice(choice))
        return NonZero._wrap(selected)

    def _comparable(self, other: object) -> bool:
        return isinstance(other, NonZero) and type(other._value) is type(self._value)

    def __eq__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return bool(self.ct_eq(other))  # type: ignore[arg-type]

    def __lt__(self, other: NonZero[T]) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return int(self._value) < int(other._value)  # type: ignore[call-overload]

    def __hash__(self) -> int:
        return hash(("NonZero", self._value))

    def __repr__(self) -> str:
        return f"NonZero({self._value!r})"

    def __str__(self) -> str:
        return str(self._value)

    def __format__(self, spec: str) -> str:
        return format(self._value, spec)