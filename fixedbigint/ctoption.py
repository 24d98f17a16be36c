"""Constant-time style boolean and optional value types."""

from __future__ import annotations

from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Choice:
    """A boolean held as the integer 0 or 1."""

    __slots__ = ("_value",)

    def __init__(self, value: int | bool) -> None:
        if isinstance(value, Choice):
            value = value._value
        as_int = int(value)
        if as_int not in (0, 1):
            raise ValueError(f"a Choice must be 0 or 1, got {value!r}")
        self._value = as_int

    def __bool__(self) -> bool:
        return self._value == 1

    def __invert__(self) -> Choice:
        return Choice(1 - self._value)

    def __and__(self, other: Choice) -> Choice:
        if not isinstance(other, Choice):
            return NotImplemented
        return Choice(self._value & other._value)

    def __or__(self, other: Choice) -> Choice:
        if not isinstance(other, Choice):
            return NotImplemented
        return Choice(self._value | other._value)

    def __xor__(self, other: Choice) -> Choice:
        if not isinstance(other, Choice):
            return NotImplemented
        return Choice(self._value ^ other._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Choice):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(("Choice", self._value))

    def __repr__(self) -> str:
        return f"Choice({self._value})"

    def unwrap_u8(self) -> int:
        """Return the choice as the integer 0 or 1."""
        return self._value


def _as_choice(value: Choice | bool | int) -> Choice:
    return value if isinstance(value, Choice) else Choice(value)


def _values_equal(a: Any, b: Any) -> bool:
    ct_eq = getattr(a, "ct_eq", None)
    if callable(ct_eq):
        return bool(ct_eq(b))
    return bool(a == b)


class CtOption(Generic[T]):
    """A value paired with a Choice saying whether it is present."""

    __slots__ = ("_value", "_is_some")

    def __init__(self, value: T, is_some: Choice | bool | int) -> None:
        self._value = value
        self._is_some = _as_choice(is_some)

    def __repr__(self) -> str:
        if self._is_some:
            return f"CtOption(Some({self._value!r}))"
        return "CtOption(None)"

    def is_some(self) -> Choice:
        """Choice(1) if a value is present."""
        return self._is_some

    def is_none(self) -> Choice:
        """Choice(1) if no value is present."""
        return ~self._is_some

    def unwrap(self) -> T:
        """Return the value, raising ValueError when there is none."""
        if not self._is_some:
            raise ValueError("called unwrap on an empty CtOption")
        return self._value

    def unwrap_or(self, default: T) -> T:
        """Return the value, or ``default`` when there is none."""
        return self._value if self._is_some else default

    def and_then(self, func: Callable[[T], CtOption[U]]) -> CtOption[U]:
        """Chain a computation that itself returns a CtOption."""
        if not self._is_some:
            return CtOption(self._value, Choice(0))  # type: ignore[arg-type]
        result = func(self._value)
        if not isinstance(result, CtOption):
            raise TypeError("and_then callback must return a CtOption")
        return CtOption(result._value, result._is_some & self._is_some)

    def map(self, func: Callable[[T], U]) -> CtOption[U]:
        """Apply ``func`` to the value if present."""
        if not self._is_some:
            return CtOption(self._value, Choice(0))  # type: ignore[arg-type]
        return CtOption(func(self._value), self._is_some)

    def to_optional(self) -> Optional[T]:
        """Return the value, or None when there is none."""
        return self._value if self._is_some else None

    def ct_eq(self, other: CtOption[T]) -> Choice:
        """Equal when both are empty, or both hold equal values."""
        both_none = self.is_none() & other.is_none()
        both_some = self._is_some & other._is_some
        if both_some:
            return Choice(_values_equal(self._value, other._value))
        return both_none

    @staticmethod
    def conditional_select(a: CtOption[T], b: CtOption[T], choice: Choice | bool | int) -> CtOption[T]:
        """Return ``b`` when ``choice`` is set, otherwise ``a``."""
        picked = b if _as_choice(choice) else a
        return CtOption(picked._value, picked._is_some)