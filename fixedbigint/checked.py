"""Arithmetic that tracks overflow instead of wrapping around."""

from __future__ import annotations

from typing import Any, Callable, Generic, Optional, TypeVar

from fixedbigint.ctoption import Choice, CtOption

T = TypeVar("T")


def _checked_op(name: str) -> Callable[[Any, Any], CtOption[Any]]:
    def apply(lhs: Any, rhs: Any) -> CtOption[Any]:
        if type(lhs) is not type(rhs):
            raise TypeError(
                f"cannot combine {type(lhs).__name__} with {type(rhs).__name__}"
            )
        method = getattr(type(lhs), name, None)
        if method is None:
            raise TypeError(f"{type(lhs).__name__} does not support {name}")
        return method(lhs, rhs)

    return apply


_ADD = _checked_op("checked_add")
_SUB = _checked_op("checked_sub")
_MUL = _checked_op("checked_mul")


class Checked(Generic[T]):
    """A value whose arithmetic yields an empty result on overflow."""

    __slots__ = ("_option",)

    def __init__(self, value: T) -> None:
        self._option: CtOption[T] = CtOption(value, Choice(1))

    @classmethod
    def from_ct_option(cls, option: CtOption[T]) -> Checked[T]:
        """Wrap an existing CtOption."""
        if not isinstance(option, CtOption):
            raise TypeError(f"expected a CtOption, got {type(option).__name__}")
        checked = cls.__new__(cls)
        checked._option = option
        return checked

    def to_ct_option(self) -> CtOption[T]:
        """The underlying CtOption."""
        return self._option

    def to_optional(self) -> Optional[T]:
        """The value, or None if an operation overflowed."""
        return self._option.to_optional()

    def __repr__(self) -> str:
        if self._option.is_some():
            return f"Checked({self._option.unwrap()!r})"
        return "Checked(None)"

    def _combine(
        self, other: object, op: Callable[[Any, Any], CtOption[Any]]
    ) -> Checked[T]:
        if not isinstance(other, Checked):
            return NotImplemented
        rhs_option = other._option
        result = self._option.and_then(
            lambda lhs: rhs_option.and_then(lambda rhs: op(lhs, rhs))
        )
        return Checked.from_ct_option(result)

    def __add__(self, other: Checked[T]) -> Checked[T]:
        return self._combine(other, _ADD)

    def __sub__(self, other: Checked[T]) -> Checked[T]:
        return self._combine(other, _SUB)

    def __mul__(self, other: Checked[T]) -> Checked[T]:
        return self._combine(other, _MUL)

    def ct_eq(self, other: Checked[T]) -> Choice:
        """Equal when both overflowed, or both hold equal values."""
        return self._option.ct_eq(other._option)

    @staticmethod
    def conditional_select(
        a: Checked[T], b: Checked[T], choice: Choice | bool | int
    ) -> Checked[T]:
        """Return ``b`` when ``choice`` is set, otherwise ``a``."""
        return Checked.from_ct_option(
            CtOption.conditional_select(a._option, b._option, choice)
        )