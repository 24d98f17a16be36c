"""Word-sized unsigned integers ("limbs") from which big integers are built."""

from __future__ import annotations

from functools import total_ordering
from typing import ClassVar

from fixedbigint.ctoption import Choice, CtOption

_WORD_BITS = 64
_WORD_BYTES = 8
_WORD_MASK = (1 << _WORD_BITS) - 1
_WIDE_MASK = (1 << (2 * _WORD_BITS)) - 1


def nlimbs(bits: int) -> int:
    """Number of limbs needed to hold an integer of ``bits`` bits."""
    return bits // Limb.BIT_SIZE


def _check_width(n: int, width: int) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not 0 <= n < (1 << width):
        raise ValueError(f"{n} does not fit in an unsigned {width}-bit integer")
    return n


def _as_choice(choice: Choice | bool | int) -> Choice:
    return choice if isinstance(choice, Choice) else Choice(choice)


@total_ordering
class Limb:
    """An unsigned 64-bit machine word."""

    __slots__ = ("_value",)

    BIT_SIZE: ClassVar[int] = _WORD_BITS
    BYTE_SIZE: ClassVar[int] = _WORD_BYTES
    ZERO: ClassVar[Limb]
    ONE: ClassVar[Limb]
    MAX: ClassVar[Limb]

    def __init__(self, value: int) -> None:
        self._value = _check_width(value, _WORD_BITS)

    @property
    def value(self) -> int:
        """The word as a Python integer."""
        return self._value

    def __int__(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"Limb(0x{self._value:0{2 * _WORD_BYTES}x})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Limb):
            return NotImplemented
        return bool(self.ct_eq(other))

    def __lt__(self, other: Limb) -> bool:
        if not isinstance(other, Limb):
            return NotImplemented
        return bool(self.ct_lt(other))

    def __hash__(self) -> int:
        return hash(("Limb", self._value))

    def __str__(self) -> str:
        return format(self, "X")

    def __format__(self, spec: str) -> str:
        width = 2 * _WORD_BYTES
        if spec in ("", "X"):
            return f"{self._value:0{width}X}"
        if spec == "x":
            return f"{self._value:0{width}x}"
        return format(self._value, spec)

    # Bitwise operations

    def __and__(self, other: Limb) -> Limb:
        if not isinstance(other, Limb):
            return NotImplemented
        return Limb(self._value & other._value)

    def __or__(self, other: Limb) -> Limb:
        if not isinstance(other, Limb):
            return NotImplemented
        return Limb(self._value | other._value)

    def __xor__(self, other: Limb) -> Limb:
        if not isinstance(other, Limb):
            return NotImplemented
        return Limb(self._value ^ other._value)

    def __invert__(self) -> Limb:
        return Limb(self._value ^ _WORD_MASK)

    # Construction from smaller integers

    @classmethod
    def from_u8(cls, n: int) -> Limb:
        """Create a limb from an 8-bit unsigned integer."""
        return cls(_check_width(n, 8))

    @classmethod
    def from_u16(cls, n: int) -> Limb:
        """Create a limb from a 16-bit unsigned integer."""
        return cls(_check_width(n, 16))

    @classmethod
    def from_u32(cls, n: int) -> Limb:
        """Create a limb from a 32-bit unsigned integer."""
        return cls(_check_width(n, 32))

    @classmethod
    def from_u64(cls, n: int) -> Limb:
        """Create a limb from a 64-bit unsigned integer."""
        return cls(_check_width(n, 64))

    # Encoding

    @classmethod
    def _check_bytes(cls, data: bytes) -> bytes:
        data = bytes(data)
        if len(data) != cls.BYTE_SIZE:
            raise ValueError(f"expected {cls.BYTE_SIZE} bytes, got {len(data)}")
        return data

    @classmethod
    def from_be_bytes(cls, data: bytes) -> Limb:
        """Decode from exactly BYTE_SIZE big-endian bytes."""
        return cls(int.from_bytes(cls._check_bytes(data), "big"))

    @classmethod
    def from_le_bytes(cls, data: bytes) -> Limb:
        """Decode from exactly BYTE_SIZE little-endian bytes."""
        return cls(int.from_bytes(cls._check_bytes(data), "little"))

    def to_be_bytes(self) -> bytes:
        """Encode as big-endian bytes."""
        return self._value.to_bytes(self.BYTE_SIZE, "big")

    def to_le_bytes(self) -> bytes:
        """Encode as little-endian bytes."""
        return self._value.to_bytes(self.BYTE_SIZE, "little")

    # Addition

    def adc(self, rhs: Limb, carry: Limb) -> tuple[Limb, Limb]:
        """Compute ``self + rhs + carry``, returning the result and new carry."""
        ret = self._value + rhs._value + carry._value
        return Limb(ret & _WORD_MASK), Limb(ret >> _WORD_BITS)

    def saturating_add(self, rhs: Limb) -> Limb:
        """Add, clamping at MAX."""
        return Limb(min(self._value + rhs._value, _WORD_MASK))

    def wrapping_add(self, rhs: Limb) -> Limb:
        """Add, discarding overflow."""
        return Limb((self._value + rhs._value) & _WORD_MASK)

    def checked_add(self, rhs: Limb) -> CtOption[Limb]:
        """Add, with an empty result on overflow."""
        result, carry = self.adc(rhs, Limb.ZERO)
        return CtOption(result, carry.is_zero())

    # Subtraction

    def sbb(self, rhs: Limb, borrow: Limb) -> tuple[Limb, Limb]:
        """Compute ``self - (rhs + borrow)``; the new borrow is MAX on underflow, else ZERO."""
        borrow_bit = borrow._value >> (_WORD_BITS - 1)
        ret = (self._value - (rhs._value + borrow_bit)) & _WIDE_MASK
        return Limb(ret & _WORD_MASK), Limb(ret >> _WORD_BITS)

    def saturating_sub(self, rhs: Limb) -> Limb:
        """Subtract, clamping at zero."""
        return Limb(max(self._value - rhs._value, 0))

    def wrapping_sub(self, rhs: Limb) -> Limb:
        """Subtract, wrapping around on underflow."""
        return Limb((self._value - rhs._value) & _WORD_MASK)

    def checked_sub(self, rhs: Limb) -> CtOption[Limb]:
        """Subtract, with an empty result on underflow."""
        result, underflow = self.sbb(rhs, Limb.ZERO)
        return CtOption(result, underflow.is_zero())

    # Multiplication

    def mac(self, b: Limb, c: Limb, carry: Limb) -> tuple[Limb, Limb]:
        """Compute ``self + b * c + carry``, returning the result and new carry."""
        ret = self._value + b._value * c._value + carry._value
        return Limb(ret & _WORD_MASK), Limb(ret >> _WORD_BITS)

    def saturating_mul(self, rhs: Limb) -> Limb:
        """Multiply, clamping at MAX."""
        return Limb(min(self._value * rhs._value, _WORD_MASK))

    def wrapping_mul(self, rhs: Limb) -> Limb:
        """Multiply, discarding overflow."""
        return Limb((self._value * rhs._value) & _WORD_MASK)

    def mul_wide(self, rhs: Limb) -> int:
        """Full double-width product as an integer."""
        return self._value * rhs._value

    def checked_mul(self, rhs: Limb) -> CtOption[Limb]:
        """Multiply, with an empty result on overflow."""
        result = self.mul_wide(rhs)
        overflow = Limb(result >> _WORD_BITS)
        return CtOption(Limb(result & _WORD_MASK), overflow.is_zero())

    # Inspection and comparison

    def bits(self) -> int:
        """Number of bits needed to represent this value."""
        return self._value.bit_length()

    def is_odd(self) -> Choice:
        """Choice(1) if the value is odd."""
        return Choice(self._value & 1)

    def is_zero(self) -> Choice:
        """Choice(1) if the value is zero."""
        return self.ct_eq(Limb.ZERO)

    def cmp_vartime(self, other: Limb) -> int:
        """Return -1, 0 or 1 as ``self`` is less than, equal to or greater than ``other``."""
        return (self._value > other._value) - (self._value < other._value)

    def eq_vartime(self, other: Limb) -> bool:
        """Plain equality check."""
        return self._value == other._value

    def ct_eq(self, other: Limb) -> Choice:
        """Choice(1) if both limbs are equal."""
        diff = self._value ^ other._value
        return Choice(1 - ((diff | -diff) >> (_WORD_BITS * 2) & 1) if diff else 1)

    def ct_gt(self, other: Limb) -> Choice:
        """Choice(1) if ``self > other``."""
        return Choice(((other._value - self._value) >> _WORD_BITS) & 1)

    def ct_lt(self, other: Limb) -> Choice:
        """Choice(1) if ``self < other``."""
        return Choice(((self._value - other._value) >> _WORD_BITS) & 1)

    @staticmethod
    def conditional_select(a: Limb, b: Limb, choice: Choice | bool | int) -> Limb:
        """Return ``b`` when ``choice`` is set, otherwise ``a``."""
        mask = -_as_choice(choice).unwrap_u8() & _WORD_MASK
        return Limb(a._value ^ (mask & (a._value ^ b._value)))


Limb.ZERO = Limb(0)
Limb.ONE = Limb(1)
Limb.MAX = Limb(_WORD_MASK)