"""Fixed-width big unsigned integers built from an array of limbs."""

from __future__ import annotations

from typing import ClassVar, Iterable, Sequence

from fixedbigint.ctoption import Choice, CtOption
from fixedbigint.limb import Limb

_ALIAS_BITS = (
    64, 128, 192, 256, 384, 448, 512, 576, 768, 896, 1024,
    1536, 1792, 2048, 3072, 3584, 4096, 6144, 8192,
)

_REGISTRY: dict[int, type[UInt]] = {}


def _as_choice(choice: Choice | bool | int) -> Choice:
    return choice if isinstance(choice, Choice) else Choice(choice)


def uint_type(bits: int) -> type[UInt]:
    """Return the unsigned integer class holding exactly ``bits`` bits."""
    if isinstance(bits, bool) or not isinstance(bits, int):
        raise TypeError(f"bit size must be an int, got {type(bits).__name__}")
    if bits <= 0 or bits % Limb.BIT_SIZE:
        raise ValueError(f"bit size must be a positive multiple of {Limb.BIT_SIZE}, got {bits}")
    existing = _REGISTRY.get(bits)
    if existing is not None:
        return existing
    return type(f"U{bits}", (UInt,), {"__slots__": ()}, bits=bits)


class UInt:
    """Big unsigned integer of a fixed number of limbs, least significant first.

    Concrete widths are subclasses such as ``U256``; use ``uint_type`` to get one.
    """

    __slots__ = ("_limbs",)

    LIMBS: ClassVar[int]
    BIT_SIZE: ClassVar[int]
    BYTE_SIZE: ClassVar[int]

    def __init_subclass__(cls, *, bits: int, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if bits <= 0 or bits % Limb.BIT_SIZE:
            raise ValueError(f"bit size must be a positive multiple of {Limb.BIT_SIZE}, got {bits}")
        cls.LIMBS = bits // Limb.BIT_SIZE
        cls.BIT_SIZE = bits
        cls.BYTE_SIZE = bits // 8
        _REGISTRY.setdefault(bits, cls)

    def __init__(self, limbs: Iterable[Limb]) -> None:
        if not hasattr(type(self), "LIMBS"):
            raise TypeError("UInt needs a concrete width; use a subclass such as U256")
        limbs = tuple(limbs)
        if len(limbs) != self.LIMBS:
            raise ValueError(f"{type(self).__name__} needs {self.LIMBS} limbs, got {len(limbs)}")
        if not all(isinstance(limb, Limb) for limb in limbs):
            raise TypeError("every limb must be a Limb")
        self._limbs: tuple[Limb, ...] = limbs

    # Constants

    @classmethod
    def zero(cls) -> UInt:
        """The value 0."""
        return cls([Limb.ZERO] * cls.LIMBS)

    @classmethod
    def one(cls) -> UInt:
        """The value 1."""
        return cls([Limb.ONE] + [Limb.ZERO] * (cls.LIMBS - 1))

    @classmethod
    def max(cls) -> UInt:
        """The largest value this width can express."""
        return cls([Limb.MAX] * cls.LIMBS)

    # Access and conversion

    def limbs(self) -> tuple[Limb, ...]:
        """The limbs, least significant first."""
        return self._limbs

    @classmethod
    def from_words(cls, words: Sequence[int]) -> UInt:
        """Build from machine words, least significant first."""
        return cls(Limb(word) for word in words)

    def to_words(self) -> tuple[int, ...]:
        """The limbs as plain integers, least significant first."""
        return tuple(limb.value for limb in self._limbs)

    def __int__(self) -> int:
        result = 0
        for limb in reversed(self._limbs):
            result = (result << Limb.BIT_SIZE) | limb.value
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}(0x{self:x})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(self.ct_eq(other))

    def __hash__(self) -> int:
        return hash((self.BIT_SIZE, self.to_words()))

    def __str__(self) -> str:
        return format(self, "X")

    def __format__(self, spec: str) -> str:
        if spec in ("", "X", "x"):
            return "".join(format(limb, spec or "X") for limb in reversed(self._limbs))
        return format(int(self), spec)

    def _same_type(self, other: object) -> UInt:
        if type(other) is not type(self):
            raise TypeError(
                f"expected {type(self).__name__}, got {type(other).__name__}"
            )
        return other  # type: ignore[return-value]

    # Bitwise operations

    def bitand(self, rhs: UInt) -> UInt:
        """Bitwise AND."""
        rhs = self._same_type(rhs)
        return type(self)(a & b for a, b in zip(self._limbs, rhs._limbs))

    def wrapping_and(self, rhs: UInt) -> UInt:
        """Bitwise AND; it never wraps."""
        return self.bitand(rhs)

    def checked_and(self, rhs: UInt) -> CtOption[UInt]:
        """Bitwise AND; the result is always present."""
        return CtOption(self.bitand(rhs), Choice(1))

    def bitor(self, rhs: UInt) -> UInt:
        """Bitwise OR."""
        rhs = self._same_type(rhs)
        return type(self)(a | b for a, b in zip(self._limbs, rhs._limbs))

    def wrapping_or(self, rhs: UInt) -> UInt:
        """Bitwise OR; it never wraps."""
        return self.bitor(rhs)

    def checked_or(self, rhs: UInt) -> CtOption[UInt]:
        """Bitwise OR; the result is always present."""
        return CtOption(self.bitor(rhs), Choice(1))

    def not_(self) -> UInt:
        """Bitwise NOT."""
        return type(self)(~limb for limb in self._limbs)

    def __and__(self, other: UInt) -> UInt:
        if type(other) is not type(self):
            return NotImplemented
        return self.bitand(other)

    def __or__(self, other: UInt) -> UInt:
        if type(other) is not type(self):
            return NotImplemented
        return self.bitor(other)

    def __invert__(self) -> UInt:
        return self.not_()

    # Addition

    def adc(self, rhs: UInt, carry: Limb) -> tuple[UInt, Limb]:
        """Compute ``self + rhs + carry``, returning the result and the new carry."""
        rhs = self._same_type(rhs)
        out = []
        for a, b in zip(self._limbs, rhs._limbs):
            word, carry = a.adc(b, carry)
            out.append(word)
        return type(self)(out), carry

    def _sbb(self, rhs: UInt, borrow: Limb) -> tuple[UInt, Limb]:
        rhs = self._same_type(rhs)
        out = []
        for a, b in zip(self._limbs, rhs._limbs):
            word, borrow = a.sbb(b, borrow)
            out.append(word)
        return type(self)(out), borrow

    def saturating_add(self, rhs: UInt) -> UInt:
        """Add, returning MAX on overflow."""
        result, overflow = self.adc(rhs, Limb.ZERO)
        return result if overflow.value == 0 else self.max()

    def wrapping_add(self, rhs: UInt) -> UInt:
        """Add, discarding overflow."""
        return self.adc(rhs, Limb.ZERO)[0]

    def checked_add(self, rhs: UInt) -> CtOption[UInt]:
        """Add, with an empty result on overflow."""
        result, carry = self.adc(rhs, Limb.ZERO)
        return CtOption(result, carry.is_zero())

    def add_mod(self, rhs: UInt, p: UInt) -> UInt:
        """Compute ``self + rhs mod p``, assuming ``self + rhs < 2p``."""
        w, carry = self.adc(rhs, Limb.ZERO)
        w, borrow = w._sbb(p, Limb.ZERO)
        _, borrow = carry.sbb(Limb.ZERO, borrow)
        # borrow is all ones on underflow, so it masks the modulus to add back.
        out = []
        carry = Limb.ZERO
        for w_limb, p_limb in zip(w._limbs, p._limbs):
            word, carry = w_limb.adc(p_limb & borrow, carry)
            out.append(word)
        return type(self)(out)

    # Predicates and selection

    def is_odd(self) -> Choice:
        """Choice(1) if the value is odd."""
        return self._limbs[0].is_odd() if self._limbs else Choice(0)

    def is_even(self) -> Choice:
        """Choice(1) if the value is even."""
        return ~self.is_odd()

    def is_zero(self) -> Choice:
        """Choice(1) if the value is zero."""
        return self.ct_eq(self.zero())

    def ct_eq(self, other: UInt) -> Choice:
        """Choice(1) if both values are equal."""
        other = self._same_type(other)
        result = Choice(1)
        for a, b in zip(self._limbs, other._limbs):
            result = result & a.ct_eq(b)
        return result

    @staticmethod
    def conditional_select(a: UInt, b: UInt, choice: Choice | bool | int) -> UInt:
        """Return ``b`` when ``choice`` is set, otherwise ``a``."""
        b = a._same_type(b)
        choice = _as_choice(choice)
        return type(a)(Limb.conditional_select(x, y, choice) for x, y in zip(a._limbs, b._limbs))

    # Widening and narrowing

    def concat(self, rhs: UInt) -> UInt:
        """Join into a double-width value with ``self`` as the high half."""
        rhs = self._same_type(rhs)
        bits = 2 * self.BIT_SIZE
        if bits not in _ALIAS_BITS:
            raise TypeError(f"{type(self).__name__} has no concatenated width")
        return uint_type(bits)(rhs._limbs + self._limbs)

    def split(self) -> tuple[UInt, UInt]:
        """Split into (high, low) halves of half the width."""
        half_bits = self.BIT_SIZE // 2
        if self.BIT_SIZE % 2 or half_bits not in _ALIAS_BITS:
            raise TypeError(f"{type(self).__name__} has no split width")
        half = uint_type(half_bits)
        n = half.LIMBS
        return half(self._limbs[n:]), half(self._limbs[:n])


class U64(UInt, bits=64):
    """64-bit unsigned integer."""

    __slots__ = ()


class U128(UInt, bits=128):
    """128-bit unsigned integer."""

    __slots__ = ()


class U192(UInt, bits=192):
    """192-bit unsigned integer."""

    __slots__ = ()


class U256(UInt, bits=256):
    """256-bit unsigned integer."""

    __slots__ = ()


class U384(UInt, bits=384):
    """384-bit unsigned integer."""

    __slots__ = ()


class U448(UInt, bits=448):
    """448-bit unsigned integer."""

    __slots__ = ()


class U512(UInt, bits=512):
    """512-bit unsigned integer."""

    __slots__ = ()


class U576(UInt, bits=576):
    """576-bit unsigned integer."""

    __slots__ = ()


class U768(UInt, bits=768):
    """768-bit unsigned integer."""

    __slots__ = ()


class U896(UInt, bits=896):
    """896-bit unsigned integer."""

    __slots__ = ()


class U1024(UInt, bits=1024):
    """1024-bit unsigned integer."""

    __slots__ = ()


class U1536(UInt, bits=1536):
    """1536-bit unsigned integer."""

    __slots__ = ()


class U1792(UInt, bits=1792):
    """1792-bit unsigned integer."""

    __slots__ = ()


class U2048(UInt, bits=2048):
    """2048-bit unsigned integer."""

    __slots__ = ()


class U3072(UInt, bits=3072):
    """3072-bit unsigned integer."""

    __slots__ = ()


class U3584(UInt, bits=3584):
    """3584-bit unsigned integer."""

    __slots__ = ()


class U4096(UInt, bits=4096):
    """4096-bit unsigned integer."""

    __slots__ = ()


class U6144(UInt, bits=6144):
    """6144-bit unsigned integer."""

    __slots__ = ()


class U8192(UInt, bits=8192):
    """8192-bit unsigned integer."""

    __slots__ = ()