"""Fixed-size byte array encoding for the named UInt widths."""

from __future__ import annotations

from fixedbigint.limb import Limb
from fixedbigint.uint import (
    U64, U128, U192, U256, U384, U448, U512, U576, U768, U896, U1024,
    U1536, U1792, U2048, U3072, U3584, U4096, U6144, U8192, UInt,
)

_SUPPORTED: tuple[type[UInt], ...] = (
    U64, U128, U192, U256, U384, U448, U512, U576, U768, U896, U1024,
    U1536, U1792, U2048, U3072, U3584, U4096, U6144, U8192,
)

_BY_SIZE: dict[int, type[UInt]] = {cls.BYTE_SIZE: cls for cls in _SUPPORTED}

_WORD_MASK = (1 << Limb.BIT_SIZE) - 1


def byte_size(uint_cls: type[UInt]) -> int:
    """Length in bytes of the array that encodes ``uint_cls``."""
    if uint_cls not in _SUPPORTED:
        raise TypeError(f"no byte array encoding for {getattr(uint_cls, '__name__', uint_cls)!r}")
    return uint_cls.BYTE_SIZE


def _decode(uint_cls: type[UInt], data: bytes, order: str) -> UInt:
    size = byte_size(uint_cls)
    data = bytes(data)
    if len(data) != size:
        raise ValueError(f"{uint_cls.__name__} needs {size} bytes, got {len(data)}")
    n = int.from_bytes(data, order)  # type: ignore[arg-type]
    return uint_cls.from_words(
        [(n >> (Limb.BIT_SIZE * i)) & _WORD_MASK for i in range(uint_cls.LIMBS)]
    )


def from_be_byte_array(uint_cls: type[UInt], data: bytes) -> UInt:
    """Decode ``uint_cls`` from a big-endian byte array of exact length."""
    return _decode(uint_cls, data, "big")


def from_le_byte_array(uint_cls: type[UInt], data: bytes) -> UInt:
    """Decode ``uint_cls`` from a little-endian byte array of exact length."""
    return _decode(uint_cls, data, "little")


def to_be_byte_array(value: UInt) -> bytes:
    """Encode as a big-endian byte array."""
    return int(value).to_bytes(byte_size(type(value)), "big")


def to_le_byte_array(value: UInt) -> bytes:
    """Encode as a little-endian byte array."""
    return int(value).to_bytes(byte_size(type(value)), "little")


def _type_for(data: bytes) -> type[UInt]:
    cls = _BY_SIZE.get(len(data))
    if cls is None:
        raise ValueError(f"no integer width matches a {len(data)}-byte array")
    return cls


def into_uint_be(data: bytes) -> UInt:
    """Decode a big-endian array into the UInt whose width matches its length."""
    data = bytes(data)
    return from_be_byte_array(_type_for(data), data)


def into_uint_le(data: bytes) -> UInt:
    """Decode a little-endian array into the UInt whose width matches its length."""
    data = bytes(data)
    return from_le_byte_array(_type_for(data), data)