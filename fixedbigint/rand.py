"""Random limb generation."""

from __future__ import annotations

import random
from typing import Optional

from fixedbigint.limb import Limb
from fixedbigint.non_zero import NonZero


def _rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.SystemRandom()


def _fill_bytes(rng: random.Random, count: int) -> bytes:
    return rng.getrandbits(8 * count).to_bytes(count, "little")


def random_limb(rng: Optional[random.Random] = None) -> Limb:
    """A uniformly random limb; defaults to the system's secure generator."""
    return Limb(_rng(rng).getrandbits(Limb.BIT_SIZE))


def random_limb_mod(rng: Optional[random.Random], modulus: NonZero[Limb]) -> Limb:
    """A uniformly random limb below ``modulus``, by rejection sampling."""
    if not isinstance(modulus, NonZero) or not isinstance(modulus.get(), Limb):
        raise TypeError("modulus must be a NonZero Limb")
    rng = _rng(rng)
    bound = modulus.get()
    n_bytes = bound.bits() // 8
    # One spare byte lets the candidate exceed the modulus, keeping it uniform.
    if n_bytes < Limb.BYTE_SIZE:
        n_bytes += 1
    padding = bytes(Limb.BYTE_SIZE - n_bytes)
    while True:
        candidate = Limb.from_le_bytes(_fill_bytes(rng, n_bytes) + padding)
        if candidate.ct_lt(bound):
            return candidate


def random_non_zero_limb(rng: Optional[random.Random] = None) -> NonZero[Limb]:
    """A random non-zero limb, by rejecting zero values."""
    rng = _rng(rng)
    while True:
        result = NonZero.new(random_limb(rng)).to_optional()
        if result is not None:
            return result