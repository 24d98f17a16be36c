"""Fixed-width big unsigned integers built from 64-bit limbs, with wrapping, checked and modular addition."""

__version__ = "0.1.0"

__all__ = [
    "array",
    "checked",
    "ctoption",
    "limb",
    "non_zero",
    "rand",
    "uint",
    "wrapping",
]