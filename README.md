# fixedbigint

Fixed-width unsigned big integers for cryptographic code. Every value has a
set width (`U64`, `U128`, `U256`, … up to `U8192`). It is stored as a tuple of
64-bit `Limb`s, with the least significant limb first. The arithmetic acts like
fixed-size machine words. Carries and borrows are handed back to the caller,
and overflow never makes the number grow.

## Installation

```
pip install fixedbigint
```

To install the test dependencies (pytest, hypothesis), run
`pip install fixedbigint[test]`.

## Limbs

`fixedbigint.limb.Limb` is an unsigned 64-bit word. It supports:

- `&`, `|`, `^`, `~`
- ordering and equality
- carrying arithmetic: `adc`, `sbb`, `mac`
- `saturating_*`, `wrapping_*` and `checked_*` versions of add, sub and mul
- `mul_wide`
- `bits`, `is_odd`, `is_zero`
- `ct_eq`, `ct_lt`, `ct_gt`, `conditional_select`
- byte encoding: `from_be_bytes`, `to_le_bytes`, and so on

`nlimbs(bits)` gives the number of limbs needed for a given bit width.

```python
from fixedbigint.limb import Limb, nlimbs

Limb.MAX.adc(Limb.ONE, Limb.ZERO)   # (Limb.ZERO, Limb.ONE)
Limb.ZERO.sbb(Limb.ONE, Limb.ZERO)  # (Limb.MAX, Limb.MAX): borrow is all ones
nlimbs(256)                         # 4
```

## Integer types

`fixedbigint.uint` defines `UInt` and its fixed-width subclasses `U64` through
`U8192`. `uint_type(bits)` returns the class for any positive multiple of 64
bits.

```python
from fixedbigint.uint import U128, uint_type
from fixedbigint.limb import Limb

total, carry = U128.max().adc(U128.one(), Limb(0))   # U128.zero(), Limb(1)
U512 = uint_type(512)
```

A `UInt` supports:

- `zero()`, `one()` and `max()`
- `from_words` and `to_words`
- `limbs()` and `int(value)`
- `adc`, `saturating_add`, `wrapping_add`, `checked_add`
- `add_mod`
- `&`, `|` and `~`, plus the named forms `bitand`, `bitor` and `not_`, and their `wrapping_`/`checked_` variants
- `is_odd`, `is_even`, `is_zero`
- `ct_eq` and `conditional_select`

A value prints as upper-case hexadecimal, padded to its full width.
`format(value, "x")` and `format(value, "X")` also work.

`concat` joins two values of the same width into one of twice that width, with
the receiver as the high half. `split` returns `(high, low)` halves. Both work
only when a named type of the resulting width exists. Otherwise they raise
`TypeError`.

## Modular addition

```python
r = a.add_mod(b, n)     # a + b mod n, assuming a + b < 2n
```

## Wrapping and checked arithmetic

```python
from fixedbigint.wrapping import Wrapping
from fixedbigint.checked import Checked
from fixedbigint.uint import U256
from fixedbigint.limb import Limb

(Wrapping(U256.max()) + Wrapping(U256.one())).value      # U256.zero()

(Checked(U256.one()) + Checked(U256.one())).to_optional()   # U256 equal to 2
(Checked(Limb.ZERO) - Checked(Limb.ONE)).to_optional()      # None
```

`Wrapping` and `Checked` call the wrapped type's `wrapping_*` and `checked_*`
methods. Their `+`, `-` and `*` therefore work fully on `Limb`. On `UInt`,
only `+` is available (plus `&`, `|`, `~` for `Wrapping`). Any other operator
raises `TypeError`.

`Checked` holds a `CtOption` from `fixedbigint.ctoption`. A `CtOption` is a
value paired with a `Choice` that records whether the value is present. You
read it with:

- `is_some`
- `unwrap`, which raises `ValueError` when the value is absent
- `unwrap_or`
- `to_optional`

## Non-zero values, randomness and byte arrays

- **`fixedbigint.non_zero.NonZero`** wraps a `Limb` or `UInt` that is not zero.
  - `NonZero.new(value)` returns a `CtOption`, which is empty for zero.
  - `NonZero.from_uint` raises `ValueError("found zero")` for a zero value.
  - `NonZero.from_be_bytes(type, data)` and `NonZero.from_le_bytes(type, data)` decode the value and then wrap it.
- **`fixedbigint.rand`** provides `random_limb(rng=None)`, `random_limb_mod(rng, modulus)` and `random_non_zero_limb(rng=None)`.
  - `rng` is a `random.Random`. When it is `None`, `random.SystemRandom` is used.
  - `random_limb_mod` takes a `NonZero` limb and uses rejection sampling.
- **`fixedbigint.array`** converts between exact-length byte strings and the named widths:
  - `byte_size`
  - `from_be_byte_array` and `from_le_byte_array`
  - `to_be_byte_array` and `to_le_byte_array`
  - `into_uint_be` and `into_uint_le`, which pick the width from the byte length.

## What it does not do

Big integers support addition, modular addition, bitwise operations and
comparison for equality, and nothing more. The package does not provide:

- subtraction, multiplication, division, remainder or shifts on `UInt`
- ordering comparisons on `UInt`
- modular subtraction, negation, multiplication or inversion
- square roots
- random `UInt` generation
- serialization formats beyond raw bytes

## Running the tests

```
pytest
```