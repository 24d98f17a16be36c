import pytest
from hypothesis import given
from hypothesis import strategies as st

from fixedbigint.ctoption import Choice
from fixedbigint.limb import Limb
from fixedbigint.uint import (
    U64,
    U128,
    U256,
    U576,
    U6144,
    U8192,
    U3072,
    UInt,
    uint_type,
)

_MASK64 = (1 << 64) - 1


def _hex_words(text, count):
    n = int(text, 16)
    return [(n >> (64 * i)) & _MASK64 for i in range(count)]


def _from_be_hex(cls, text):
    return cls.from_words(_hex_words(text, cls.LIMBS))


def _u64(n):
    return U64.from_words([n])


# uint.rs


@pytest.mark.parametrize(
    "hex_text",
    [
        "AAAAAAAABBBBBBBBCCCCCCCCDDDDDDDD",
        "AAAAAAAABBBBBBBB0000000000000000",
        "AAAAAAAABBBBBBBB00000000DDDDDDDD",
        "AAAAAAAABBBBBBBB0CCCCCCCDDDDDDDD",
    ],
)
def test_display(hex_text):
    n = U128.from_words(_hex_words(hex_text, 2))
    assert str(n) == hex_text


def test_lower_hex_format():
    n = U128.from_words(_hex_words("00112233445566778899AABBCCDDEEFF", 2))
    assert format(n, "x") == "00112233445566778899aabbccddeeff"


def test_conditional_select():
    a = _from_be_hex(U128, "00002222444466668888AAAACCCCEEEE")
    b = _from_be_hex(U128, "11113333555577779999BBBBDDDDFFFF")
    assert U128.conditional_select(a, b, Choice(0)) == a
    assert U128.conditional_select(a, b, Choice(1)) == b


def test_concat():
    hi = _u64(0x0011223344556677)
    lo = _u64(0x8899AABBCCDDEEFF)
    assert hi.concat(lo) == _from_be_hex(U128, "00112233445566778899aabbccddeeff")


def test_split():
    hi, lo = _from_be_hex(U128, "00112233445566778899aabbccddeeff").split()
    assert hi == _u64(0x0011223344556677)
    assert lo == _u64(0x8899AABBCCDDEEFF)


def test_split_u6144_gives_u3072():
    hi, lo = U6144.max().split()
    assert type(hi) is U3072
    assert hi == U3072.max()


def test_concat_unavailable_width():
    with pytest.raises(TypeError):
        U576.one().concat(U576.one())
    with pytest.raises(TypeError):
        U8192.one().concat(U8192.one())


def test_split_unavailable_width():
    with pytest.raises(TypeError):
        U64.one().split()
    with pytest.raises(TypeError):
        U576.one().split()


def test_limb_layout_is_little_endian():
    n = _from_be_hex(U128, "00112233445566778899aabbccddeeff")
    assert n.limbs() == (Limb(0x8899AABBCCDDEEFF), Limb(0x0011223344556677))
    assert n.to_words() == (0x8899AABBCCDDEEFF, 0x0011223344556677)


def test_wrong_limb_count():
    with pytest.raises(ValueError):
        U128([Limb.ONE])


def test_bare_uint_rejected():
    with pytest.raises(TypeError):
        UInt([Limb.ONE])


def test_uint_type_lookup_and_errors():
    assert uint_type(256) is U256
    assert uint_type(320).LIMBS == 5
    with pytest.raises(ValueError):
        uint_type(100)


def test_mixed_widths_rejected():
    with pytest.raises(TypeError):
        U128.one().wrapping_add(U256.one())
    assert (U128.one() == U256.one()) is False


def test_parity_and_zero():
    assert U128.one().is_odd() == Choice(1)
    assert U128.zero().is_even() == Choice(1)
    assert U128.zero().is_zero() == Choice(1)
    assert U128.max().is_zero() == Choice(0)


# add.rs


def test_adc_no_carry():
    res, carry = U128.zero().adc(U128.one(), Limb.ZERO)
    assert res == U128.one()
    assert carry == Limb.ZERO


def test_adc_with_carry():
    res, carry = U128.max().adc(U128.one(), Limb.ZERO)
    assert res == U128.zero()
    assert carry == Limb.ONE


def test_wrapping_add_no_carry():
    assert U128.zero().wrapping_add(U128.one()) == U128.one()


def test_wrapping_add_with_carry():
    assert U128.max().wrapping_add(U128.one()) == U128.zero()


def test_checked_add_ok():
    assert U128.zero().checked_add(U128.one()).unwrap() == U128.one()


def test_checked_add_overflow():
    assert U128.max().checked_add(U128.one()).is_some() == Choice(0)


def test_saturating_add():
    assert U128.max().saturating_add(U128.one()) == U128.max()
    assert U128.one().saturating_add(U128.one()) == U128.from_words([2, 0])


# add_mod.rs


def test_add_mod_nist_p256():
    a = U256.from_words(
        _hex_words("44acf6b7e36c1342c2c5897204fe09504e1e2efb1a900377dbc4e7a6a133ec56", 4)
    )
    b = U256.from_words(
        _hex_words("d5777c45019673125ad240f83094d4252d829516fac8601ed01979ec1ec1a251", 4)
    )
    n = U256.from_words(
        _hex_words("ffffffff00000000ffffffffffffffffbce6faada7179e84f3b9cac2fc632551", 4)
    )
    expected = U256.from_words(
        _hex_words("1a2472fde50286541d97ca6a3592dd75beb9c9646e40c511b82496cfc3926956", 4)
    )
    assert a.add_mod(b, n) == expected


def test_add_mod_small():
    three = U256.from_words([3, 0, 0, 0])
    two = U256.one().add_mod(U256.one(), three)
    assert two == U256.from_words([2, 0, 0, 0])
    assert two.add_mod(U256.one(), three) == U256.zero()


# bit_and.rs / bit_or.rs / bit_not.rs


def test_checked_and_ok():
    assert U128.zero().checked_and(U128.one()).unwrap() == U128.zero()


def test_overlapping_and_ok():
    assert U128.max().wrapping_and(U128.one()) == U128.one()


def test_checked_or_ok():
    assert U128.zero().checked_or(U128.one()).unwrap() == U128.one()


def test_overlapping_or_ok():
    assert U128.max().wrapping_or(U128.one()) == U128.max()


def test_bitnot_ok():
    assert U128.zero().not_() == U128.max()
    assert ~U128.max() == U128.zero()


def test_operators():
    assert (U128.max() & U128.one()) == U128.one()
    assert (U128.zero() | U128.one()) == U128.one()


# Properties

_words128 = st.lists(st.integers(0, _MASK64), min_size=2, max_size=2)


@given(_words128)
def test_words_roundtrip(words):
    n = U128.from_words(words)
    assert list(n.to_words()) == words
    assert int(n) == words[0] | (words[1] << 64)


@given(_words128, _words128)
def test_wrapping_add_modular(a_words, b_words):
    a, b = U128.from_words(a_words), U128.from_words(b_words)
    assert int(a.wrapping_add(b)) == (int(a) + int(b)) % (1 << 128)


@given(_words128)
def test_double_not_identity(words):
    n = U128.from_words(words)
    assert ~~n == n
    assert (n & ~n) == U128.zero()


@given(_words128)
def test_split_concat_roundtrip(words):
    n = U128.from_words(words)
    hi, lo = n.split()
    assert hi.concat(lo) == n


@given(_words128)
def test_hash_consistent_with_eq(words):
    assert hash(U128.from_words(words)) == hash(U128.from_words(list(words)))