import pytest
from hypothesis import given, strategies as st

from fixedbigint.checked import Checked
from fixedbigint.ctoption import Choice, CtOption
from fixedbigint.limb import Limb
from fixedbigint.uint import U64, U128, U256

WORDS = st.integers(min_value=0, max_value=(1 << 64) - 1)


def test_add_limbs_ok():
    result = Checked(Limb.ZERO) + Checked(Limb.ONE)
    assert result.to_optional() == Limb.ONE


def test_add_limbs_overflow():
    result = Checked(Limb.MAX) + Checked(Limb.ONE)
    assert result.to_optional() is None
    assert not bool(result.to_ct_option().is_some())


def test_sub_limbs_ok_and_underflow():
    assert (Checked(Limb.ONE) - Checked(Limb.ONE)).to_optional() == Limb.ZERO
    assert (Checked(Limb.ZERO) - Checked(Limb.ONE)).to_optional() is None


def test_mul_limbs_ok_and_overflow():
    n = Limb.from_u32(0xFFFF_FFFF)
    assert (Checked(n) * Checked(n)).to_optional() == Limb.from_u64(0xFFFF_FFFE_0000_0001)
    assert (Checked(Limb.MAX) * Checked(Limb.MAX)).to_optional() is None


def test_uint_add_example():
    a = Checked(U256.one())
    b = Checked(U256.from_words([2, 0, 0, 0]))
    c = a + b
    assert c.to_ct_option().unwrap() == U256.from_words([3, 0, 0, 0])


def test_uint_add_overflow():
    result = Checked(U128.max()) + Checked(U128.one())
    assert result.to_optional() is None


def test_overflow_propagates():
    overflowed = Checked(Limb.MAX) + Checked(Limb.ONE)
    assert (overflowed + Checked(Limb.ZERO)).to_optional() is None
    assert (Checked(Limb.ZERO) + overflowed).to_optional() is None


def test_ct_eq_of_empty_results():
    a = Checked(Limb.ZERO) - Checked(Limb.ONE)
    b = Checked.from_ct_option(CtOption(Limb.ZERO, Choice(0)))
    assert a.ct_eq(b) == Choice(1)
    assert a.ct_eq(Checked(Limb.ZERO)) == Choice(0)


def test_ct_eq_of_values():
    value = U64.from_words([0x0011223344556677])
    assert Checked(value).ct_eq(Checked(U64.from_words([0x0011223344556677]))) == Choice(1)
    assert Checked(value).ct_eq(Checked(U64.zero())) == Choice(0)


def test_ct_option_round_trip():
    option = CtOption(Limb.ONE, Choice(1))
    checked = Checked.from_ct_option(option)
    assert checked.to_ct_option() is option
    assert checked.to_optional() == Limb.ONE


def test_from_ct_option_rejects_other_types():
    with pytest.raises(TypeError):
        Checked.from_ct_option(Limb.ONE)


def test_conditional_select():
    a = Checked(Limb.ZERO)
    b = Checked(Limb.MAX)
    assert Checked.conditional_select(a, b, Choice(0)).to_optional() == Limb.ZERO
    assert Checked.conditional_select(a, b, Choice(1)).to_optional() == Limb.MAX


def test_mismatched_types_raise():
    with pytest.raises(TypeError):
        Checked(Limb.ONE) + Checked(U64.one())


def test_unsupported_operation_raises():
    with pytest.raises(TypeError):
        Checked(U64.one()) * Checked(U64.one())


@given(WORDS, WORDS)
def test_add_matches_integer_sum(a, b):
    result = (Checked(Limb(a)) + Checked(Limb(b))).to_optional()
    if a + b < (1 << 64):
        assert result is not None and int(result) == a + b
    else:
        assert result is None


@given(WORDS, WORDS)
def test_sub_present_only_without_underflow(a, b):
    result = (Checked(Limb(a)) - Checked(Limb(b))).to_optional()
    if a >= b:
        assert result is not None and int(result) == a - b
    else:
        assert result is None