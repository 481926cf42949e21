"""
Property tests for the unit types:
- Rendering in any denomination and parsing back is the identity.
- Construction succeeds exactly on the valid range.
- Checked arithmetic either matches exact integer arithmetic or raises.
- Computed fees are the smallest amount covering rate * weight.
- Untrusted text only ever fails with the package's own error types.
"""
from __future__ import annotations

import pytest
from hypothesis import given, settings, strategies as st

from coinunits_core.amount import Amount, SignedAmount
from coinunits_core.denomination import Denomination
from coinunits_core.errors import (
    ArithmeticOverflowError,
    OutOfRangeError,
    UnitsError,
)
from coinunits_core.fee_rate import FeeRate, compute_fee
from coinunits_core.precision import MAX_MONEY, U64_MAX
from coinunits_core.weight import Weight

denominations = st.sampled_from(list(Denomination))
sats = st.integers(min_value=0, max_value=MAX_MONEY)
signed_sats = st.integers(min_value=-MAX_MONEY, max_value=MAX_MONEY)


# ---- Round trips -------------------------------------------------------------

@given(sat=sats, denom=denominations)
def test_amount_text_round_trip(sat, denom):
    a = Amount(sat)
    assert Amount.from_str_in(a.to_string_in(denom), denom) == a
    assert Amount.from_str(a.to_string_with_denomination(denom)) == a


@given(sat=signed_sats, denom=denominations)
def test_signed_amount_text_round_trip(sat, denom):
    a = SignedAmount(sat)
    assert SignedAmount.from_str_in(a.to_string_in(denom), denom) == a
    assert SignedAmount.from_str(a.to_string_with_denomination(denom)) == a


# ---- Range -------------------------------------------------------------------

@given(sat=st.integers(min_value=-2 * MAX_MONEY, max_value=2 * MAX_MONEY))
def test_from_sat_iff_in_range(sat):
    if 0 <= sat <= MAX_MONEY:
        assert Amount.from_sat(sat).to_sat() == sat
    else:
        with pytest.raises(OutOfRangeError):
            Amount.from_sat(sat)


# ---- Arithmetic --------------------------------------------------------------

@given(a=sats, b=sats)
def test_checked_add_exact_or_raises(a, b):
    if a + b <= MAX_MONEY:
        assert Amount(a).checked_add(Amount(b)).to_sat() == a + b
    else:
        with pytest.raises(ArithmeticOverflowError):
            Amount(a).checked_add(Amount(b))


@given(a=signed_sats, b=signed_sats)
def test_signed_checked_sub_exact_or_raises(a, b):
    if abs(a - b) <= MAX_MONEY:
        assert SignedAmount(a).checked_sub(SignedAmount(b)).to_sat() == a - b
    else:
        with pytest.raises(ArithmeticOverflowError):
            SignedAmount(a).checked_sub(SignedAmount(b))


@given(a=signed_sats, b=signed_sats)
def test_saturating_add_clamps(a, b):
    got = SignedAmount(a).saturating_add(SignedAmount(b)).to_sat()
    assert got == max(-MAX_MONEY, min(MAX_MONEY, a + b))


# ---- Fees --------------------------------------------------------------------

@settings(max_examples=300)
@given(
    rate=st.integers(min_value=0, max_value=1_000_000_000),
    wu=st.integers(min_value=0, max_value=4_000_000),
)
def test_fee_is_tightest_cover(rate, wu):
    fee = compute_fee(FeeRate(rate), Weight(wu)).to_sat()
    assert fee * 1000 >= rate * wu
    if fee > 0:
        assert (fee - 1) * 1000 < rate * wu


@given(rate=st.integers(min_value=0, max_value=U64_MAX), wu=st.integers(min_value=0, max_value=U64_MAX))
def test_fee_never_wraps(rate, wu):
    try:
        fee = compute_fee(FeeRate(rate), Weight(wu))
    except ArithmeticOverflowError:
        assert rate * wu + 999 > U64_MAX or (rate * wu + 999) // 1000 > MAX_MONEY
    else:
        assert fee.to_sat() * 1000 >= rate * wu


# ---- Untrusted input ---------------------------------------------------------

@given(text=st.text(max_size=40))
def test_arbitrary_text_only_raises_units_errors(text):
    for parse in (Amount.from_str, SignedAmount.from_str, Weight.from_str, FeeRate.from_str):
        try:
            parse(text)
        except UnitsError:
            pass


@given(text=st.text(alphabet="0123456789.+- ", max_size=30), denom=denominations)
def test_numeric_looking_text_in_denomination(text, denom):
    try:
        a = SignedAmount.from_str_in(text, denom)
    except UnitsError:
        return
    assert -MAX_MONEY <= a.to_sat() <= MAX_MONEY
