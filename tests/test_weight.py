"""Tests for the Weight unit type."""

import pytest

from coinunits_core.errors import (
    ArithmeticOverflowError,
    DivideByZeroError,
    InvalidCharacterError,
    OutOfRangeError,
)
from coinunits_core.precision import U64_MAX
from coinunits_core.weight import Weight


class TestConstruction:
    def test_constants(self):
        assert Weight.ZERO.to_wu() == 0
        assert Weight.MIN == Weight.ZERO
        assert Weight.MAX.to_wu() == U64_MAX
        assert Weight.MAX_BLOCK.to_wu() == 4_000_000
        assert Weight.MIN_TRANSACTION.to_wu() == 240

    def test_from_vb(self):
        assert Weight.from_vb(10) == Weight(40)

    def test_from_vb_overflow(self):
        with pytest.raises(ArithmeticOverflowError):
            Weight.from_vb(U64_MAX)

    def test_from_vb_unchecked_asserts(self):
        assert Weight.from_vb_unchecked(2) == Weight(8)
        with pytest.raises(AssertionError):
            Weight.from_vb_unchecked(U64_MAX)

    def test_from_kwu(self):
        assert Weight.from_kwu(2) == Weight(2000)
        with pytest.raises(ArithmeticOverflowError):
            Weight.from_kwu(U64_MAX)

    def test_data_sizes(self):
        assert Weight.from_witness_data_size(10) == Weight(10)
        assert Weight.from_non_witness_data_size(10) == Weight(40)

    def test_range(self):
        with pytest.raises(OutOfRangeError):
            Weight(-1)
        with pytest.raises(OutOfRangeError):
            Weight(U64_MAX + 1)

    def test_type(self):
        with pytest.raises(TypeError):
            Weight(1.0)

    def test_from_str(self):
        assert Weight.from_str("381") == Weight(381)
        with pytest.raises(InvalidCharacterError):
            Weight.from_str("-1")


class TestConversions:
    def test_vbytes(self):
        assert Weight(381).to_vbytes_floor() == 95
        assert Weight(381).to_vbytes_ceil() == 96
        assert Weight(380).to_vbytes_ceil() == 95

    def test_kwu_floor(self):
        assert Weight(1999).to_kwu_floor() == 1

    def test_str(self):
        assert str(Weight(5)) == "5 wu"


class TestArithmetic:
    def test_add_sub(self):
        assert Weight(1).checked_add(Weight(2)) == Weight(3)
        assert Weight(3) - Weight(1) == Weight(2)
        assert Weight(3) + Weight(1) == Weight(4)

    def test_add_overflow(self):
        with pytest.raises(ArithmeticOverflowError):
            Weight.MAX.checked_add(Weight(1))

    def test_sub_underflow(self):
        with pytest.raises(ArithmeticOverflowError):
            Weight.ZERO.checked_sub(Weight(1))

    def test_mul_div(self):
        assert Weight(10).checked_mul(3) == Weight(30)
        assert Weight(10).checked_div(3) == Weight(3)

    def test_div_zero(self):
        with pytest.raises(DivideByZeroError):
            Weight(10).checked_div(0)

    def test_scale_by_witness_factor(self):
        assert Weight(3).scale_by_witness_factor() == Weight(12)

    def test_checked_sum(self):
        assert Weight.checked_sum([Weight(1), Weight(2)]) == Weight(3)
        with pytest.raises(ArithmeticOverflowError):
            Weight.checked_sum([Weight.MAX, Weight(1)])

    def test_raw_int_refused(self):
        with pytest.raises(TypeError):
            Weight(1) + 1
