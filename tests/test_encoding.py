"""Tests for raw 64-bit and JSON encoding of unit types."""

import struct

import pytest

from coinunits_core.amount import Amount, SignedAmount
from coinunits_core.encoding import (
    ENCODED_SIZE,
    amount_from_json,
    amount_to_json,
    decode_amount,
    decode_fee_rate,
    decode_signed_amount,
    decode_weight,
    encode_amount,
    encode_fee_rate,
    encode_signed_amount,
    encode_weight,
)
from coinunits_core.errors import DecodeError, OutOfRangeError
from coinunits_core.fee_rate import FeeRate
from coinunits_core.precision import MAX_MONEY
from coinunits_core.weight import Weight


class TestBinary:
    def test_amount_little_endian(self):
        assert encode_amount(Amount(1)) == b"\x01" + b"\x00" * 7
        assert len(encode_amount(Amount.MAX)) == ENCODED_SIZE

    def test_signed_twos_complement(self):
        assert encode_signed_amount(SignedAmount(-1)) == b"\xff" * 8

    def test_decode(self):
        assert decode_amount(struct.pack("<Q", 100_000_000)) == Amount.ONE_BTC
        assert decode_signed_amount(struct.pack("<q", -5)) == SignedAmount(-5)

    def test_no_denomination_in_encoding(self):
        # 1 BTC and 100000000 sat are the same stored value
        assert encode_amount(Amount.from_str("1 BTC")) == encode_amount(Amount.from_str("100000000 sat"))

    def test_decode_above_max_money(self):
        with pytest.raises(OutOfRangeError):
            decode_amount(struct.pack("<Q", MAX_MONEY + 1))

    def test_decode_u64_max(self):
        with pytest.raises(OutOfRangeError):
            decode_amount(b"\xff" * 8)

    def test_decode_signed_below_min(self):
        with pytest.raises(OutOfRangeError):
            decode_signed_amount(struct.pack("<q", -MAX_MONEY - 1))

    @pytest.mark.parametrize("data", [b"", b"\x00" * 7, b"\x00" * 9])
    def test_wrong_length(self, data):
        with pytest.raises(DecodeError):
            decode_amount(data)

    def test_weight_and_fee_rate(self):
        assert decode_weight(encode_weight(Weight.MAX)) == Weight.MAX
        assert decode_fee_rate(encode_fee_rate(FeeRate.DUST)) == FeeRate.DUST


class TestJSON:
    def test_to_json(self):
        assert amount_to_json(Amount.ONE_BTC) == 100_000_000
        assert amount_to_json(SignedAmount(-5)) == -5

    def test_from_json(self):
        assert amount_from_json(100_000_000) == Amount.ONE_BTC
        assert amount_from_json(-5, signed=True) == SignedAmount(-5)

    def test_negative_unsigned(self):
        with pytest.raises(OutOfRangeError):
            amount_from_json(-5)

    @pytest.mark.parametrize("value", [1.0, "1", True, None])
    def test_non_integer(self, value):
        with pytest.raises(DecodeError):
            amount_from_json(value)
