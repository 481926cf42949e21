"""
Raw storage / wire encoding of unit types.

Only the bare integer is stored: 8 bytes little-endian, unsigned for
``Amount``, ``Weight`` and ``FeeRate``, two's complement for
``SignedAmount``.  Denominations are a display concern and never appear in
the encoded form.  Decoding re-applies the type's range invariant, so a
corrupt or hostile input cannot produce an invalid amount.
"""

from __future__ import annotations

import struct
from typing import Any

from coinunits_core.amount import Amount, SignedAmount
from coinunits_core.errors import DecodeError
from coinunits_core.fee_rate import FeeRate
from coinunits_core.precision import is_strict_int
from coinunits_core.weight import Weight

_U64 = struct.Struct("<Q")
_I64 = struct.Struct("<q")

ENCODED_SIZE: int = 8


def _unpack(fmt: struct.Struct, data: bytes, what: str) -> int:
    if len(data) != ENCODED_SIZE:
        raise DecodeError(f"{what} needs {ENCODED_SIZE} bytes, got {len(data)}")
    return fmt.unpack(data)[0]


def encode_amount(amount: Amount) -> bytes:
    return _U64.pack(amount.to_sat())


def decode_amount(data: bytes) -> Amount:
    return Amount(_unpack(_U64, data, "Amount"))


def encode_signed_amount(amount: SignedAmount) -> bytes:
    return _I64.pack(amount.to_sat())


def decode_signed_amount(data: bytes) -> SignedAmount:
    return SignedAmount(_unpack(_I64, data, "SignedAmount"))


def encode_weight(weight: Weight) -> bytes:
    return _U64.pack(weight.to_wu())


def decode_weight(data: bytes) -> Weight:
    return Weight(_unpack(_U64, data, "Weight"))


def encode_fee_rate(rate: FeeRate) -> bytes:
    return _U64.pack(rate.to_sat_per_kwu())


def decode_fee_rate(data: bytes) -> FeeRate:
    return FeeRate(_unpack(_U64, data, "FeeRate"))


# ── JSON ────────────────────────────────────────────────────────


def amount_to_json(amount: Amount | SignedAmount) -> int:
    """JSON form is the plain satoshi count."""
    return amount.to_sat()


def amount_from_json(value: Any, signed: bool = False) -> Amount | SignedAmount:
    """Inverse of :func:`amount_to_json`.

    Floats and numeric strings are refused: a JSON amount must already be an
    integer satoshi count.
    """
    if not is_strict_int(value):
        raise DecodeError(f"amount must be an integer satoshi count, got {value!r}")
    if signed:
        return SignedAmount(value)
    return Amount(value)
