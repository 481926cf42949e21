"""
coinunits - exact, overflow-safe Bitcoin value types.

Key features:
- Integer satoshi amounts, unsigned and signed, capped at the 21M BTC supply
- Checked and saturating arithmetic that never wraps or silently clamps
- Exact decimal parsing/formatting across BTC, cBTC, mBTC, bit and sat
- Weight and fee-rate types with round-up fee computation
- Raw 64-bit encode/decode for storage and transport
"""

from coinunits_core.amount import (
    Amount,
    SignedAmount,
    format_amount,
    format_with_denomination,
    parse_amount,
    parse_signed_amount,
    parse_with_denomination,
)
from coinunits_core.denomination import Denomination
from coinunits_core.errors import (
    ArithmeticOverflowError,
    DecodeError,
    DivideByZeroError,
    InvalidCharacterError,
    InvalidFormatError,
    OutOfRangeError,
    ParseAmountError,
    TooBigError,
    TooPreciseError,
    UnitsError,
    UnknownDenominationError,
)
from coinunits_core.fee_rate import FeeRate, compute_fee
from coinunits_core.precision import MAX_MONEY, SATS_PER_BTC
from coinunits_core.weight import Weight

__version__ = "0.2.0"
__all__ = [
    "Amount",
    "SignedAmount",
    "Denomination",
    "Weight",
    "FeeRate",
    "compute_fee",
    "parse_amount",
    "parse_signed_amount",
    "parse_with_denomination",
    "format_amount",
    "format_with_denomination",
    "MAX_MONEY",
    "SATS_PER_BTC",
    "UnitsError",
    "ParseAmountError",
    "InvalidCharacterError",
    "InvalidFormatError",
    "TooPreciseError",
    "TooBigError",
    "UnknownDenominationError",
    "OutOfRangeError",
    "ArithmeticOverflowError",
    "DivideByZeroError",
    "DecodeError",
]
