"""
Precision constants for coinunits.

All monetary values are held as integer satoshi counts, matching Bitcoin's
model:

    1 BTC = 100,000,000 sat (smallest indivisible unit)

Nothing in this package converts through ``float``; these constants are the
only scale factors used by the parser, the formatter and the arithmetic.
"""

from __future__ import annotations

from coinunits_core.errors import ArithmeticOverflowError

# Number of decimal places of one whole coin.
BTC_DECIMALS: int = 8

# Smallest representable unit: 1 sat = 0.00000001 BTC.
SATS_PER_BTC: int = 10 ** BTC_DECIMALS  # 100_000_000

# Total supply cap.  Fixed at import time and never reconfigured.
MAX_MONEY: int = 21_000_000 * SATS_PER_BTC  # 2_100_000_000_000_000

# Fixed-width integer bounds emulated on top of Python ints.
U64_MAX: int = 2 ** 64 - 1
I64_MIN: int = -(2 ** 63)
I64_MAX: int = 2 ** 63 - 1

# Weight units per virtual byte.
WITNESS_SCALE_FACTOR: int = 4


def is_strict_int(value: object) -> bool:
    """True for real ``int`` values; ``bool`` is rejected."""
    return isinstance(value, int) and not isinstance(value, bool)


def checked_u64(value: int, what: str) -> int:
    """Return *value* if it fits an unsigned 64-bit integer, else raise."""
    if not 0 <= value <= U64_MAX:
        raise ArithmeticOverflowError(f"{what} gives {value}, outside [0, {U64_MAX}]")
    return value


def require_u64_operand(rhs: object) -> int:
    """Validate a raw integer operand of a u64-backed unit type."""
    if not is_strict_int(rhs):
        raise TypeError(f"operand must be an int, got {type(rhs).__name__}")
    return checked_u64(rhs, "operand")
