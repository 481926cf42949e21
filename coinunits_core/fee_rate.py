"""
Fee rates and fee computation.

A :class:`FeeRate` is an unsigned 64-bit count of satoshi per 1000 weight
units (sat/kwu).  One sat/vB equals 250 sat/kwu, because one virtual byte is
four weight units.

Fee policy: multiplying a rate by a weight rounds *up* to the next whole
satoshi.  A fee computed this way never falls short of the nominal rate;
at worst it overpays by less than one satoshi.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from coinunits_core.amount import Amount
from coinunits_core.errors import (
    ArithmeticOverflowError,
    DivideByZeroError,
    OutOfRangeError,
)
from coinunits_core.parsing import parse_u64
from coinunits_core.precision import (
    MAX_MONEY,
    U64_MAX,
    WITNESS_SCALE_FACTOR,
    checked_u64,
    is_strict_int,
    require_u64_operand,
)
from coinunits_core.weight import Weight

# sat/kwu per sat/vB
_KWU_PER_VB: int = 1000 // WITNESS_SCALE_FACTOR  # 250


@dataclass(frozen=True, order=True)
class FeeRate:
    """Fee rate in sat/kwu."""

    sat_per_kwu: int

    ZERO: ClassVar[FeeRate]
    MIN: ClassVar[FeeRate]
    MAX: ClassVar[FeeRate]
    # Minimum relay fee of the default node policy.
    BROADCAST_MIN: ClassVar[FeeRate]
    # Rate used to compute the dust threshold.
    DUST: ClassVar[FeeRate]

    def __post_init__(self) -> None:
        if not is_strict_int(self.sat_per_kwu):
            raise TypeError(f"FeeRate requires an int, got {type(self.sat_per_kwu).__name__}")
        if not 0 <= self.sat_per_kwu <= U64_MAX:
            raise OutOfRangeError(self.sat_per_kwu, 0, U64_MAX, "FeeRate")

    # ── Construction ────────────────────────────────────────────

    @classmethod
    def from_sat_per_kwu(cls, sat_kwu: int) -> FeeRate:
        return cls(sat_kwu)

    @classmethod
    def from_sat_per_vb(cls, sat_vb: int) -> FeeRate:
        return cls(checked_u64(require_u64_operand(sat_vb) * _KWU_PER_VB, "sat/vB conversion"))

    @classmethod
    def from_sat_per_vb_unchecked(cls, sat_vb: int) -> FeeRate:
        """For literals known at programming time; asserts on overflow."""
        if not is_strict_int(sat_vb) or not 0 <= sat_vb * _KWU_PER_VB <= U64_MAX:
            raise AssertionError(f"{sat_vb!r} sat/vB is not a valid FeeRate literal")
        return cls(sat_vb * _KWU_PER_VB)

    @classmethod
    def from_sat_per_kvb(cls, sat_kvb: int) -> FeeRate:
        # 1 kvB == 4 kwu
        return cls(require_u64_operand(sat_kvb) // WITNESS_SCALE_FACTOR)

    @classmethod
    def from_str(cls, text: str) -> FeeRate:
        """Parse a raw sat/kwu integer."""
        return cls(parse_u64(text))

    # ── Accessors ───────────────────────────────────────────────

    def to_sat_per_kwu(self) -> int:
        return self.sat_per_kwu

    def to_sat_per_vb_floor(self) -> int:
        return self.sat_per_kwu // _KWU_PER_VB

    def to_sat_per_vb_ceil(self) -> int:
        return -(-self.sat_per_kwu // _KWU_PER_VB)

    def display_sat_per_vb(self) -> str:
        return f"{self.to_sat_per_vb_ceil()}.00 sat/vbyte"

    def __str__(self) -> str:
        return f"{self.sat_per_kwu} sat/kwu"

    # ── Checked arithmetic ──────────────────────────────────────

    def checked_add(self, rhs: int) -> FeeRate:
        return FeeRate(checked_u64(self.sat_per_kwu + require_u64_operand(rhs), "FeeRate addition"))

    def checked_sub(self, rhs: int) -> FeeRate:
        return FeeRate(checked_u64(self.sat_per_kwu - require_u64_operand(rhs), "FeeRate subtraction"))

    def checked_mul(self, rhs: int) -> FeeRate:
        return FeeRate(checked_u64(self.sat_per_kwu * require_u64_operand(rhs), "FeeRate multiplication"))

    def checked_div(self, rhs: int) -> FeeRate:
        if require_u64_operand(rhs) == 0:
            raise DivideByZeroError("FeeRate division by zero")
        return FeeRate(self.sat_per_kwu // rhs)

    def checked_mul_by_weight(self, weight: Weight) -> Amount:
        """Absolute fee for *weight* at this rate, rounded up to whole satoshi."""
        return compute_fee(self, weight)

    def fee_wu(self, weight: Weight) -> Amount:
        return compute_fee(self, weight)

    def fee_vb(self, vb: int) -> Amount:
        return compute_fee(self, Weight.from_vb(vb))

    def __add__(self, other):
        if not isinstance(other, FeeRate):
            return NotImplemented
        return self.checked_add(other.sat_per_kwu)

    def __sub__(self, other):
        if not isinstance(other, FeeRate):
            return NotImplemented
        return self.checked_sub(other.sat_per_kwu)

    def __mul__(self, other):
        if not isinstance(other, Weight):
            return NotImplemented
        return compute_fee(self, other)

    __rmul__ = __mul__


FeeRate.ZERO = FeeRate(0)
FeeRate.MIN = FeeRate.ZERO
FeeRate.MAX = FeeRate(U64_MAX)
FeeRate.BROADCAST_MIN = FeeRate.from_sat_per_vb_unchecked(1)
FeeRate.DUST = FeeRate.from_sat_per_vb_unchecked(3)


def compute_fee(rate: FeeRate, weight: Weight) -> Amount:
    """Fee owed for *weight* at *rate*: ``ceil(rate * wu / 1000)`` satoshi.

    Both the 64-bit intermediate product and the final fee are checked;
    exceeding either the integer width or ``MAX_MONEY`` raises
    :class:`ArithmeticOverflowError`.
    """
    product = checked_u64(rate.to_sat_per_kwu() * weight.to_wu(), "fee multiplication")
    fee = checked_u64(product + 999, "fee rounding") // 1000
    if fee > MAX_MONEY:
        raise ArithmeticOverflowError(f"fee {fee} sat exceeds MAX_MONEY ({MAX_MONEY})")
    return Amount(fee)
