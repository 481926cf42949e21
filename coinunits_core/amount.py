"""
Bounded monetary amounts.

Two immutable value types share one arithmetic core:

* :class:`Amount`: unsigned, ``0 <= sat <= MAX_MONEY``
* :class:`SignedAmount`: signed, ``-MAX_MONEY <= sat <= MAX_MONEY``

Every operation either returns a new valid value or raises a
:class:`~coinunits_core.errors.UnitsError` subclass.  The supply cap is
enforced on every result, so an amount can never hold a value the network
could not represent, even when a 64-bit integer would not have overflowed.

Usage:
    from coinunits_core.amount import Amount
    from coinunits_core.denomination import Denomination

    fee = Amount.from_str_in("0.0001", Denomination.BITCOIN)
    change = Amount.ONE_BTC.checked_sub(fee)
    change.to_string_with_denomination(Denomination.SATOSHI)  # '99990000 sat'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Iterable, TypeVar

from coinunits_core.denomination import Denomination
from coinunits_core.errors import (
    ArithmeticOverflowError,
    DivideByZeroError,
    OutOfRangeError,
    UnitsError,
)
from coinunits_core.parsing import format_sats, parse_sats, split_denomination
from coinunits_core.precision import (
    I64_MAX,
    I64_MIN,
    MAX_MONEY,
    SATS_PER_BTC,
    U64_MAX,
    is_strict_int,
)

if TYPE_CHECKING:
    from coinunits_core.fee_rate import FeeRate
    from coinunits_core.weight import Weight

logger = logging.getLogger("coinunits.parse")

_A = TypeVar("_A", bound="_BoundedAmount")


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero, as fixed-width integers do."""
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def _trunc_rem(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


class _BoundedAmount:
    """Checked arithmetic, parsing and formatting shared by both amount types."""

    sat: int

    # Domain bounds of the value.
    MIN_SAT: ClassVar[int]
    MAX_SAT: ClassVar[int]
    # Machine width of the underlying integer, used for integer operands.
    OPERAND_MIN: ClassVar[int]
    OPERAND_MAX: ClassVar[int]

    def __post_init__(self) -> None:
        if not is_strict_int(self.sat):
            raise TypeError(
                f"{type(self).__name__} requires an int satoshi count, got {type(self.sat).__name__}"
            )
        if not self.MIN_SAT <= self.sat <= self.MAX_SAT:
            raise OutOfRangeError(self.sat, self.MIN_SAT, self.MAX_SAT, type(self).__name__)

    # ── Construction ────────────────────────────────────────────

    @classmethod
    def from_sat(cls: type[_A], sat: int) -> _A:
        return cls(sat)

    @classmethod
    def from_int_btc(cls: type[_A], btc: int) -> _A:
        """Build from a whole-coin literal known at programming time.

        Out-of-range input is a defect in the calling code, so this raises
        ``AssertionError`` instead of :class:`OutOfRangeError`.
        """
        if not is_strict_int(btc) or not cls.MIN_SAT <= btc * SATS_PER_BTC <= cls.MAX_SAT:
            raise AssertionError(f"{btc!r} BTC is not a valid {cls.__name__} literal")
        return cls(btc * SATS_PER_BTC)

    @classmethod
    def _from_parts(cls: type[_A], negative: bool, magnitude: int) -> _A:
        return cls(-magnitude if negative else magnitude)

    @classmethod
    def from_str_in(cls: type[_A], text: str, denom: Denomination) -> _A:
        """Parse a bare decimal number expressed in *denom*."""
        try:
            negative, magnitude = parse_sats(text, denom)
            return cls._from_parts(negative, magnitude)
        except UnitsError as exc:
            logger.debug("rejected %s %r in %s: %s", cls.__name__, text, denom, exc)
            raise

    @classmethod
    def from_str_with_denomination(cls: type[_A], text: str) -> _A:
        """Parse ``"<number>[ ]<suffix>"``, e.g. ``"0.1 BTC"`` or ``"1000sat"``."""
        try:
            number, denom = split_denomination(text)
        except UnitsError as exc:
            logger.debug("rejected %s %r: %s", cls.__name__, text, exc)
            raise
        return cls.from_str_in(number, denom)

    from_str = from_str_with_denomination

    @classmethod
    def checked_sum(cls: type[_A], amounts: Iterable[_A]) -> _A:
        total = cls(0)
        for amount in amounts:
            total = total.checked_add(amount)
        return total

    # ── Accessors / formatting ──────────────────────────────────

    def to_sat(self) -> int:
        return self.sat

    def to_string_in(self, denom: Denomination) -> str:
        return format_sats(self.sat, denom)

    def to_string_with_denomination(self, denom: Denomination) -> str:
        return f"{format_sats(self.sat, denom)} {denom}"

    def display_dynamic(self) -> str:
        """BTC for amounts of at least one coin, sat below that."""
        if abs(self.sat) >= SATS_PER_BTC:
            return self.to_string_with_denomination(Denomination.BITCOIN)
        return self.to_string_with_denomination(Denomination.SATOSHI)

    def __str__(self) -> str:
        return self.to_string_with_denomination(Denomination.BITCOIN)

    # ── Checked arithmetic ──────────────────────────────────────

    def _require_same_type(self, other: object) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"cannot combine {type(self).__name__} with {type(other).__name__}"
            )

    def _require_operand(self, rhs: object) -> None:
        if not is_strict_int(rhs):
            raise TypeError(f"{type(self).__name__} operand must be an int, got {type(rhs).__name__}")
        if not self.OPERAND_MIN <= rhs <= self.OPERAND_MAX:
            raise ArithmeticOverflowError(
                f"operand {rhs} outside [{self.OPERAND_MIN}, {self.OPERAND_MAX}]"
            )

    def _result(self: _A, value: int, op: str) -> _A:
        if not self.MIN_SAT <= value <= self.MAX_SAT:
            raise ArithmeticOverflowError(
                f"{type(self).__name__} {op} gives {value}, outside [{self.MIN_SAT}, {self.MAX_SAT}]"
            )
        return type(self)(value)

    def checked_add(self: _A, other: _A) -> _A:
        self._require_same_type(other)
        return self._result(self.sat + other.sat, "addition")

    def checked_sub(self: _A, other: _A) -> _A:
        self._require_same_type(other)
        return self._result(self.sat - other.sat, "subtraction")

    def checked_mul(self: _A, rhs: int) -> _A:
        self._require_operand(rhs)
        return self._result(self.sat * rhs, "multiplication")

    def checked_div(self: _A, rhs: int) -> _A:
        """Division truncating toward zero."""
        self._require_operand(rhs)
        if rhs == 0:
            raise DivideByZeroError(f"{type(self).__name__} division by zero")
        return self._result(_trunc_div(self.sat, rhs), "division")

    def checked_rem(self: _A, rhs: int) -> _A:
        """Remainder of :meth:`checked_div`; takes the sign of ``self``."""
        self._require_operand(rhs)
        if rhs == 0:
            raise DivideByZeroError(f"{type(self).__name__} remainder by zero")
        return self._result(_trunc_rem(self.sat, rhs), "remainder")

    def saturating_add(self: _A, other: _A) -> _A:
        self._require_same_type(other)
        return type(self)(min(max(self.sat + other.sat, self.MIN_SAT), self.MAX_SAT))

    def saturating_sub(self: _A, other: _A) -> _A:
        self._require_same_type(other)
        return type(self)(min(max(self.sat - other.sat, self.MIN_SAT), self.MAX_SAT))

    # Operators delegate to the checked forms and refuse raw ints.

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.checked_add(other)

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.checked_sub(other)

    def __mul__(self, other):
        if not is_strict_int(other):
            return NotImplemented
        return self.checked_mul(other)

    __rmul__ = __mul__

    def __floordiv__(self, other):
        if not is_strict_int(other):
            return NotImplemented
        return self.checked_div(other)

    def __mod__(self, other):
        if not is_strict_int(other):
            return NotImplemented
        return self.checked_rem(other)


@dataclass(frozen=True, order=True)
class Amount(_BoundedAmount):
    """Unsigned satoshi amount in ``[0, MAX_MONEY]``."""

    sat: int

    MIN_SAT: ClassVar[int] = 0
    MAX_SAT: ClassVar[int] = MAX_MONEY
    OPERAND_MIN: ClassVar[int] = 0
    OPERAND_MAX: ClassVar[int] = U64_MAX

    ZERO: ClassVar[Amount]
    MIN: ClassVar[Amount]
    MAX: ClassVar[Amount]
    ONE_SAT: ClassVar[Amount]
    ONE_BTC: ClassVar[Amount]

    def to_signed(self) -> SignedAmount:
        """Always succeeds: the unsigned range is a subset of the signed one."""
        return SignedAmount(self.sat)

    def checked_div_by_weight(self, weight: Weight) -> FeeRate:
        """Fee rate paid by this fee over *weight*, rounded up to the next sat/kwu."""
        from coinunits_core.fee_rate import FeeRate

        wu = weight.to_wu()
        if wu == 0:
            raise DivideByZeroError("fee rate over zero weight")
        return FeeRate.from_sat_per_kwu((self.sat * 1000 + wu - 1) // wu)


@dataclass(frozen=True, order=True)
class SignedAmount(_BoundedAmount):
    """Signed satoshi amount in ``[-MAX_MONEY, MAX_MONEY]``."""

    sat: int

    MIN_SAT: ClassVar[int] = -MAX_MONEY
    MAX_SAT: ClassVar[int] = MAX_MONEY
    OPERAND_MIN: ClassVar[int] = I64_MIN
    OPERAND_MAX: ClassVar[int] = I64_MAX

    ZERO: ClassVar[SignedAmount]
    MIN: ClassVar[SignedAmount]
    MAX: ClassVar[SignedAmount]
    ONE_SAT: ClassVar[SignedAmount]
    ONE_BTC: ClassVar[SignedAmount]

    def to_unsigned(self) -> Amount:
        if self.sat < 0:
            raise OutOfRangeError(self.sat, Amount.MIN_SAT, Amount.MAX_SAT, "Amount")
        return Amount(self.sat)

    def abs(self) -> SignedAmount:
        return SignedAmount(abs(self.sat))

    def unsigned_abs(self) -> Amount:
        return Amount(abs(self.sat))

    def signum(self) -> int:
        return (self.sat > 0) - (self.sat < 0)

    def is_positive(self) -> bool:
        return self.sat > 0

    def is_negative(self) -> bool:
        return self.sat < 0

    def __neg__(self) -> SignedAmount:
        return SignedAmount(-self.sat)

    def __abs__(self) -> SignedAmount:
        return self.abs()


Amount.ZERO = Amount(0)
Amount.MIN = Amount.ZERO
Amount.MAX = Amount(MAX_MONEY)
Amount.ONE_SAT = Amount(1)
Amount.ONE_BTC = Amount.from_int_btc(1)

SignedAmount.ZERO = SignedAmount(0)
SignedAmount.MIN = SignedAmount(-MAX_MONEY)
SignedAmount.MAX = SignedAmount(MAX_MONEY)
SignedAmount.ONE_SAT = SignedAmount(1)
SignedAmount.ONE_BTC = SignedAmount.from_int_btc(1)


# ── Module-level conveniences ───────────────────────────────────


def parse_amount(text: str, denom: Denomination) -> Amount:
    return Amount.from_str_in(text, denom)


def parse_signed_amount(text: str, denom: Denomination) -> SignedAmount:
    return SignedAmount.from_str_in(text, denom)


def parse_with_denomination(text: str, signed: bool = False) -> Amount | SignedAmount:
    if signed:
        return SignedAmount.from_str_with_denomination(text)
    return Amount.from_str_with_denomination(text)


def format_amount(amount: Amount | SignedAmount, denom: Denomination) -> str:
    return amount.to_string_in(denom)


def format_with_denomination(amount: Amount | SignedAmount, denom: Denomination) -> str:
    return amount.to_string_with_denomination(denom)
