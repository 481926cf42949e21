"""
Transaction weight.

Weight is measured in weight units (wu).  One virtual byte is
``WITNESS_SCALE_FACTOR`` (4) weight units; witness data counts once per byte,
non-witness data four times.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterable

from coinunits_core.errors import DivideByZeroError, OutOfRangeError
from coinunits_core.parsing import parse_u64
from coinunits_core.precision import (
    U64_MAX,
    WITNESS_SCALE_FACTOR,
    checked_u64,
    is_strict_int,
    require_u64_operand,
)


@dataclass(frozen=True, order=True)
class Weight:
    """Unsigned 64-bit count of weight units."""

    wu: int

    ZERO: ClassVar[Weight]
    MIN: ClassVar[Weight]
    MAX: ClassVar[Weight]
    MAX_BLOCK: ClassVar[Weight]
    MIN_TRANSACTION: ClassVar[Weight]

    def __post_init__(self) -> None:
        if not is_strict_int(self.wu):
            raise TypeError(f"Weight requires an int, got {type(self.wu).__name__}")
        if not 0 <= self.wu <= U64_MAX:
            raise OutOfRangeError(self.wu, 0, U64_MAX, "Weight")

    @classmethod
    def from_wu(cls, wu: int) -> Weight:
        return cls(wu)

    @classmethod
    def from_kwu(cls, kwu: int) -> Weight:
        return cls(checked_u64(require_u64_operand(kwu) * 1000, "kwu conversion"))

    @classmethod
    def from_vb(cls, vb: int) -> Weight:
        return cls(checked_u64(require_u64_operand(vb) * WITNESS_SCALE_FACTOR, "vbyte conversion"))

    @classmethod
    def from_vb_unchecked(cls, vb: int) -> Weight:
        """For virtual-byte literals known at programming time; asserts on overflow."""
        if not is_strict_int(vb) or not 0 <= vb * WITNESS_SCALE_FACTOR <= U64_MAX:
            raise AssertionError(f"{vb!r} vB is not a valid Weight literal")
        return cls(vb * WITNESS_SCALE_FACTOR)

    @classmethod
    def from_witness_data_size(cls, witness_size: int) -> Weight:
        return cls(witness_size)

    @classmethod
    def from_non_witness_data_size(cls, non_witness_size: int) -> Weight:
        return cls.from_vb(non_witness_size)

    @classmethod
    def from_str(cls, text: str) -> Weight:
        return cls(parse_u64(text))

    @classmethod
    def checked_sum(cls, weights: Iterable[Weight]) -> Weight:
        total = cls.ZERO
        for w in weights:
            total = total.checked_add(w)
        return total

    def to_wu(self) -> int:
        return self.wu

    def to_kwu_floor(self) -> int:
        return self.wu // 1000

    def to_vbytes_floor(self) -> int:
        return self.wu // WITNESS_SCALE_FACTOR

    def to_vbytes_ceil(self) -> int:
        return -(-self.wu // WITNESS_SCALE_FACTOR)

    def checked_add(self, other: Weight) -> Weight:
        return Weight(checked_u64(self.wu + other.wu, "Weight addition"))

    def checked_sub(self, other: Weight) -> Weight:
        return Weight(checked_u64(self.wu - other.wu, "Weight subtraction"))

    def checked_mul(self, rhs: int) -> Weight:
        return Weight(checked_u64(self.wu * require_u64_operand(rhs), "Weight multiplication"))

    def checked_div(self, rhs: int) -> Weight:
        if require_u64_operand(rhs) == 0:
            raise DivideByZeroError("Weight division by zero")
        return Weight(self.wu // rhs)

    def scale_by_witness_factor(self) -> Weight:
        return self.checked_mul(WITNESS_SCALE_FACTOR)

    def __add__(self, other):
        if not isinstance(other, Weight):
            return NotImplemented
        return self.checked_add(other)

    def __sub__(self, other):
        if not isinstance(other, Weight):
            return NotImplemented
        return self.checked_sub(other)

    def __str__(self) -> str:
        return f"{self.wu} wu"


Weight.ZERO = Weight(0)
Weight.MIN = Weight.ZERO
Weight.MAX = Weight(U64_MAX)
Weight.MAX_BLOCK = Weight(4_000_000)
Weight.MIN_TRANSACTION = Weight.from_vb_unchecked(60)
