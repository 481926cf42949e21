"""
Error types raised by coinunits.

Every failure is an ordinary exception derived from :class:`UnitsError`, so
callers can recover locally: retry with corrected input, substitute a
default, or abort.  Each class also inherits the closest builtin exception
(``ValueError``, ``OverflowError``, ``ZeroDivisionError``) so generic
handlers keep working.

The only fault that is *not* part of this hierarchy is the
``AssertionError`` raised by constructors meant for programming-time
literals (``Amount.from_int_btc`` and friends).
"""

from __future__ import annotations


class UnitsError(Exception):
    """Base class for every coinunits error."""


# ── Parsing ─────────────────────────────────────────────────────


class ParseAmountError(UnitsError, ValueError):
    """Malformed textual amount."""


class InvalidCharacterError(ParseAmountError):
    """Input is empty or contains a character outside ``[0-9.+-]``."""

    def __init__(self, text: str, position: int | None = None):
        self.text = text
        self.position = position
        if position is None:
            msg = "empty amount string"
        else:
            msg = f"invalid character {text[position]!r} at position {position} in {text!r}"
        super().__init__(msg)

    @property
    def character(self) -> str | None:
        if self.position is None:
            return None
        return self.text[self.position]


class InvalidFormatError(ParseAmountError):
    """Misplaced or repeated sign, repeated decimal point, or no digits."""


class TooPreciseError(ParseAmountError):
    """More fractional digits than the denomination allows."""

    def __init__(self, text: str, max_decimals: int):
        self.text = text
        self.max_decimals = max_decimals
        super().__init__(
            f"{text!r} has more than {max_decimals} fractional digit(s)"
        )


class TooBigError(ParseAmountError):
    """The unit count overflowed the 64-bit working width while parsing."""


class UnknownDenominationError(ParseAmountError):
    """Unrecognised denomination suffix."""

    def __init__(self, suffix: str, suggestion: str | None = None):
        self.suffix = suffix
        self.suggestion = suggestion
        if not suffix:
            msg = "missing denomination"
        else:
            msg = f"unknown denomination {suffix!r}"
        if suggestion is not None:
            msg += f" (suffixes are case-sensitive, did you mean {suggestion!r}?)"
        super().__init__(msg)


# ── Range and arithmetic ────────────────────────────────────────


class OutOfRangeError(UnitsError, ValueError):
    """A well-formed value lies outside the type's allowed range."""

    def __init__(self, value: int, minimum: int, maximum: int, type_name: str = "value"):
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"{type_name} {value} out of range [{minimum}, {maximum}]"
        )

    @property
    def is_negative(self) -> bool:
        return self.value < 0 <= self.minimum

    @property
    def is_above_max(self) -> bool:
        return self.value > self.maximum


class ArithmeticOverflowError(UnitsError, OverflowError):
    """A checked operation's exact result does not fit the type."""


class DivideByZeroError(UnitsError, ZeroDivisionError):
    """Division or remainder with a zero divisor."""


# ── Encoding ────────────────────────────────────────────────────


class DecodeError(UnitsError, ValueError):
    """Raw bytes or JSON value cannot be decoded into a unit type."""
