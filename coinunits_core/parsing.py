"""
Exact decimal parsing and formatting of satoshi counts.

The functions here work on raw integers and know nothing about the amount
types; :mod:`coinunits_core.amount` wraps them with range checks.

Parsing never goes through ``float`` or ``Decimal``.  The unit count is
rebuilt from the digit string with integer arithmetic only:

    total = int_part * 10**e + frac_part * 10**(e - frac_digits)

which is the same as reading the integer digits followed by the fractional
digits right-padded with zeros to ``e`` places.  Accumulation stops as soon
as the running total leaves the unsigned 64-bit working width.
"""

from __future__ import annotations

from coinunits_core.denomination import Denomination
from coinunits_core.errors import (
    InvalidCharacterError,
    InvalidFormatError,
    TooBigError,
    TooPreciseError,
    UnknownDenominationError,
)
from coinunits_core.precision import U64_MAX

_DIGITS = frozenset("0123456789")
_NUMERIC_CHARS = _DIGITS | frozenset(".+-")


def _check_characters(text: str, allowed: frozenset[str]) -> None:
    if not text:
        raise InvalidCharacterError(text)
    for i, ch in enumerate(text):
        if ch not in allowed:
            raise InvalidCharacterError(text, i)


def parse_sats(text: str, denom: Denomination) -> tuple[bool, int]:
    """Parse a bare decimal number expressed in *denom*.

    Returns ``(negative, magnitude)`` where *magnitude* is the satoshi count.
    No range check against the supply cap happens here.

    Raises:
        InvalidCharacterError: empty input or a character outside ``[0-9.+-]``.
        InvalidFormatError: misplaced/repeated sign, repeated point, no digits.
        TooPreciseError: more fractional digits than ``denom.exponent()``.
        TooBigError: the magnitude does not fit in 64 bits.
    """
    _check_characters(text, _NUMERIC_CHARS)

    body = text
    negative = False
    if body[0] in "+-":
        negative = body[0] == "-"
        body = body[1:]
    if "+" in body or "-" in body:
        raise InvalidFormatError(f"misplaced or repeated sign in {text!r}")
    if body.count(".") > 1:
        raise InvalidFormatError(f"more than one decimal point in {text!r}")

    int_digits, _, frac_digits = body.partition(".")
    if not int_digits and not frac_digits:
        raise InvalidFormatError(f"no digits in {text!r}")

    precision = denom.exponent()
    if len(frac_digits) > precision:
        raise TooPreciseError(text, precision)

    total = 0
    for ch in int_digits + frac_digits.ljust(precision, "0"):
        total = total * 10 + int(ch)
        if total > U64_MAX:
            raise TooBigError(f"{text!r} {denom} overflows a 64-bit unit count")
    return negative, total


def format_sats(value: int, denom: Denomination) -> str:
    """Render a signed satoshi count in *denom* without losing digits.

    The fractional part is always zero-padded to the denomination's
    precision; the point is omitted only for exponent 0.
    """
    sign = "-" if value < 0 else ""
    precision = denom.exponent()
    magnitude = abs(value)
    if precision == 0:
        return f"{sign}{magnitude}"
    whole, frac = divmod(magnitude, 10 ** precision)
    return f"{sign}{whole}.{frac:0{precision}d}"


def split_denomination(text: str) -> tuple[str, Denomination]:
    """Split ``"<number>[ ]<suffix>"`` into the number and its denomination.

    At most one space may separate the two.  Without a space the suffix
    starts at the first character that cannot belong to a number.
    """
    if " " in text:
        number, suffix = text.split(" ", 1)
    else:
        idx = next(
            (i for i, ch in enumerate(text) if ch not in _NUMERIC_CHARS),
            len(text),
        )
        number, suffix = text[:idx], text[idx:]
    if not suffix:
        raise UnknownDenominationError(suffix)
    return number, Denomination.from_suffix(suffix)


def parse_u64(text: str) -> int:
    """Strict unsigned integer parsing for raw counts (weights, fee rates).

    Accepts an optional leading ``+``; rejects everything else that is not
    a decimal digit.
    """
    if text.startswith("+"):
        digits = text[1:]
        if not digits:
            raise InvalidFormatError(f"no digits in {text!r}")
        offset = 1
    else:
        digits = text
        offset = 0
    if not digits:
        raise InvalidCharacterError(text)
    for i, ch in enumerate(digits):
        if ch not in _DIGITS:
            raise InvalidCharacterError(text, i + offset)
    # int() refuses very long digit strings, so bound the length first
    significant = digits.lstrip("0")
    if len(significant) > len(str(U64_MAX)) or int(significant or "0") > U64_MAX:
        raise TooBigError(f"{text!r} overflows a 64-bit integer")
    return int(significant or "0")
