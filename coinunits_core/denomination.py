"""
Bitcoin denominations.

A denomination is a named power-of-ten multiple of the satoshi, used only
when reading or writing human-readable amounts.  The set is closed; the
stored value of an amount never carries a denomination.
"""

from __future__ import annotations

from enum import Enum

from coinunits_core.errors import UnknownDenominationError


class Denomination(Enum):
    """Closed set of display scales: ``(exponent, canonical suffix)``.

    One unit of a denomination is ``10 ** exponent`` satoshi.
    """

    BITCOIN = (8, "BTC")
    CENTI_BITCOIN = (6, "cBTC")
    MILLI_BITCOIN = (5, "mBTC")
    BIT = (2, "bit")
    SATOSHI = (0, "sat")

    def exponent(self) -> int:
        return self.value[0]

    def suffix(self) -> str:
        return self.value[1]

    @property
    def precision(self) -> int:
        """Number of fractional digits this denomination can express."""
        return self.value[0]

    @property
    def unit_sats(self) -> int:
        """Satoshi in one unit of this denomination."""
        return 10 ** self.value[0]

    @classmethod
    def from_suffix(cls, suffix: str) -> "Denomination":
        """Exact, case-sensitive lookup of a suffix or alias."""
        denom = _BY_SUFFIX.get(suffix)
        if denom is not None:
            return denom
        folded = [s for s in _BY_SUFFIX if s.lower() == suffix.lower()]
        raise UnknownDenominationError(
            suffix, _BY_SUFFIX[folded[0]].suffix() if folded else None
        )

    @classmethod
    def all_suffixes(cls) -> list[str]:
        return list(_BY_SUFFIX)

    def __str__(self) -> str:
        return self.value[1]


# uBTC and bit share the 10^2 scale, so uBTC is an alias rather than a variant.
_ALIASES: dict[str, Denomination] = {
    "bits": Denomination.BIT,
    "uBTC": Denomination.BIT,
    "sats": Denomination.SATOSHI,
    "satoshi": Denomination.SATOSHI,
}

_BY_SUFFIX: dict[str, Denomination] = {d.suffix(): d for d in Denomination}
_BY_SUFFIX.update(_ALIASES)
