"""
TOML-based configuration for coinunits consumers.

Loads display, fee-policy and logging settings from a TOML file and/or
environment variables.  Environment variables take precedence over file
values.  The supply cap (``MAX_MONEY``) is deliberately absent: it is a
constant, not a setting.

Usage:
    from coinunits_core.config import load_config
    cfg = load_config("coinunits.toml")
    denom = cfg.display.resolve_denomination()
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from coinunits_core.denomination import Denomination
from coinunits_core.fee_rate import FeeRate

logger = logging.getLogger("coinunits.config")


@dataclass
class DisplayConfig:
    """How amounts are rendered for people."""
    denomination: str = "BTC"
    show_denomination: bool = True
    # Pick BTC for amounts >= 1 BTC and sat below, ignoring ``denomination``.
    dynamic: bool = False

    def resolve_denomination(self) -> Denomination:
        return Denomination.from_suffix(self.denomination)


@dataclass
class FeeConfig:
    """Fee policy knobs, in sat/vB."""
    broadcast_min_sat_per_vb: int = 1
    dust_sat_per_vb: int = 3

    def broadcast_min_rate(self) -> FeeRate:
        return FeeRate.from_sat_per_vb(self.broadcast_min_sat_per_vb)

    def dust_rate(self) -> FeeRate:
        return FeeRate.from_sat_per_vb(self.dust_sat_per_vb)


@dataclass
class LoggingConfig:
    """Logging settings."""
    level: str = "INFO"
    format: str = "human"   # "human" or "json"
    file: str | None = None


@dataclass
class UnitsConfig:
    """Top-level configuration container."""
    display: DisplayConfig = field(default_factory=DisplayConfig)
    fees: FeeConfig = field(default_factory=FeeConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _merge(dc: Any, raw: dict[str, Any]) -> None:
    """Merge a raw dict into a dataclass instance (in-place)."""
    for key, value in raw.items():
        key_under = key.replace("-", "_")
        if hasattr(dc, key_under):
            setattr(dc, key_under, value)
        else:
            logger.warning("ignoring unknown config key %r", key)


def load_config(path: str | None = None) -> UnitsConfig:
    """
    Load configuration from a TOML file, then overlay environment variables.

    Env-var mapping:
        COINUNITS_DENOMINATION -> display.denomination
        COINUNITS_LOG_LEVEL    -> logging.level
        COINUNITS_LOG_FMT      -> logging.format
        COINUNITS_LOG_FILE     -> logging.file

    The display denomination is validated before returning, so a bad suffix
    fails here with ``UnknownDenominationError`` rather than at first use.
    """
    cfg = UnitsConfig()

    # ── TOML file ────────────────────────────────────────────────
    if path is not None:
        p = Path(path)
        if p.exists():
            with open(p, "rb") as f:
                data = tomllib.load(f)
            for section_name, section_dc in [
                ("display", cfg.display),
                ("fees", cfg.fees),
                ("logging", cfg.logging),
            ]:
                if section_name in data:
                    _merge(section_dc, data[section_name])
            logger.info("loaded config from %s", p)
        else:
            logger.info("config file %s not found, using defaults", p)

    # ── Environment variable overrides ───────────────────────────
    if v := os.environ.get("COINUNITS_DENOMINATION"):
        cfg.display.denomination = v
    if v := os.environ.get("COINUNITS_LOG_LEVEL"):
        cfg.logging.level = v.upper()
    if v := os.environ.get("COINUNITS_LOG_FMT"):
        cfg.logging.format = v
    if v := os.environ.get("COINUNITS_LOG_FILE"):
        cfg.logging.file = v

    cfg.display.resolve_denomination()
    return cfg
