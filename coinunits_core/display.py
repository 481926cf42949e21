"""Render amounts the way a :class:`DisplayConfig` asks."""

from __future__ import annotations

from coinunits_core.amount import Amount, SignedAmount
from coinunits_core.config import DisplayConfig


def format_for_display(amount: Amount | SignedAmount, cfg: DisplayConfig | None = None) -> str:
    cfg = cfg or DisplayConfig()
    if cfg.dynamic:
        return amount.display_dynamic()
    denom = cfg.resolve_denomination()
    if cfg.show_denomination:
        return amount.to_string_with_denomination(denom)
    return amount.to_string_in(denom)
