"""VAT arithmetic on gross and net prices."""

from __future__ import annotations

from numberhelper.core.decimals import round_half_up
from numberhelper.core.types import Number


def add_vat_to_price(price: Number, vat_percent: Number) -> float:
    """Net to gross, rounded to cents: ``add_vat_to_price(100, 20) == 120.0``."""
    return round_half_up(price * (1 + vat_percent / 100), 2)


def remove_vat_from_price(price: Number, vat_percent: Number) -> float:
    """Gross to net, rounded to cents: ``remove_vat_from_price(120, 20) == 100.0``."""
    return round_half_up(price / (1 + vat_percent / 100), 2)
