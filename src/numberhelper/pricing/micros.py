"""Conversion between prices and micro units.

Micro units are integers equal to the price times 1,000,000, as used by
ad-platform billing APIs (e.g. Google Ads ``cost_micros``).
"""

from __future__ import annotations

from decimal import Decimal

from numberhelper.core.decimals import quantize_half_up, round_half_up
from numberhelper.core.types import Micros, Number
from numberhelper.formatting.numbers import format_price

MICROS_PER_UNIT = 1_000_000


def micro_to_price(value: Micros) -> float:
    """Price from micros: ``2500000`` -> ``2.5``."""
    return value / MICROS_PER_UNIT


def price_to_micros(value: Number) -> Micros:
    """Micros from a price, rounded to the nearest whole micro."""
    return int(round_half_up(float(value) * MICROS_PER_UNIT))


def micro_prices_to_decimal(value: Micros, decimals: int = 2, thousand_separator: str = "") -> float:
    """Convert micros to a price rounded to ``decimals`` places.

    Goes through :func:`format_price` and parses the text back. The
    separator only ever affected that intermediate text, so it is left out
    of it and cannot leak into the parsed float.
    """
    return float(format_price(micro_to_price(value), decimals, ""))


def micros_to_decimal(value: Micros, decimals: int = 2) -> Decimal:
    """Exact ``Decimal`` price from micros, rounded half-up to ``decimals`` places."""
    return quantize_half_up(Decimal(int(value)).scaleb(-6), decimals)
