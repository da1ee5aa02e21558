"""Half-up rounding and fixed-point rendering shared by the formatters.

Floats are converted through their shortest repr before rounding, so
``1.005`` rounds to ``1.01`` and ``2.5`` to ``3`` rather than following the
binary value or banker's rounding.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from numberhelper.core.types import Number


def to_decimal(value: Number) -> Decimal:
    """Exact decimal for ints, shortest-repr decimal for floats."""
    if isinstance(value, int):
        return Decimal(value)
    return Decimal(repr(float(value)))


def quantize_half_up(value: Decimal, places: int) -> Decimal:
    """Round ``value`` to ``places`` fractional digits, ties away from zero."""
    places = max(places, 0)
    with localcontext() as ctx:
        ctx.prec = max(value.adjusted(), 0) + places + 2
        rounded = value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    if rounded.is_zero():
        rounded = rounded.copy_abs()
    return rounded


def round_half_up(value: Number, places: int = 0) -> float:
    """Float counterpart of :func:`quantize_half_up`; non-finite values pass through."""
    if isinstance(value, float) and not math.isfinite(value):
        return value
    return float(quantize_half_up(to_decimal(value), places))


def render_fixed(value: Number, decimals: int = 0, thousand_separator: str = "") -> str:
    """Render ``value`` with ``decimals`` digits after ``.`` and grouped integer digits.

    Ints are rendered exactly, whatever their size. Non-finite floats render
    as ``inf``, ``-inf`` or ``nan``.
    """
    if not isinstance(value, int):
        value = float(value)
        if not math.isfinite(value):
            return repr(value)
    rounded = quantize_half_up(to_decimal(value), decimals)
    if not thousand_separator:
        return format(rounded, "f")
    text = format(rounded, ",f")
    if thousand_separator != ",":
        text = text.replace(",", thousand_separator)
    return text
