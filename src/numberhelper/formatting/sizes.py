"""Human readable byte sizes."""

from __future__ import annotations

from numberhelper.core.decimals import render_fixed

SIZE_UNITS: tuple[str, ...] = ("B", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")


def format_bytes(bytes_: int, decimals: int = 2) -> str:
    """Format a byte count as e.g. ``"1.50KB"``.

    The unit is picked from the number of decimal digits of ``bytes_``
    (three digits per step), not from powers of 1024, so ``1000`` renders as
    ``"0.98KB"``. The value itself is divided by 1024 per step. Counts beyond
    the unit table get no suffix.
    """
    bytes_ = int(bytes_)
    factor = (len(str(bytes_)) - 1) // 3
    unit = SIZE_UNITS[factor] if factor < len(SIZE_UNITS) else ""
    return render_fixed(bytes_ / 1024**factor, decimals) + unit
