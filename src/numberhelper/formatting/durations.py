"""Clock-style and short human duration strings."""

from __future__ import annotations

from numberhelper.core.types import Seconds
from numberhelper.models.duration import DurationParts


def split_duration(seconds: Seconds) -> DurationParts:
    """Split ``seconds`` into hours (floor division), minutes and seconds (truncating)."""
    seconds = int(seconds)
    sign = -1 if seconds < 0 else 1
    magnitude = abs(seconds)
    return DurationParts(
        hours=seconds // 3600,
        minutes=sign * (magnitude // 60 % 60),
        seconds=sign * (magnitude % 60),
    )


def format_duration(seconds: Seconds) -> str:
    """Format as zero-padded ``HH:MM:SS``; ``3661`` -> ``"01:01:01"``."""
    parts = split_duration(seconds)
    return "%02d:%02d:%02d" % (parts.hours, parts.minutes, parts.seconds)


def format_duration_short(seconds: Seconds) -> str:
    """Format as ``"1h 20m 30s"``, leaving out zero components.

    Seconds are always shown when nothing else is, so ``0`` -> ``"0s"``.
    """
    parts = split_duration(seconds)
    result = ""
    if parts.hours > 0:
        result += f"{parts.hours}h "
    if parts.minutes > 0:
        result += f"{parts.minutes}m "
    if parts.seconds > 0 or not result:
        result += f"{parts.seconds}s"
    return result.strip()
