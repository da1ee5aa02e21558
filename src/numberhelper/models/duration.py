"""Duration broken into clock components."""

from __future__ import annotations

from pydantic import BaseModel


class DurationParts(BaseModel):
    """Hours, minutes and seconds of a duration given in seconds.

    Hours are unbounded. For negative durations minutes and seconds carry the
    sign of the total, as truncating division produces them.
    """

    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    model_config = {"frozen": True}
