"""Type aliases used across numberhelper."""

from __future__ import annotations

from typing import Union

Number = Union[int, float]
CurrencyCode = str
Seconds = int
Micros = int
