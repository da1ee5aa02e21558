"""numberhelper exception hierarchy."""

from __future__ import annotations

from typing import Any


class NumberHelperError(Exception):
    """Base exception for all numberhelper errors."""


class NotNumericError(NumberHelperError, ValueError):
    """Value cannot be read as a number, even after stripping commas."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Value is not numeric: {value!r}")
