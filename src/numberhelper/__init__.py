"""Stateless number, price, size and duration formatting helpers."""

from __future__ import annotations

import logging

from numberhelper.core.config import AppSettings, FormattingConfig
from numberhelper.core.exceptions import NotNumericError, NumberHelperError
from numberhelper.core.logging_config import configure_logging, get_logger
from numberhelper.currency.symbols import CURRENCY_SYMBOLS, get_currency_symbol_from_code
from numberhelper.formatting.durations import format_duration, format_duration_short, split_duration
from numberhelper.formatting.numbers import (
    calculate_percentage,
    format_number,
    format_price,
    sanitize_numeric,
    to_number,
)
from numberhelper.formatting.sizes import format_bytes
from numberhelper.helper import NumberHelper
from numberhelper.models.duration import DurationParts
from numberhelper.pricing.micros import (
    micro_prices_to_decimal,
    micro_to_price,
    micros_to_decimal,
    price_to_micros,
)
from numberhelper.pricing.vat import add_vat_to_price, remove_vat_from_price

__all__ = [
    "AppSettings",
    "CURRENCY_SYMBOLS",
    "DurationParts",
    "FormattingConfig",
    "NotNumericError",
    "NumberHelper",
    "NumberHelperError",
    "add_vat_to_price",
    "calculate_percentage",
    "configure_logging",
    "format_bytes",
    "format_duration",
    "format_duration_short",
    "format_number",
    "format_price",
    "get_currency_symbol_from_code",
    "get_logger",
    "micro_prices_to_decimal",
    "micro_to_price",
    "micros_to_decimal",
    "price_to_micros",
    "remove_vat_from_price",
    "sanitize_numeric",
    "split_duration",
    "to_number",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
