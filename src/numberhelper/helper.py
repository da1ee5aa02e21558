"""NumberHelper facade binding the formatters to configured defaults."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Literal, Optional, Union

from numberhelper.core.config import AppSettings
from numberhelper.core.logging_config import configure_logging
from numberhelper.core.types import CurrencyCode, Micros, Number, Seconds
from numberhelper.currency.symbols import get_currency_symbol_from_code
from numberhelper.formatting.durations import format_duration, format_duration_short
from numberhelper.formatting.numbers import (
    calculate_percentage,
    format_number,
    format_price,
    sanitize_numeric,
)
from numberhelper.formatting.sizes import format_bytes
from numberhelper.pricing.micros import (
    micro_prices_to_decimal,
    micro_to_price,
    micros_to_decimal,
    price_to_micros,
)
from numberhelper.pricing.vat import add_vat_to_price, remove_vat_from_price


def _pick(value: Any, default: Any) -> Any:
    return default if value is None else value


class NumberHelper:
    """All formatting operations with defaults taken from settings.

    Arguments left as ``None`` fall back to ``settings.formatting``; explicit
    values (including ``""`` and ``0``) are passed through untouched. With
    ``configure_logs=True`` the process-wide logging is set up at
    ``settings.log_level``.
    """

    def __init__(self, settings: AppSettings | None = None, *, configure_logs: bool = False) -> None:
        self._settings = settings or AppSettings()
        self._fmt = self._settings.formatting
        if configure_logs:
            configure_logging(self._settings.log_level)

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def sanitize_numeric(self, value: Any) -> Union[Number, Literal[False]]:
        return sanitize_numeric(value)

    def format_number(
        self, value: Any, decimals: Optional[int] = None, thousand_separator: Optional[str] = None
    ) -> str:
        return format_number(
            value,
            _pick(decimals, self._fmt.number_decimals),
            _pick(thousand_separator, self._fmt.number_thousand_separator),
        )

    def format_price(
        self,
        value: Any,
        decimals: Optional[int] = None,
        thousand_separator: Optional[str] = None,
        currency_code: Optional[CurrencyCode] = None,
    ) -> str:
        return format_price(
            value,
            _pick(decimals, self._fmt.price_decimals),
            _pick(thousand_separator, self._fmt.price_thousand_separator),
            _pick(currency_code, self._fmt.currency_code),
        )

    def format_bytes(self, bytes_: int, decimals: Optional[int] = None) -> str:
        return format_bytes(bytes_, _pick(decimals, self._fmt.bytes_decimals))

    def format_duration(self, seconds: Seconds) -> str:
        return format_duration(seconds)

    def format_duration_short(self, seconds: Seconds) -> str:
        return format_duration_short(seconds)

    def add_vat_to_price(self, price: Number, vat_percent: Number) -> float:
        return add_vat_to_price(price, vat_percent)

    def remove_vat_from_price(self, price: Number, vat_percent: Number) -> float:
        return remove_vat_from_price(price, vat_percent)

    def calculate_percentage(
        self,
        main_val: Number,
        divide_val: Number,
        decimals: Optional[int] = None,
        thousand_separator: Optional[str] = None,
    ) -> str:
        return calculate_percentage(
            main_val,
            divide_val,
            _pick(decimals, self._fmt.percentage_decimals),
            _pick(thousand_separator, self._fmt.percentage_thousand_separator),
        )

    def micro_to_price(self, value: Micros) -> float:
        return micro_to_price(value)

    def price_to_micros(self, value: Number) -> Micros:
        return price_to_micros(value)

    def micro_prices_to_decimal(
        self, value: Micros, decimals: Optional[int] = None, thousand_separator: Optional[str] = None
    ) -> float:
        return micro_prices_to_decimal(
            value,
            _pick(decimals, self._fmt.price_decimals),
            _pick(thousand_separator, self._fmt.price_thousand_separator),
        )

    def micros_to_decimal(self, value: Micros, decimals: Optional[int] = None) -> Decimal:
        return micros_to_decimal(value, _pick(decimals, self._fmt.price_decimals))

    def get_currency_symbol_from_code(self, currency_code: CurrencyCode) -> str:
        return get_currency_symbol_from_code(currency_code)
