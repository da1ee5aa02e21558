"""Numeric sanitization and fixed-point number, price and percentage formatting.

Formatters never raise for malformed input: anything that does not read as a
number is echoed back as text.
"""

from __future__ import annotations

import re
from typing import Any, Literal, Union

from numberhelper.core.decimals import render_fixed
from numberhelper.core.exceptions import NotNumericError
from numberhelper.core.logging_config import get_logger
from numberhelper.core.types import CurrencyCode, Number
from numberhelper.currency.symbols import get_currency_symbol_from_code

logger = get_logger(__name__)

# Optional sign, digits with optional fraction (or a bare fraction), optional exponent.
_NUMERIC_RE = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$", re.ASCII)
_INTEGER_RE = re.compile(r"^\s*[+-]?\d+\s*$", re.ASCII)


def to_number(value: Any) -> Number:
    """Read ``value`` as an int or float, stripping embedded commas.

    Raises:
        NotNumericError: if the value is not numeric after comma stripping.
    """
    if isinstance(value, bool):
        raise NotNumericError(value)
    if isinstance(value, (int, float)):
        return value
    if not isinstance(value, str):
        raise NotNumericError(value)

    text = value.replace(",", "")
    if not _NUMERIC_RE.match(text):
        raise NotNumericError(value)
    if _INTEGER_RE.match(text):
        try:
            return int(text)
        except ValueError:
            # longer than the interpreter allows for int parsing
            return float(text)
    return float(text)


def sanitize_numeric(value: Any) -> Union[Number, Literal[False]]:
    """Return ``value`` as a number, or ``False`` when it is not numeric.

    ``0`` is a valid result, so test the outcome with ``is False``.
    """
    try:
        return to_number(value)
    except NotNumericError:
        return False


def as_text(value: Any) -> str:
    """Text fallback used when a value cannot be formatted."""
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    return str(value)


def format_number(value: Any, decimals: int = 0, thousand_separator: str = ",") -> str:
    """Format ``value`` as fixed point with grouped thousands.

    >>> format_number(1234.5, 2)
    '1,234.50'
    >>> format_number("abc")
    'abc'
    """
    try:
        number = to_number(value)
    except NotNumericError:
        logger.debug("value_not_numeric", formatter="format_number", value=repr(value))
        return as_text(value)
    return render_fixed(number, decimals, thousand_separator)


def format_price(
    value: Any,
    decimals: int = 2,
    thousand_separator: str = "",
    currency_code: CurrencyCode = "",
) -> str:
    """Format ``value`` as a price, prefixed with the symbol for ``currency_code``.

    Unknown or empty currency codes add no prefix. Non-numeric values are
    echoed back as text.
    """
    try:
        number = to_number(value)
    except NotNumericError:
        logger.debug("value_not_numeric", formatter="format_price", value=repr(value))
        return as_text(value)
    symbol = get_currency_symbol_from_code(currency_code) if currency_code else ""
    return symbol + render_fixed(number, decimals, thousand_separator)


def calculate_percentage(
    main_val: Number,
    divide_val: Number,
    decimals: int = 0,
    thousand_separator: str = "",
) -> str:
    """Percentage of ``main_val`` in ``divide_val``, e.g. ``"25%"``.

    Returns ``"0%"`` unless both values are strictly positive.
    """
    if main_val > 0 and divide_val > 0:
        return format_price(main_val * 100 / divide_val, decimals, thousand_separator) + "%"
    return "0%"
