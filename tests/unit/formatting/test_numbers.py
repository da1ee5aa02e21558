"""Tests for numeric sanitization and number/price/percentage formatting."""

from __future__ import annotations

import logging

import pytest
from structlog.testing import capture_logs

from numberhelper.core.exceptions import NotNumericError, NumberHelperError
from numberhelper.formatting.numbers import (
    calculate_percentage,
    format_number,
    format_price,
    sanitize_numeric,
    to_number,
)


class TestSanitizeNumeric:
    def test_strips_commas(self):
        result = sanitize_numeric("1,234")
        assert result == 1234
        assert isinstance(result, int)

    def test_strips_commas_from_decimal(self):
        assert sanitize_numeric("1,234.56") == pytest.approx(1234.56)

    @pytest.mark.parametrize(
        "value", ["12a", "", "   ", "abc", ",", "1.2.3", "--1", "\u0661\u0662\u0663", "\uff11\uff12", None, True, False, [1]]
    )
    def test_rejects_non_numeric(self, value):
        assert sanitize_numeric(value) is False

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("42", 42),
            (" 42 ", 42),
            ("-3.5", -3.5),
            ("+7", 7),
            (".5", 0.5),
            ("1.", 1.0),
            ("1.5e3", 1500.0),
            ("2E-2", 0.02),
            (12, 12),
            (1.25, 1.25),
        ],
    )
    def test_accepts_numeric(self, value, expected):
        assert sanitize_numeric(value) == expected

    def test_zero_is_not_false(self):
        assert sanitize_numeric("0") is not False
        assert sanitize_numeric(0) == 0

    def test_does_not_mutate_input(self):
        value = "1,000"
        sanitize_numeric(value)
        assert value == "1,000"


class TestToNumber:
    def test_raises_with_rejected_value(self):
        with pytest.raises(NotNumericError) as exc_info:
            to_number("12a")
        assert exc_info.value.value == "12a"

    def test_error_is_part_of_hierarchy(self):
        with pytest.raises(NumberHelperError):
            to_number(None)
        with pytest.raises(ValueError):
            to_number("x")


class TestFormatNumber:
    def test_two_decimals_with_separator(self):
        assert format_number(1234.5, 2, ",") == "1,234.50"

    def test_default_arguments(self):
        assert format_number(1234567) == "1,234,567"

    def test_fallback_echoes_value(self):
        assert format_number("abc") == "abc"

    def test_fallback_for_none_is_empty(self):
        assert format_number(None) == ""

    def test_rounds_half_away_from_zero(self):
        assert format_number(2.5) == "3"
        assert format_number(-2.5) == "-3"
        assert format_number(1.005, 2) == "1.01"

    def test_custom_and_empty_separator(self):
        assert format_number(1234567.891, 2, " ") == "1 234 567.89"
        assert format_number(1234.5, 2, "") == "1234.50"
        assert format_number(1234.5, 2, ".") == "1.234.50"

    def test_accepts_comma_string(self):
        assert format_number("1,234.5", 1) == "1,234.5"

    def test_negative_zero_has_no_sign(self):
        assert format_number(-0.001, 2) == "0.00"

    def test_negative_grouping(self):
        assert format_number(-1234567.5, 1) == "-1,234,567.5"

    def test_non_finite(self):
        assert format_number(float("inf")) == "inf"

    def test_logs_fallback(self):
        with capture_logs() as logs:
            format_number("abc")
        assert logs[0]["event"] == "value_not_numeric"
        assert logs[0]["log_level"] == "debug"

    def test_fallback_writes_nothing(self, capsys):
        format_number("abc")
        format_price(None, 2, "", "EUR")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_fallback_event_goes_to_stdlib_logging(self, caplog):
        caplog.set_level(logging.DEBUG, logger="numberhelper")
        format_number("abc")
        assert "value_not_numeric" in caplog.text

    def test_non_ascii_digits_are_echoed(self):
        assert format_number("\u0661\u0662\u0663") == "\u0661\u0662\u0663"

    def test_integer_too_large_for_float(self):
        assert format_number("1" + "0" * 400) == "10" + ",000" * 133

    @pytest.mark.parametrize("value", [1234567.89, 1000, 0.5, 98765.4])
    def test_formatted_value_sanitizes_back(self, value):
        assert sanitize_numeric(format_number(value, 2)) == pytest.approx(value)


class TestFormatPrice:
    def test_currency_prefix(self):
        assert format_price(1000, 2, ",", "USD") == "$1,000.00"

    def test_defaults(self):
        assert format_price(19.999) == "20.00"
        assert format_price(1234.5) == "1234.50"

    def test_unknown_currency_has_no_prefix(self):
        assert format_price(5, 2, "", "XXX") == "5.00"

    def test_euro_symbol(self):
        assert format_price(1234.5, 2, "", "EUR") == "€1234.50"

    def test_comma_string_input(self):
        assert format_price("1,000", 2, ",", "GBP") == "£1,000.00"

    def test_fallback_ignores_currency(self):
        assert format_price("n/a", 2, "", "EUR") == "n/a"

    def test_integer_too_large_for_float(self):
        assert format_price(10**400) == "1" + "0" * 400 + ".00"


class TestCalculatePercentage:
    def test_basic(self):
        assert calculate_percentage(50, 200) == "25%"

    @pytest.mark.parametrize(("main_val", "divide_val"), [(-5, 10), (10, 0), (0, 10), (10, -5), (-5, -10)])
    def test_non_positive_values_give_zero(self, main_val, divide_val):
        assert calculate_percentage(main_val, divide_val) == "0%"

    def test_decimals(self):
        assert calculate_percentage(1, 3, 2) == "33.33%"
        assert calculate_percentage(2, 3) == "67%"

    def test_thousand_separator(self):
        assert calculate_percentage(50000, 10, 0, ",") == "500,000%"
