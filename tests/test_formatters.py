"""Tests for the shared field formatters and validators."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from peoplehub.common.formatters import (
    DATE_ERROR,
    MAX_AMOUNT,
    format_currency,
    is_valid_currency,
    is_valid_iso_date,
    parse_currency,
    parse_iso_date,
)


# ═════════════════════════════════════════════════════════════════════
# format_currency
# ═════════════════════════════════════════════════════════════════════


class TestFormatCurrency:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("1234.5", "$1,234.50"),
            ("5000", "$5,000.00"),
            ("0", "$0.00"),
            ("$1,234,567.891", "$1,234,567.89"),
            ("12abc34", "$1,234.00"),
            (".5", "$0.50"),
            ("1.2.3", "$1.20"),
        ],
    )
    def test_formats_amounts(self, raw, expected):
        """Non-numeric characters are dropped and two decimals are forced."""
        assert format_currency(raw) == expected

    @pytest.mark.parametrize("raw", ["", "abc", "$", ".", "-", ",,,"])
    def test_nothing_numeric_gives_empty(self, raw):
        assert format_currency(raw) == ""

    @pytest.mark.parametrize("raw", ["1234.5", "5000", "$99", "0.015", "7,500.25"])
    def test_idempotent(self, raw):
        """Formatting an already formatted amount changes nothing."""
        once = format_currency(raw)
        assert format_currency(once) == once

    def test_rounds_half_up(self):
        assert format_currency("2.005") == "$2.01"

    def test_long_amounts_keep_every_digit(self):
        """More digits than the default decimal precision still format."""
        raw = "1" * 30
        formatted = format_currency(raw)
        assert formatted == "$" + "{:,}".format(int(raw)) + ".00"
        assert format_currency(formatted) == formatted


# ═════════════════════════════════════════════════════════════════════
# is_valid_iso_date / parse_iso_date
# ═════════════════════════════════════════════════════════════════════


class TestIsoDate:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("", True),
            ("2024-02-29", True),
            ("2023-12-31", True),
            ("2024-02-30", False),
            ("2023-02-29", False),
            ("2024-13-01", False),
            ("2024-2-5", False),
            ("24-02-05", False),
            ("2024/02/05", False),
            ("2024-02-05T00:00", False),
            ("not a date", False),
        ],
    )
    def test_validity(self, raw, expected):
        assert is_valid_iso_date(raw) is expected

    def test_parse_returns_date(self):
        assert parse_iso_date("2022-10-11") == date(2022, 10, 11)

    def test_parse_empty_is_none(self):
        assert parse_iso_date("") is None

    def test_parse_invalid_raises_with_form_message(self):
        with pytest.raises(ValueError, match="YYYY-MM-DD"):
            parse_iso_date("2024-02-30")
        assert "YYYY-MM-DD" in DATE_ERROR


# ═════════════════════════════════════════════════════════════════════
# Currency validation / parsing
# ═════════════════════════════════════════════════════════════════════


class TestCurrencyValidation:

    @pytest.mark.parametrize("raw", ["", "0", "5000", "$5,000.00", "12.5"])
    def test_valid(self, raw):
        assert is_valid_currency(raw)

    @pytest.mark.parametrize("raw", ["-5", "abc", "$", "1.2.3", "NaN", "Infinity", "1e400", "5E3"])
    def test_invalid(self, raw):
        assert not is_valid_currency(raw)

    def test_parse_formatted_amount(self):
        assert parse_currency("$5,000.00") == Decimal("5000.00")

    def test_parse_empty_is_none(self):
        assert parse_currency("") is None

    def test_parse_invalid_raises(self):
        with pytest.raises(ValueError):
            parse_currency("-12")

    @pytest.mark.parametrize("raw", ["1" * 30, "1e400", "10000000000", "9999999999.995"])
    def test_parse_out_of_range_raises_value_error(self, raw):
        """Too large for a NUMERIC(12, 2) column, or not plain digits."""
        with pytest.raises(ValueError):
            parse_currency(raw)

    def test_parse_largest_storable_amount(self):
        assert parse_currency("$9,999,999,999.99") == MAX_AMOUNT
