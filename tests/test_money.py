"""Unit tests for money helpers."""

from decimal import Decimal

import pytest

from salary_engine.calculators.money import (
    format_money,
    format_rate,
    parse_amount,
    round_to_cents,
    to_decimal,
)


class TestRoundToCents:
    @pytest.mark.parametrize(
        "amount, expected",
        [
            ("56.125", "56.13"),
            ("56.1249", "56.12"),
            ("572.66725", "572.67"),
            ("0.005", "0.01"),
            ("10", "10.00"),
            ("-1.005", "-1.01"),
        ],
    )
    def test_half_up(self, amount, expected):
        assert round_to_cents(Decimal(amount)) == Decimal(expected)
        assert str(round_to_cents(Decimal(amount))) == expected


class TestParseAmount:
    """Form-style amount coercion."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("1000", "1000"),
            ("  250.50 ", "250.50"),
            ("1,234.56", "1234.56"),
            ("", "0"),
            ("   ", "0"),
            ("abc", "0"),
            ("12abc", "0"),
            ("-50", "0"),
            ("NaN", "0"),
            ("Infinity", "0"),
            (None, "0"),
            (True, "0"),
            (300, "300"),
            (0.1, "0.1"),
            (Decimal("42.42"), "42.42"),
        ],
    )
    def test_coercion(self, value, expected):
        assert parse_amount(value) == Decimal(expected)

    def test_float_has_no_binary_artifacts(self):
        assert to_decimal(0.1) == Decimal("0.1")
        assert to_decimal(1.005) == Decimal("1.005")

    def test_unsupported_type_is_zero(self):
        assert parse_amount(object()) == Decimal("0")


class TestFormatting:
    def test_format_money(self):
        assert format_money(Decimal("1234.5")) == "GHS 1,234.50"
        assert format_money(Decimal("0")) == "GHS 0.00"
        assert format_money(Decimal("999.995"), currency="USD") == "USD 1,000.00"

    @pytest.mark.parametrize(
        "rate, label",
        [
            ("0.055", "5.5%"),
            ("0.13", "13%"),
            ("0.10", "10%"),
            ("0.175", "17.5%"),
            ("0", "0%"),
        ],
    )
    def test_format_rate(self, rate, label):
        assert format_rate(Decimal(rate)) == label
