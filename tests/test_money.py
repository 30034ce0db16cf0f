"""Tests for display formatting and rounding helpers."""

import math
from decimal import Decimal
from fractions import Fraction

import pytest

from ripe_quote.core.exceptions import InvalidAmount
from ripe_quote.models.constants import CurrencyCode
from ripe_quote.services.money import format_amount, fraction_digits, round2


class TestFormatAmount:
    def test_two_decimals_for_regular_currency(self):
        assert format_amount(58347.8, "PHP") == "58,347.80"

    def test_zero_decimals_for_high_denomination(self):
        assert format_amount(15800000, "IDR") == "15,800,000"
        assert format_amount(25300000.4, CurrencyCode.VND) == "25,300,000"

    @pytest.mark.parametrize(
        "amount,code,expected",
        [
            (1.005, "THB", "1.01"),
            (1234.565, "MYR", "1,234.57"),
            (2.5, "IDR", "3"),
            (-2.5, "VND", "-3"),
            (0.004, "PHP", "0.00"),
        ],
    )
    def test_rounds_half_away_from_zero(self, amount, code, expected):
        assert format_amount(amount, code) == expected

    def test_negative_values_keep_sign(self):
        assert format_amount(-1234.5, "PHP") == "-1,234.50"

    def test_no_negative_zero(self):
        assert format_amount(-0.001, "PHP") == "0.00"
        assert format_amount(-0.4, "IDR") == "0"

    def test_code_is_case_insensitive_and_not_validated(self):
        assert format_amount(1000, "idr") == "1,000"
        assert format_amount(1000, "ZZZ") == "1,000.00"

    def test_accepts_decimal(self):
        assert format_amount(Decimal("1234.5"), "PHP") == "1,234.50"

    def test_very_large_value(self):
        assert format_amount(1e21, "PHP") == "1,000,000,000,000,000,000,000.00"

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf, Decimal("NaN")])
    def test_non_finite_rejected(self, bad):
        with pytest.raises(InvalidAmount):
            format_amount(bad, "PHP")

    @pytest.mark.parametrize("bad", ["58347.8", None, False])
    def test_non_numeric_rejected(self, bad):
        with pytest.raises(InvalidAmount):
            format_amount(bad, "PHP")


def test_fraction_digits():
    assert fraction_digits(CurrencyCode.IDR) == 0
    assert fraction_digits("vnd") == 0
    assert fraction_digits(CurrencyCode.PHP) == 2


def test_round2():
    assert round2(2.675) == 2.68
    assert round2(58.3478) == 58.35


class TestOtherNumberTypes:
    def test_fraction(self):
        assert format_amount(Fraction(1, 3), "PHP") == "0.33"
        assert format_amount(Fraction(5, 2), "IDR") == "3"

    def test_large_int_keeps_precision(self):
        assert format_amount(10**21 + 1, "IDR") == "1,000,000,000,000,000,000,001"

    def test_fraction_too_large_for_float(self):
        with pytest.raises(InvalidAmount, match="too large"):
            format_amount(Fraction(10**400), "PHP")
