"""Tests for shareable-link parsing used by the widget page."""

import pytest

from ripe_quote.models.constants import CurrencyCode
from ripe_quote.services.quote_params import (
    AMOUNT_PRESETS,
    build_share_query,
    build_share_url,
    normalize_amount_input,
    parse_amount_param,
    parse_currency_param,
)


class TestParseAmountParam:
    def test_missing_uses_default(self):
        assert parse_amount_param(None) == ("1000", 1000.0)
        assert parse_amount_param(None, default="250") == ("250", 250.0)

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("1000", 1000.0),
            ("1,000.50", 1000.5),
            (".5", 0.5),
            ("12abc", 12.0),
            ("7.", 7.0),
        ],
    )
    def test_reads_leading_number(self, raw, expected):
        text, value = parse_amount_param(raw)
        assert text == raw
        assert value == expected

    @pytest.mark.parametrize("raw", ["", "abc", ".", "-5", "1e999"])
    def test_unusable_becomes_zero(self, raw):
        assert parse_amount_param(raw) == (raw, 0.0)


class TestParseCurrencyParam:
    def test_known_code(self, table):
        assert parse_currency_param("thb", table, "PHP") == CurrencyCode.THB

    @pytest.mark.parametrize("raw", [None, "", "ZZZ"])
    def test_falls_back_to_default(self, table, raw):
        assert parse_currency_param(raw, table, "VND") == CurrencyCode.VND


class TestNormalizeAmountInput:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("100", "100"),
            ("12,5", "12.5"),
            ("12.34", "12.34"),
            ("", ""),
            (".", "."),
        ],
    )
    def test_accepted(self, value, expected):
        assert normalize_amount_input(value) == expected

    @pytest.mark.parametrize("value", ["1.2.3", "1,2.3", "1.234", "abc", "-1"])
    def test_rejected(self, value):
        assert normalize_amount_input(value) is None


class TestShareLinks:
    def test_query(self):
        assert build_share_query("1000", CurrencyCode.PHP) == "amount=1000&currency=PHP"

    def test_url_replaces_existing_query(self):
        url = build_share_url("http://testserver/ui?amount=1&compare=1", "250", "THB")
        assert url == "http://testserver/ui?amount=250&currency=THB"


def test_presets():
    assert AMOUNT_PRESETS == ("100", "1000", "5000", "10000")


class TestTypedAmount:
    def test_comma_decimal_is_normalized(self):
        assert parse_amount_param("12,5") == ("12.5", 12.5)

    def test_thousands_separator_still_dropped(self):
        assert parse_amount_param("1,000") == ("1,000", 1000.0)
