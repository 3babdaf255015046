"""Tests for form-input parsing of income and age."""

import pytest

from backend.pipelines.income_parser import parse_age, parse_income
from backend.tax_engine.errors import InvalidAgeError, InvalidIncomeError


class TestParseIncome:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("1200000", 1_200_000),
            ("12,00,000", 1_200_000),
            ("1,200,000", 1_200_000),
            ("  5,00,000  ", 500_000),
            ("₹ 5,00,000", 500_000),
            ("Rs. 750000", 750_000),
            ("1234.50", 1234.5),
            ("0", 0),
            (850000, 850_000),
            (1e6, 1_000_000),
        ],
    )
    def test_valid(self, raw, expected):
        assert parse_income(raw) == expected

    @pytest.mark.parametrize("raw", ["", "   ", ",,", "abc", "12L", "-1", "-5,000", "nan", "inf", None, True, -3])
    def test_invalid(self, raw):
        with pytest.raises(InvalidIncomeError):
            parse_income(raw)


class TestParseAge:

    def test_blank_uses_default(self):
        assert parse_age("") == 30
        assert parse_age(None) == 30
        assert parse_age(None, default=65) == 65

    @pytest.mark.parametrize("raw, expected", [("45", 45), (" 80 ", 80), (0, 0), (120, 120), (60.0, 60)])
    def test_valid(self, raw, expected):
        assert parse_age(raw) == expected

    @pytest.mark.parametrize("raw", ["forty", "30.5", 30.5, -1, 121, "200", False])
    def test_invalid(self, raw):
        with pytest.raises(InvalidAgeError):
            parse_age(raw)
