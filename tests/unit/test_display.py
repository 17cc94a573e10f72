"""
Unit tests for locale-aware display strings.
"""

from decimal import Decimal

import pytest

from money_kernel.display import (
    BabelDecimalFormatter,
    display,
    display_amount,
    display_iso,
)
from money_kernel.domain.values import Money
from money_kernel.exceptions import FormatError


class TestDisplayAmount:
    """Tests for display_amount."""

    def test_english_grouping(self):
        assert display_amount(Money.forge(123456, "EUR"), "en") == "1,234.56"

    def test_italian_grouping(self):
        assert display_amount(Money.forge(123456, "EUR"), "it") == "1.234,56"

    def test_whole_amount_drops_fraction(self):
        assert display_amount(Money.forge(123400, "EUR"), "en") == "1,234"
        assert display_amount(Money.forge(123400, "EUR"), "it") == "1.234"

    def test_leading_zero_minor_part(self):
        assert display_amount(Money.forge(123405, "EUR"), "en") == "1,234.05"

    def test_zero_digit_currency(self):
        assert display_amount(Money.forge(1234567, "JPY"), "en") == "1,234,567"

    def test_three_digit_currency(self):
        assert display_amount(Money.forge(1011, "JOD"), "en") == "1.011"

    def test_five_digit_currency(self):
        assert display_amount(Money.forge(12345, "CLF"), "en") == "0.12345"

    def test_negative(self):
        assert display_amount(Money.forge(-123456, "EUR"), "en") == "-1,234.56"

    def test_zero(self):
        assert display_amount(Money.forge(0, "EUR"), "en") == "0"

    def test_int64_max_is_exact(self):
        assert display_amount(Money.forge(2**63 - 1, "EUR"), "en") == (
            "92,233,720,368,547,758.07"
        )

    def test_hyphenated_locale(self):
        assert display_amount(Money.forge(123456, "EUR"), "en-US") == "1,234.56"

    def test_unknown_locale(self):
        with pytest.raises(FormatError) as exc_info:
            display_amount(Money.forge(1, "EUR"), "zz")
        assert exc_info.value.value == "zz"

    def test_malformed_locale(self):
        with pytest.raises(FormatError):
            display_amount(Money.forge(1, "EUR"), "not a locale")

    def test_injected_formatter(self):
        class Recording:
            def __init__(self):
                self.calls = []

            def format(self, value, fraction_digits, locale):
                self.calls.append((value, fraction_digits, locale))
                return "formatted"

        fmt = Recording()
        assert display_amount(Money.forge(150, "USD"), "de", formatter=fmt) == "formatted"
        assert fmt.calls == [(Decimal("1.50"), 2, "de")]


class TestDisplay:
    """Tests for display and display_iso."""

    def test_symbol_en(self):
        assert display(Money.forge(123456, "EUR"), "en") == "€ 1,234.56"

    def test_symbol_it(self):
        assert display(Money.forge(123456, "EUR"), "it") == "€ 1.234,56"
        assert display(Money.forge(123400, "EUR"), "it") == "€ 1.234"

    def test_empty_symbol_uses_code(self):
        assert display(Money.forge(500, "CHF"), "en") == "CHF 5"

    def test_iso(self):
        assert display_iso(Money.forge(123456, "EUR"), "en") == "EUR 1,234.56"


class TestBabelDecimalFormatter:
    """Tests for the Babel-backed formatter."""

    def test_pattern_digits(self):
        fmt = BabelDecimalFormatter()
        assert fmt.format(Decimal("1234.4"), 3, "en") == "1,234.400"
        assert fmt.format(Decimal("1234.4"), 0, "en") == "1,234"
