"""
Unit tests for the Money value object.

Verifies:
- Construction from minor units and from major-unit floats
- The default-currency fallback and its log event
- Same-currency arithmetic and percentages
- Float, string and major/minor decompositions
- The signed 64-bit range
"""

import pytest

from money_kernel.domain.codec import marshal, unmarshal
from money_kernel.domain.values import (
    INT64_MAX,
    INT64_MIN,
    Currency,
    Money,
    round_half_away_from_zero,
)
from money_kernel.exceptions import (
    AmountOutOfRangeError,
    CurrencyMismatchError,
    CurrencyNotFoundError,
    DecimalConversionError,
    UnknownCurrencyError,
)


class TestRoundHalfAwayFromZero:
    """Tests for the rounding helper."""

    def test_ties_round_away_from_zero(self):
        assert round_half_away_from_zero(0.5) == 1
        assert round_half_away_from_zero(1.5) == 2
        assert round_half_away_from_zero(2.5) == 3
        assert round_half_away_from_zero(-2.5) == -3

    def test_non_ties(self):
        assert round_half_away_from_zero(2.4) == 2
        assert round_half_away_from_zero(2.6) == 3
        assert round_half_away_from_zero(-2.4) == -2


class TestForge:
    """Tests for Money.forge and friends."""

    def test_forge(self):
        m = Money.forge(123, "EUR")
        assert m.amount == 123
        assert m.currency == Currency.by_iso_code("EUR")

    def test_forge_unknown_currency(self):
        with pytest.raises(UnknownCurrencyError) as exc_info:
            Money.forge(1, "ZZZ")
        assert exc_info.value.currency == "ZZZ"
        assert isinstance(exc_info.value.__cause__, CurrencyNotFoundError)

    @pytest.mark.parametrize("code", ["XYZ", "Monopoly", ""])
    def test_invalid_codes_never_default(self, code):
        with pytest.raises(UnknownCurrencyError):
            Money.forge(1, code)

    def test_forge_int64_max(self):
        assert Money.forge(2**63 - 1, "EUR").amount == INT64_MAX

    def test_forge_int64_min(self):
        assert Money.forge(-(2**63), "EUR").amount == INT64_MIN

    def test_out_of_range(self):
        with pytest.raises(AmountOutOfRangeError) as exc_info:
            Money.forge(2**63, "EUR")
        assert exc_info.value.amount == 2**63

    def test_rejects_float_amount(self):
        with pytest.raises(TypeError):
            Money(amount=1.5, currency=Currency.by_iso_code("EUR"))  # type: ignore[arg-type]

    def test_rejects_bool_amount(self):
        with pytest.raises(TypeError):
            Money(amount=True, currency=Currency.by_iso_code("EUR"))  # type: ignore[arg-type]

    def test_forge_float(self):
        assert Money.forge_float(1.01, "EUR").amount == 101
        assert Money.forge_float(12.345, "EUR").amount == 1235
        assert Money.forge_float(12.345, "JPY").amount == 12

    def test_forge_float_negative_rounds_away_from_zero(self):
        assert Money.forge_float(-0.5, "JPY").amount == -1

    def test_forge_float_unknown_currency(self):
        with pytest.raises(UnknownCurrencyError):
            Money.forge_float(1.0, "ZZZ")

    def test_zero(self):
        z = Money.zero("USD")
        assert z.is_zero
        assert z.currency.code == "USD"

    def test_must_forge(self):
        assert Money.must_forge(5, "EUR") == Money.forge(5, "EUR")

    def test_must_forge_raises_runtime_error(self):
        with pytest.raises(RuntimeError) as exc_info:
            Money.must_forge(5, "ZZZ")
        assert isinstance(exc_info.value.__cause__, UnknownCurrencyError)

    def test_must_forge_float_raises_runtime_error(self):
        with pytest.raises(RuntimeError):
            Money.must_forge_float(5.0, "ZZZ")


class TestForgeWithCurrency:
    """Tests for the default-currency fallback."""

    def test_valid_currency_is_kept(self, usd):
        assert Money.forge_with_currency(10, usd).currency == usd

    def test_invalid_currency_falls_back_to_default(self, invalid_currency, eur):
        m = Money.forge_with_currency(10, invalid_currency)
        assert m.amount == 10
        assert m.currency == eur

    def test_injected_default(self, invalid_currency, usd):
        m = Money.forge_with_currency(10, invalid_currency, default_currency=usd)
        assert m.currency == usd

    def test_fallback_is_logged(self, invalid_currency, captured_logs):
        Money.forge_with_currency(10, invalid_currency)
        records = [r for r in captured_logs() if r["message"] == "money_currency_fallback"]
        assert len(records) == 1
        assert records[0]["level"] == "WARNING"
        assert records[0]["requested_currency"] == "XYZ"
        assert records[0]["fallback_currency"] == "EUR"

    def test_float_fallback(self, invalid_currency, eur):
        m = Money.forge_float_with_currency(1.5, invalid_currency)
        assert m == Money(amount=150, currency=eur)

    def test_lower_case_code_is_not_kept(self):
        m = Money.forge_with_currency(100, Currency("eur", 2))
        assert m.currency.code == "EUR"
        assert m.currency.symbol == "€"
        assert str(m) == "EUR 100"
        assert m + Money.forge(1, "EUR") == Money.forge(101, "EUR")

    def test_lower_case_code_survives_json_round_trip(self):
        m = Money.forge_with_currency(100, Currency("eur", 2))
        assert unmarshal(marshal(m)) == m


class TestArithmetic:
    """Tests for same-currency arithmetic."""

    def test_add(self):
        assert Money.forge(100, "EUR").add(Money.forge(23, "EUR")) == Money.forge(123, "EUR")

    def test_subtract(self):
        assert Money.forge(100, "EUR").subtract(Money.forge(123, "EUR")) == Money.forge(-23, "EUR")

    def test_operators(self):
        a = Money.forge(5, "USD")
        b = Money.forge(7, "USD")
        assert a + b == Money.forge(12, "USD")
        assert b - a == Money.forge(2, "USD")
        assert -a == Money.forge(-5, "USD")
        assert abs(Money.forge(-5, "USD")) == a

    def test_add_mismatch(self):
        with pytest.raises(CurrencyMismatchError) as exc_info:
            Money.forge(1, "EUR").add(Money.forge(1, "USD"))
        assert exc_info.value.currency1 == "EUR"
        assert exc_info.value.currency2 == "USD"

    def test_subtract_mismatch(self):
        with pytest.raises(CurrencyMismatchError):
            Money.forge(1, "EUR") - Money.forge(1, "GBP")

    def test_add_overflow(self):
        with pytest.raises(AmountOutOfRangeError):
            Money.forge(INT64_MAX, "EUR") + Money.forge(1, "EUR")

    def test_adding_zero_is_identity(self):
        m = Money.forge(4711, "CHF")
        assert m + Money.zero(m.currency) == m

    def test_comparisons(self):
        assert Money.forge(1, "EUR") < Money.forge(2, "EUR")
        assert Money.forge(2, "EUR") >= Money.forge(2, "EUR")
        with pytest.raises(CurrencyMismatchError):
            Money.forge(1, "EUR") < Money.forge(2, "USD")

    def test_add_non_money_is_type_error(self):
        with pytest.raises(TypeError):
            Money.forge(1, "EUR") + 1  # type: ignore[operator]

    def test_equality_and_hash(self):
        assert Money.forge(1, "EUR") == Money.forge(1, "eur")
        assert Money.forge(1, "EUR") != Money.forge(1, "USD")
        assert len({Money.forge(1, "EUR"), Money.forge(1, "EUR")}) == 1


class TestPercent:
    """Tests for percentage helpers."""

    def test_percent_off(self):
        m = Money.forge_float(100.09, "EUR").percent_off(20)
        assert m.amount == 2002
        assert m.to_float() == 20.02

    def test_percent_off_float(self):
        m = Money.forge_float(100.09, "EUR").percent_off_float(20.5)
        assert m.amount == 2052

    def test_percent_off_keeps_currency(self):
        assert Money.forge(1000, "JPY").percent_off(10) == Money.forge(100, "JPY")


class TestFloatAndString:
    """Tests for float and fixed-point string forms."""

    def test_to_float(self):
        assert Money.forge(1011, "JOD").to_float() == 1.011
        assert Money.forge(1000, "JOD").to_float() == 1.0
        assert Money.forge(1011, "VND").to_float() == 1011.0

    def test_zero_to_float(self):
        assert Money.forge(0, "EUR").to_float() == 0.0

    def test_amount_as_string(self):
        assert Money.forge(1011, "JOD").amount_as_string() == "1.011"
        assert Money.forge(1000, "JOD").amount_as_string() == "1.000"
        assert Money.forge(1011, "VND").amount_as_string() == "1011"
        assert Money.forge(101, "EUR").amount_as_string() == "1.01"

    def test_amount_as_string_negative(self):
        assert Money.forge(-5, "EUR").amount_as_string() == "-0.05"

    def test_str(self):
        assert str(Money.forge(123, "EUR")) == "EUR 123"

    def test_int(self):
        m = Money.forge(-42, "EUR")
        assert int(m) == -42
        assert m.minor_units == -42

    def test_sign_predicates(self):
        assert Money.forge(1, "EUR").is_positive
        assert Money.forge(-1, "EUR").is_negative
        assert not Money.forge(0, "EUR").is_positive


class TestSplitMajorAndMinor:
    """Tests for split_major_and_minor."""

    @pytest.mark.parametrize(
        "amount,code,expected",
        [
            (1234.56789, "EUR", (1234, 57)),
            (1234.5, "EUR", (1234, 5)),
            (123.45, "EUR", (123, 45)),
            (12.345, "EUR", (12, 35)),
            (1.2345, "EUR", (1, 23)),
            (12.345, "JPY", (12, 0)),
            (12.12312312, "EUR", (12, 12)),
        ],
    )
    def test_from_float(self, amount, code, expected):
        assert Money.forge_float(amount, code).split_major_and_minor() == expected

    @pytest.mark.parametrize(
        "amount,code,expected",
        [
            (12345, "EUR", (123, 45)),
            (12345, "JPY", (12345, 0)),
            (12345, "CLF", (0, 12345)),
            (123, "CLF", (0, 123)),
            (12, "EUR", (0, 12)),
            (0, "EUR", (0, 0)),
        ],
    )
    def test_from_minor_units(self, amount, code, expected):
        assert Money.forge(amount, code).split_major_and_minor() == expected

    def test_negative_amount_has_no_minor_part(self):
        assert Money.forge(-12345, "EUR").split_major_and_minor() == (-123, 0)

    def test_exponent_rendering_is_sliced_as_is(self):
        """CLF 0.00001 renders as "1e-05"; the slice after "1e" reads -5."""
        assert Money.forge(1, "CLF").split_major_and_minor() == (0, -5)

    def test_unsliceable_rendering_raises(self):
        m = Money(amount=15, currency=Currency("EUR", 7))
        with pytest.raises(DecimalConversionError) as exc_info:
            m.split_major_and_minor()
        assert exc_info.value.rendered == "1.5e-06"
        assert exc_info.value.code == "DECIMAL_CONVERSION_ERROR"
