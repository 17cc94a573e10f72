"""
Display -- Locale-aware human-readable Money strings.

Responsibility:
    Renders Money for people: grouped major units in the conventions of a
    locale, prefixed by the currency symbol or ISO code.

Architecture position:
    Kernel -- presentation edge. Nothing in money_kernel.domain imports it.
    The grouping and separators come from an injected DecimalFormatter; the
    default implementation is Babel's CLDR-backed ``format_decimal``.

Invariants enforced:
    - The formatter receives an exact Decimal built from the integer
      amount, so no binary-float digits reach the output.
    - The fractional part is omitted when the amount is a whole number of
      major units ("1,234" rather than "1,234.00").
    - Otherwise exactly ``minor_unit`` fraction digits are shown.

Failure modes:
    - FormatError for an unknown or malformed locale identifier.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol

from babel import UnknownLocaleError
from babel.numbers import format_decimal

from money_kernel.domain.values import Money
from money_kernel.exceptions import FormatError


class DecimalFormatter(Protocol):
    """Formats a decimal with locale grouping and a fixed number of fraction digits."""

    def format(self, value: Decimal, fraction_digits: int, locale: str) -> str: ...


class BabelDecimalFormatter:
    """DecimalFormatter backed by babel.numbers.format_decimal."""

    def format(self, value: Decimal, fraction_digits: int, locale: str) -> str:
        pattern = "#,##0"
        if fraction_digits > 0:
            pattern += "." + "0" * fraction_digits
        locale_id = (locale or "").strip().replace("-", "_")
        try:
            return format_decimal(value, format=pattern, locale=locale_id)
        except (UnknownLocaleError, ValueError, TypeError) as exc:
            raise FormatError(locale, f"unknown locale: {exc}") from exc


_default_formatter: DecimalFormatter = BabelDecimalFormatter()


def display_amount(
    money: Money,
    locale: str,
    *,
    formatter: DecimalFormatter | None = None,
) -> str:
    """
    Grouped major-unit amount: EUR 123456 -> "1,234.56" (en), "1.234,56" (it).
    """
    fmt = formatter if formatter is not None else _default_formatter
    currency = money.currency
    digits = max(currency.minor_unit, 0)
    exact = Decimal(money.amount).scaleb(-digits)
    if money.amount % currency.minor_unit_multiplier == 0:
        digits = 0
    return fmt.format(exact, digits, locale)


def display(
    money: Money,
    locale: str,
    *,
    formatter: DecimalFormatter | None = None,
) -> str:
    """Symbol-prefixed display string, "€ 1,234.56". Falls back to the code."""
    label = money.currency.symbol or money.currency.code
    return f"{label} {display_amount(money, locale, formatter=formatter)}"


def display_iso(
    money: Money,
    locale: str,
    *,
    formatter: DecimalFormatter | None = None,
) -> str:
    """ISO-code-prefixed display string, "EUR 1,234.56"."""
    return f"{money.currency.code} {display_amount(money, locale, formatter=formatter)}"
