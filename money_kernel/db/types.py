"""
Module: money_kernel.db.types
Responsibility: SQLAlchemy column types that persist Money through the
    codec's scan/value contract.
Architecture position: Kernel > DB.  Imports money_kernel.domain only;
    nothing in the domain imports this module.

Invariants enforced:
    - MinorUnitMoney writes the exact minor-unit integer (BigInteger) and
      reads it back in the column currency.  Binding Money of any other
      currency is refused, because the currency is not stored.
    - CanonicalMoney stores "CODE AMOUNT" text, so each row keeps its own
      currency.
    - MajorUnitMoney stores major units as a float and re-rounds to minor
      units on read.  Lossy for very large amounts; use MinorUnitMoney for
      anything that is summed or compared.

Failure modes:
    - CurrencyMismatchError on bind of Money in a foreign currency.
    - TypeError on bind of anything that is not Money.
    - UnsupportedScanTypeError / FormatError on read of unexpected data.
"""

from sqlalchemy import BigInteger, Float, String
from sqlalchemy.types import TypeDecorator

from money_kernel.domain import codec
from money_kernel.domain.parsing import format_money
from money_kernel.domain.values import Currency, Money
from money_kernel.exceptions import CurrencyMismatchError


def _as_currency(currency: str | Currency) -> Currency:
    if isinstance(currency, Currency):
        return currency
    return Currency.by_iso_code(currency)


def _require_money(value: object) -> Money:
    if not isinstance(value, Money):
        raise TypeError(f"Money column expects Money, got {type(value).__name__}")
    return value


class MinorUnitMoney(TypeDecorator):
    """
    Money in a fixed currency stored as BigInteger minor units.

    Contract:
        The column declares its currency, e.g. ``MinorUnitMoney("EUR")``.

    Guarantees:
        - process_bind_param: Money -> int via codec.value().
        - process_result_value: int -> Money via codec.scan() in the column
          currency.
        - cache_ok=True enables SQLAlchemy statement caching.
    """

    impl = BigInteger
    cache_ok = True

    def __init__(self, currency: str | Currency):
        super().__init__()
        self.currency = _as_currency(currency)

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        money = _require_money(value)
        if money.currency != self.currency:
            raise CurrencyMismatchError(self.currency.code, money.currency.code)
        return codec.value(money)

    def process_result_value(self, value, dialect):
        return codec.scan(value, self.currency)


class CanonicalMoney(TypeDecorator):
    """
    Money of any currency stored as "CODE AMOUNT" text.

    A bare integer read from legacy rows resolves to ``fallback_currency``,
    or the registry default when none is given.
    """

    impl = String(64)
    cache_ok = True

    def __init__(self, fallback_currency: str | Currency | None = None):
        super().__init__()
        self.fallback_currency = (
            _as_currency(fallback_currency) if fallback_currency is not None else None
        )

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return format_money(_require_money(value))

    def process_result_value(self, value, dialect):
        return codec.scan(value, self.fallback_currency)


class MajorUnitMoney(TypeDecorator):
    """Money in a fixed currency stored as a float of major units."""

    impl = Float
    cache_ok = True

    def __init__(self, currency: str | Currency):
        super().__init__()
        self.currency = _as_currency(currency)

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        money = _require_money(value)
        if money.currency != self.currency:
            raise CurrencyMismatchError(self.currency.code, money.currency.code)
        return money.to_float()

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return codec.scan(float(value), self.currency)
