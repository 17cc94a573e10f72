"""
DTOs -- Transfer shapes for Money.

Responsibility:
    Defines the two boundary representations of Money: MoneyDTO (the
    structured document used for JSON) and ShortDTO (the canonical
    "CODE AMOUNT" string).

Architecture position:
    Kernel > Domain -- pure data, zero I/O.

Invariants enforced:
    - MoneyDTO.amount is an int count of minor units, never a float.
    - ``unit`` is the minor-unit exponent of the currency (2 for EUR).
    - Only ``amount`` and ``currency`` are read back; ``symbol``, ``unit``
      and the legacy ``cents`` field are informational.

Failure modes:
    - InvalidMoneyError for a missing or empty currency, or an amount that
      is not an integer.
    - UnknownCurrencyError when the currency is not registered.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from money_kernel.domain.parsing import format_money, parse_with_fallback
from money_kernel.domain.values import Money
from money_kernel.exceptions import InvalidMoneyError


@dataclass(frozen=True, slots=True)
class MoneyDTO:
    """Structured Money document: {amount, currency, symbol, unit}."""

    amount: int
    currency: str
    symbol: str = ""
    unit: int = 0

    @classmethod
    def from_money(cls, money: Money) -> MoneyDTO:
        return cls(
            amount=money.amount,
            currency=money.currency.code,
            symbol=money.currency.symbol,
            unit=money.currency.minor_unit,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MoneyDTO:
        """
        Validate a decoded document.

        A missing amount reads as 0. ``unit``, ``symbol`` and ``cents`` are
        accepted whatever their value.
        """
        currency = data.get("currency")
        if not isinstance(currency, str) or not currency:
            raise InvalidMoneyError("empty currency")

        amount = data.get("amount", 0)
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise InvalidMoneyError(f"amount must be an integer, got {amount!r}")

        symbol = data.get("symbol")
        unit = data.get("unit")
        return cls(
            amount=amount,
            currency=currency,
            symbol=symbol if isinstance(symbol, str) else "",
            unit=unit if isinstance(unit, int) and not isinstance(unit, bool) else 0,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "amount": self.amount,
            "currency": self.currency,
            "symbol": self.symbol,
            "unit": self.unit,
        }

    def to_money(self) -> Money:
        """Rebuild Money from amount and currency only."""
        return Money.forge(self.amount, self.currency)


@dataclass(frozen=True, slots=True)
class ShortDTO:
    """Money as its canonical "CODE AMOUNT" string."""

    value: str

    @classmethod
    def from_money(cls, money: Money) -> ShortDTO:
        return cls(format_money(money))

    def to_money(self) -> Money:
        return parse_with_fallback(self.value, None)

    def __str__(self) -> str:
        return self.value
