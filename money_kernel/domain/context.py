"""
MoneyContext -- Explicit holder of process-wide money defaults.

The default currency and display locale are injected rather than read from
module globals. Build one per process (usually through
money_config.bridges.build_money_context) and pass it where needed.
"""

from __future__ import annotations

from dataclasses import dataclass

from money_kernel import display as _display
from money_kernel.domain import codec
from money_kernel.domain.parsing import parse_with_fallback
from money_kernel.domain.values import Currency, Money


@dataclass(frozen=True, slots=True)
class MoneyContext:
    default_currency: Currency
    display_locale: str = "en"

    def __post_init__(self) -> None:
        if not self.default_currency.is_valid():
            raise ValueError(f"Default currency {self.default_currency.code!r} is not registered")
        if not self.display_locale or not self.display_locale.strip():
            raise ValueError("display_locale must be non-empty")

    @classmethod
    def standard(cls) -> MoneyContext:
        """Registry default currency, English display."""
        return cls(default_currency=Currency.default())

    def parse(self, s: str, fallback: Currency | None = None) -> Money:
        return parse_with_fallback(s, fallback, default_currency=self.default_currency)

    def forge_with_currency(self, amount: int, currency: Currency) -> Money:
        return Money.forge_with_currency(amount, currency, default_currency=self.default_currency)

    def scan(self, raw: object, currency: Currency | None = None) -> Money | None:
        return codec.scan(raw, currency, default_currency=self.default_currency)

    def display(self, money: Money, locale: str | None = None) -> str:
        return _display.display(money, locale or self.display_locale)
