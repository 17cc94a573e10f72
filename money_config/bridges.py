"""
Config → Kernel Bridges.

Converts a MoneyConfig into kernel inputs. Lives in money_config (the
producer) because the kernel must NEVER import money_config.

Usage:
    from money_config import get_active_config
    from money_config.bridges import build_money_context

    ctx = build_money_context(get_active_config())
    price = ctx.parse("1999")
"""

from __future__ import annotations

from money_config.schema import MoneyConfig
from money_kernel.domain.context import MoneyContext
from money_kernel.domain.values import Currency


def build_money_context(config: MoneyConfig) -> MoneyContext:
    """Build a MoneyContext from the configured defaults.

    Raises:
        CurrencyNotFoundError: If the configured currency is not registered.
    """
    return MoneyContext(
        default_currency=Currency.by_iso_code(config.default_currency),
        display_locale=config.display_locale,
    )
