"""
Parsing -- Canonical "CODE AMOUNT" text form of Money.

Responsibility:
    Read and write the canonical textual form: an optional ISO code, then
    whitespace, then a signed base-10 integer count of minor units
    ("EUR 123", "  USD   -5  ", "3324").

Architecture position:
    Kernel > Domain -- pure functions, zero I/O.

Invariants enforced:
    - Exactly one or two whitespace-separated tokens.
    - The amount token is a signed 64-bit integer; decimal separators are
      rejected ("USD 12.12" is not minor units).
    - format_money(parse(s)) is stable for every well-formed s.

Failure modes:
    - FormatError for empty input, wrong token count or a bad amount.
    - UnknownCurrencyError for an unregistered code token.
"""

import re

from money_kernel.domain.values import (
    INT64_MAX,
    INT64_MIN,
    Currency,
    Money,
    resolve_money_currency,
)
from money_kernel.exceptions import FormatError

_INT_RE = re.compile(r"^[+-]?[0-9]+$")


def _parse_amount(token: str, original: str) -> int:
    if not _INT_RE.match(token):
        raise FormatError(original, f"amount {token!r} is not a base-10 integer")
    amount = int(token)
    if not INT64_MIN <= amount <= INT64_MAX:
        raise FormatError(original, f"amount {token!r} is outside the 64-bit range")
    return amount


def parse_with_fallback(
    s: str,
    fallback: Currency | None,
    *,
    default_currency: Currency | None = None,
) -> Money:
    """
    Parse ``s``, using ``fallback`` when the text carries no code.

    An invalid or missing fallback resolves to ``default_currency``, or the
    registry default when none is injected.

    The code token is matched case-insensitively through the registry, so
    "eur 100" parses as EUR 100. Stored values written by stricter,
    case-sensitive producers never contain lower-case codes, so this only
    widens what is accepted.
    """
    if not s or not s.strip():
        raise FormatError(s, "empty string")

    tokens = s.split()
    if len(tokens) not in (1, 2):
        raise FormatError(s, "money text should look like 'EUR 123'")

    amount = _parse_amount(tokens[-1], s)

    if len(tokens) == 2:
        currency = resolve_money_currency(tokens[0])
    elif fallback is not None and fallback.is_valid():
        currency = fallback
    elif default_currency is not None:
        currency = default_currency
    else:
        currency = Currency.default()

    return Money.forge_with_currency(amount, currency, default_currency=default_currency)


def parse(s: str, *, default_currency: Currency | None = None) -> Money:
    """Parse ``s`` with no fallback currency."""
    return parse_with_fallback(s, None, default_currency=default_currency)


def format_money(money: Money) -> str:
    """Canonical "CODE AMOUNT" form."""
    return f"{money.currency.code} {money.amount}"
