"""
Codec -- JSON marshalling and persistence scan/value for Money.

Responsibility:
    Turns Money into its boundary forms and back:
    - marshal / unmarshal: compact JSON MoneyDTO documents.
    - scan / value: the column contract used by persistence drivers.

Architecture position:
    Kernel > Domain -- pure functions, zero I/O beyond logging.
    money_kernel.db.types wraps scan/value into SQLAlchemy column types.

Invariants enforced:
    - value() always writes the minor-unit integer. The currency is NOT
      written; the reading side supplies it through scan(currency=...).
    - scan() never mutates anything; it returns a new Money or None.
    - Driver values are classified into exactly one wire variant before
      dispatch. Anything else is rejected.

Failure modes:
    - InvalidMoneyError from unmarshal for malformed documents.
    - UnknownCurrencyError from unmarshal for unregistered codes.
    - UnsupportedScanTypeError from scan for unsupported driver shapes.
    - FormatError / UnknownCurrencyError from scan of canonical text.
"""

from __future__ import annotations

import json
from dataclasses import dataclass

from money_kernel.domain.dtos import MoneyDTO
from money_kernel.domain.parsing import parse_with_fallback
from money_kernel.domain.values import Currency, Money
from money_kernel.exceptions import InvalidMoneyError, UnsupportedScanTypeError
from money_kernel.logging_config import get_logger

logger = get_logger("domain.codec")


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------


def marshal(money: Money) -> str:
    """Money -> '{"amount":123,"currency":"EUR","symbol":"€","unit":2}'."""
    return json.dumps(
        MoneyDTO.from_money(money).to_dict(),
        separators=(",", ":"),
        ensure_ascii=False,
    )


def unmarshal(text: str | bytes) -> Money:
    """
    JSON document -> Money.

    Raises:
        InvalidMoneyError: Malformed JSON, a non-object document, an empty
            currency or a non-integer amount.
        UnknownCurrencyError: The currency is not registered.
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError, TypeError) as exc:
        logger.warning("money_unmarshal_rejected", extra={"reason": "malformed json"})
        raise InvalidMoneyError(f"malformed json: {exc}") from exc

    if not isinstance(data, dict):
        logger.warning(
            "money_unmarshal_rejected",
            extra={"reason": f"expected object, got {type(data).__name__}"},
        )
        raise InvalidMoneyError(f"expected a JSON object, got {type(data).__name__}")

    try:
        dto = MoneyDTO.from_dict(data)
    except InvalidMoneyError as exc:
        logger.warning("money_unmarshal_rejected", extra={"reason": exc.reason})
        raise

    return dto.to_money()


# ---------------------------------------------------------------------------
# Persistence wire variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class MinorUnitsWire:
    """Integer column: minor units."""

    value: int


@dataclass(frozen=True, slots=True)
class CanonicalTextWire:
    """Text column: "CODE AMOUNT" or a bare integer."""

    value: str


@dataclass(frozen=True, slots=True)
class MajorUnitsWire:
    """Floating-point column: major units."""

    value: float


Wire = MinorUnitsWire | CanonicalTextWire | MajorUnitsWire


def wire_from_driver(raw: object) -> Wire:
    """
    Classify a raw driver value.

    bool is checked before int because it is an int subclass.

    Raises:
        UnsupportedScanTypeError: For bool and every other shape.
    """
    if not isinstance(raw, bool):
        if isinstance(raw, int):
            return MinorUnitsWire(raw)
        if isinstance(raw, str):
            return CanonicalTextWire(raw)
        if isinstance(raw, float):
            return MajorUnitsWire(raw)

    value_type = type(raw).__name__
    logger.warning("money_scan_unsupported_type", extra={"value_type": value_type})
    raise UnsupportedScanTypeError(value_type)


def scan(
    raw: object,
    currency: Currency | None = None,
    *,
    default_currency: Currency | None = None,
) -> Money | None:
    """
    Read Money from a driver value.

    ``currency`` is the column currency. When it is missing or invalid the
    default currency applies (``default_currency`` or the registry default).
    Canonical text carrying its own code keeps that code.
    """
    if raw is None:
        return None

    column_currency = currency
    if column_currency is None or not column_currency.is_valid():
        column_currency = default_currency if default_currency is not None else Currency.default()

    match wire_from_driver(raw):
        case MinorUnitsWire(value=amount):
            return Money.forge_with_currency(
                amount, column_currency, default_currency=default_currency
            )
        case CanonicalTextWire(value=text):
            return parse_with_fallback(text, currency, default_currency=default_currency)
        case MajorUnitsWire(value=major):
            return Money.forge_float_with_currency(
                major, column_currency, default_currency=default_currency
            )


def value(money: Money) -> int:
    """Driver value for a Money column: the minor-unit integer."""
    return money.amount
