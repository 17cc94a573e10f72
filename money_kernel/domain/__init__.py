"""
Pure domain layer.

This module contains the money value objects and the functions over them,
with NO dependencies on:
- ORM (SQLAlchemy)
- Configuration
- I/O (other than logging)

All domain objects are immutable and deterministic.
"""

from money_kernel.domain.codec import (
    CanonicalTextWire,
    MajorUnitsWire,
    MinorUnitsWire,
    marshal,
    scan,
    unmarshal,
    value,
    wire_from_driver,
)
from money_kernel.domain.conversion import convert_to
from money_kernel.domain.currency import CurrencyInfo, CurrencyRegistry
from money_kernel.domain.dtos import MoneyDTO, ShortDTO
from money_kernel.domain.parsing import format_money, parse, parse_with_fallback
from money_kernel.domain.values import Currency, Money, Rate, round_half_away_from_zero

__all__ = [
    # Registry
    "CurrencyInfo",
    "CurrencyRegistry",
    # Value objects
    "Currency",
    "Money",
    "Rate",
    "round_half_away_from_zero",
    # Conversion
    "convert_to",
    # Text form
    "parse",
    "parse_with_fallback",
    "format_money",
    # Transfer shapes
    "MoneyDTO",
    "ShortDTO",
    # Codec
    "marshal",
    "unmarshal",
    "scan",
    "value",
    "wire_from_driver",
    "MinorUnitsWire",
    "CanonicalTextWire",
    "MajorUnitsWire",
]
