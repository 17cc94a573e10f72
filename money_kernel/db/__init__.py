"""Database layer - SQLAlchemy column types for Money."""

from money_kernel.db.types import CanonicalMoney, MajorUnitMoney, MinorUnitMoney

__all__ = [
    "CanonicalMoney",
    "MajorUnitMoney",
    "MinorUnitMoney",
]
