"""
Values -- Immutable, self-validating money value objects.

Responsibility:
    Provides the value types every other module works with: Currency,
    Money (an exact count of minor units paired with its Currency) and
    Rate (a directional exchange rate).

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.
    Imported by every other domain module. No outward dependencies except
    money_kernel.domain.currency (CurrencyRegistry) and the exceptions.

Invariants enforced:
    - Money.amount is an int inside the signed 64-bit range.
    - Arithmetic never mixes currencies (CurrencyMismatchError).
    - Float inputs are turned into minor units exactly once, with
      round-half-away-from-zero at the currency's minor-unit multiplier.
    - Rate.rate is a finite float greater than zero.

Failure modes:
    - CurrencyNotFoundError from Currency.by_iso_code.
    - UnknownCurrencyError from Money.forge / Money.forge_float.
    - AmountOutOfRangeError on construction outside the int64 range.
    - DecimalConversionError from Money.split_major_and_minor.
    - InvalidExchangeRateError on construction of a non-positive Rate.

Design note:
    Money.forge_with_currency silently replaces an invalid currency with the
    default currency. This is a deliberate degradation, not an error; every
    occurrence is logged as ``money_currency_fallback``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal, localcontext

from money_kernel.domain.currency import CurrencyRegistry
from money_kernel.exceptions import (
    AmountOutOfRangeError,
    CurrencyMismatchError,
    CurrencyNotFoundError,
    DecimalConversionError,
    InvalidExchangeRateError,
    MoneyKernelError,
    UnknownCurrencyError,
)
from money_kernel.logging_config import get_logger

logger = get_logger("domain.values")

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def round_half_away_from_zero(value: float) -> int:
    """
    Round a float to the nearest integer, ties away from zero.

    The float is converted to Decimal exactly (no repr round trip), so the
    tie test sees the same binary value the caller computed.

    Raises:
        ValueError: If value is NaN or infinite.
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot round non-finite value {value!r}")
    # Wide enough for the integer part of any finite float.
    with localcontext() as ctx:
        ctx.prec = 400
        return int(Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True, slots=True)
class Currency:
    """
    Currency value object.

    Contract:
        Identified by (code, minor_unit). Symbol, name and the display flag
        are presentation data and do not take part in equality or hashing.
        Sanctioned instances come from ``Currency.by_iso_code``; a Currency
        built directly may be invalid, which ``is_valid`` reports.
    """

    code: str
    minor_unit: int
    symbol: str = field(default="", compare=False)
    name: str = field(default="", compare=False)
    show_code_next_to_symbol: bool = field(default=False, compare=False)

    @classmethod
    def by_iso_code(cls, code: str) -> Currency:
        """
        Resolve a currency from the registry.

        Raises:
            CurrencyNotFoundError: If the code is not registered.
        """
        info = CurrencyRegistry.get_info(code)
        if info is None:
            raise CurrencyNotFoundError(str(code))
        return cls(
            code=info.code,
            minor_unit=info.minor_unit,
            symbol=info.symbol,
            name=info.name,
            show_code_next_to_symbol=info.show_code_next_to_symbol,
        )

    @classmethod
    def default(cls) -> Currency:
        """The process-wide default currency."""
        return cls.by_iso_code(CurrencyRegistry.DEFAULT_CURRENCY_CODE)

    def is_valid(self) -> bool:
        """True iff the code is a registry key exactly ("eur" is not)."""
        info = CurrencyRegistry.get_info(self.code)
        return info is not None and info.code == self.code

    @property
    def minor_unit_multiplier(self) -> int:
        """10 ** minor_unit, clamped to 1 for a negative minor_unit."""
        if self.minor_unit < 0:
            return 1
        return 10 ** self.minor_unit

    @property
    def has_zero_minor_unit(self) -> bool:
        return self.minor_unit == 0

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"Currency({self.code!r}, {self.minor_unit})"


def resolve_money_currency(code: str) -> Currency:
    """Registry lookup for Money construction: a miss is UnknownCurrencyError."""
    try:
        return Currency.by_iso_code(code)
    except CurrencyNotFoundError as exc:
        raise UnknownCurrencyError(str(code)) from exc


def _usable_currency(
    currency: Currency, default_currency: Currency | None, amount: float
) -> Currency:
    if currency.is_valid():
        return currency
    fallback = default_currency if default_currency is not None else Currency.default()
    logger.warning(
        "money_currency_fallback",
        extra={
            "requested_currency": currency.code,
            "fallback_currency": fallback.code,
            "amount": amount,
        },
    )
    return fallback


@dataclass(frozen=True, slots=True)
class Money:
    """
    Monetary amount value object.

    Contract:
        Pairs an exact integer count of minor units with its Currency. The
        two are never separated, and there is no implicit currency.

    Guarantees:
        - Immutable and hashable (frozen dataclass with slots)
        - amount is always an int in the signed 64-bit range
        - add/subtract only combine equal currencies

    Non-goals:
        - Does NOT perform currency conversion (see domain.conversion)
        - Does NOT format for display (see money_kernel.display)
    """

    amount: int
    currency: Currency

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise TypeError(f"amount must be int minor units, got {type(self.amount).__name__}")
        if not isinstance(self.currency, Currency):
            raise TypeError(f"currency must be Currency, got {type(self.currency).__name__}")
        if not INT64_MIN <= self.amount <= INT64_MAX:
            raise AmountOutOfRangeError(self.amount)

    # -- construction ------------------------------------------------------

    @classmethod
    def forge(cls, amount: int, code: str) -> Money:
        """
        Build Money from minor units and an ISO code.

        Raises:
            UnknownCurrencyError: If the code is not registered.
            AmountOutOfRangeError: If amount is outside the int64 range.
        """
        return cls.forge_with_currency(amount, resolve_money_currency(code))

    @classmethod
    def forge_float(cls, amount: float, code: str) -> Money:
        """
        Build Money from a major-unit float (1.01 EUR -> 101 cents).

        Raises:
            UnknownCurrencyError: If the code is not registered.
        """
        return cls.forge_float_with_currency(amount, resolve_money_currency(code))

    @classmethod
    def forge_with_currency(
        cls,
        amount: int,
        currency: Currency,
        *,
        default_currency: Currency | None = None,
    ) -> Money:
        """
        Build Money in ``currency``, falling back to the default currency.

        An invalid ``currency`` is replaced by ``default_currency`` (or
        ``Currency.default()`` when none is injected). The downgrade is
        logged at WARNING level as ``money_currency_fallback``.
        """
        currency = _usable_currency(currency, default_currency, amount)
        return cls(amount=amount, currency=currency)

    @classmethod
    def forge_float_with_currency(
        cls,
        amount: float,
        currency: Currency,
        *,
        default_currency: Currency | None = None,
    ) -> Money:
        """Float counterpart of forge_with_currency."""
        currency = _usable_currency(currency, default_currency, amount)
        minor_units = round_half_away_from_zero(amount * currency.minor_unit_multiplier)
        return cls(amount=minor_units, currency=currency)

    @classmethod
    def must_forge(cls, amount: int, code: str) -> Money:
        """forge, turning any kernel error into a RuntimeError at the call site."""
        try:
            return cls.forge(amount, code)
        except MoneyKernelError as exc:
            raise RuntimeError(f"must_forge({amount!r}, {code!r}) failed: {exc}") from exc

    @classmethod
    def must_forge_float(cls, amount: float, code: str) -> Money:
        """forge_float, turning any kernel error into a RuntimeError at the call site."""
        try:
            return cls.forge_float(amount, code)
        except MoneyKernelError as exc:
            raise RuntimeError(f"must_forge_float({amount!r}, {code!r}) failed: {exc}") from exc

    @classmethod
    def zero(cls, currency: str | Currency) -> Money:
        """Create a zero amount in the given currency."""
        if isinstance(currency, str):
            currency = resolve_money_currency(currency)
        return cls(amount=0, currency=currency)

    # -- inspection --------------------------------------------------------

    @property
    def minor_units(self) -> int:
        return self.amount

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    @property
    def is_positive(self) -> bool:
        return self.amount > 0

    @property
    def is_negative(self) -> bool:
        return self.amount < 0

    def to_float(self) -> float:
        """Major units as float; exactly 0.0 for a zero amount."""
        if self.is_zero:
            return 0.0
        return self.amount / self.currency.minor_unit_multiplier

    def amount_as_string(self) -> str:
        """
        Exact major-unit string with ``minor_unit`` decimals.

        Computed from the integer, never from the float form:
        JOD 1011 -> "1.011", JOD 1000 -> "1.000", VND 1011 -> "1011".
        """
        digits = self.currency.minor_unit
        if digits <= 0:
            return str(self.amount)
        sign = "-" if self.amount < 0 else ""
        major, minor = divmod(abs(self.amount), self.currency.minor_unit_multiplier)
        return f"{sign}{major}.{minor:0{digits}d}"

    def split_major_and_minor(self) -> tuple[int, int]:
        """
        Split the float form into whole units and the minor-unit part.

        The fractional residue is rendered with ``2 + minor_unit``
        significant digits and the digits after ``"0."`` are read back, so
        EUR 1234.5 yields (1234, 5) and CLF 0.00123 yields (0, 123).
        Non-positive residues, including every negative amount, yield 0.

        Raises:
            DecimalConversionError: If the rendered residue cannot be sliced.
        """
        value = self.to_float()
        major = int(value)
        residue = value - major
        if residue <= 0:
            return major, 0

        cut_at = 2 + self.currency.minor_unit
        rendered = f"{residue:.{cut_at}g}"
        if len(rendered) <= 2:
            raise DecimalConversionError(rendered)

        digits = rendered[2:cut_at] if len(rendered) > cut_at else rendered[2:]
        try:
            return major, int(digits)
        except ValueError as exc:
            raise DecimalConversionError(rendered) from exc

    # -- arithmetic --------------------------------------------------------

    def _check_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency.code, other.currency.code)

    def add(self, other: Money) -> Money:
        """Sum of two Money values in the same currency."""
        self._check_same_currency(other)
        return Money.forge_with_currency(self.amount + other.amount, self.currency)

    def subtract(self, other: Money) -> Money:
        """Difference of two Money values in the same currency."""
        self._check_same_currency(other)
        return Money.forge_with_currency(self.amount - other.amount, self.currency)

    def percent_off(self, percent: int) -> Money:
        """
        ``percent`` % of this amount, re-rounded at minor-unit precision.

        Goes through the float form, so chained calls can drift by up to
        half a minor unit each. EUR 100.09 at 20 -> EUR 20.02.
        """
        return Money.forge_float_with_currency(self.to_float() * (percent / 100), self.currency)

    def percent_off_float(self, percent: float) -> Money:
        """percent_off with a fractional percentage (EUR 100.09 at 20.5 -> 20.52)."""
        return Money.forge_float_with_currency(self.to_float() * (percent / 100), self.currency)

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> Money:
        return Money(amount=-self.amount, currency=self.currency)

    def __abs__(self) -> Money:
        return Money(amount=abs(self.amount), currency=self.currency)

    def __int__(self) -> int:
        return self.amount

    def __lt__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount >= other.amount

    def __str__(self) -> str:
        return f"{self.currency.code} {self.amount}"

    def __repr__(self) -> str:
        return f"Money({self.amount!r}, {self.currency.code!r})"


@dataclass(frozen=True, slots=True)
class Rate:
    """
    Directional exchange rate between two currencies.

    Contract:
        1 major unit of ``source`` = ``rate`` major units of ``target``.
        Money in ``source`` is converted by multiplying, Money in ``target``
        by dividing. A Rate is not required to be the reciprocal of a rate
        quoted the other way round.
    """

    source: Currency
    target: Currency
    rate: float

    def __post_init__(self) -> None:
        if isinstance(self.rate, bool) or not isinstance(self.rate, (int, float)):
            raise InvalidExchangeRateError(repr(self.rate), "rate must be a real number")
        if not math.isfinite(self.rate):
            raise InvalidExchangeRateError(repr(self.rate), "rate must be finite")
        if self.rate <= 0:
            raise InvalidExchangeRateError(repr(self.rate), "rate must be positive")
        object.__setattr__(self, "rate", float(self.rate))

    @classmethod
    def forge(cls, source: str | Currency, target: str | Currency, rate: float) -> Rate:
        """Factory accepting ISO codes or Currency objects."""
        if isinstance(source, str):
            source = resolve_money_currency(source)
        if isinstance(target, str):
            target = resolve_money_currency(target)
        return cls(source=source, target=target, rate=rate)

    def inverse(self) -> Rate:
        """The same quote seen from the other side (USD->EUR 0.85 -> EUR->USD 1/0.85)."""
        return Rate(source=self.target, target=self.source, rate=1 / self.rate)

    @property
    def pair(self) -> tuple[str, str]:
        return (self.source.code, self.target.code)

    def __str__(self) -> str:
        return f"{self.source}/{self.target} = {self.rate}"
