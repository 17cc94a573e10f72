"""
Typed Exception Hierarchy for the Money Kernel.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

Callers handling money must react to failures precisely: an unknown
currency code in user input is a validation problem, a currency mismatch in
arithmetic is a programming problem, an unsupported column shape is a schema
problem. Matching on message text is fragile, so:

  1. Every error has a TYPED exception class (catch by type, not message)
  2. Every exception has a CODE attribute (machine-readable, API-safe)
  3. Exceptions carry structured DATA (not just a message string)

Example:
    try:
        money = parse(request_body["price"])
    except UnknownCurrencyError as e:
        return {"error": e.code, "currency": e.currency}
    except FormatError as e:
        return {"error": e.code, "input": e.value}

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

All exceptions inherit from MoneyKernelError:

    MoneyKernelError (base)
    |
    +-- CurrencyError
    |   +-- CurrencyNotFoundError
    |   +-- UnknownCurrencyError
    |   +-- CurrencyMismatchError
    |
    +-- ExchangeRateError
    |   +-- CurrencyRateMismatchError
    |   +-- InvalidExchangeRateError
    |
    +-- AmountError
    |   +-- AmountOutOfRangeError
    |   +-- DecimalConversionError
    |
    +-- SerializationError
        +-- FormatError
        +-- InvalidMoneyError
        +-- UnsupportedScanTypeError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category        | Code                        | When Raised
----------------|-----------------------------|-----------------------------------------
Currency        | CURRENCY_NOT_FOUND          | Registry lookup by ISO code failed
                | UNKNOWN_CURRENCY            | Money built from an unknown code
                | CURRENCY_MISMATCH           | Arithmetic between different currencies
----------------|-----------------------------|-----------------------------------------
Exchange Rate   | CURRENCY_RATE_MISMATCH      | Rate references neither money currency
                | INVALID_EXCHANGE_RATE       | Rate is zero, negative or not finite
----------------|-----------------------------|-----------------------------------------
Amount          | AMOUNT_OUT_OF_RANGE         | Minor units outside signed 64-bit range
                | DECIMAL_CONVERSION_ERROR    | Fractional part cannot be extracted
----------------|-----------------------------|-----------------------------------------
Serialization   | FORMAT_ERROR                | Malformed "CODE AMOUNT" text or locale
                | INVALID_MONEY               | Structured document missing currency
                | UNSUPPORTED_SCAN_TYPE       | Driver value of an unsupported shape

===============================================================================
HANDLING PATTERNS
===============================================================================

1. The only deliberate degradation in the kernel is the default-currency
   fallback in ``Money.forge_with_currency``. It is logged, never raised.

2. UnknownCurrencyError is raised FROM CurrencyNotFoundError so the registry
   miss stays visible in ``__cause__``.

3. Nothing is retried. Every operation is a deterministic pure computation,
   so a failure is permanent for the given input.
"""


class MoneyKernelError(Exception):
    """
    Base exception for all money kernel errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "MONEY_KERNEL_ERROR"


# Currency-related exceptions


class CurrencyError(MoneyKernelError):
    """Base exception for currency-related errors."""

    code: str = "CURRENCY_ERROR"


class CurrencyNotFoundError(CurrencyError):
    """ISO code is absent from the currency registry."""

    code: str = "CURRENCY_NOT_FOUND"

    def __init__(self, currency: str):
        self.currency = currency
        super().__init__(f"Currency not found: '{currency}'")


class UnknownCurrencyError(CurrencyError):
    """Money was requested in a currency the registry does not know."""

    code: str = "UNKNOWN_CURRENCY"

    def __init__(self, currency: str):
        self.currency = currency
        super().__init__(f"Unknown currency code: '{currency}'")


class CurrencyMismatchError(CurrencyError):
    """Attempted operation on mismatched currencies."""

    code: str = "CURRENCY_MISMATCH"

    def __init__(self, currency1: str, currency2: str):
        self.currency1 = currency1
        self.currency2 = currency2
        super().__init__(f"Currency mismatch: {currency1} vs {currency2}")


# Exchange rate exceptions


class ExchangeRateError(MoneyKernelError):
    """Base exception for exchange rate related errors."""

    code: str = "EXCHANGE_RATE_ERROR"


class CurrencyRateMismatchError(ExchangeRateError):
    """
    Money currency matches neither side of the exchange rate.

    A rate can be applied forwards (money in source currency) or backwards
    (money in target currency). Anything else is a caller error.
    """

    code: str = "CURRENCY_RATE_MISMATCH"

    def __init__(self, currency: str, source: str, target: str):
        self.currency = currency
        self.source = source
        self.target = target
        super().__init__(
            f"Money currency and rate don't match: currency {currency}, "
            f"rate source {source}, rate target {target}"
        )


class InvalidExchangeRateError(ExchangeRateError):
    """
    Exchange rate value is invalid (zero, negative, NaN or infinite).

    A rate of zero makes reverse conversion undefined and negative rates
    are meaningless.
    """

    code: str = "INVALID_EXCHANGE_RATE"

    def __init__(self, rate_value: str, reason: str):
        self.rate_value = rate_value
        self.reason = reason
        super().__init__(f"Invalid exchange rate {rate_value}: {reason}")


# Amount exceptions


class AmountError(MoneyKernelError):
    """Base exception for amount-related errors."""

    code: str = "AMOUNT_ERROR"


class AmountOutOfRangeError(AmountError):
    """Minor-unit amount does not fit a signed 64-bit integer."""

    code: str = "AMOUNT_OUT_OF_RANGE"

    def __init__(self, amount: int):
        self.amount = amount
        super().__init__(
            f"Amount {amount} is outside the signed 64-bit minor-unit range"
        )


class DecimalConversionError(AmountError):
    """
    Fractional minor-unit part could not be extracted from the float form.

    Seen when the fractional residue renders too short to slice, e.g. for
    floating-point noise far below the currency precision.
    """

    code: str = "DECIMAL_CONVERSION_ERROR"

    def __init__(self, rendered: str):
        self.rendered = rendered
        super().__init__(f"Can't convert to decimal: '{rendered}'")


# Serialization exceptions


class SerializationError(MoneyKernelError):
    """Base exception for parse, marshal and persistence errors."""

    code: str = "SERIALIZATION_ERROR"


class FormatError(SerializationError):
    """Textual input is not in the expected shape."""

    code: str = "FORMAT_ERROR"

    def __init__(self, value: str, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid money text {value!r}: {reason}")


class InvalidMoneyError(SerializationError):
    """Structured money document cannot be turned into Money."""

    code: str = "INVALID_MONEY"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid money object: {reason}")


class UnsupportedScanTypeError(SerializationError):
    """Persistence driver returned a value of an unsupported shape."""

    code: str = "UNSUPPORTED_SCAN_TYPE"

    def __init__(self, value_type: str):
        self.value_type = value_type
        super().__init__(f"Can't scan money from value of type {value_type}")
