"""
Conversion -- Apply a directional exchange rate to Money.

Responsibility:
    Convert a Money value into the other currency of a Rate, in either
    direction, rounding half away from zero at the result currency's
    minor-unit precision.

Architecture position:
    Kernel > Domain -- pure function, zero I/O beyond logging.

Invariants enforced:
    - A rate whose source and target both equal the money currency is the
      identity: the input value is returned unchanged.
    - Money in the rate source is multiplied, money in the rate target is
      divided. No other combination is accepted.

Failure modes:
    - CurrencyRateMismatchError when the money currency is on neither side.
    - UnknownCurrencyError when the result currency is not registered.
    - AmountOutOfRangeError when the result does not fit in 64 bits.
"""

from money_kernel.domain.values import Money, Rate, round_half_away_from_zero
from money_kernel.exceptions import CurrencyRateMismatchError
from money_kernel.logging_config import get_logger

logger = get_logger("domain.conversion")


def convert_to(money: Money, rate: Rate) -> Money:
    """
    Convert ``money`` through ``rate``.

    EUR 1.00 @ EUR->USD 1.1    -> USD 1.10 (forward, multiply)
    EUR 1.00 @ USD->EUR 0.91   -> USD 1.10 (reverse, divide)
    GBP 1.00 @ USD->EUR 2      -> CurrencyRateMismatchError
    """
    currency = money.currency

    if rate.source == currency and rate.target == currency:
        return money

    if rate.source == currency:
        target = rate.target
        minor_units = round_half_away_from_zero(
            money.to_float() * rate.rate * target.minor_unit_multiplier
        )
    elif rate.target == currency:
        target = rate.source
        minor_units = round_half_away_from_zero(
            money.to_float() / rate.rate * target.minor_unit_multiplier
        )
    else:
        logger.warning(
            "currency_rate_mismatch",
            extra={
                "currency": currency.code,
                "rate_source": rate.source.code,
                "rate_target": rate.target.code,
            },
        )
        raise CurrencyRateMismatchError(currency.code, rate.source.code, rate.target.code)

    result = Money.forge(minor_units, target.code)
    logger.debug(
        "money_converted",
        extra={
            "from_currency": currency.code,
            "from_amount": money.amount,
            "to_currency": result.currency.code,
            "to_amount": result.amount,
            "rate": rate.rate,
        },
    )
    return result
