from __future__ import annotations

# Fast, lossy multiply/divide on a single scaled integer.
# Amounts are encoded at two decimal places (hundredths), combined with plain integer arithmetic,
# and decoded at four decimal places. The two scales are intentionally different: the product of
# two hundredths-encoded amounts is in ten-thousandths, which is what decoding expects.

import logging

from nanomoney.domain.monetary.monetary_amount import MonetaryAmount
from nanomoney.utils.math import trunc_div, trunc_rem
from nanomoney.utils.numeric_tools import require_int

logger = logging.getLogger(__name__)

# Encoding: scaled integers per unit, nanos per scaled integer
SCALE_IN = 100
NANOS_PER_SCALED_IN = 10_000_000

# Decoding: scaled integers per unit, nanos per scaled integer
SCALE_OUT = 10_000
NANOS_PER_SCALED_OUT = 100_000


def encode_scaled(units: int, nanos: int) -> int:
    """Encode units and nanos as hundredths of a unit. Digits below 0.01 are truncated."""
    return units * SCALE_IN + trunc_div(nanos, NANOS_PER_SCALED_IN)


def decode_scaled(scaled: int) -> tuple[int, int]:
    """Decode ten-thousandths of a unit into units and nanos."""
    return trunc_div(scaled, SCALE_OUT), trunc_rem(scaled, SCALE_OUT) * NANOS_PER_SCALED_OUT


def from_scaled(scaled: int, currency_code: str) -> MonetaryAmount:
    units, nanos = decode_scaled(scaled)
    return MonetaryAmount(units, nanos, currency_code)


def multiply_fast(left: MonetaryAmount, right: MonetaryAmount) -> MonetaryAmount:
    """Multiply two amounts at two-decimal precision. The result has $left's currency."""
    product = encode_scaled(left.units, left.nanos) * encode_scaled(right.units, right.nanos)
    return from_scaled(product, left.currency_code)


def divide_fast(left: MonetaryAmount, right: MonetaryAmount) -> MonetaryAmount:
    """Divide two amounts at two-decimal precision. The result has $left's currency.

    Raises:
        ZeroDivisionError: If $right encodes to zero (its absolute value is below 0.01).
    """
    divisor = encode_scaled(right.units, right.nanos)

    # Raise: divisor must be non-zero at two-decimal precision
    if divisor == 0:
        logger.debug(f"Rejected `divide_fast` of {left!r} by {right!r} (zero at two-decimal precision)")
        raise ZeroDivisionError(f"Cannot call `divide_fast` because $right ({right!r}) is zero at two-decimal precision")

    quotient = trunc_div(encode_scaled(left.units, left.nanos), divisor)
    return from_scaled(quotient, left.currency_code)


def multiply_fast_int(left: MonetaryAmount, n: int) -> MonetaryAmount:
    """Multiply the two-decimal encoding of $left by $n."""
    require_int(n, "n", "multiply_fast_int")
    return from_scaled(encode_scaled(left.units, left.nanos) * n, left.currency_code)


def divide_fast_int(left: MonetaryAmount, n: int) -> MonetaryAmount:
    """Divide the two-decimal encoding of $left by $n, truncating toward zero.

    Raises:
        ZeroDivisionError: If $n == 0.
    """
    require_int(n, "n", "divide_fast_int")

    # Raise: dividing by zero is undefined
    if n == 0:
        logger.debug(f"Rejected `divide_fast_int` of {left!r} by zero")
        raise ZeroDivisionError(f"Cannot call `divide_fast_int` because $n is zero (left={left!r})")

    return from_scaled(trunc_div(encode_scaled(left.units, left.nanos), n), left.currency_code)
