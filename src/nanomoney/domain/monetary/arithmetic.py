from __future__ import annotations

import logging

from nanomoney.domain.monetary.errors import InvalidValueError
from nanomoney.domain.monetary.monetary_amount import NANOS_MOD, MonetaryAmount
from nanomoney.domain.monetary.predicates import check_operands, is_valid
from nanomoney.utils.math import trunc_div, trunc_rem
from nanomoney.utils.numeric_tools import require_int

logger = logging.getLogger(__name__)


def negate(m: MonetaryAmount) -> MonetaryAmount:
    """Return the same amount with the sign negated.

    No validation is done; negating an invalid value gives an invalid value.
    """
    return MonetaryAmount(-m.units, -m.nanos, m.currency_code)


def sum_amounts(left: MonetaryAmount, right: MonetaryAmount) -> MonetaryAmount:
    """Add two amounts.

    The raw sums of units and nanos are normalized so the result satisfies the sign and range
    invariants again:

    - If raw units and raw nanos have the same sign (or one of them is zero), nanos overflow is
      carried into units with truncating division.
    - If they have different signs, exactly one unit is borrowed. One step is enough because
      each operand's nanos is below one billion in magnitude.

    Args:
        left: Left operand.
        right: Right operand.

    Returns:
        New amount with the shared currency code. Two empty currency codes are allowed.

    Raises:
        InvalidValueError: If $left or $right is not valid.
        MismatchingCurrencyError: If currency codes are not the same.
    """
    check_operands(left, right, "sum_amounts")

    units = left.units + right.units
    nanos = left.nanos + right.nanos

    if (units >= 0 and nanos >= 0) or (units <= 0 and nanos <= 0):
        # Same sign: carry whole units out of nanos
        units += trunc_div(nanos, NANOS_MOD)
        nanos = trunc_rem(nanos, NANOS_MOD)
    else:
        # Different sign: nanos is guaranteed not to go over the limit after a single borrow
        if units > 0:
            units -= 1
            nanos += NANOS_MOD
        else:
            units += 1
            nanos -= NANOS_MOD

    return MonetaryAmount(units, nanos, left.currency_code)


def subtract_amounts(left: MonetaryAmount, right: MonetaryAmount) -> MonetaryAmount:
    """Return $left - $right. Same preconditions and errors as `sum_amounts`."""
    return sum_amounts(left, negate(right))


def multiply_by_int(m: MonetaryAmount, n: int) -> MonetaryAmount:
    """Multiply exactly by adding $m to itself $n - 1 times.

    Slow for large $n, but never loses precision.

    Args:
        m: Amount to multiply.
        n: Non-negative multiplier. Zero gives the zero amount in $m's currency.

    Returns:
        New amount equal to $m * $n.

    Raises:
        TypeError: If $n is not int.
        ValueError: If $n is negative.
        InvalidValueError: If $m is not valid (and $n > 1).
    """
    require_int(n, "n", "multiply_by_int")

    # Raise: only non-negative multipliers are supported
    if n < 0:
        raise ValueError(f"Cannot call `multiply_by_int` because $n ({n}) < 0")

    if n == 0:
        return MonetaryAmount.zero(m.currency_code)

    out = m
    for _ in range(n - 1):
        out = sum_amounts(out, m)
    return out


def divide_by_int(m: MonetaryAmount, n: int) -> MonetaryAmount:
    """Divide exactly at nano precision, truncating toward zero.

    Args:
        m: Amount to divide.
        n: Positive divisor.

    Returns:
        New amount equal to $m / $n, truncated to whole nanos.

    Raises:
        TypeError: If $n is not int.
        ZeroDivisionError: If $n == 0.
        ValueError: If $n is negative.
        InvalidValueError: If $m is not valid.
    """
    require_int(n, "n", "divide_by_int")

    # Raise: dividing by zero is undefined
    if n == 0:
        logger.debug(f"Rejected `divide_by_int` of {m!r} by zero")
        raise ZeroDivisionError(f"Cannot call `divide_by_int` because $n is zero (m={m!r})")

    # Raise: only positive divisors are supported
    if n < 0:
        raise ValueError(f"Cannot call `divide_by_int` because $n ({n}) < 0")

    # Raise: the nanos expansion below is only meaningful for valid amounts
    if not is_valid(m):
        logger.debug(f"Rejected `divide_by_int` of invalid operand: {m!r}")
        raise InvalidValueError(left=m)

    total_nanos = trunc_div(m.units * NANOS_MOD + m.nanos, n)
    return MonetaryAmount(trunc_div(total_nanos, NANOS_MOD), trunc_rem(total_nanos, NANOS_MOD), m.currency_code)
