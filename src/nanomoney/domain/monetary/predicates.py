from __future__ import annotations

import logging

from nanomoney.domain.monetary.errors import InvalidValueError, MismatchingCurrencyError
from nanomoney.domain.monetary.monetary_amount import NANOS_MAX, NANOS_MIN, NANOS_MOD, MonetaryAmount

logger = logging.getLogger(__name__)


def is_valid(m: MonetaryAmount) -> bool:
    """Check if $m has valid units/nanos signs and ranges."""
    return _sign_matches(m) and _valid_nanos(m.nanos)


def _sign_matches(m: MonetaryAmount) -> bool:
    return m.nanos == 0 or m.units == 0 or (m.nanos < 0) == (m.units < 0)


def _valid_nanos(nanos: int) -> bool:
    return NANOS_MIN <= nanos <= NANOS_MAX


def is_zero(m: MonetaryAmount) -> bool:
    """Return True if $m equals zero. The currency code is ignored."""
    return m.units == 0 and m.nanos == 0


def is_positive(m: MonetaryAmount) -> bool:
    """Return True if $m is valid and positive.

    With $units == 0, the sign of $nanos alone decides.
    """
    if not is_valid(m):
        return False
    return m.units > 0 or (m.units == 0 and m.nanos > 0)


def is_negative(m: MonetaryAmount) -> bool:
    """Return True if $m is valid and negative.

    With $units == 0, the sign of $nanos alone decides.
    """
    if not is_valid(m):
        return False
    return m.units < 0 or (m.units == 0 and m.nanos < 0)


def are_same_currency(left: MonetaryAmount, right: MonetaryAmount) -> bool:
    """Return True if both values have a currency code and the codes are the same."""
    return left.currency_code == right.currency_code and left.currency_code != ""


def are_equals(left: MonetaryAmount, right: MonetaryAmount) -> bool:
    """Return True if all fields of $left and $right are equal, including the currency.

    Validity of the values is not checked.
    """
    return left.currency_code == right.currency_code and left.units == right.units and left.nanos == right.nanos


def check_operands(left: MonetaryAmount, right: MonetaryAmount, func_name: str) -> None:
    """Ensure two operands can be combined: both valid and with equal currency codes.

    Two empty currency codes are equal.

    Raises:
        InvalidValueError: If $left or $right is not valid.
        MismatchingCurrencyError: If currency codes differ.
    """
    # Raise: both operands must satisfy the sign and range invariants
    if not is_valid(left) or not is_valid(right):
        logger.debug(f"Rejected `{func_name}` of invalid operands: {left!r}, {right!r}")
        raise InvalidValueError(left=left, right=right)

    # Raise: currency codes must match (empty == empty is allowed)
    if left.currency_code != right.currency_code:
        logger.debug(f"Rejected `{func_name}` because currency codes differ: '{left.currency_code}' vs '{right.currency_code}'")
        raise MismatchingCurrencyError(left=left, right=right)


def compare(left: MonetaryAmount, right: MonetaryAmount) -> int:
    """Order two valid amounts of the same currency.

    Returns:
        -1 if $left < $right, 0 if equal, 1 if $left > $right.

    Raises:
        InvalidValueError: If $left or $right is not valid.
        MismatchingCurrencyError: If currency codes differ.
    """
    check_operands(left, right, "compare")
    left_nanos = left.units * NANOS_MOD + left.nanos
    right_nanos = right.units * NANOS_MOD + right.nanos
    return (left_nanos > right_nanos) - (left_nanos < right_nanos)
