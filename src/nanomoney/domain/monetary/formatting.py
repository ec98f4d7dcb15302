from __future__ import annotations

from nanomoney.domain.monetary.fast_math import encode_scaled
from nanomoney.domain.monetary.monetary_amount import MonetaryAmount


def to_decimal_string(m: MonetaryAmount) -> str:
    """Render $m as '<units>.<fraction>' with at least two fraction digits.

    Trailing zeros of the fraction are stripped down to two digits; more significant digits are
    kept in full, so nothing is rounded away.

    Examples:
        5 units, 910_000_000 nanos -> '5.91'
        5 units, 0 nanos -> '5.00'
        5 units, 912_345_000 nanos -> '5.912345'
        0 units, -500_000_000 nanos -> '-0.50'
    """
    fraction = f"{abs(m.nanos):09d}".rstrip("0")
    if fraction == "":
        fraction = "00"
    elif len(fraction) == 1:
        fraction += "0"

    sign = "-" if m.units < 0 or m.nanos < 0 else ""
    return f"{sign}{abs(m.units)}.{fraction}"


def to_scaled_int(m: MonetaryAmount) -> int:
    """Return $m as an integer count of hundredths of a unit (fraction beyond 0.01 is truncated)."""
    return encode_scaled(m.units, m.nanos)
