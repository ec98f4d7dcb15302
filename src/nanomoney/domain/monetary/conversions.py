from __future__ import annotations

from decimal import Context, Decimal, InvalidOperation

from nanomoney.domain.monetary.monetary_amount import NANOS_MOD, MonetaryAmount
from nanomoney.utils.math import trunc_div, trunc_rem
from nanomoney.utils.numeric_tools import DecimalLike, as_decimal, require_int

MICROS_PER_UNIT = 1_000_000
NANOS_PER_MICRO = 1_000

# Smallest fractional step representable by MonetaryAmount
NANO_STEP = Decimal("1e-9")


# region Decimal


def to_decimal(m: MonetaryAmount) -> Decimal:
    """Return the exact value of $m as Decimal (currency is dropped)."""
    total_nanos = m.units * NANOS_MOD + m.nanos
    # String construction is exact, independent of the current Decimal context
    return Decimal(f"{total_nanos}E-9")


def from_decimal(value: DecimalLike, currency_code: str = "") -> MonetaryAmount:
    """Create a valid MonetaryAmount from a Decimal-like scalar.

    Args:
        value: Numeric value (Decimal-like scalar) with at most 9 significant fractional digits.
        currency_code: Currency tag of the result.

    Returns:
        MonetaryAmount: Amount with units and nanos of the same sign.

    Raises:
        ValueError: If $value cannot be converted to Decimal, is not finite, or needs more
            than 9 fractional digits.
    """
    # Raise: $value must be convertible to Decimal
    try:
        decimal_value = as_decimal(value)
    except (ValueError, TypeError, InvalidOperation) as e:
        raise ValueError(f"Cannot call `from_decimal` because $value ({value}) cannot be converted to Decimal") from e

    # Raise: NaN and infinity have no units/nanos representation
    if not decimal_value.is_finite():
        raise ValueError(f"Cannot call `from_decimal` because $value ({decimal_value}) is not finite")

    # Enough precision for every digit of $value plus the nanos digits
    value_tuple = decimal_value.as_tuple()
    ctx = Context(prec=len(value_tuple.digits) + abs(value_tuple.exponent) + 10)
    quantized = decimal_value.quantize(NANO_STEP, context=ctx)

    # Raise: value must be representable exactly in whole nanos
    if quantized != decimal_value:
        raise ValueError(f"Cannot call `from_decimal` because $value ({decimal_value}) has more than 9 fractional digits")

    total_nanos = int(quantized.scaleb(9, context=ctx))
    return MonetaryAmount(trunc_div(total_nanos, NANOS_MOD), trunc_rem(total_nanos, NANOS_MOD), currency_code)


# endregion

# region Micros


def units_to_micros(units: int) -> int:
    return units * MICROS_PER_UNIT


def units_and_micro_part_to_micros(units: int, micros: int) -> int:
    return units_to_micros(units) + micros


def micros_to_units_and_micro_part(micros: int) -> tuple[int, int]:
    """Split $micros into whole units and the remaining micros (both with the sign of $micros)."""
    return trunc_div(micros, MICROS_PER_UNIT), trunc_rem(micros, MICROS_PER_UNIT)


def to_micros(m: MonetaryAmount) -> int:
    """Return $m in millionths of a unit. Digits below one micro are truncated."""
    return units_and_micro_part_to_micros(m.units, trunc_div(m.nanos, NANOS_PER_MICRO))


def from_micros(micros: int, currency_code: str = "") -> MonetaryAmount:
    """Create a MonetaryAmount from millionths of a unit."""
    require_int(micros, "micros", "from_micros")
    units, micro_part = micros_to_units_and_micro_part(micros)
    return MonetaryAmount(units, micro_part * NANOS_PER_MICRO, currency_code)


# endregion
