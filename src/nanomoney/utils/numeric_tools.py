from __future__ import annotations

from decimal import Decimal
from typing import TypeAlias

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.
    """
    if isinstance(value, Decimal):
        return value

    return Decimal(str(value))


def require_int(value: object, name: str, func_name: str) -> int:
    """Return $value if it is a plain `int`, otherwise raise `TypeError`.

    `bool` is rejected even though it subclasses `int`.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Cannot call `{func_name}` because ${name} is not int (got type '{type(value).__name__}')")
    return value
