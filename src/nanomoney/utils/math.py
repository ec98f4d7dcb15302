from __future__ import annotations


def trunc_div(n: int, d: int) -> int:
    """
    Divide $n by $d and truncate the quotient toward zero.

    Python's `//` floors, which differs from truncation when exactly one operand is negative.
    Carry and scaling steps in monetary arithmetic rely on truncation, so the units part and the
    fractional part of a value always keep the same sign.

    Args:
        n: The dividend.
        d: The divisor.

    Returns:
        The quotient truncated toward zero.

    Raises:
        ZeroDivisionError: If $d == 0.

    Examples:
        >>> trunc_div(7, 2)
        3
        >>> trunc_div(-7, 2)
        -3
        >>> trunc_div(7, -2)
        -3
    """
    if d == 0:
        raise ZeroDivisionError(f"Cannot call `trunc_div` because $d is zero (n={n})")
    q = abs(n) // abs(d)
    return -q if (n < 0) != (d < 0) else q


def trunc_rem(n: int, d: int) -> int:
    """
    Remainder matching `trunc_div`; it carries the sign of $n.

    Examples:
        >>> trunc_rem(7, 2)
        1
        >>> trunc_rem(-7, 2)
        -1
    """
    return n - d * trunc_div(n, d)
