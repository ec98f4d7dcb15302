from __future__ import annotations

from dataclasses import dataclass

from nanomoney.utils.numeric_tools import require_int

# Nanos range of a valid amount (one billion nanos per whole unit, exclusive)
NANOS_MIN = -999_999_999
NANOS_MAX = 999_999_999
NANOS_MOD = 1_000_000_000


@dataclass(frozen=True)
class MonetaryAmount:
    """Represents a monetary amount as whole units plus billionths of a unit.

    The real value is `units + nanos / 1_000_000_000`. Construction does not enforce the sign and
    range invariants; use `is_valid` to check them. Operations that require valid operands (like
    `sum_amounts`) raise `InvalidValueError` when they receive an invalid one.

    Attributes:
        units (int): Whole currency units (e.g. dollars). Signed.
        nanos (int): Fractional part in billionths of a unit. Signed, must share the sign of
            $units unless one of them is zero, and `abs(nanos) <= 999_999_999`.
        currency_code (str): Currency tag (e.g. "USD"). Empty string means no currency specified.
    """

    units: int
    nanos: int
    currency_code: str = ""

    def __post_init__(self) -> None:
        """Check field types after initialization.

        Raises:
            TypeError: If $units or $nanos is not int, or $currency_code is not str.
        """
        for field in ("units", "nanos"):
            require_int(getattr(self, field), field, "MonetaryAmount.__init__")

        if not isinstance(self.currency_code, str):
            raise TypeError(f"Cannot call `MonetaryAmount.__init__` because $currency_code is not str (got type '{type(self.currency_code).__name__}')")

    @classmethod
    def zero(cls, currency_code: str = "") -> MonetaryAmount:
        """Return the zero amount in $currency_code."""
        return cls(0, 0, currency_code)

    def __str__(self) -> str:
        """Return string like '5.91 USD' (or '5.91' without currency)."""
        from nanomoney.domain.monetary.formatting import to_decimal_string

        text = to_decimal_string(self)
        return f"{text} {self.currency_code}" if self.currency_code else text
