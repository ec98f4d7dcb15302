"""Exceptions raised by monetary arithmetic."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nanomoney.domain.monetary.monetary_amount import MonetaryAmount


class MoneyError(ValueError):
    """Base class for errors of monetary operations.

    Attributes:
        left (MonetaryAmount | None): Left operand of the failed operation.
        right (MonetaryAmount | None): Right operand of the failed operation.
    """

    default_message = "monetary operation failed"

    def __init__(self, message: str | None = None, left: MonetaryAmount | None = None, right: MonetaryAmount | None = None) -> None:
        super().__init__(message or self.default_message)
        self.left = left
        self.right = right


class InvalidValueError(MoneyError):
    """Raised when an operand violates the units/nanos sign or range invariants."""

    default_message = "one of the specified money values is invalid"


class MismatchingCurrencyError(MoneyError):
    """Raised when two operands do not have the same currency code."""

    default_message = "mismatching currency codes"
