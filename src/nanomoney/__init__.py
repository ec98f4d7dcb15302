__version__ = "0.0.1"

from nanomoney.domain.monetary.arithmetic import divide_by_int, multiply_by_int, negate, subtract_amounts, sum_amounts
from nanomoney.domain.monetary.errors import InvalidValueError, MismatchingCurrencyError, MoneyError
from nanomoney.domain.monetary.fast_math import divide_fast, divide_fast_int, multiply_fast, multiply_fast_int
from nanomoney.domain.monetary.formatting import to_decimal_string, to_scaled_int
from nanomoney.domain.monetary.monetary_amount import MonetaryAmount
from nanomoney.domain.monetary.predicates import are_equals, are_same_currency, compare, is_negative, is_positive, is_valid, is_zero

__all__ = [
    "MonetaryAmount",
    "MoneyError",
    "InvalidValueError",
    "MismatchingCurrencyError",
    "is_valid",
    "is_zero",
    "is_positive",
    "is_negative",
    "are_same_currency",
    "are_equals",
    "compare",
    "negate",
    "sum_amounts",
    "subtract_amounts",
    "multiply_by_int",
    "divide_by_int",
    "multiply_fast",
    "divide_fast",
    "multiply_fast_int",
    "divide_fast_int",
    "to_decimal_string",
    "to_scaled_int",
]
