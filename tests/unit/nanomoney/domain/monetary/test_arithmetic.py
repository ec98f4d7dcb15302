import pytest

from nanomoney.domain.monetary.arithmetic import divide_by_int, multiply_by_int, negate, subtract_amounts, sum_amounts
from nanomoney.domain.monetary.errors import InvalidValueError, MismatchingCurrencyError, MoneyError
from nanomoney.domain.monetary.monetary_amount import MonetaryAmount
from nanomoney.domain.monetary.predicates import is_valid, is_zero


# region Helpers


def mm(units: int, nanos: int, currency_code: str = "") -> MonetaryAmount:
    return MonetaryAmount(units, nanos, currency_code)


# Valid sample amounts used for algebraic properties
SAMPLES = [
    mm(0, 0),
    mm(0, 1),
    mm(0, -1),
    mm(0, 999_999_999),
    mm(0, -999_999_999),
    mm(1, 0),
    mm(-1, 0),
    mm(2, 200_000_000),
    mm(2, 900_000_000),
    mm(-2, -900_000_000),
    mm(11, 100_000_000),
    mm(-11, -100_000_000),
    mm(123_456, 789_000_001),
]

# endregion

# region sum_amounts


@pytest.mark.parametrize(
    "left, right, expected",
    [
        (mm(0, 0), mm(0, 0), mm(0, 0)),
        (mm(2, 200_000_000), mm(2, 200_000_000), mm(4, 400_000_000)),
        (mm(2, 111_111_111), mm(2, 888_888_888), mm(4, 999_999_999)),
        (mm(2, 200_000_000), mm(2, 900_000_000), mm(5, 100_000_000)),
        (mm(-2, -200_000_000), mm(-2, -200_000_000), mm(-4, -400_000_000)),
        (mm(-2, -200_000_000), mm(-2, -900_000_000), mm(-5, -100_000_000)),
        (mm(11, 0), mm(-2, 0), mm(9, 0)),
        (mm(-11, 0), mm(2, 0), mm(-9, 0)),
        (mm(11, 100_000_000), mm(-2, -100_000_000), mm(9, 0)),
        (mm(11, 100_000_000), mm(-2, -9_000_000), mm(9, 91_000_000)),
        (mm(-11, -100_000_000), mm(2, 100_000_000), mm(-9, 0)),
        (mm(-11, -100_000_000), mm(2, 9_000_000), mm(-9, -91_000_000)),
        (mm(0, 0), mm(-2, -100_000_000), mm(-2, -100_000_000)),
        (mm(-2, -100_000_000), mm(0, 0), mm(-2, -100_000_000)),
        # Zero units with nanos only
        (mm(0, 500_000_000), mm(0, 600_000_000), mm(1, 100_000_000)),
        (mm(0, -500_000_000), mm(0, -600_000_000), mm(-1, -100_000_000)),
        (mm(0, 500_000_000), mm(0, 100_000_000), mm(0, 600_000_000)),
        (mm(1, 0), mm(0, -1), mm(0, 999_999_999)),
        (mm(-1, 0), mm(0, 1), mm(0, -999_999_999)),
        (mm(7, 250_000_000, "USD"), mm(1, 750_000_000, "USD"), mm(9, 0, "USD")),
    ],
)
def test_sum_amounts(left, right, expected):
    result = sum_amounts(left, right)
    assert result == expected
    assert is_valid(result)


@pytest.mark.parametrize(
    "left, right",
    [
        (mm(0, 0, "XXX"), mm(0, 0)),
        (mm(0, 0), mm(0, 0, "YYY")),
        (mm(0, 0, "AAA"), mm(0, 0, "BBB")),
        (mm(1_000, 0, "USD"), mm(-5, -1, "EUR")),
    ],
)
def test_sum_amounts_rejects_mismatching_currency(left, right):
    with pytest.raises(MismatchingCurrencyError) as exc_info:
        sum_amounts(left, right)
    assert exc_info.value.left == left
    assert exc_info.value.right == right


@pytest.mark.parametrize(
    "left, right",
    [
        (mm(1, -1), mm(0, 0)),
        (mm(0, 0), mm(-1, 2)),
        (mm(0, 1_000_000_000), mm(1, 0)),
        (mm(0, 0), mm(0, -1_000_000_000)),
    ],
)
def test_sum_amounts_rejects_invalid_value(left, right):
    with pytest.raises(InvalidValueError):
        sum_amounts(left, right)


def test_invalid_value_is_checked_before_currency():
    with pytest.raises(InvalidValueError):
        sum_amounts(mm(1, -1, "USD"), mm(0, 0, "EUR"))


def test_errors_are_value_errors():
    with pytest.raises(ValueError, match="mismatching currency codes"):
        sum_amounts(mm(0, 0, "USD"), mm(0, 0, "EUR"))
    with pytest.raises(MoneyError, match="one of the specified money values is invalid"):
        sum_amounts(mm(1, -1), mm(0, 0))


@pytest.mark.parametrize("left", SAMPLES)
@pytest.mark.parametrize("right", SAMPLES)
def test_sum_amounts_is_commutative_and_valid(left, right):
    assert sum_amounts(left, right) == sum_amounts(right, left)
    assert is_valid(sum_amounts(left, right))


@pytest.mark.parametrize("value", SAMPLES)
def test_sum_with_negation_is_zero(value):
    value = MonetaryAmount(value.units, value.nanos, "EUR")
    result = sum_amounts(value, negate(value))
    assert is_zero(result)
    assert result == mm(0, 0, "EUR")


def test_sum_amounts_does_not_modify_operands():
    left = mm(2, 900_000_000, "USD")
    right = mm(2, 200_000_000, "USD")
    sum_amounts(left, right)
    assert left == mm(2, 900_000_000, "USD")
    assert right == mm(2, 200_000_000, "USD")


# endregion

# region negate / subtract_amounts


def test_negate():
    assert negate(mm(5, 910_000_000, "USD")) == mm(-5, -910_000_000, "USD")
    assert negate(mm(0, -1)) == mm(0, 1)
    assert negate(mm(0, 0)) == mm(0, 0)


def test_negate_keeps_invalid_value_invalid():
    result = negate(mm(1, -1))
    assert result == mm(-1, 1)
    assert not is_valid(result)


def test_subtract_amounts():
    assert subtract_amounts(mm(5, 100_000_000), mm(2, 900_000_000)) == mm(2, 200_000_000)
    assert subtract_amounts(mm(2, 900_000_000), mm(5, 100_000_000)) == mm(-2, -200_000_000)
    assert subtract_amounts(mm(1, 0, "USD"), mm(1, 0, "USD")) == mm(0, 0, "USD")


def test_subtract_amounts_rejects_mismatching_currency():
    with pytest.raises(MismatchingCurrencyError):
        subtract_amounts(mm(1, 0, "USD"), mm(1, 0, "EUR"))


# endregion

# region multiply_by_int / divide_by_int


@pytest.mark.parametrize(
    "value, n, expected",
    [
        (mm(2, 500_000_000, "USD"), 3, mm(7, 500_000_000, "USD")),
        (mm(-1, -300_000_000), 4, mm(-5, -200_000_000)),
        (mm(0, 333_333_333), 3, mm(0, 999_999_999)),
        (mm(0, 500_000_000), 5, mm(2, 500_000_000)),
        (mm(3, 0), 1, mm(3, 0)),
        (mm(3, 140_000_000, "EUR"), 0, mm(0, 0, "EUR")),
    ],
)
def test_multiply_by_int(value, n, expected):
    assert multiply_by_int(value, n) == expected


def test_multiply_by_int_rejects_negative_multiplier():
    with pytest.raises(ValueError):
        multiply_by_int(mm(1, 0), -1)


def test_multiply_by_int_rejects_non_int_multiplier():
    with pytest.raises(TypeError):
        multiply_by_int(mm(1, 0), 2.0)
    with pytest.raises(TypeError):
        multiply_by_int(mm(1, 0), True)


def test_multiply_by_int_propagates_invalid_value():
    with pytest.raises(InvalidValueError):
        multiply_by_int(mm(1, -1), 2)


@pytest.mark.parametrize(
    "value, n, expected",
    [
        (mm(10, 0, "USD"), 4, mm(2, 500_000_000, "USD")),
        (mm(1, 0), 3, mm(0, 333_333_333)),
        (mm(-1, 0), 3, mm(0, -333_333_333)),
        (mm(-7, -500_000_000), 2, mm(-3, -750_000_000)),
        (mm(9, 0), 3, mm(3, 0)),
        (mm(0, 1), 2, mm(0, 0)),
        (mm(5, 910_000_000), 1, mm(5, 910_000_000)),
    ],
)
def test_divide_by_int(value, n, expected):
    assert divide_by_int(value, n) == expected


def test_divide_then_multiply_restores_exactly_divisible_value():
    value = mm(12, 600_000_000, "USD")
    assert multiply_by_int(divide_by_int(value, 3), 3) == value


def test_divide_by_int_rejects_zero():
    with pytest.raises(ZeroDivisionError):
        divide_by_int(mm(1, 0), 0)


def test_divide_by_int_rejects_negative_divisor():
    with pytest.raises(ValueError):
        divide_by_int(mm(1, 0), -2)


def test_divide_by_int_rejects_invalid_value():
    with pytest.raises(InvalidValueError):
        divide_by_int(mm(0, 1_000_000_000), 2)


# endregion
