from __future__ import annotations

# Bulk helpers: build MonetaryAmount(s) from an in-memory pandas DataFrame and total them up.

import logging
from typing import Optional

import pandas as pd

from nanomoney.domain.monetary.arithmetic import sum_amounts
from nanomoney.domain.monetary.monetary_amount import MonetaryAmount

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("units", "nanos")
CURRENCY_COLUMN = "currency_code"


def amounts_from_dataframe(df: pd.DataFrame) -> list[MonetaryAmount]:
    """Build one `MonetaryAmount` per row of $df.

    Input DataFrame has to meet these requirements:
    - Columns: units, nanos. Optional: currency_code.
    - Values in units and nanos must be whole numbers without missing cells.
    - Missing currency_code column or missing cells mean "no currency" ('').

    The amounts are not validated here; `sum_amounts` and friends check validity when used.

    Args:
        df: Source data with one row per amount.

    Returns:
        List of amounts in row order.

    Raises:
        ValueError: If $df is not a DataFrame, required columns are missing, or a units/nanos cell
            is missing or not a whole number.
    """
    # Check: $df must be a pandas DataFrame
    if not isinstance(df, pd.DataFrame):
        raise ValueError(f"Cannot call `amounts_from_dataframe` because $df is not a pandas DataFrame (got type '{type(df).__name__}')")

    # Check: required columns present (currency_code is optional)
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Cannot call `amounts_from_dataframe` because $df is missing required columns: {', '.join(missing)}")

    if CURRENCY_COLUMN in df.columns:
        currencies = ["" if pd.isna(c) else str(c) for c in df[CURRENCY_COLUMN].tolist()]
    else:
        logger.debug(f"Column '{CURRENCY_COLUMN}' not present in DataFrame; using empty currency code for all rows")
        currencies = [""] * len(df)

    result: list[MonetaryAmount] = []
    for row_index, (units, nanos, currency_code) in enumerate(zip(df["units"].tolist(), df["nanos"].tolist(), currencies)):
        result.append(MonetaryAmount(_as_whole_number(units, "units", row_index), _as_whole_number(nanos, "nanos", row_index), currency_code))

    logger.debug(f"Loaded {len(result)} amount(s) from DataFrame")
    return result


def total_from_dataframe(df: pd.DataFrame, currency_code: Optional[str] = None) -> MonetaryAmount:
    """Sum all rows of $df with `sum_amounts`.

    Args:
        df: Source data; see `amounts_from_dataframe` for requirements.
        currency_code: Currency of the starting zero amount. If None, the currency of the first
            row is used ('' for an empty DataFrame).

    Returns:
        Total of all rows.

    Raises:
        ValueError: For malformed $df (see `amounts_from_dataframe`).
        InvalidValueError: If any row is not a valid amount.
        MismatchingCurrencyError: If a row's currency differs from the total's currency.
    """
    amounts = amounts_from_dataframe(df)

    if currency_code is None:
        currency_code = amounts[0].currency_code if amounts else ""

    total = MonetaryAmount.zero(currency_code)
    for amount in amounts:
        total = sum_amounts(total, amount)
    return total


def _as_whole_number(value: object, column: str, row_index: int) -> int:
    # Raise: missing cells cannot be turned into an amount
    if pd.isna(value):
        raise ValueError(f"Cannot call `amounts_from_dataframe` because ${column} is missing in row {row_index}")

    # Raise: float cells are accepted only when they hold a whole number (e.g. after NaN upcasting)
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"Cannot call `amounts_from_dataframe` because ${column} ({value}) in row {row_index} is not a whole number")
        return int(value)

    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Cannot call `amounts_from_dataframe` because ${column} ({value!r}) in row {row_index} is not a whole number")
    return value
