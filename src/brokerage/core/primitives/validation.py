# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Reusable validation helpers for monthly time data.

Every historical and forecast series in this package is monthly. These
helpers normalize the many date shapes callers hand us (ISO strings,
``datetime.date``, ``pd.Timestamp``, ``pd.Period``) into monthly
``pd.Period`` values and check pandas inputs for monthly periodicity.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Any

import pandas as pd


_ISO_MONTH_OR_DAY = re.compile(r"\d{4}-\d{2}(-\d{2})?")


def to_month_period(value: Any) -> pd.Period:
    """
    Normalize a date-like value to a monthly ``pd.Period``.

    Args:
        value: ``"YYYY-MM"`` or ``"YYYY-MM-DD"`` string, ``datetime.date``,
            ``pd.Timestamp`` or ``pd.Period``

    Returns:
        The calendar month containing ``value``

    Raises:
        ValueError: If the value is not date-like or cannot be parsed

    Example:
        ```python
        to_month_period("2024-03")             # Period('2024-03', 'M')
        to_month_period(date(2024, 3, 18))     # Period('2024-03', 'M')
        to_month_period(pd.Period("2024Q1"))   # Period('2024-01', 'M')
        to_month_period("Jan")                 # ValueError
        ```
    """
    if isinstance(value, pd.Period):
        if value.freqstr != "M":
            return pd.Period(value.start_time, freq="M")
        return value

    if not isinstance(value, (str, date)):
        raise ValueError(
            f"Expected a month string, date or Period, got {type(value).__name__}"
        )

    # pandas also reads bare years and month names; only ISO months and days count here
    if isinstance(value, str) and not _ISO_MONTH_OR_DAY.fullmatch(value):
        raise ValueError(
            f"Cannot parse a calendar month from {value!r}; expected 'YYYY-MM' or 'YYYY-MM-DD'"
        )

    try:
        period = pd.Period(value, freq="M")
    except (ValueError, TypeError) as e:
        raise ValueError(f"Cannot parse a calendar month from {value!r}") from e

    if pd.isna(period):
        raise ValueError(f"Cannot parse a calendar month from {value!r}")
    return period


def validate_monthly_period_index(series: pd.Series, field_name: str = "series") -> pd.Series:
    """
    Check that ``series`` is keyed by calendar month.

    Returns the series unchanged. Raises ``TypeError`` for anything that is
    not a Series and ``ValueError`` when the index is not a monthly
    ``PeriodIndex``.
    """
    if not isinstance(series, pd.Series):
        raise TypeError(f"Expected {field_name} as a pandas Series, not {type(series).__name__}")

    if not isinstance(series.index, pd.PeriodIndex):
        raise ValueError(
            f"{field_name} is indexed by {type(series.index).__name__}; "
            "monthly commission data needs a PeriodIndex"
        )

    if series.index.freqstr != "M":
        raise ValueError(
            f"{field_name} has frequency '{series.index.freqstr}'; "
            "only monthly frequency ('M') is supported"
        )

    return series
