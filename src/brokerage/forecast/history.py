# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Historical commission series.

Turns raw commission records from the back office into the monthly series
the forecast engine consumes. Grouping uses calendar-month ``pd.Period``
buckets; sums stay in ``Decimal``.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, FrozenSet, Iterable, List, Mapping, Optional, Union

import pandas as pd
from pydantic import ValidationError, field_serializer, field_validator

from ..core.primitives import (
    CommissionStatusEnum,
    ForecastSettings,
    InvalidHistoricalData,
    Model,
    NonNegativeDecimal,
    PositiveInt,
    to_month_period,
    validate_monthly_period_index,
)

logger = logging.getLogger(__name__)


class MonthlyCommissionPoint(Model):
    """
    Total commission earned in one calendar month.

    ``date`` accepts ``"YYYY-MM"`` strings, dates, timestamps or periods and
    is stored as a monthly ``pd.Period``; it serializes back to ``"YYYY-MM"``.
    ``transaction_count`` is the number of transactions behind the amount,
    when known. Amount bounds are checked by the forecast engine, not here.
    """

    date: pd.Period
    commission_amount: Decimal
    transaction_count: Optional[PositiveInt] = None

    @field_validator("date", mode="before")
    @classmethod
    def normalize_date(cls, v: Any) -> pd.Period:
        return to_month_period(v)

    @field_serializer("date", when_used="json")
    def serialize_date(self, v: pd.Period) -> str:
        return str(v)


class CommissionRecord(Model):
    """One commission row as stored by the back office."""

    amount: NonNegativeDecimal
    date: pd.Period
    status: CommissionStatusEnum

    @field_validator("date", mode="before")
    @classmethod
    def normalize_date(cls, v: Any) -> pd.Period:
        return to_month_period(v)

    @field_serializer("date", when_used="json")
    def serialize_date(self, v: pd.Period) -> str:
        return str(v)


def _decimal_sum(values: Iterable[Decimal]) -> Decimal:
    return sum(values, Decimal("0"))


def _coerce_records(
    records: Iterable[Union[CommissionRecord, Mapping[str, Any]]],
) -> List[CommissionRecord]:
    coerced = []
    for i, record in enumerate(records):
        if isinstance(record, CommissionRecord):
            coerced.append(record)
            continue
        try:
            coerced.append(CommissionRecord.model_validate(record))
        except ValidationError as e:
            raise InvalidHistoricalData(f"Malformed commission record at position {i}: {e}") from e
    return coerced


def _coerce_statuses(statuses: Iterable[Any]) -> FrozenSet[CommissionStatusEnum]:
    kept = set()
    for status in statuses:
        try:
            kept.add(CommissionStatusEnum(status))
        except ValueError as e:
            raise InvalidHistoricalData(f"Unknown commission status {status!r}") from e
    return frozenset(kept)


def _records_frame(records: List[CommissionRecord]) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "month": pd.PeriodIndex([r.date for r in records], freq="M"),
            "status": [r.status.value for r in records],
            "amount": pd.Series([r.amount for r in records], dtype=object),
        }
    )


def aggregate_monthly(
    records: Iterable[Union[CommissionRecord, Mapping[str, Any]]],
    statuses: Optional[Iterable[Union[CommissionStatusEnum, str]]] = None,
    settings: Optional[ForecastSettings] = None,
) -> List[MonthlyCommissionPoint]:
    """
    Sum commission records per calendar month.

    Args:
        records: Commission records or mappings of their fields
        statuses: Statuses to keep; defaults to
            ``ForecastSettings.historical_statuses`` (Approved and Paid)
        settings: Forecast settings supplying the default statuses

    Returns:
        One point per month that has at least one kept record, ascending,
        with ``transaction_count`` set to the number of kept records in that
        month. Months without records are omitted, not zero-filled.

    Raises:
        InvalidHistoricalData: If a record cannot be validated or a status
            is unknown

    Example:
        ```python
        points = aggregate_monthly([
            {"amount": "1200", "date": "2024-01-05", "status": "Paid"},
            {"amount": "300", "date": "2024-01-20", "status": "Approved"},
            {"amount": "999", "date": "2024-01-21", "status": "Rejected"},
        ])
        points[0].commission_amount  # Decimal('1500')
        points[0].transaction_count  # 2
        ```
    """
    settings = settings or ForecastSettings()
    kept_statuses: FrozenSet[CommissionStatusEnum] = (
        _coerce_statuses(statuses) if statuses is not None else settings.historical_statuses
    )

    kept = [r for r in _coerce_records(records) if r.status in kept_statuses]
    if not kept:
        return []

    totals = _records_frame(kept).groupby("month", sort=True).agg(
        commission_amount=("amount", _decimal_sum),
        transaction_count=("amount", "size"),
    )
    points = [
        MonthlyCommissionPoint(
            date=month,
            commission_amount=row.commission_amount,
            transaction_count=int(row.transaction_count),
        )
        for month, row in totals.iterrows()
    ]
    logger.debug(f"Aggregated {len(kept)} commission records into {len(points)} months")
    return points


def monthly_status_breakdown(
    records: Iterable[Union[CommissionRecord, Mapping[str, Any]]],
) -> pd.DataFrame:
    """
    Per-month commission totals broken down by status.

    Returns a DataFrame indexed by monthly ``PeriodIndex`` (named ``month``)
    with one ``Decimal`` column per ``CommissionStatusEnum`` value; months
    without records for a status hold zero.
    """
    columns = [status.value for status in CommissionStatusEnum]
    coerced = _coerce_records(records)
    if not coerced:
        return pd.DataFrame(columns=columns, index=pd.PeriodIndex([], freq="M", name="month"))

    breakdown = (
        _records_frame(coerced)
        .groupby(["month", "status"], sort=True)["amount"]
        .agg(_decimal_sum)
        .unstack("status", fill_value=Decimal("0"))
        .reindex(columns=columns, fill_value=Decimal("0"))
    )
    breakdown.columns.name = None
    return breakdown


def points_from_series(series: pd.Series) -> List[MonthlyCommissionPoint]:
    """
    Convert a monthly pandas Series of commission totals into points.

    Raises:
        InvalidHistoricalData: If the series is not monthly or holds a
            value that is not a finite number
    """
    try:
        validate_monthly_period_index(series, field_name="historical commission series")
    except (TypeError, ValueError) as e:
        raise InvalidHistoricalData(str(e)) from e

    points = []
    for month, value in series.items():
        try:
            amount = Decimal(str(value))
        except InvalidOperation as e:
            raise InvalidHistoricalData(f"Commission amount for {month} is not a number: {value!r}") from e
        if not amount.is_finite():
            raise InvalidHistoricalData(f"Commission amount for {month} is missing or infinite")
        points.append(MonthlyCommissionPoint(date=month, commission_amount=amount))
    return points
