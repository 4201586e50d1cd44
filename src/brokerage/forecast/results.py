# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Forecast result models.

Strongly-typed containers returned by ``build_forecast``. They serialize to
plain JSON (``model_dump(mode="json")``) for dashboards and convert to a
single DataFrame for charting or export.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, List, Literal, Optional

import pandas as pd
from pydantic import field_serializer, field_validator

from ..core.primitives import Model, to_month_period
from .history import MonthlyCommissionPoint


class ForecastPoint(Model):
    """
    Projected commission for one future month.

    ``projected_transaction_count`` is the average monthly transaction count
    rounded to a whole number, or ``None`` when the history carries no counts.
    """

    date: pd.Period
    projected_commission_amount: Decimal
    projected_transaction_count: Optional[int] = None
    is_projection: Literal[True] = True

    @field_validator("date", mode="before")
    @classmethod
    def normalize_date(cls, v: Any) -> pd.Period:
        return to_month_period(v)

    @field_serializer("date", when_used="json")
    def serialize_date(self, v: pd.Period) -> str:
        return str(v)


class ForecastSummary(Model):
    """Aggregates over the historical and projected series."""

    avg_monthly_commission: Decimal
    total_historical_commission: Decimal
    total_projected_commission: Decimal
    avg_monthly_transactions: Optional[Decimal] = None


class ForecastResult(Model):
    """
    Historical series, flat-average projection and summary.

    Attributes:
        historical: Validated historical points in ascending month order
        forecast: One projected point per month of the horizon
        summary: Average and totals over both series
    """

    historical: List[MonthlyCommissionPoint]
    forecast: List[ForecastPoint]
    summary: ForecastSummary

    def to_dataframe(self) -> pd.DataFrame:
        """
        Combine history and projection into one monthly frame.

        Returns:
            DataFrame indexed by monthly ``PeriodIndex`` (named ``month``)
            with columns ``commission_amount``, ``transaction_count``
            (nullable integers) and ``is_projection``
        """
        months = [p.date for p in self.historical] + [p.date for p in self.forecast]
        amounts = [p.commission_amount for p in self.historical] + [
            p.projected_commission_amount for p in self.forecast
        ]
        counts = [p.transaction_count for p in self.historical] + [
            p.projected_transaction_count for p in self.forecast
        ]
        flags = [False] * len(self.historical) + [True] * len(self.forecast)
        return pd.DataFrame(
            {
                "commission_amount": amounts,
                "transaction_count": pd.array(counts, dtype="Int64"),
                "is_projection": flags,
            },
            index=pd.PeriodIndex(months, freq="M", name="month"),
        )
