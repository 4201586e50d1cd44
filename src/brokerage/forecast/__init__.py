# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Forecast Engine

Aggregates historical commission records into calendar months and projects
future monthly commission at the historical average.

Example:
    ```python
    from brokerage.forecast import aggregate_monthly, build_forecast

    history = aggregate_monthly(records)  # Approved and Paid only
    result = build_forecast(history, months_ahead=6)
    result.summary.total_projected_commission
    result.to_dataframe()
    ```
"""

from .engine import build_forecast
from .history import (
    CommissionRecord,
    MonthlyCommissionPoint,
    aggregate_monthly,
    monthly_status_breakdown,
    points_from_series,
)
from .results import ForecastPoint, ForecastResult, ForecastSummary

__all__ = [
    "build_forecast",
    "CommissionRecord",
    "MonthlyCommissionPoint",
    "aggregate_monthly",
    "monthly_status_breakdown",
    "points_from_series",
    "ForecastPoint",
    "ForecastResult",
    "ForecastSummary",
]
