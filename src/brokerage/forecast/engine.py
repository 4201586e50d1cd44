# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Flat-average commission forecast.

Projects future monthly commission as the arithmetic mean of the historical
months. The model is intentionally flat: no smoothing, seasonality, trend
fitting or random jitter, so the same history always yields the same
forecast.
"""

from __future__ import annotations

import logging
import numbers
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable, List, Mapping, Optional, Union

from pydantic import ValidationError

from ..core.primitives import (
    ForecastSettings,
    InvalidHistoricalData,
    InvalidRange,
    Timeline,
    to_month_period,
)
from .history import MonthlyCommissionPoint
from .results import ForecastPoint, ForecastResult, ForecastSummary

logger = logging.getLogger(__name__)


def _validate_horizon(months_ahead: Any) -> int:
    if isinstance(months_ahead, bool) or not isinstance(months_ahead, numbers.Integral):
        raise InvalidRange(
            f"months_ahead must be a whole number of months, got {months_ahead!r}"
        )
    if months_ahead <= 0:
        raise InvalidRange(f"months_ahead must be positive, got {months_ahead}")
    return int(months_ahead)


def _coerce_history(
    historical: Iterable[Union[MonthlyCommissionPoint, Mapping[str, Any]]],
) -> List[MonthlyCommissionPoint]:
    """Validate historical points and return them in ascending month order."""
    points = []
    seen = set()
    for i, item in enumerate(historical):
        if isinstance(item, MonthlyCommissionPoint):
            point = item
        else:
            try:
                point = MonthlyCommissionPoint.model_validate(item)
            except ValidationError as e:
                raise InvalidHistoricalData(
                    f"Malformed historical point at position {i}: {e}"
                ) from e

        amount = point.commission_amount
        if not amount.is_finite() or amount < 0:
            raise InvalidHistoricalData(
                f"Commission amount for {point.date} must be a non-negative number, got {amount}"
            )
        if point.date in seen:
            raise InvalidHistoricalData(f"Month {point.date} appears more than once")
        seen.add(point.date)
        points.append(point)

    return sorted(points, key=lambda p: p.date)


def _average_transactions(points: List[MonthlyCommissionPoint]) -> Optional[Decimal]:
    """Mean monthly transaction count; ``None`` if any month lacks a count."""
    if not points:
        return Decimal("0")
    counts = [p.transaction_count for p in points]
    if any(count is None for count in counts):
        return None
    return Decimal(sum(counts)) / Decimal(len(counts))


def build_forecast(
    historical: Iterable[Union[MonthlyCommissionPoint, Mapping[str, Any]]],
    months_ahead: Optional[int] = None,
    as_of: Optional[Any] = None,
    settings: Optional[ForecastSettings] = None,
) -> ForecastResult:
    """
    Project monthly commission forward using the historical monthly average.

    Args:
        historical: Monthly commission totals (points or mappings with
            ``date`` and ``commission_amount``), in any order. May be empty.
        months_ahead: Number of months to project; defaults to
            ``ForecastSettings.default_months_ahead``
        as_of: Anchor month used only when ``historical`` is empty; the
            forecast starts the month after it. Defaults to today.
        settings: Forecast settings

    Returns:
        ``ForecastResult`` with the sorted history, the projection and the
        summary aggregates. When every historical month carries a
        ``transaction_count``, the summary also reports the average monthly
        transaction count and each projected month carries it rounded half
        up to a whole number.

    Raises:
        InvalidRange: If ``months_ahead`` is not a positive integer, or
            ``as_of`` is not a recognizable date
        InvalidHistoricalData: If a point is malformed, negative or a
            duplicate month

    Example:
        ```python
        result = build_forecast(
            [
                {"date": "2024-01", "commission_amount": "1000"},
                {"date": "2024-02", "commission_amount": "3000"},
            ],
            months_ahead=2,
        )
        result.summary.avg_monthly_commission              # Decimal('2000')
        [str(p.date) for p in result.forecast]             # ['2024-03', '2024-04']
        ```
    """
    settings = settings or ForecastSettings()
    if months_ahead is None:
        months_ahead = settings.default_months_ahead
    months_ahead = _validate_horizon(months_ahead)

    points = _coerce_history(historical)
    total_historical = sum((p.commission_amount for p in points), Decimal("0"))

    if points:
        avg_monthly = total_historical / Decimal(len(points))
        anchor = points[-1].date
    else:
        avg_monthly = Decimal("0")
        try:
            anchor = to_month_period(as_of if as_of is not None else date.today())
        except ValueError as e:
            raise InvalidRange(f"as_of is not a valid month: {as_of!r}") from e

    avg_transactions = _average_transactions(points)
    projected_count = (
        int(avg_transactions.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
        if avg_transactions is not None
        else None
    )

    timeline = Timeline.following(anchor, months_ahead)
    forecast = [
        ForecastPoint(
            date=month,
            projected_commission_amount=avg_monthly,
            projected_transaction_count=projected_count,
        )
        for month in timeline.period_index
    ]
    total_projected = sum((p.projected_commission_amount for p in forecast), Decimal("0"))

    logger.debug(
        f"Forecast {timeline.start_date}..{timeline.end_date} from {len(points)} months: "
        f"avg={avg_monthly}, projected_total={total_projected}"
    )
    return ForecastResult(
        historical=points,
        forecast=forecast,
        summary=ForecastSummary(
            avg_monthly_commission=avg_monthly,
            total_historical_commission=total_historical,
            total_projected_commission=total_projected,
            avg_monthly_transactions=avg_transactions,
        ),
    )
