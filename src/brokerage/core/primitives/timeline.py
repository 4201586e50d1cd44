# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any

import pandas as pd
from pydantic import field_validator

from .model import Model
from .types import PositiveIntGt0
from .validation import to_month_period


class Timeline(Model):
    """
    A contiguous run of calendar months.

    Used to lay out forecast horizons: a timeline starts on a monthly
    ``pd.Period`` and spans ``duration_months`` consecutive months.

    Attributes:
        start_date: First month of the timeline.
        duration_months: Number of months covered (at least one).

    Examples:
        >>> import pandas as pd
        >>> from brokerage.core.primitives import Timeline
        >>>
        >>> timeline = Timeline(start_date="2024-03", duration_months=3)
        >>> [str(p) for p in timeline.period_index]
        ['2024-03', '2024-04', '2024-05']

        >>> # Six months after the last reported month
        >>> Timeline.following(pd.Period("2024-12", freq="M"), 6).start_date
        Period('2025-01', 'M')
    """

    start_date: pd.Period
    duration_months: PositiveIntGt0

    @field_validator("start_date", mode="before")
    @classmethod
    def normalize_start_date(cls, v: Any) -> pd.Period:
        """Ensure start_date is a monthly pd.Period."""
        return to_month_period(v)

    @property
    def end_date(self) -> pd.Period:
        """Last month covered by the timeline."""
        return self.start_date + (self.duration_months - 1)

    @property
    def period_index(self) -> pd.PeriodIndex:
        """Generate a monthly PeriodIndex for the timeline."""
        return pd.period_range(start=self.start_date, periods=self.duration_months, freq="M")

    @classmethod
    def following(cls, anchor: Any, duration_months: int) -> "Timeline":
        """Create the timeline that begins the month after ``anchor``."""
        return cls(start_date=to_month_period(anchor) + 1, duration_months=duration_months)
