# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date

import pandas as pd
import pytest
from pydantic import ValidationError

from brokerage.core.primitives import Timeline


def test_timeline_from_string():
    timeline = Timeline(start_date="2024-03", duration_months=3)

    assert timeline.start_date == pd.Period("2024-03", freq="M")
    assert timeline.end_date == pd.Period("2024-05", freq="M")
    assert list(timeline.period_index.astype(str)) == ["2024-03", "2024-04", "2024-05"]


def test_timeline_from_date():
    timeline = Timeline(start_date=date(2024, 12, 25), duration_months=2)

    assert list(timeline.period_index.astype(str)) == ["2024-12", "2025-01"]


def test_following_starts_next_month():
    timeline = Timeline.following(pd.Period("2024-12", freq="M"), 6)

    assert timeline.start_date == pd.Period("2025-01", freq="M")
    assert timeline.end_date == pd.Period("2025-06", freq="M")
    assert len(timeline.period_index) == 6


def test_duration_must_be_positive():
    with pytest.raises(ValidationError):
        Timeline(start_date="2024-01", duration_months=0)


def test_invalid_start_date():
    with pytest.raises(ValidationError):
        Timeline(start_date="not a month", duration_months=1)
