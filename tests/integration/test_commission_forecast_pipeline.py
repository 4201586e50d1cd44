# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Integration tests for the back-office commission pipeline.

Transactions are priced with the commission engine, stored as commission
records, aggregated per month and projected forward, the way the admin
dashboard consumes them.
"""

from __future__ import annotations

from decimal import Decimal

from brokerage.commission import calculate_commission
from brokerage.core.primitives import GlobalSettings
from brokerage.forecast import CommissionRecord, aggregate_monthly, build_forecast

TRANSACTIONS = [
    # (closing date, value, rate, tier, co-broking split, status)
    ("2024-01-12", "500000", "2.5", "Advisor", None, "Paid"),
    ("2024-01-26", "320000", "3", "Team Leader", "50", "Approved"),
    ("2024-02-08", "1200000", "2", "Group Leader", None, "Paid"),
    ("2024-02-19", "450000", "2.5", "Sales Leader", None, "Rejected"),
    ("2024-03-03", "275000", "3", "Advisor", "60", "Pending"),
]


def _records(settings: GlobalSettings) -> list[CommissionRecord]:
    records = []
    for closing, value, rate, tier, split, status in TRANSACTIONS:
        payload = {"transaction_value": value, "commission_rate": rate, "agent_tier": tier}
        if split is not None:
            payload["co_broking"] = {"enabled": True, "commission_split": split}
        result = calculate_commission(payload, settings=settings.commission)
        # The brokerage books its own share of the commission, not the co-broker's
        records.append(
            CommissionRecord(amount=result.our_agency_commission, date=closing, status=status)
        )
    return records


def test_pipeline_from_transactions_to_forecast(sample_settings):
    records = _records(sample_settings)

    history = aggregate_monthly(records, settings=sample_settings.forecast)
    result = build_forecast(history, settings=sample_settings.forecast)

    # January: 12,500 + half of 9,600; February: 24,000. Rejected and pending are excluded.
    assert [(str(p.date), p.commission_amount) for p in history] == [
        ("2024-01", Decimal("17300")),
        ("2024-02", Decimal("24000")),
    ]
    assert result.summary.total_historical_commission == Decimal("41300")
    assert result.summary.avg_monthly_commission == Decimal("20650")
    assert len(result.forecast) == sample_settings.forecast.default_months_ahead
    assert str(result.forecast[0].date) == "2024-03"
    assert result.summary.total_projected_commission == Decimal("20650") * 6
    # Two booked transactions in January, one in February
    assert [p.transaction_count for p in history] == [2, 1]
    assert result.summary.avg_monthly_transactions == Decimal("1.5")
    assert {p.projected_transaction_count for p in result.forecast} == {2}


def test_pipeline_is_reproducible(sample_settings):
    first = build_forecast(aggregate_monthly(_records(sample_settings)), months_ahead=12)
    second = build_forecast(aggregate_monthly(_records(sample_settings)), months_ahead=12)

    assert first.model_dump(mode="json") == second.model_dump(mode="json")
