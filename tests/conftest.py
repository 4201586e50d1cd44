# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for brokerage testing.

This module provides convenient builders for commission inputs, commission
records and historical series so tests can focus on the numbers.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

import pytest

from brokerage.commission import CoBroking, CommissionInput
from brokerage.core.primitives import GlobalSettings
from brokerage.forecast import CommissionRecord, MonthlyCommissionPoint


# Input Utilities
def create_commission_input(
    transaction_value: str = "500000",
    commission_rate: str = "2.5",
    agent_tier: str = "Advisor",
    commission_split: Optional[str] = None,
) -> CommissionInput:
    """
    Create commission terms for testing.

    Args:
        transaction_value: Sale price as a decimal string
        commission_rate: Commission rate in percent as a decimal string
        agent_tier: Agent rank
        commission_split: Our agency's share in percent; enables co-broking
            when given

    Returns:
        CommissionInput ready for ``calculate_commission``
    """
    co_broking = None
    if commission_split is not None:
        co_broking = CoBroking(enabled=True, commission_split=Decimal(commission_split))
    return CommissionInput(
        transaction_value=Decimal(transaction_value),
        commission_rate=Decimal(commission_rate),
        agent_tier=agent_tier,
        co_broking=co_broking,
    )


def create_history(*amounts: str, start: str = "2024-01") -> list[MonthlyCommissionPoint]:
    """Create consecutive monthly points starting at ``start``."""
    import pandas as pd

    months = pd.period_range(start=start, periods=len(amounts), freq="M")
    return [
        MonthlyCommissionPoint(date=month, commission_amount=Decimal(amount))
        for month, amount in zip(months, amounts)
    ]


def create_record(amount: str, date: str, status: str = "Approved") -> CommissionRecord:
    """Create a single commission record."""
    return CommissionRecord(amount=Decimal(amount), date=date, status=status)


@pytest.fixture
def sample_settings():
    """Create default global settings for testing."""
    return GlobalSettings()


@pytest.fixture
def sample_history():
    """Two months of history: January 1,000 and February 3,000."""
    return create_history("1000", "3000")


@pytest.fixture
def sample_records():
    """Mixed-status commission records spanning three months."""
    return [
        create_record("1200", "2024-01-05", "Paid"),
        create_record("300", "2024-01-20", "Approved"),
        create_record("999", "2024-01-21", "Rejected"),
        create_record("450", "2024-02-11", "Pending"),
        create_record("2500", "2024-03-02", "Approved"),
        create_record("800", "2024-03-28", "Projected"),
    ]
