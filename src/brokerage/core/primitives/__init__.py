# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Brokerage Core Primitives

Essential building blocks shared by the commission and forecast engines.
Handles base models, monthly periods, settings and the error taxonomy.
"""

from .enums import AgentTierEnum, CommissionStatusEnum, InstallmentStatusEnum
from .errors import (
    BrokerageError,
    InvalidCoBrokingSplit,
    InvalidHistoricalData,
    InvalidInput,
    InvalidRange,
)
from .model import Model
from .settings import (
    DEFAULT_TIER_PERCENTAGES,
    AgentTierSchedule,
    CommissionSettings,
    ForecastSettings,
    GlobalSettings,
)
from .timeline import Timeline
from .types import NonNegativeDecimal, Percentage, PositiveInt, PositiveIntGt0
from .validation import to_month_period, validate_monthly_period_index

__all__ = [
    # Core models
    "Model",
    "Timeline",
    # Settings
    "GlobalSettings",
    "CommissionSettings",
    "ForecastSettings",
    "AgentTierSchedule",
    "DEFAULT_TIER_PERCENTAGES",
    # Enums
    "AgentTierEnum",
    "CommissionStatusEnum",
    "InstallmentStatusEnum",
    # Errors
    "BrokerageError",
    "InvalidInput",
    "InvalidCoBrokingSplit",
    "InvalidRange",
    "InvalidHistoricalData",
    # Types
    "NonNegativeDecimal",
    "Percentage",
    "PositiveInt",
    "PositiveIntGt0",
    # Validation
    "to_month_period",
    "validate_monthly_period_index",
]
