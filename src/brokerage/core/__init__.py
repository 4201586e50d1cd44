# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Brokerage Core Framework

Foundational building blocks shared by the commission and forecast engines:
base models, monthly periods, settings and the error taxonomy.
"""

from . import primitives
from .primitives import (
    AgentTierEnum,
    AgentTierSchedule,
    BrokerageError,
    CommissionSettings,
    CommissionStatusEnum,
    ForecastSettings,
    GlobalSettings,
    InvalidCoBrokingSplit,
    InvalidHistoricalData,
    InvalidInput,
    InvalidRange,
    Model,
    Timeline,
)

__all__ = [
    "primitives",
    "Model",
    "Timeline",
    "GlobalSettings",
    "CommissionSettings",
    "ForecastSettings",
    "AgentTierSchedule",
    "AgentTierEnum",
    "CommissionStatusEnum",
    "BrokerageError",
    "InvalidInput",
    "InvalidCoBrokingSplit",
    "InvalidRange",
    "InvalidHistoricalData",
]
