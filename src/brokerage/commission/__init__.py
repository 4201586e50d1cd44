# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Commission Engine

Computes how a transaction's commission splits across our agency, a
co-broking agency and the agent, and expands agent commissions into
installment payout schedules.

Example:
    ```python
    from brokerage.commission import calculate_commission

    result = calculate_commission({
        "transaction_value": "500000",
        "commission_rate": "2.5",
        "agent_tier": "Advisor",
        "co_broking": {"enabled": True, "commission_split": "60"},
    })
    result.our_agency_commission  # 7500
    result.agent_share            # 5250
    ```
"""

from .calculator import (
    CoBroking,
    CommissionInput,
    CommissionResult,
    calculate_commission,
    commission_breakdown_frame,
)
from .installments import (
    CommissionInstallment,
    PaymentSchedule,
    ScheduleInstallment,
    generate_installments,
)

__all__ = [
    "CoBroking",
    "CommissionInput",
    "CommissionResult",
    "calculate_commission",
    "commission_breakdown_frame",
    "CommissionInstallment",
    "PaymentSchedule",
    "ScheduleInstallment",
    "generate_installments",
]
