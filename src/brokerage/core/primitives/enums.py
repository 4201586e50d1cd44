# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class AgentTierEnum(str, Enum):
    """
    Agent ranks used by the default commission tier schedule.

    The rank decides which share of the agency-retained commission is paid
    out to the agent. The percentage for each rank lives in
    ``AgentTierSchedule``, not here, so alternate schemes can reuse the names.

    Attributes:
        ADVISOR: Entry rank.
        SALES_LEADER: Leads a small sales group.
        TEAM_LEADER: Leads a team of sales leaders.
        GROUP_LEADER: Leads several teams.
        SUPREME_LEADER: Top rank.
    """

    ADVISOR = "Advisor"
    SALES_LEADER = "Sales Leader"
    TEAM_LEADER = "Team Leader"
    GROUP_LEADER = "Group Leader"
    SUPREME_LEADER = "Supreme Leader"


class CommissionStatusEnum(str, Enum):
    """
    Lifecycle status of a commission record in the back office.

    Only APPROVED and PAID records count as realized income when building the
    historical series for a forecast (see ``ForecastSettings``).
    """

    PENDING = "Pending"
    APPROVED = "Approved"
    PAID = "Paid"
    PROJECTED = "Projected"
    REJECTED = "Rejected"


class InstallmentStatusEnum(str, Enum):
    """Payout status of a single commission installment."""

    PENDING = "Pending"
    PAID = "Paid"
    CANCELLED = "Cancelled"
