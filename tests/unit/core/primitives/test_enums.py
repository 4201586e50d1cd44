# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from brokerage.core.primitives import (
    AgentTierEnum,
    CommissionStatusEnum,
    InstallmentStatusEnum,
)


def test_enum_member_values():
    """Test that key enum members have the correct string value."""
    assert AgentTierEnum.ADVISOR == "Advisor"
    assert AgentTierEnum.SUPREME_LEADER == "Supreme Leader"
    assert CommissionStatusEnum.APPROVED == "Approved"
    assert InstallmentStatusEnum.PENDING == "Pending"


def test_agent_tier_order():
    """Tiers are declared from entry rank to top rank."""
    assert [tier.value for tier in AgentTierEnum] == [
        "Advisor",
        "Sales Leader",
        "Team Leader",
        "Group Leader",
        "Supreme Leader",
    ]


def test_status_lookup_by_value():
    assert CommissionStatusEnum("Paid") is CommissionStatusEnum.PAID
