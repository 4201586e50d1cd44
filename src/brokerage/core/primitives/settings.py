# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from decimal import Decimal
from typing import Dict, FrozenSet, List

from pydantic import Field, field_validator

from .enums import AgentTierEnum, CommissionStatusEnum
from .errors import InvalidInput
from .model import Model
from .types import Percentage, PositiveIntGt0

DEFAULT_TIER_PERCENTAGES: Dict[str, Decimal] = {
    AgentTierEnum.ADVISOR.value: Decimal("70"),
    AgentTierEnum.SALES_LEADER.value: Decimal("80"),
    AgentTierEnum.TEAM_LEADER.value: Decimal("83"),
    AgentTierEnum.GROUP_LEADER.value: Decimal("85"),
    AgentTierEnum.SUPREME_LEADER.value: Decimal("85"),
}


class AgentTierSchedule(Model):
    """
    Lookup table of agent payout percentages by tier.

    Each entry is the percentage of the agency-retained commission (after any
    co-broking split) paid to an agent of that tier. The default schedule is
    the brokerage's standard ladder; pass an alternate schedule to model a
    different compensation plan.

    Usage Examples:
        # Standard ladder
        schedule = AgentTierSchedule()
        schedule.percentage_for("Team Leader")  # Decimal('83')

        # Flat plan for a partner office
        schedule = AgentTierSchedule(percentages={"Associate": Decimal("60")})
    """

    percentages: Dict[str, Percentage] = Field(
        default_factory=lambda: dict(DEFAULT_TIER_PERCENTAGES),
        description="Agent share of agency-retained commission, in percent, keyed by tier name.",
    )

    @field_validator("percentages")
    @classmethod
    def validate_not_empty(cls, v: Dict[str, Decimal]) -> Dict[str, Decimal]:
        if not v:
            raise ValueError("Tier schedule must define at least one tier")
        return v

    @property
    def tiers(self) -> List[str]:
        """Tier names known to this schedule."""
        return list(self.percentages)

    def percentage_for(self, tier: str) -> Decimal:
        """
        Resolve the agent percentage for a tier.

        Raises:
            InvalidInput: If the tier is not in the schedule. Unknown tiers
                are never mapped to a default.
        """
        if isinstance(tier, AgentTierEnum):
            tier = tier.value
        try:
            return self.percentages[tier]
        except KeyError:
            raise InvalidInput(
                f"Unknown agent tier {tier!r}; expected one of {', '.join(self.tiers)}"
            ) from None


class CommissionSettings(Model):
    """Settings bound to the commission engine."""

    tier_schedule: AgentTierSchedule = Field(default_factory=AgentTierSchedule)


class ForecastSettings(Model):
    """Settings for historical aggregation and forward projection."""

    default_months_ahead: PositiveIntGt0 = Field(
        default=6, description="Forecast horizon used when the caller omits one."
    )
    historical_statuses: FrozenSet[CommissionStatusEnum] = Field(
        default=frozenset({CommissionStatusEnum.APPROVED, CommissionStatusEnum.PAID}),
        description="Commission statuses counted as realized income in the historical series.",
    )


class GlobalSettings(Model):
    """Top-level container for all engine settings."""

    commission: CommissionSettings = Field(default_factory=CommissionSettings)
    forecast: ForecastSettings = Field(default_factory=ForecastSettings)
