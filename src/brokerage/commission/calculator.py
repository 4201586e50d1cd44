# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Transaction commission calculation.

Splits the commission generated by one property transaction across the
co-broking agency (if any), our agency and the individual agent:

    total       = transaction value x commission rate
    our agency  = total x co-broking split (100% without co-broking)
    agent       = our agency x tier percentage
    agency      = our agency - agent

All amounts are full-precision ``Decimal`` values. Rounding to currency
happens at presentation time, outside this module.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Iterable, Mapping, Optional, Union

import pandas as pd
from pydantic import Field, ValidationError, computed_field, field_validator

from ..core.primitives import (
    CommissionSettings,
    InvalidCoBrokingSplit,
    InvalidInput,
    Model,
)

logger = logging.getLogger(__name__)

HUNDRED = Decimal("100")


class CoBroking(Model):
    """
    Co-broking arrangement with another agency.

    Attributes:
        enabled: Whether another agency shares this transaction.
        commission_split: Percentage of the total commission kept by our
            agency; the remainder goes to the co-broking agency.
    """

    enabled: bool = False
    commission_split: Optional[Decimal] = Field(
        default=None,
        description="Percentage of total commission retained by our agency (0-100 exclusive).",
    )


class CommissionInput(Model):
    """
    Financial terms of one transaction.

    Only field types are checked here. Business rules (positive value and
    rate, known tier, co-broking split bounds) are enforced by
    ``calculate_commission`` so that every violation is reported as a
    commission error rather than a generic validation error.

    Example:
        ```python
        terms = CommissionInput(
            transaction_value=Decimal("500000"),
            commission_rate=Decimal("2.5"),
            agent_tier="Advisor",
            co_broking=CoBroking(enabled=True, commission_split=Decimal("60")),
        )
        ```
    """

    transaction_value: Decimal = Field(..., description="Sale or rental price")
    commission_rate: Decimal = Field(..., description="Commission rate in percent (2.5 = 2.5%)")
    agent_tier: str = Field(..., description="Agent rank, resolved against the tier schedule")
    co_broking: Optional[CoBroking] = None

    @field_validator("agent_tier", mode="before")
    @classmethod
    def normalize_agent_tier(cls, v: Any) -> Any:
        """Accept AgentTierEnum members as their plain names."""
        return getattr(v, "value", v)


class CommissionResult(Model):
    """
    Commission breakdown for one transaction.

    Identities that always hold:
        our_agency_commission + co_agency_commission == total_commission
        agent_share + agency_share == our_agency_commission

    ``co_agency_commission`` is the co-broker's external revenue and is
    zero when co-broking is disabled. It is not part of ``agency_share``.
    """

    transaction_value: Decimal
    commission_rate: Decimal
    total_commission: Decimal
    co_broking_enabled: bool
    our_agency_commission: Decimal
    co_agency_commission: Decimal
    agent_tier: str
    agent_commission_percentage: Decimal
    agent_share: Decimal
    agency_share: Decimal

    @computed_field
    @property
    def effective_rate(self) -> Decimal:
        """Total commission as a percentage of the transaction value."""
        return self.total_commission / self.transaction_value * HUNDRED


def _coerce_input(data: Union[CommissionInput, Mapping[str, Any]]) -> CommissionInput:
    if isinstance(data, CommissionInput):
        return data
    if not isinstance(data, Mapping):
        raise InvalidInput(
            f"Commission input must be a CommissionInput or a mapping, got {type(data).__name__}"
        )
    try:
        return CommissionInput.model_validate(data)
    except ValidationError as e:
        raise InvalidInput(f"Malformed commission input: {e}") from e


def _require_positive(value: Decimal, field_name: str) -> None:
    if not value.is_finite() or value <= 0:
        raise InvalidInput(f"{field_name} must be a positive number, got {value}")


def _resolve_agency_split(co_broking: Optional[CoBroking]) -> Decimal:
    """Percentage of the total commission that stays with our agency."""
    if co_broking is None or not co_broking.enabled:
        return HUNDRED

    split = co_broking.commission_split
    if split is None:
        raise InvalidCoBrokingSplit(
            "commission_split is required when co-broking is enabled"
        )
    if not split.is_finite() or not (0 < split < HUNDRED):
        raise InvalidCoBrokingSplit(
            f"commission_split must be between 0 and 100 (exclusive), got {split}"
        )
    return split


def calculate_commission(
    data: Union[CommissionInput, Mapping[str, Any]],
    settings: Optional[CommissionSettings] = None,
) -> CommissionResult:
    """
    Compute the commission breakdown for one transaction.

    Args:
        data: Transaction terms, as a ``CommissionInput`` or a mapping of its
            fields (e.g. a form payload)
        settings: Commission settings carrying the tier schedule; defaults
            to the standard brokerage ladder

    Returns:
        Full-precision ``CommissionResult``

    Raises:
        InvalidInput: Malformed input, non-positive value or rate, or an
            agent tier missing from the schedule
        InvalidCoBrokingSplit: Co-broking enabled with a missing split or
            one outside (0, 100)

    Example:
        ```python
        result = calculate_commission({
            "transaction_value": "500000",
            "commission_rate": "2.5",
            "agent_tier": "Advisor",
        })
        result.total_commission  # Decimal('12500.0')
        result.agent_share       # Decimal('8750.00')
        ```
    """
    settings = settings or CommissionSettings()
    terms = _coerce_input(data)

    _require_positive(terms.transaction_value, "transaction_value")
    _require_positive(terms.commission_rate, "commission_rate")
    agent_percentage = settings.tier_schedule.percentage_for(terms.agent_tier)
    agency_split = _resolve_agency_split(terms.co_broking)

    # Order matters: total -> co-broking split -> tier split, no intermediate rounding
    total_commission = terms.transaction_value * terms.commission_rate / HUNDRED
    our_agency_commission = total_commission * (agency_split / HUNDRED)
    co_agency_commission = total_commission - our_agency_commission
    agent_share = our_agency_commission * (agent_percentage / HUNDRED)
    agency_share = our_agency_commission - agent_share

    result = CommissionResult(
        transaction_value=terms.transaction_value,
        commission_rate=terms.commission_rate,
        total_commission=total_commission,
        co_broking_enabled=terms.co_broking is not None and terms.co_broking.enabled,
        our_agency_commission=our_agency_commission,
        co_agency_commission=co_agency_commission,
        agent_tier=terms.agent_tier,
        agent_commission_percentage=agent_percentage,
        agent_share=agent_share,
        agency_share=agency_share,
    )
    logger.debug(
        f"Commission for {terms.agent_tier}: total={total_commission}, "
        f"our_agency={our_agency_commission}, agent={agent_share}, agency={agency_share}"
    )
    return result


def commission_breakdown_frame(results: Iterable[CommissionResult]) -> pd.DataFrame:
    """
    Tabulate commission results for export (one row per transaction).

    Columns follow the ``CommissionResult`` field names, plus
    ``effective_rate``. Values stay ``Decimal``; callers round when writing
    CSV or spreadsheets.
    """
    rows = [result.model_dump() for result in results]
    columns = list(CommissionResult.model_fields) + ["effective_rate"]
    return pd.DataFrame(rows, columns=columns)
