# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Installment payout schedules for agent commissions.

A brokerage rarely pays an agent's share in one lump: a payment schedule
spreads it over installments, each a percentage of the agent commission due
a fixed number of days after the transaction date.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from decimal import Decimal, InvalidOperation
from typing import Any, List, Optional, Union

import pandas as pd
from pydantic import Field, field_validator

from ..core.primitives import InstallmentStatusEnum, InvalidInput, Model
from ..core.primitives.types import PositiveInt, PositiveIntGt0

logger = logging.getLogger(__name__)

HUNDRED = Decimal("100")


class ScheduleInstallment(Model):
    """
    One step of a payment schedule.

    Examples:
        # Half at closing, half 30 days later
        [
            ScheduleInstallment(installment_number=1, percentage=Decimal("50"), days_after_transaction=0),
            ScheduleInstallment(installment_number=2, percentage=Decimal("50"), days_after_transaction=30),
        ]
    """

    installment_number: PositiveIntGt0
    percentage: Decimal = Field(..., gt=0, le=100)
    days_after_transaction: PositiveInt = 0
    description: Optional[str] = None


class PaymentSchedule(Model):
    """Named set of installments that together pay out 100% of a commission."""

    name: str
    installments: List[ScheduleInstallment] = Field(..., min_length=1)

    @field_validator("installments")
    @classmethod
    def validate_unique_numbers(
        cls, v: List[ScheduleInstallment]
    ) -> List[ScheduleInstallment]:
        numbers = [installment.installment_number for installment in v]
        if len(numbers) != len(set(numbers)):
            raise ValueError("Installment numbers must be unique within a schedule")
        return v

    @property
    def total_percentage(self) -> Decimal:
        return sum((i.percentage for i in self.installments), Decimal("0"))


class CommissionInstallment(Model):
    """A scheduled payout of part of an agent's commission."""

    installment_number: int
    amount: Decimal
    due_date: date
    status: InstallmentStatusEnum = InstallmentStatusEnum.PENDING
    notes: str


def _to_transaction_date(value: Any) -> date:
    """Accept a date, a datetime or ``pd.Timestamp`` (time dropped), or an ISO string."""
    if isinstance(value, datetime):
        if value is pd.NaT:
            raise InvalidInput("transaction_date is missing")
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value).date()
        except ValueError as e:
            raise InvalidInput(f"transaction_date is not an ISO date: {value!r}") from e
    raise InvalidInput(
        f"transaction_date must be a date or ISO date string, got {type(value).__name__}"
    )


def generate_installments(
    transaction_date: Union[date, str],
    agent_commission: Decimal,
    schedule: PaymentSchedule,
) -> List[CommissionInstallment]:
    """
    Expand a payment schedule into dated installments.

    Args:
        transaction_date: Date the transaction closed; datetimes and ISO
            strings such as ``"2024-01-31"`` are accepted
        agent_commission: Agent's commission to be paid out (usually
            ``CommissionResult.agent_share``)
        schedule: Payment schedule to apply

    Returns:
        Installments ordered by installment number, all ``Pending``

    Raises:
        InvalidInput: If the date is not recognizable, the commission is not
            positive or the schedule's percentages do not total 100
    """
    transaction_date = _to_transaction_date(transaction_date)
    try:
        agent_commission = Decimal(str(agent_commission))
    except InvalidOperation as e:
        raise InvalidInput(f"agent_commission is not a number: {agent_commission!r}") from e
    if not agent_commission.is_finite() or agent_commission <= 0:
        raise InvalidInput(
            f"agent_commission must be a positive number, got {agent_commission}"
        )

    total_percentage = schedule.total_percentage
    if total_percentage != HUNDRED:
        raise InvalidInput(
            f"Schedule '{schedule.name}' pays out {total_percentage}% of the commission; "
            "installment percentages must total 100"
        )

    installments = [
        CommissionInstallment(
            installment_number=step.installment_number,
            amount=agent_commission * step.percentage / HUNDRED,
            due_date=transaction_date + timedelta(days=step.days_after_transaction),
            notes=step.description or f"Installment {step.installment_number}",
        )
        for step in sorted(schedule.installments, key=lambda s: s.installment_number)
    ]
    logger.debug(
        f"Generated {len(installments)} installments for schedule '{schedule.name}'"
    )
    return installments
