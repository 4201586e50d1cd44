# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Brokerage - Commission and Forecast Engines for Real Estate Back Offices

Pure, deterministic calculations behind a brokerage's transaction workflow:
how each transaction's commission splits between our agency, a co-broking
agency and the agent, how agent commissions pay out in installments, and
how monthly commission income projects forward.

Key Entry Points:
- brokerage.commission.calculate_commission() - Commission breakdown for one transaction
- brokerage.commission.generate_installments() - Installment payout schedule
- brokerage.forecast.aggregate_monthly() - Monthly totals from commission records
- brokerage.forecast.build_forecast() - Flat-average forward projection
- brokerage.core.* - Settings, tier schedule and error taxonomy

Example Usage:
    ```python
    from brokerage.commission import calculate_commission
    from brokerage.forecast import build_forecast

    breakdown = calculate_commission({
        "transaction_value": "500000",
        "commission_rate": "2.5",
        "agent_tier": "Advisor",
    })
    print(f"Agent share: {breakdown.agent_share:,.2f}")

    result = build_forecast(history, months_ahead=6)
    print(f"Projected: {result.summary.total_projected_commission:,.2f}")
    ```
"""

import importlib
import logging

# Libraries stay silent unless the application configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "commission",
    "core",
    "forecast",
]


_LAZY_MODULES = {
    "commission": "brokerage.commission",
    "core": "brokerage.core",
    "forecast": "brokerage.forecast",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'brokerage' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
