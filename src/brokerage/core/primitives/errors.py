# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Error taxonomy for commission and forecast calculations.

All errors derive from ``ValueError``. The engines raise these eagerly and
never clamp or default bad values.
"""


class BrokerageError(ValueError):
    """Base class for all commission and forecast errors."""


class InvalidInput(BrokerageError):
    """Malformed or out-of-range commission input (value, rate, tier, installments)."""


class InvalidCoBrokingSplit(BrokerageError):
    """Co-broking is enabled but the split is missing or outside (0, 100)."""


class InvalidRange(BrokerageError):
    """Forecast horizon is not a positive number of months."""


class InvalidHistoricalData(BrokerageError):
    """A historical monthly point is malformed (bad date, negative amount, duplicate month)."""
