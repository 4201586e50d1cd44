# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Brokerage test suite.

Unit tests mirror the package layout under ``unit/``; ``integration/``
exercises the commission-to-forecast pipeline end to end.
"""
