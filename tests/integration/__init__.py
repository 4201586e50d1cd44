# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Integration tests for brokerage components.

These tests chain the commission engine, monthly aggregation and the
forecast engine the way a back-office dashboard does.
"""
