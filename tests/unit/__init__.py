# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for brokerage components.

Each module is tested in isolation with in-memory inputs only.
"""
