# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable models; every result is computed fresh from caller inputs, so
    nothing needs to be mutated after construction.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,  # pd.Period month fields
        frozen=True,
        extra="forbid",  # Catches typos and missing field definitions immediately
    )
