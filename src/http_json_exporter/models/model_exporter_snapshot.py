# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Point-in-time view of the collector's published state."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelExporterSnapshot(BaseModel):
    """Liveness gauge value and the full path-to-value metric store."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    up: float
    values: dict[str, float] = Field(default_factory=dict)


__all__ = ["ModelExporterSnapshot"]
