# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Scrape Cycle Outcome Model."""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from http_json_exporter.flattener import JsonPathValue


class ModelScrapeOutcome(BaseModel):
    """Result of one fetch, parse, flatten and publish cycle.

    Attributes:
        success: True when fetch, parse and flatten all completed
        pairs: Pairs written to the metric store (empty on failure)
        correlation_id: Correlation ID of the cycle, also present in its logs
        duration_seconds: Wall-clock duration of the cycle
        error_type: Exception class name when the cycle failed
        error_message: Sanitized error message when the cycle failed
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    success: bool
    pairs: tuple[JsonPathValue, ...] = Field(default=())
    correlation_id: UUID
    duration_seconds: float = Field(ge=0.0)
    error_type: Optional[str] = None
    error_message: Optional[str] = None

    @property
    def pair_count(self) -> int:
        return len(self.pairs)


__all__ = ["ModelScrapeOutcome"]
