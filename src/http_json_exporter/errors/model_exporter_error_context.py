# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Exporter Error Context Configuration Model.

Bundles the structured fields shared by every exporter error so that error
constructors keep a short parameter list.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ModelExporterErrorContext(BaseModel):
    """Structured context attached to exporter errors.

    Attributes:
        operation: Operation being performed (fetch, parse_json, flatten, ...)
        target_name: Target resource, usually the sanitized scrape URI
        correlation_id: Scrape cycle correlation ID

    Example:
        >>> context = ModelExporterErrorContext(
        ...     operation="fetch",
        ...     target_name="http://actuator.local/metrics",
        ...     correlation_id=uuid4(),
        ... )
        >>> raise FetchConnectionError("Failed to connect", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: Optional[str] = Field(
        default=None,
        description="Operation being performed (fetch, parse_json, flatten, etc.)",
    )
    target_name: Optional[str] = Field(
        default=None,
        description="Target resource or endpoint name",
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Scrape cycle correlation ID for log correlation",
    )


__all__ = ["ModelExporterErrorContext"]
