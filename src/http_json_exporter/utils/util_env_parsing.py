# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Type-safe environment variable parsing with range validation.

Rules shared by every parser in this module:
    - Variable unset: the default is returned
    - Variable set but not parseable (including empty): ExporterConfigurationError
    - Value outside ``[min_value, max_value]``: WARNING logged, default returned
"""

from __future__ import annotations

import logging
import math
import os

from http_json_exporter.errors import (
    ExporterConfigurationError,
    ModelExporterErrorContext,
)

logger = logging.getLogger(__name__)


def _check_range(
    env_var: str,
    value: float,
    default: float,
    min_value: float | None,
    max_value: float | None,
) -> bool:
    if min_value is not None and value < min_value:
        logger.warning(
            "Value for %s below minimum, using default",
            env_var,
            extra={"value": value, "min_value": min_value, "default": default},
        )
        return False
    if max_value is not None and value > max_value:
        logger.warning(
            "Value for %s above maximum, using default",
            env_var,
            extra={"value": value, "max_value": max_value, "default": default},
        )
        return False
    return True


def parse_env_float(
    env_var: str,
    default: float,
    *,
    min_value: float | None = None,
    max_value: float | None = None,
    service_name: str = "http_json_exporter",
) -> float:
    """Parse a float environment variable.

    Args:
        env_var: Environment variable name
        default: Value used when unset or out of range
        min_value: Inclusive lower bound
        max_value: Inclusive upper bound
        service_name: Component name recorded in the error context

    Returns:
        The parsed value or ``default``.

    Raises:
        ExporterConfigurationError: If the variable is set but not numeric.
    """
    raw = os.environ.get(env_var)
    if raw is None:
        return default

    try:
        value = float(raw)
    except ValueError as e:
        ctx = ModelExporterErrorContext(
            operation="parse_env_float",
            target_name=service_name,
        )
        raise ExporterConfigurationError(
            f"Invalid value for {env_var}: expected numeric value",
            context=ctx,
            env_var=env_var,
        ) from e

    if math.isnan(value):
        ctx = ModelExporterErrorContext(
            operation="parse_env_float",
            target_name=service_name,
        )
        raise ExporterConfigurationError(
            f"Invalid value for {env_var}: expected numeric value, got NaN",
            context=ctx,
            env_var=env_var,
        )

    if not _check_range(env_var, value, default, min_value, max_value):
        return default
    return value


def parse_env_int(
    env_var: str,
    default: int,
    *,
    min_value: int | None = None,
    max_value: int | None = None,
    service_name: str = "http_json_exporter",
) -> int:
    """Parse an integer environment variable.

    Same rules as :func:`parse_env_float`; values such as ``"1.5"`` are
    rejected rather than truncated.
    """
    raw = os.environ.get(env_var)
    if raw is None:
        return default

    try:
        value = int(raw)
    except ValueError as e:
        ctx = ModelExporterErrorContext(
            operation="parse_env_int",
            target_name=service_name,
        )
        raise ExporterConfigurationError(
            f"Invalid value for {env_var}: expected integer value",
            context=ctx,
            env_var=env_var,
        ) from e

    if not _check_range(env_var, value, default, min_value, max_value):
        return default
    return value


__all__: list[str] = ["parse_env_float", "parse_env_int"]
