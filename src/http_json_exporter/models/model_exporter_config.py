# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Exporter Configuration Model.

Pydantic model holding every value the exporter consumes: the scrape target,
its timeout, where to serve metrics, and the metric namespace.

Configuration Sources (later wins):
    1. Field defaults
    2. Environment variables via :meth:`ModelExporterConfig.from_env`
    3. Command-line flags (see ``http_json_exporter.cli``)

Security Note:
    ``scrape_uri`` may contain basic-auth credentials. Never log it directly;
    use ``sanitize_url``.
"""

from __future__ import annotations

import os
import re
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator

from http_json_exporter.exposition.exporter_app import parse_listen_address
from http_json_exporter.utils import parse_env_float, parse_env_int

ENV_PREFIX: str = "HTTP_JSON_EXPORTER_"

DEFAULT_SCRAPE_URI: str = "http://localhost/metrics"
DEFAULT_TIMEOUT_SECONDS: float = 5.0
DEFAULT_LISTEN_ADDRESS: str = ":9101"
DEFAULT_TELEMETRY_PATH: str = "/metrics"
DEFAULT_NAMESPACE: str = "http_json"
DEFAULT_MAX_RESPONSE_SIZE: int = 50 * 1024 * 1024  # 50 MB

TIMEOUT_MIN_SECONDS: float = 0.001
TIMEOUT_MAX_SECONDS: float = 3600.0
MAX_RESPONSE_SIZE_LIMIT: int = 1024 * 1024 * 1024  # 1 GB

_NAMESPACE_PATTERN = re.compile(r"^[a-zA-Z_:][a-zA-Z0-9_:]*$")


class ModelExporterConfig(BaseModel):
    """Configuration for the HTTP JSON exporter.

    Attributes:
        scrape_uri: HTTP(S) URL of the JSON document to scrape
        timeout_seconds: Combined connect and read deadline for one fetch
        listen_address: ``[host]:port`` the exporter serves on
        telemetry_path: HTTP path serving the Prometheus exposition
        namespace: Metric name prefix (``<namespace>_up``, ``<namespace>_value``)
        max_response_size: Largest accepted response body in bytes

    Example:
        >>> config = ModelExporterConfig(
        ...     scrape_uri="http://actuator:8080/metrics",
        ...     timeout_seconds=2.5,
        ... )
        >>> config.namespace
        'http_json'
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    scrape_uri: str = Field(
        default=DEFAULT_SCRAPE_URI,
        description="HTTP JSON API URL scraped on every pull",
    )
    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        ge=TIMEOUT_MIN_SECONDS,
        le=TIMEOUT_MAX_SECONDS,
        description="Deadline for connecting to and reading from the scrape URI",
    )
    listen_address: str = Field(
        default=DEFAULT_LISTEN_ADDRESS,
        description="Address to listen on for the landing page and telemetry",
    )
    telemetry_path: str = Field(
        default=DEFAULT_TELEMETRY_PATH,
        description="Path under which to expose metrics",
    )
    namespace: str = Field(
        default=DEFAULT_NAMESPACE,
        min_length=1,
        description="Prefix for exported metric names",
    )
    max_response_size: int = Field(
        default=DEFAULT_MAX_RESPONSE_SIZE,
        ge=1,
        le=MAX_RESPONSE_SIZE_LIMIT,
        description="Maximum response body size in bytes",
    )

    @field_validator("scrape_uri", mode="after")
    @classmethod
    def validate_scrape_uri(cls, v: str) -> str:
        """Require an absolute http or https URL with a host."""
        try:
            parts = urlsplit(v)
        except ValueError as e:
            raise ValueError(f"scrape_uri is not a valid URL: {e}") from e
        if parts.scheme not in ("http", "https"):
            raise ValueError("scrape_uri must use the http or https scheme")
        if not parts.hostname:
            raise ValueError("scrape_uri must include a host")
        return v

    @field_validator("listen_address", mode="after")
    @classmethod
    def validate_listen_address(cls, v: str) -> str:
        parse_listen_address(v)
        return v

    @field_validator("telemetry_path", mode="after")
    @classmethod
    def validate_telemetry_path(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError("telemetry_path must start with '/'")
        return v

    @field_validator("namespace", mode="after")
    @classmethod
    def validate_namespace(cls, v: str) -> str:
        if not _NAMESPACE_PATTERN.match(v):
            raise ValueError(
                f"namespace '{v}' is not a valid Prometheus metric name prefix"
            )
        return v

    @classmethod
    def from_env(cls, **overrides: object) -> ModelExporterConfig:
        """Create config from ``HTTP_JSON_EXPORTER_*`` environment variables.

        Args:
            **overrides: Field values that take precedence over the environment

        Raises:
            ExporterConfigurationError: If a numeric variable is not numeric.
            pydantic.ValidationError: If a resulting field value is invalid.
        """
        values: dict[str, object] = {
            "scrape_uri": os.environ.get(f"{ENV_PREFIX}SCRAPE_URI", DEFAULT_SCRAPE_URI),
            "timeout_seconds": parse_env_float(
                f"{ENV_PREFIX}TIMEOUT",
                DEFAULT_TIMEOUT_SECONDS,
                min_value=TIMEOUT_MIN_SECONDS,
                max_value=TIMEOUT_MAX_SECONDS,
            ),
            "listen_address": os.environ.get(
                f"{ENV_PREFIX}LISTEN_ADDRESS", DEFAULT_LISTEN_ADDRESS
            ),
            "telemetry_path": os.environ.get(
                f"{ENV_PREFIX}TELEMETRY_PATH", DEFAULT_TELEMETRY_PATH
            ),
            "namespace": os.environ.get(f"{ENV_PREFIX}NAMESPACE", DEFAULT_NAMESPACE),
            "max_response_size": parse_env_int(
                f"{ENV_PREFIX}MAX_RESPONSE_SIZE",
                DEFAULT_MAX_RESPONSE_SIZE,
                min_value=1,
                max_value=MAX_RESPONSE_SIZE_LIMIT,
            ),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(values)


__all__ = [
    "DEFAULT_LISTEN_ADDRESS",
    "DEFAULT_MAX_RESPONSE_SIZE",
    "DEFAULT_NAMESPACE",
    "DEFAULT_SCRAPE_URI",
    "DEFAULT_TELEMETRY_PATH",
    "DEFAULT_TIMEOUT_SECONDS",
    "ENV_PREFIX",
    "ModelExporterConfig",
]
