# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""HTTP JSON Collector - one serialized scrape cycle per Prometheus pull.

Implements prometheus_client's custom collector protocol. Every call to
``collect()`` runs a full scrape cycle under the collector lock:

    1. fetch the scrape URI (JsonFetchHandler or any ProtocolJsonFetcher)
    2. decode the body as strict JSON
    3. flatten the document into (path, value) pairs
    4. overwrite ``<namespace>_value{path=...}`` for every pair
    5. set ``<namespace>_up`` to 1 on success, 0 on fetch/parse failure

and returns both metric families while still holding the lock, so every
pull observes the state produced by exactly one complete cycle.

Failure Semantics:
    FetchError and JsonParseError are logged at WARNING and reported as
    ``up == 0``. Previously published values stay in place (stale but
    present); consumers treat ``up == 0`` as "values not fresh".
    FlattenInvariantError propagates: it signals a corrupted decoded tree,
    not an unhealthy endpoint.

Stale Paths:
    The metric store is never cleared. A path that disappears from later
    responses keeps its last published value until the process restarts.
"""

from __future__ import annotations

import json
import logging
import math
import sys
import threading
import time
from collections.abc import Iterable
from typing import Optional
from uuid import UUID, uuid4

from prometheus_client import Gauge
from prometheus_client.metrics_core import Metric
from prometheus_client.registry import Collector

from http_json_exporter.errors import (
    FetchError,
    JsonParseError,
    ModelExporterErrorContext,
)
from http_json_exporter.flattener import flatten_json
from http_json_exporter.handlers import JsonFetchHandler
from http_json_exporter.models import (
    ModelExporterConfig,
    ModelExporterSnapshot,
    ModelScrapeOutcome,
)
from http_json_exporter.protocols import ProtocolJsonFetcher
from http_json_exporter.utils import sanitize_error_message, sanitize_url

logger = logging.getLogger(__name__)

PATH_LABEL: str = "path"


def _reject_constant(name: str) -> object:
    raise ValueError(f"Non-standard JSON constant {name}")


def _parse_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"Number {text[:32]} is out of float64 range")
    return value


def _parse_int(text: str) -> int:
    value = int(text)
    if abs(value) > sys.float_info.max:
        raise ValueError(f"Number {text[:32]}... is out of float64 range")
    return value


def parse_json_body(
    body: bytes, correlation_id: Optional[UUID] = None, target_name: str | None = None
) -> object:
    """Decode a response body as strict JSON.

    ``NaN``/``Infinity`` literals and numbers outside the float64 range are
    rejected, as is nesting deep enough to exhaust the recursion limit.

    Args:
        body: Raw response body (UTF-8, UTF-16 or UTF-32)
        correlation_id: Scrape cycle correlation ID for error context
        target_name: Sanitized scrape URI for error context

    Raises:
        JsonParseError: If the body is not a valid JSON document.
    """
    try:
        return json.loads(
            body,
            parse_constant=_reject_constant,
            parse_float=_parse_float,
            parse_int=_parse_int,
        )
    except RecursionError as e:
        raise JsonParseError(
            "JSON document is nested too deeply",
            context=ModelExporterErrorContext(
                operation="parse_json",
                target_name=target_name,
                correlation_id=correlation_id,
            ),
        ) from e
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueError
        raise JsonParseError(
            f"Invalid JSON body: {e}",
            context=ModelExporterErrorContext(
                operation="parse_json",
                target_name=target_name,
                correlation_id=correlation_id,
            ),
        ) from e


class HttpJsonCollector(Collector):
    """Prometheus collector exposing the numeric leaves of a JSON endpoint.

    Args:
        config: Exporter configuration (scrape URI, timeout, namespace, ...)
        fetcher: Optional fetcher; defaults to a JsonFetchHandler built from
            ``config``

    Example:
        >>> registry = CollectorRegistry()
        >>> collector = HttpJsonCollector(ModelExporterConfig(scrape_uri=url))
        >>> registry.register(collector)
        >>> generate_latest(registry)  # runs one scrape cycle
    """

    def __init__(
        self,
        config: ModelExporterConfig,
        fetcher: Optional[ProtocolJsonFetcher] = None,
    ) -> None:
        self._config = config
        self._safe_url = sanitize_url(config.scrape_uri)
        if fetcher is None:
            fetcher = JsonFetchHandler(
                timeout_seconds=config.timeout_seconds,
                max_response_size=config.max_response_size,
            )
        self._fetcher: ProtocolJsonFetcher = fetcher
        self._lock = threading.Lock()

        # registry=None: these wrappers are emitted by collect(), never registered
        self._up = Gauge(
            "up",
            "Was the last scrape of JSON successful",
            namespace=config.namespace,
            registry=None,
        )
        self._value = Gauge(
            "value",
            "JSON value",
            [PATH_LABEL],
            namespace=config.namespace,
            registry=None,
        )

        logger.info(
            "HttpJsonCollector initialized",
            extra={
                "scrape_uri": self._safe_url,
                "timeout_seconds": config.timeout_seconds,
                "namespace": config.namespace,
            },
        )

    @property
    def config(self) -> ModelExporterConfig:
        return self._config

    def describe(self) -> Iterable[Metric]:
        """Return sample-less families so registration never triggers a scrape."""
        return [*self._value.describe(), *self._up.describe()]

    def collect(self) -> Iterable[Metric]:
        """Run one scrape cycle and return the resulting metric families."""
        with self._lock:
            self._run_scrape_cycle_locked()
            return [*self._value.collect(), *self._up.collect()]

    def run_scrape_cycle(self) -> ModelScrapeOutcome:
        """Run one scrape cycle, waiting for any cycle already in progress."""
        with self._lock:
            return self._run_scrape_cycle_locked()

    def snapshot(self) -> ModelExporterSnapshot:
        """Return the liveness value and metric store as of the last cycle."""
        with self._lock:
            up_samples = self._up.collect()[0].samples
            values = {
                sample.labels[PATH_LABEL]: sample.value
                for sample in self._value.collect()[0].samples
            }
            return ModelExporterSnapshot(up=up_samples[0].value, values=values)

    def close(self) -> None:
        """Close the underlying fetcher."""
        self._fetcher.close()

    def _run_scrape_cycle_locked(self) -> ModelScrapeOutcome:
        correlation_id = uuid4()
        started = time.perf_counter()

        try:
            body = self._fetcher.fetch(self._config.scrape_uri, correlation_id)
            document = parse_json_body(body, correlation_id, self._safe_url)
            # Fully materialized before the first store write
            pairs = tuple(flatten_json(document))
        except (FetchError, JsonParseError) as e:
            duration = time.perf_counter() - started
            self._up.set(0)
            error_message = sanitize_error_message(e)
            logger.warning(
                "Scrape of %s failed: %s",
                self._safe_url,
                error_message,
                extra={
                    "correlation_id": str(correlation_id),
                    "error_code": e.error_code.value,
                    "duration_seconds": round(duration, 6),
                },
            )
            return ModelScrapeOutcome(
                success=False,
                correlation_id=correlation_id,
                duration_seconds=duration,
                error_type=type(e).__name__,
                error_message=error_message,
            )

        for pair in pairs:
            logger.debug("%s => %s", pair.path, pair.value)
            self._value.labels(pair.path).set(pair.value)
        self._up.set(1)

        duration = time.perf_counter() - started
        logger.debug(
            "Scrape cycle completed",
            extra={
                "correlation_id": str(correlation_id),
                "pair_count": len(pairs),
                "duration_seconds": round(duration, 6),
            },
        )
        return ModelScrapeOutcome(
            success=True,
            pairs=pairs,
            correlation_id=correlation_id,
            duration_seconds=duration,
        )


__all__: list[str] = ["HttpJsonCollector", "PATH_LABEL", "parse_json_body"]
