# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for http_json_exporter tests."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Callable
from uuid import UUID

import pytest
from prometheus_client import CollectorRegistry

from http_json_exporter.models import ModelExporterConfig

# =============================================================================
# Fake Fetchers
# =============================================================================


class FakeJsonFetcher:
    """In-memory ProtocolJsonFetcher.

    Each ``fetch`` consumes the next queued item; the last item repeats
    forever. Items are bytes (returned) or exceptions (raised).
    """

    def __init__(self, *responses: bytes | BaseException) -> None:
        if not responses:
            raise ValueError("FakeJsonFetcher needs at least one response")
        self._responses: deque[bytes | BaseException] = deque(responses)
        self._lock = threading.Lock()
        self.calls: list[tuple[str, UUID | None]] = []
        self.closed = False

    def fetch(self, url: str, correlation_id: UUID | None = None) -> bytes:
        with self._lock:
            self.calls.append((url, correlation_id))
            item = (
                self._responses.popleft()
                if len(self._responses) > 1
                else self._responses[0]
            )
        if isinstance(item, BaseException):
            raise item
        return item

    def close(self) -> None:
        self.closed = True


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def fake_fetcher_factory() -> Callable[..., FakeJsonFetcher]:
    """Return the FakeJsonFetcher class for building per-test fetchers."""
    return FakeJsonFetcher


@pytest.fixture
def exporter_config() -> ModelExporterConfig:
    """Exporter config pointing at a placeholder scrape URI."""
    return ModelExporterConfig(
        scrape_uri="http://actuator.test:8080/metrics",
        timeout_seconds=1.0,
    )


@pytest.fixture
def isolated_registry() -> CollectorRegistry:
    """Create an isolated Prometheus registry for test isolation.

    The default REGISTRY is global and persists across tests; isolated
    registries keep each test's collectors separate.
    """
    return CollectorRegistry()
