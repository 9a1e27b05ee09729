# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""JSON Fetch Handler - bounded single GET using the httpx sync client.

Performs exactly one GET per call against the scrape URI. No retries; the
next Prometheus pull is the retry.

Deadline Semantics:
    ``timeout_seconds`` is one absolute deadline covering connect, headers
    and body, fixed when ``fetch`` is called. The GET runs on a worker
    thread and the caller waits on it for at most the remaining time, so a
    server that trickles headers or body bytes cannot hold the caller past
    the deadline.

    Inside the worker ``httpx.Timeout`` bounds every single transport step,
    and the deadline is re-checked after every network read of the body.
    A worker abandoned by its caller therefore stops within one read of the
    deadline and its result is discarded.

Security Features:
    - Configurable response size limit
    - Content-Length validated before the body is read
    - Running total enforced while streaming chunked bodies
    - Credentials in the URL never reach logs or error messages
"""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError
from typing import Optional
from uuid import UUID, uuid4

import httpx

from http_json_exporter.errors import (
    ExporterConfigurationError,
    FetchBadStatusError,
    FetchConnectionError,
    FetchReadError,
    FetchTimeoutError,
    ModelExporterErrorContext,
)
from http_json_exporter.utils import sanitize_url

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT_SECONDS: float = 5.0
_DEFAULT_MAX_RESPONSE_SIZE: int = 50 * 1024 * 1024  # 50 MB

# One active fetch plus workers still draining after their caller timed out
_MAX_FETCH_WORKERS: int = 4

# Size category thresholds for sanitized logging
_SIZE_THRESHOLD_KB: int = 1024
_SIZE_THRESHOLD_MB: int = 1024 * 1024
_SIZE_THRESHOLD_10MB: int = 10 * 1024 * 1024


def _categorize_size(size: int) -> str:
    """Categorize byte size into "small", "medium", "large" or "very_large"."""
    if size < _SIZE_THRESHOLD_KB:
        return "small"
    elif size < _SIZE_THRESHOLD_MB:
        return "medium"
    elif size < _SIZE_THRESHOLD_10MB:
        return "large"
    else:
        return "very_large"


class JsonFetchHandler:
    """Fetches the raw body of a JSON endpoint with one bounded GET.

    Args:
        timeout_seconds: Deadline for the whole fetch (connect, headers, body)
        max_response_size: Largest accepted body in bytes
        transport: Optional httpx transport (``httpx.MockTransport`` in tests)

    Example:
        >>> with JsonFetchHandler(timeout_seconds=5.0) as handler:
        ...     body = handler.fetch("http://actuator:8080/metrics")
    """

    def __init__(
        self,
        timeout_seconds: float = _DEFAULT_TIMEOUT_SECONDS,
        max_response_size: int = _DEFAULT_MAX_RESPONSE_SIZE,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        if timeout_seconds <= 0:
            raise ExporterConfigurationError(
                "timeout_seconds must be positive",
                context=ModelExporterErrorContext(
                    operation="initialize", target_name="json_fetch_handler"
                ),
                timeout_seconds=timeout_seconds,
            )
        if max_response_size <= 0:
            raise ExporterConfigurationError(
                "max_response_size must be positive",
                context=ModelExporterErrorContext(
                    operation="initialize", target_name="json_fetch_handler"
                ),
                max_response_size=max_response_size,
            )

        self._timeout: float = timeout_seconds
        self._max_response_size: int = max_response_size
        self._client: Optional[httpx.Client] = httpx.Client(
            timeout=httpx.Timeout(timeout_seconds),
            follow_redirects=True,
            headers={"Accept": "application/json"},
            transport=transport,
        )
        self._executor = ThreadPoolExecutor(
            max_workers=_MAX_FETCH_WORKERS, thread_name_prefix="json-fetch"
        )
        logger.info(
            "JsonFetchHandler initialized",
            extra={
                "timeout_seconds": self._timeout,
                "max_response_size": self._max_response_size,
            },
        )

    @property
    def timeout_seconds(self) -> float:
        return self._timeout

    def close(self) -> None:
        """Close the HTTP client and release pooled connections."""
        if self._client is not None:
            self._executor.shutdown(wait=False, cancel_futures=True)
            self._client.close()
            self._client = None
            logger.info("JsonFetchHandler closed")

    def __enter__(self) -> JsonFetchHandler:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def fetch(self, url: str, correlation_id: Optional[UUID] = None) -> bytes:
        """GET ``url`` and return the full response body.

        Returns no later than ``timeout_seconds`` after the call.

        Args:
            url: Absolute http(s) URL
            correlation_id: Scrape cycle correlation ID for error context

        Returns:
            The response body bytes.

        Raises:
            FetchTimeoutError: Connect, read, or overall deadline exceeded.
            FetchConnectionError: No response could be obtained.
            FetchBadStatusError: Status code outside [200, 300).
            FetchReadError: Body read failed or exceeded the size limit.
            ExporterConfigurationError: The handler was closed.
        """
        correlation_id = correlation_id or uuid4()
        safe_url = sanitize_url(url)
        ctx = ModelExporterErrorContext(
            operation="http.get",
            target_name=safe_url,
            correlation_id=correlation_id,
        )

        client = self._client
        if client is None:
            raise ExporterConfigurationError(
                "JsonFetchHandler is closed", context=ctx
            )

        deadline = time.monotonic() + self._timeout
        abandoned = threading.Event()
        future = self._executor.submit(
            self._fetch_in_worker, client, url, deadline, abandoned, ctx
        )
        try:
            body = future.result(timeout=max(deadline - time.monotonic(), 0.0))
        except FuturesTimeoutError as e:
            abandoned.set()
            raise FetchTimeoutError(
                f"HTTP GET not completed within {self._timeout}s",
                context=ctx,
                timeout_seconds=self._timeout,
            ) from e

        logger.debug(
            "Response body received",
            extra={
                "body_size_category": _categorize_size(len(body)),
                "url": safe_url,
                "correlation_id": str(correlation_id),
            },
        )
        return body

    def _fetch_in_worker(
        self,
        client: httpx.Client,
        url: str,
        deadline: float,
        abandoned: threading.Event,
        ctx: ModelExporterErrorContext,
    ) -> bytes:
        """Run the GET on an executor thread; errors surface via the future."""
        self._check_deadline(deadline, abandoned, ctx)
        try:
            with client.stream("GET", url) as response:
                self._check_deadline(deadline, abandoned, ctx)
                if not 200 <= response.status_code < 300:
                    raise FetchBadStatusError(
                        f"Unexpected HTTP status {response.status_code} from {ctx.target_name}",
                        status_code=response.status_code,
                        context=ctx,
                    )
                self._validate_content_length_header(response, ctx)
                return self._read_body_with_limit(response, deadline, abandoned, ctx)
        except httpx.TimeoutException as e:
            raise FetchTimeoutError(
                f"HTTP GET timed out after {self._timeout}s",
                context=ctx,
                timeout_seconds=self._timeout,
            ) from e
        except httpx.ConnectError as e:
            raise FetchConnectionError(
                f"Failed to connect to {ctx.target_name}", context=ctx
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchConnectionError(
                f"HTTP error during GET request: {type(e).__name__}", context=ctx
            ) from e

    def _check_deadline(
        self,
        deadline: float,
        abandoned: threading.Event,
        ctx: ModelExporterErrorContext,
    ) -> None:
        if abandoned.is_set() or time.monotonic() > deadline:
            raise FetchTimeoutError(
                f"HTTP GET not completed within {self._timeout}s",
                context=ctx,
                timeout_seconds=self._timeout,
            )

    def _validate_content_length_header(
        self, response: httpx.Response, ctx: ModelExporterErrorContext
    ) -> None:
        """Reject oversize responses before reading the body."""
        content_length_header = response.headers.get("content-length")
        if content_length_header is None:
            return

        try:
            content_length = int(content_length_header)
        except ValueError:
            logger.warning(
                "Invalid Content-Length header value",
                extra={
                    "content_length_header": content_length_header,
                    "url": ctx.target_name,
                    "correlation_id": str(ctx.correlation_id),
                },
            )
            return

        if content_length > self._max_response_size:
            raise FetchReadError(
                f"Response Content-Length ({_categorize_size(content_length)}) exceeds configured limit",
                context=ctx,
            )

    def _read_body_with_limit(
        self,
        response: httpx.Response,
        deadline: float,
        abandoned: threading.Event,
        ctx: ModelExporterErrorContext,
    ) -> bytes:
        """Read the body one network read at a time under the size limit and deadline."""
        chunks: list[bytes] = []
        total_size: int = 0

        try:
            # No chunk_size: one chunk per network read, no re-buffering
            for chunk in response.iter_bytes():
                total_size += len(chunk)
                if total_size > self._max_response_size:
                    raise FetchReadError(
                        f"Response body size ({_categorize_size(total_size)}) exceeds configured limit during streaming read",
                        context=ctx,
                    )
                self._check_deadline(deadline, abandoned, ctx)
                chunks.append(chunk)
        except httpx.TimeoutException:
            raise
        except httpx.HTTPError as e:
            raise FetchReadError(
                f"Failed to read response body: {type(e).__name__}", context=ctx
            ) from e

        self._check_deadline(deadline, abandoned, ctx)
        return b"".join(chunks)

    def describe(self) -> dict[str, object]:
        """Return handler metadata."""
        return {
            "handler": "json_fetch",
            "timeout_seconds": self._timeout,
            "max_response_size": self._max_response_size,
            "closed": self._client is None,
        }


__all__: list[str] = ["JsonFetchHandler"]
