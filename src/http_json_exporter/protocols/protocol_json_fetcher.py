# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol for the fetch step of a scrape cycle.

The collector depends on this protocol rather than on JsonFetchHandler so
tests and alternative transports can supply the body directly.

Example:
    >>> class StaticFetcher:
    ...     def fetch(self, url: str, correlation_id: UUID | None = None) -> bytes:
    ...         return b'{"requests": 42}'
    ...
    ...     def close(self) -> None:
    ...         pass
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from uuid import UUID


@runtime_checkable
class ProtocolJsonFetcher(Protocol):
    """Fetches the raw body of the scrape URI.

    Methods:
        fetch: Perform one GET and return the body, or raise FetchError
        close: Release any held connections
    """

    def fetch(self, url: str, correlation_id: UUID | None = None) -> bytes: ...

    def close(self) -> None: ...


__all__ = ["ProtocolJsonFetcher"]
