# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol definitions for the HTTP JSON exporter."""

from http_json_exporter.protocols.protocol_json_fetcher import ProtocolJsonFetcher

__all__: list[str] = ["ProtocolJsonFetcher"]
