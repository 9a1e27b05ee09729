# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Outbound protocol handlers.

Exports:
    JsonFetchHandler: Bounded single-GET fetcher for the scrape URI
"""

from http_json_exporter.handlers.handler_json_fetch import JsonFetchHandler

__all__: list[str] = ["JsonFetchHandler"]
