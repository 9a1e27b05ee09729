# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Prometheus collectors.

Exports:
    HttpJsonCollector: Scrapes a JSON endpoint on every pull
    parse_json_body: Strict JSON decoding of a fetched body
"""

from http_json_exporter.collector.collector_http_json import (
    PATH_LABEL,
    HttpJsonCollector,
    parse_json_body,
)

__all__: list[str] = ["HttpJsonCollector", "PATH_LABEL", "parse_json_body"]
