# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Integration tests for the HTTP JSON exporter.

Test Categories:
    - Real HTTP fetches against a local JSON endpoint
    - Exposition served by the threaded WSGI server
    - Failure reporting (bad status, timeout, unreachable endpoint)
    - Concurrent pulls
"""
