# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""HTTP exposition of exporter metrics."""

from http_json_exporter.exposition.exporter_app import (
    LANDING_PAGE_TITLE,
    make_exporter_app,
    make_exporter_server,
    parse_listen_address,
    render_landing_page,
    serve_exporter,
)

__all__: list[str] = [
    "LANDING_PAGE_TITLE",
    "make_exporter_app",
    "make_exporter_server",
    "parse_listen_address",
    "render_landing_page",
    "serve_exporter",
]
