# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Command-line entry points."""

from http_json_exporter.cli.exporter_cli import cli, main

__all__: list[str] = ["cli", "main"]
