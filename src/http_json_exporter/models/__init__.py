# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""HTTP JSON Exporter Models.

Exports:
    ModelExporterConfig: Exporter configuration (defaults, env, flags)
    ModelExporterSnapshot: Liveness value plus metric store contents
    ModelScrapeOutcome: Result of one scrape cycle
"""

from http_json_exporter.models.model_exporter_config import ModelExporterConfig
from http_json_exporter.models.model_exporter_snapshot import ModelExporterSnapshot
from http_json_exporter.models.model_scrape_outcome import ModelScrapeOutcome

__all__: list[str] = [
    "ModelExporterConfig",
    "ModelExporterSnapshot",
    "ModelScrapeOutcome",
]
