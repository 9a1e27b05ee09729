# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""HTTP JSON Exporter - republish JSON endpoint values as Prometheus gauges.

On every Prometheus pull the exporter fetches a JSON document from a
configured HTTP endpoint, flattens every numeric leaf into a
``(path, value)`` pair and publishes it as ``<namespace>_value{path="..."}``,
alongside a ``<namespace>_up`` liveness gauge.

Key Components:
    - JsonFetchHandler: bounded single-GET HTTP fetcher (httpx)
    - flatten_json: pure JSON-to-path flattening
    - HttpJsonCollector: prometheus_client custom collector running one
      serialized scrape cycle per pull
    - make_exporter_app: WSGI app serving the telemetry path and landing page
"""

__version__ = "0.1.0"

__all__: list[str] = ["__version__"]
