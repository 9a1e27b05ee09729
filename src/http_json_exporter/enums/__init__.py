# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""HTTP JSON Exporter Enumerations Module.

Exports:
    EnumExporterErrorCode: Error classification carried by ExporterError
    EnumFetchFailureKind: Why a fetch of the scrape URI failed
    EnumJsonValueKind: Tagged variants of a decoded JSON value
"""

from http_json_exporter.enums.enum_exporter_error_code import EnumExporterErrorCode
from http_json_exporter.enums.enum_fetch_failure_kind import EnumFetchFailureKind
from http_json_exporter.enums.enum_json_value_kind import EnumJsonValueKind

__all__: list[str] = [
    "EnumExporterErrorCode",
    "EnumFetchFailureKind",
    "EnumJsonValueKind",
]
