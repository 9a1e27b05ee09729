# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""JSON flattening: decoded JSON document to (path, number) pairs."""

from http_json_exporter.flattener.json_flattener import (
    ROOT_PATH,
    JsonPathValue,
    classify_json_value,
    flatten_json,
    format_index_path,
    format_member_path,
)

__all__: list[str] = [
    "JsonPathValue",
    "ROOT_PATH",
    "classify_json_value",
    "flatten_json",
    "format_index_path",
    "format_member_path",
]
