# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Utility modules for the HTTP JSON exporter.

This package provides:
    - util_duration: Duration flag parsing (``5s``, ``250ms``, ``1m30s``)
    - util_env_parsing: Type-safe environment variable parsing with validation
    - util_error_sanitization: URL and error message sanitization for logs
"""

from http_json_exporter.utils.util_duration import parse_duration
from http_json_exporter.utils.util_env_parsing import (
    parse_env_float,
    parse_env_int,
)
from http_json_exporter.utils.util_error_sanitization import (
    SENSITIVE_PATTERNS,
    sanitize_error_message,
    sanitize_error_string,
    sanitize_url,
)

__all__: list[str] = [
    "SENSITIVE_PATTERNS",
    "parse_duration",
    "parse_env_float",
    "parse_env_int",
    "sanitize_error_message",
    "sanitize_error_string",
    "sanitize_url",
]
