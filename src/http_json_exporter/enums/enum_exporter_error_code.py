# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Exporter Error Code Enumeration.

Classifies exporter errors for logging and for the ``error_type`` reported
in scrape outcomes.
"""

from enum import Enum


class EnumExporterErrorCode(str, Enum):
    """Error codes carried by every ExporterError.

    Attributes:
        OPERATION_FAILED: Generic failure (default for the base class)
        INVALID_CONFIGURATION: Configuration value missing or invalid
        FETCH_FAILED: The scrape endpoint could not be fetched
        PARSE_FAILED: The fetched body is not valid JSON
        INTERNAL_ERROR: An internal invariant was violated (programming error)
    """

    OPERATION_FAILED = "OPERATION_FAILED"
    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"
    FETCH_FAILED = "FETCH_FAILED"
    PARSE_FAILED = "PARSE_FAILED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


__all__ = ["EnumExporterErrorCode"]
