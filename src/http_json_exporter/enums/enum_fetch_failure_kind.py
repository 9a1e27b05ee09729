# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Fetch failure classification for the JSON fetch handler."""

from enum import Enum


class EnumFetchFailureKind(str, Enum):
    """Why a single GET against the scrape URI failed."""

    TIMEOUT = "timeout"
    CONNECT_FAILED = "connect_failed"
    BAD_STATUS = "bad_status"
    READ_FAILED = "read_failed"


__all__ = ["EnumFetchFailureKind"]
