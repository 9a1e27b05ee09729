# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Duration string parsing.

Accepts the duration syntax operators already use for exporter flags
(``5s``, ``250ms``, ``1m30s``, ``1.5h``) as well as a bare number of seconds.
"""

from __future__ import annotations

import math
import re

_UNIT_SECONDS: dict[str, float] = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_COMPONENT_PATTERN = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|s|m|h)")


def parse_duration(text: str) -> float:
    """Parse a duration string into seconds.

    Args:
        text: ``"5s"``, ``"1m30s"``, ``"250ms"`` or ``"2.5"`` (seconds)

    Returns:
        Duration in seconds.

    Raises:
        ValueError: If the text is empty, negative, or not a valid duration.

    Example:
        >>> parse_duration("1m30s")
        90.0
        >>> parse_duration("250ms")
        0.25
    """
    raw = text.strip()
    if not raw:
        raise ValueError("empty duration")

    try:
        seconds = float(raw)
    except ValueError:
        pass
    else:
        if seconds < 0 or not math.isfinite(seconds):
            raise ValueError(f"invalid duration {text!r}")
        return seconds

    position = 0
    total = 0.0
    while position < len(raw):
        match = _COMPONENT_PATTERN.match(raw, position)
        if match is None:
            raise ValueError(f"invalid duration {text!r}")
        total += float(match.group(1)) * _UNIT_SECONDS[match.group(2)]
        position = match.end()
    return total


__all__: list[str] = ["parse_duration"]
