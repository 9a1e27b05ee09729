# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""JSON Value Kind Enumeration.

Tags the variants a decoded JSON value can take. The flattener dispatches
on these tags instead of on raw Python types.
"""

from enum import Enum


class EnumJsonValueKind(str, Enum):
    """Variants of a decoded JSON value.

    Attributes:
        NULL: JSON ``null`` (Python ``None``)
        BOOLEAN: JSON ``true``/``false`` (Python ``bool``)
        NUMBER: JSON number (Python ``int`` or ``float``, never ``bool``)
        STRING: JSON string
        ARRAY: JSON array (Python ``list``)
        OBJECT: JSON object (Python ``dict`` with ``str`` keys)
    """

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


__all__ = ["EnumJsonValueKind"]
