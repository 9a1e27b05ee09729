# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""JSON-to-path flattening.

Turns a decoded JSON document into ``(path, value)`` pairs, one per numeric
leaf. Paths start at ``$`` and grow one segment per level:

    - object member, key without ``.``:  ``$.key``
    - object member, key with ``.``:     ``$['a.key']``
    - array element at index ``i``:      ``$[i]``

Example:
    >>> sorted(flatten_json({"a": 1, "b.c": [2, "x", None, True]}))
    [JsonPathValue(path='$.a', value=1.0), JsonPathValue(path="$['b.c'][0]", value=2.0)]

Leaf Policy:
    Only numbers are published. Strings, nulls and booleans are dropped:
    the metric model stores float64 values and booleans are deliberately not
    treated as 0/1. Integers are widened to float, which is exact for every
    magnitude below 2**53.

Known Limitation:
    A literal ``'`` inside a bracketed key is not escaped, so a key such as
    ``"a.b']['c"`` can render the same path as a nested object. Paths are
    kept byte-compatible with existing dashboards rather than escaped.

Traversal is depth-first pre-order and driven by an explicit stack, so the
nesting depth of the document is bounded only by what the JSON decoder
accepted.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import NamedTuple, Union, cast

from http_json_exporter.enums import EnumJsonValueKind
from http_json_exporter.errors import FlattenInvariantError, ModelExporterErrorContext

logger = logging.getLogger(__name__)

ROOT_PATH: str = "$"

_JsonContainer = Union[list[object], dict[object, object]]


class JsonPathValue(NamedTuple):
    """One numeric JSON leaf: its path and its value widened to float."""

    path: str
    value: float


def classify_json_value(value: object, path: str = ROOT_PATH) -> EnumJsonValueKind:
    """Return the JSON variant of a decoded value.

    Args:
        value: A value produced by ``json.loads`` (or built to look like one)
        path: Path of the value, used only for the error message

    Raises:
        FlattenInvariantError: If the value is not a JSON variant.
    """
    if value is None:
        return EnumJsonValueKind.NULL
    # bool before number: bool is a subclass of int
    if isinstance(value, bool):
        return EnumJsonValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return EnumJsonValueKind.NUMBER
    if isinstance(value, str):
        return EnumJsonValueKind.STRING
    if isinstance(value, list):
        return EnumJsonValueKind.ARRAY
    if isinstance(value, dict):
        return EnumJsonValueKind.OBJECT

    raise FlattenInvariantError(
        f"Unexpected {type(value).__name__} at {path} in decoded JSON tree",
        context=ModelExporterErrorContext(operation="flatten"),
        path=path,
        value_type=type(value).__name__,
    )


def format_member_path(parent: str, key: str) -> str:
    """Append an object member segment to ``parent``."""
    if "." in key:
        return f"{parent}['{key}']"
    return f"{parent}.{key}"


def format_index_path(parent: str, index: int) -> str:
    """Append an array element segment to ``parent``."""
    return f"{parent}[{index}]"


def _iter_children(
    value: _JsonContainer, path: str
) -> Iterator[tuple[str, object]]:
    if isinstance(value, list):
        for index, child in enumerate(value):
            yield format_index_path(path, index), child
        return

    for key, child in value.items():
        if not isinstance(key, str):
            raise FlattenInvariantError(
                f"Non-string object key of type {type(key).__name__} at {path}",
                context=ModelExporterErrorContext(operation="flatten"),
                path=path,
                key_type=type(key).__name__,
            )
        yield format_member_path(path, key), child


def flatten_json(value: object, root: str = ROOT_PATH) -> Iterator[JsonPathValue]:
    """Lazily yield one JsonPathValue per numeric leaf of ``value``.

    The iterator is one-shot; call again on the same tree for a second pass.
    Pairs come out in depth-first pre-order, with object members in the
    dict's iteration order. Consumers treat the result as a set.

    Args:
        value: Decoded JSON document
        root: Path of ``value`` itself (``$`` for a whole document)

    Yields:
        JsonPathValue for every number in the tree.

    Raises:
        FlattenInvariantError: When a non-JSON value is reached.
    """
    stack: list[Iterator[tuple[str, object]]] = [iter(((root, value),))]
    while stack:
        try:
            path, node = next(stack[-1])
        except StopIteration:
            stack.pop()
            continue

        kind = classify_json_value(node, path)
        if kind is EnumJsonValueKind.NUMBER:
            try:
                number = float(cast(Union[int, float], node))
            except OverflowError as e:
                raise FlattenInvariantError(
                    f"Integer at {path} does not fit in a 64-bit float",
                    context=ModelExporterErrorContext(operation="flatten"),
                    path=path,
                ) from e
            yield JsonPathValue(path, number)
        elif kind is EnumJsonValueKind.ARRAY or kind is EnumJsonValueKind.OBJECT:
            stack.append(_iter_children(cast(_JsonContainer, node), path))
        else:
            logger.debug(
                "Skipping non-numeric leaf",
                extra={"path": path, "value_kind": kind.value},
            )


__all__: list[str] = [
    "JsonPathValue",
    "ROOT_PATH",
    "classify_json_value",
    "flatten_json",
    "format_index_path",
    "format_member_path",
]
