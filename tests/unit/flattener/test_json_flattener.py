# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for the JSON flattener.

Tests cover:
    - Path grammar (dot members, bracketed dotted keys, array indexes)
    - Leaf policy (numbers kept, strings/nulls/booleans dropped)
    - Empty containers at any depth
    - Determinism and independence from key order
    - Invariant faults for values no JSON decoder produces
"""

from __future__ import annotations

import json
from collections import OrderedDict
from decimal import Decimal

import pytest

from http_json_exporter.enums import EnumJsonValueKind
from http_json_exporter.errors import FlattenInvariantError
from http_json_exporter.flattener import (
    ROOT_PATH,
    JsonPathValue,
    classify_json_value,
    flatten_json,
    format_index_path,
    format_member_path,
)


def _as_dict(value: object) -> dict[str, float]:
    return {pair.path: pair.value for pair in flatten_json(value)}


@pytest.mark.unit
class TestPathFormatting:
    def test_member_without_dot_uses_dot_notation(self) -> None:
        assert format_member_path("$", "heap") == "$.heap"

    def test_member_with_dot_uses_bracket_notation(self) -> None:
        assert format_member_path("$", "mem.free") == "$['mem.free']"

    def test_quote_in_bracketed_key_is_not_escaped(self) -> None:
        assert format_member_path("$", "it's.here") == "$['it's.here']"

    def test_index_segment(self) -> None:
        assert format_index_path("$.items", 3) == "$.items[3]"

    def test_empty_key_uses_dot_notation(self) -> None:
        assert format_member_path("$", "") == "$."


@pytest.mark.unit
class TestScalarRoots:
    @pytest.mark.parametrize("value", [0, 42, -7, 3.5, 1e-9, 2**53 - 1])
    def test_numeric_root_yields_root_path(self, value: float) -> None:
        assert list(flatten_json(value)) == [JsonPathValue(ROOT_PATH, float(value))]

    @pytest.mark.parametrize("value", [None, True, False, "", "12"])
    def test_non_numeric_root_yields_nothing(self, value: object) -> None:
        assert list(flatten_json(value)) == []

    def test_integer_widened_to_float(self) -> None:
        (pair,) = flatten_json(12)
        assert isinstance(pair.value, float)
        assert pair.value == 12.0

    def test_large_integer_below_2_pow_53_is_exact(self) -> None:
        (pair,) = flatten_json(2**53 - 1)
        assert int(pair.value) == 2**53 - 1


@pytest.mark.unit
class TestContainers:
    def test_object_with_plain_and_dotted_keys(self) -> None:
        assert _as_dict({"a": 1, "b.c": 2}) == {"$.a": 1.0, "$['b.c']": 2.0}

    def test_array_indexes(self) -> None:
        assert _as_dict([1, 2, 3]) == {"$[0]": 1.0, "$[1]": 2.0, "$[2]": 3.0}

    def test_nested_drops_non_numeric_leaves(self) -> None:
        document = {"a": {"b": [True, None, "x", 5]}}
        assert _as_dict(document) == {"$.a.b[3]": 5.0}

    def test_array_of_objects(self) -> None:
        document = {"pools": [{"used": 10}, {"used": 20, "name": "old"}]}
        assert _as_dict(document) == {
            "$.pools[0].used": 10.0,
            "$.pools[1].used": 20.0,
        }

    def test_dotted_key_below_dotted_key(self) -> None:
        document = {"jvm.memory": {"heap.used": 512}}
        assert _as_dict(document) == {"$['jvm.memory']['heap.used']": 512.0}

    def test_nested_arrays(self) -> None:
        assert _as_dict([[1], [2, [3]]]) == {
            "$[0][0]": 1.0,
            "$[1][0]": 2.0,
            "$[1][1][0]": 3.0,
        }

    @pytest.mark.parametrize(
        "document",
        [{}, [], {"a": {}}, {"a": []}, [[], {}], {"a": [{"b": {}}]}],
    )
    def test_empty_containers_yield_nothing(self, document: object) -> None:
        assert list(flatten_json(document)) == []

    def test_empty_subtree_next_to_values(self) -> None:
        assert _as_dict({"a": {}, "b": [], "c": 1}) == {"$.c": 1.0}

    def test_container_subclasses_are_traversed(self) -> None:
        class Members(OrderedDict):
            pass

        class Items(list):
            pass

        document = Members([("a", Items([1, Members([("b.c", 2)])]))])

        assert _as_dict(document) == {"$.a[0]": 1.0, "$.a[1]['b.c']": 2.0}

    def test_numeric_subclass_is_widened(self) -> None:
        class Count(int):
            pass

        assert _as_dict({"n": Count(7)}) == {"$.n": 7.0}


@pytest.mark.unit
class TestOrderingAndDeterminism:
    def test_depth_first_pre_order(self) -> None:
        document = {"a": [1, {"b": 2}], "c": 3}
        assert [pair.path for pair in flatten_json(document)] == [
            "$.a[0]",
            "$.a[1].b",
            "$.c",
        ]

    def test_same_tree_twice_gives_same_pairs(self) -> None:
        document = {"x": [1, 2, {"y.z": 3}], "w": 4.5}
        assert list(flatten_json(document)) == list(flatten_json(document))

    def test_key_order_does_not_change_pair_set(self) -> None:
        forward = json.loads('{"a": 1, "b": {"c": 2, "d": [3]}}')
        backward = json.loads('{"b": {"d": [3], "c": 2}, "a": 1}')
        assert set(flatten_json(forward)) == set(flatten_json(backward))

    def test_result_is_lazy_and_one_shot(self) -> None:
        pairs = flatten_json({"a": 1, "b": 2})
        assert next(pairs) == JsonPathValue("$.a", 1.0)
        assert list(pairs) == [JsonPathValue("$.b", 2.0)]
        assert list(pairs) == []

    def test_custom_root(self) -> None:
        assert list(flatten_json({"a": 1}, root="doc")) == [
            JsonPathValue("doc.a", 1.0)
        ]


@pytest.mark.unit
class TestDeepDocuments:
    def test_nesting_beyond_recursion_limit(self) -> None:
        depth = 3000
        document: object = 7
        for _ in range(depth):
            document = [document]
        (pair,) = flatten_json(document)
        assert pair.path == "$" + "[0]" * depth
        assert pair.value == 7.0


@pytest.mark.unit
class TestClassification:
    @pytest.mark.parametrize(
        ("value", "kind"),
        [
            (None, EnumJsonValueKind.NULL),
            (True, EnumJsonValueKind.BOOLEAN),
            (False, EnumJsonValueKind.BOOLEAN),
            (0, EnumJsonValueKind.NUMBER),
            (1.5, EnumJsonValueKind.NUMBER),
            ("1", EnumJsonValueKind.STRING),
            ([], EnumJsonValueKind.ARRAY),
            ({}, EnumJsonValueKind.OBJECT),
        ],
    )
    def test_json_variants(self, value: object, kind: EnumJsonValueKind) -> None:
        assert classify_json_value(value) is kind

    @pytest.mark.parametrize("value", [(1, 2), {1, 2}, Decimal("1.5"), b"1", object()])
    def test_non_json_value_is_invariant_fault(self, value: object) -> None:
        with pytest.raises(FlattenInvariantError):
            classify_json_value(value)


@pytest.mark.unit
class TestInvariantFaults:
    def test_non_json_leaf_raises_when_reached(self) -> None:
        pairs = flatten_json({"a": 1, "b": (2, 3)})
        assert next(pairs) == JsonPathValue("$.a", 1.0)
        with pytest.raises(FlattenInvariantError) as exc_info:
            next(pairs)
        assert exc_info.value.context["path"] == "$.b"

    def test_non_string_key_raises(self) -> None:
        with pytest.raises(FlattenInvariantError, match="Non-string object key"):
            list(flatten_json({1: 2}))

    def test_integer_too_large_for_float_raises(self) -> None:
        with pytest.raises(FlattenInvariantError, match="64-bit float"):
            list(flatten_json({"big": 10**400}))
