"""Tests for immutable mapping transformations."""

from collections import OrderedDict

import pytest

from immuta import (
    create_object,
    filter_,
    get,
    map_,
    merge,
    merge_deep,
    omit,
    pick,
    remove,
    remove_in,
    set_,
    to_array,
)

from tests.structstest import Employee


def test_create_object():
    assert create_object([("a", 1), ("b", 2), ("a", 3)]) == {"a": 3, "b": 2}


def test_get():
    assert get({"a": 1}, "a") == 1
    assert get({"a": 1}, "b") is None
    assert get({"a": 1}, "b", default=0) == 0
    assert get(None, "a") is None


class TestSetAndRemove:
    def test_set_returns_new_dict(self):
        source = {"key": "val"}
        result = set_(source, "key2", "val2")

        assert result == {"key": "val", "key2": "val2"}
        assert source == {"key": "val"}
        assert result is not source

    def test_set_overwrites(self):
        assert set_({"a": 1}, "a", 2) == {"a": 2}

    def test_set_on_none(self):
        assert set_(None, "a", 1) == {"a": 1}

    def test_remove(self):
        source = {"a": 1, "b": 2}
        assert remove(source, "a") == {"b": 2}
        assert source == {"a": 1, "b": 2}

    def test_remove_missing_key(self):
        source = {"a": 1}
        result = remove(source, "zzz")
        assert result == source
        assert result is not source

    def test_remove_keeps_keys_with_same_string_form(self):
        """1 and "1" are distinct keys; only the exact key is removed."""
        assert remove({1: "a", "1": "b"}, 1) == {"1": "b"}
        assert remove({1: "a", "1": "b"}, "1") == {1: "a"}
        assert remove({"1": "x"}, 1) == {"1": "x"}

    @pytest.mark.parametrize(
        "source, key",
        [
            ({1: "a", "1": "b"}, 1),
            ({1: "a", "1": "b"}, "1"),
            ({"1": "x"}, 1),
            ({"a": 1}, "zzz"),
        ],
    )
    def test_remove_agrees_with_remove_in(self, source, key):
        assert remove(source, key) == remove_in(source, [key])


class TestMerge:
    def test_shallow_merge(self):
        assert merge({"a": 1, "b": 2}, {"b": 3, "c": 4}) == {"a": 1, "b": 3, "c": 4}

    def test_shallow_merge_replaces_nested(self):
        assert merge({"a": {"x": 1}}, {"a": {"y": 2}}) == {"a": {"y": 2}}

    def test_merge_deep(self):
        assert merge_deep({"a": {"x": 1, "y": 2}}, {"a": {"y": 9}}) == {
            "a": {"x": 1, "y": 9}
        }

    def test_merge_deep_preserves_source_only_keys(self):
        source = {"a": {"b": {"c": 1, "d": 2}}, "keep": True}
        result = merge_deep(source, {"a": {"b": {"c": 5}, "e": 3}})

        assert result == {"a": {"b": {"c": 5, "d": 2}, "e": 3}, "keep": True}
        assert source == {"a": {"b": {"c": 1, "d": 2}}, "keep": True}

    def test_merge_deep_non_mapping_replaces(self):
        assert merge_deep({"a": {"x": 1}}, {"a": [1, 2]}) == {"a": [1, 2]}
        assert merge_deep({"a": 5}, {"a": {"x": 1}}) == {"a": {"x": 1}}

    def test_merge_deep_does_not_alias_incoming(self):
        incoming = {"a": {"x": 1}}
        result = merge_deep({}, incoming)
        assert result["a"] == incoming["a"]
        assert result["a"] is not incoming["a"]

    def test_merge_accepts_other_mappings(self):
        assert merge(OrderedDict(a=1), OrderedDict(b=2)) == {"a": 1, "b": 2}


class TestMapFilter:
    def test_map_values(self, employees):
        result = map_(employees, lambda v: v["name"].upper())
        assert result == {1: "NICK", 2: "STEVEN", 3: "KIMANI"}

    def test_map_callback_arguments(self, employees):
        """Callbacks receive value, key, index and the whole source."""
        calls = []

        def record(value, key, index, source):
            calls.append((key, index, source is employees))
            return index

        assert map_(employees, record) == {1: 0, 2: 1, 3: 2}
        assert calls == [(1, 0, True), (2, 1, True), (3, 2, True)]

    def test_map_by_field(self, employees):
        assert map_(employees, "team") == {1: "fleet", 2: "dispatch", 3: "fleet"}

    def test_filter(self, employees):
        result = filter_(employees, lambda v: v["admin"])
        assert list(result) == [1]
        assert result[1] is employees[1]

    def test_filter_by_key_and_index(self, employees):
        assert list(filter_(employees, lambda v, k: k > 1)) == [2, 3]
        assert list(filter_(employees, lambda v, k, i: i == 0)) == [1]

    def test_filter_by_field(self, employees):
        assert list(filter_(employees, "admin")) == [1]

    def test_builtin_callables(self):
        assert map_({"a": "x", "b": "yz"}, len) == {"a": 1, "b": 2}
        assert filter_({"a": 0, "b": 1}, bool) == {"b": 1}


class TestToArray:
    def test_values_in_order(self, employees):
        assert to_array(employees) == list(employees.values())

    def test_field_accessor(self, employees):
        assert to_array(employees, "name") == ["Nick", "Steven", "Kimani"]

    def test_function_accessor(self):
        source = {"a": {"n": 1}, "b": {"n": 2}}
        assert to_array(source, lambda v, k: {**v, "id": k}) == [
            {"n": 1, "id": "a"},
            {"n": 2, "id": "b"},
        ]

    def test_empty(self):
        assert to_array({}) == []
        assert to_array(None) == []


class TestPickOmit:
    def test_pick(self):
        source = {"first": "Nick", "last": "Coronado", "id": 1}
        assert pick(source, ["first", "last"]) == {"first": "Nick", "last": "Coronado"}

    def test_pick_ignores_unknown_fields(self):
        assert pick({"a": 1}, ["a", "missing"]) == {"a": 1}

    def test_pick_keeps_none_values(self):
        assert pick({"a": None, "b": 1}, ["a"]) == {"a": None}

    def test_omit(self):
        source = {"first": "Nick", "sign": "Capricorn", "id": 1}
        assert omit(source, ["sign"]) == {"first": "Nick", "id": 1}
        assert source == {"first": "Nick", "sign": "Capricorn", "id": 1}

    def test_omit_single_field(self):
        assert omit({"a": 1, "b": 2}, "a") == {"b": 2}


def test_model_source_is_dumped():
    """Pydantic models behave like their dumped dict."""
    employee = Employee(id=1, name="Nick", team="fleet")
    assert pick(employee, ["id", "name"]) == {"id": 1, "name": "Nick"}
    assert set_(employee, "team", "dispatch")["team"] == "dispatch"
    assert employee.team == "fleet"


@pytest.mark.parametrize("scalar", [5, "text", 3.5, True])
def test_scalar_source_is_empty_mapping(scalar):
    assert merge(scalar, {"a": 1}) == {"a": 1}
    assert to_array(scalar) == []
