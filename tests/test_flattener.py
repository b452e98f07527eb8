"""
Tests for record flattening.
"""

from slack_sheets.engine.flattener import flatten_record, flatten_records


def test_nested_keys_are_dot_joined():
    record = {"a": 1, "b": {"c": 2, "d": {"e": 3}}}
    assert flatten_record(record) == {"a": 1, "b.c": 2, "b.d.e": 3}


def test_empty_record():
    assert flatten_record({}) == {}


def test_empty_nested_record_vanishes():
    assert flatten_record({"a": {}}) == {}
    assert flatten_record({"a": 1, "b": {}, "c": {"d": {}}}) == {"a": 1}


def test_lists_are_not_recursed_into():
    record = {"ids": [1, 2], "nested": [{"x": 1}], "meta": {"tags": ["a"]}}
    flat = flatten_record(record)
    assert flat == {"ids": [1, 2], "nested": [{"x": 1}], "meta.tags": ["a"]}


def test_no_value_is_a_mapping():
    record = {"profile": {"fields": {"Xf01": {"value": "v", "alt": ""}}, "email": "e"}, "id": "U1"}
    flat = flatten_record(record)
    assert not any(isinstance(value, dict) for value in flat.values())
    assert flat["profile.fields.Xf01.value"] == "v"
    assert flat["profile.fields.Xf01.alt"] == ""


def test_primitive_values_are_kept_as_is():
    record = {"none": None, "zero": 0, "false": False, "float": 1.5}
    assert flatten_record(record) == record


def test_key_order_follows_input():
    flat = flatten_record({"z": 1, "a": {"y": 2, "b": 3}, "m": 4})
    assert list(flat) == ["z", "a.y", "a.b", "m"]


def test_custom_separator():
    assert flatten_record({"a": {"b": 1}}, separator="__") == {"a__b": 1}


def test_flatten_records():
    records = [{"a": {"b": 1}}, {"a": {"b": 2}, "c": 3}]
    assert flatten_records(records) == [{"a.b": 1}, {"a.b": 2, "c": 3}]
