"""Tests for the literal encoder."""

import datetime
import enum

import pytest

from expectkit.encoding import encode, format_number, render, to_js_string
from expectkit.values import ValueKind, kind_of, undefined


# --- numbers ---


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "0"),
        (4, "4"),
        (-7, "-7"),
        (4.0, "4"),
        (-0.0, "0"),
        (0.1, "0.1"),
        (123.456, "123.456"),
        (1e20, "100000000000000000000"),
        (1e21, "1e+21"),
        (float(2**60), "1152921504606847000"),
        (1.2345678901234568e20, "123456789012345680000"),
        (1.5e300, "1.5e+300"),
        (0.000001, "0.000001"),
        (1e-7, "1e-7"),
        (-2.5e-8, "-2.5e-8"),
        (float("nan"), "null"),
        (float("inf"), "null"),
        (float("-inf"), "null"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


# --- encode ---


def test_encode_scalars():
    assert encode(None) == "null"
    assert encode(True) == "true"
    assert encode(False) == "false"
    assert encode("héllo") == '"héllo"'
    assert encode('say "hi"\n') == '"say \\"hi\\"\\n"'


def test_encode_undefined_has_no_encoding():
    assert encode(undefined) is undefined
    assert encode(len) is undefined


def test_encode_sequence_replaces_missing_with_null():
    assert encode([1, undefined, None, len]) == "[1,null,null,null]"


def test_encode_mapping_drops_missing_members():
    assert encode({"a": 1, "b": undefined, "c": None}) == '{"a":1,"c":null}'


def test_encode_mapping_keeps_insertion_order():
    assert encode({"b": 1, "a": 2}) == '{"b":1,"a":2}'


def test_encode_map_like_keys_use_string_form():
    assert encode({1: True, None: 2.0}) == '{"1":true,"null":2}'


def test_encode_nested():
    assert encode({"a": [1, {"b": []}]}) == '{"a":[1,{"b":[]}]}'


class _Color(enum.Enum):
    RED = "red"


def test_encode_objects_through_plain_conversion():
    assert encode(_Color.RED) == '"red"'
    assert encode(datetime.date(2024, 1, 2)) == '"2024-01-02"'


def test_encode_cycle_raises():
    cyclic = {}
    cyclic["me"] = cyclic
    with pytest.raises(ValueError, match="Circular reference detected"):
        encode(cyclic)


def test_render_shows_undefined():
    assert render(undefined) == "undefined"
    assert render([1, "a"]) == '[1,"a"]'


# --- to_js_string ---


def test_to_js_string():
    assert to_js_string(None) == "null"
    assert to_js_string(undefined) == "undefined"
    assert to_js_string(1.0) == "1"
    assert to_js_string(float("nan")) == "NaN"
    assert to_js_string(float("-inf")) == "-Infinity"
    assert to_js_string(["a", None, 1]) == "a,,1"
    assert to_js_string({"a": 1}) == "[object Object]"
    assert to_js_string({1: 1}) == "[object Map]"


def test_to_js_string_of_self_containing_list():
    cyclic = [1]
    cyclic.append(cyclic)
    assert to_js_string(cyclic) == "1,"


# --- kinds ---


@pytest.mark.parametrize(
    "value, kind",
    [
        (None, ValueKind.NULL),
        (undefined, ValueKind.UNDEFINED),
        (0, ValueKind.PRIMITIVE),
        ("s", ValueKind.PRIMITIVE),
        ([], ValueKind.SEQUENCE),
        ((1,), ValueKind.SEQUENCE),
        ({}, ValueKind.MAPPING),
        ({"a": 1}, ValueKind.MAPPING),
        ({1: "a"}, ValueKind.ASSOCIATIVE_MAP),
    ],
)
def test_kind_of(value, kind):
    assert kind_of(value) is kind


def test_undefined_is_a_falsy_singleton():
    import copy

    assert not undefined
    assert repr(undefined) == "undefined"
    assert copy.deepcopy(undefined) is undefined
