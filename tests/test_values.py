import json

import pytest

from ddotelmap.values import (
    MismatchedTypeError,
    ValueType,
    as_string,
    str_value,
    value_type,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("a string", ValueType.STR),
        (True, ValueType.BOOL),
        (False, ValueType.BOOL),
        (1000, ValueType.INT),
        (1.5, ValueType.DOUBLE),
        ([], ValueType.SLICE),
        (["192.168.1.1", True], ValueType.SLICE),
        ({"a": 1}, ValueType.MAP),
        (b"raw", ValueType.BYTES),
        (None, ValueType.EMPTY),
    ],
)
def test_value_type(value, expected):
    assert value_type(value) is expected


def test_value_type_names_match_error_format():
    assert str(value_type("x")) == "Str"
    assert str(value_type(True)) == "Bool"
    assert str(value_type([])) == "Slice"


def test_value_type_rejects_unsupported():
    with pytest.raises(TypeError):
        value_type(object())


def test_mismatched_type_error_message():
    err = MismatchedTypeError("host.ip", ValueType.STR, ValueType.SLICE)
    assert str(err) == '"host.ip" has type "Str", expected type "Slice" instead'
    assert err.name == "host.ip"
    assert err.actual_type is ValueType.STR
    assert err.expected_type is ValueType.SLICE


def test_mismatched_type_error_bool_message():
    err = MismatchedTypeError("os.description", ValueType.BOOL, ValueType.STR)
    assert str(err) == '"os.description" has type "Bool", expected type "Str" instead'


def test_mismatched_type_error_int_message_and_fields():
    err = MismatchedTypeError("x", ValueType.INT, ValueType.STR)
    assert str(err) == '"x" has type "Int", expected type "Str" instead'
    assert err.actual_type is ValueType.INT
    assert err.expected_type is ValueType.STR


def test_mismatched_type_error_equality():
    a = MismatchedTypeError("k", ValueType.INT, ValueType.STR)
    b = MismatchedTypeError("k", ValueType.INT, ValueType.STR)
    c = MismatchedTypeError("k", ValueType.BOOL, ValueType.STR)
    assert a == b
    assert hash(a) == hash(b)
    assert not (a == c)


def test_as_string_int():
    assert as_string(1000) == "1000"


def test_as_string_str_identity():
    assert as_string("host-1-hostid") == "host-1-hostid"


def test_as_string_bool():
    assert as_string(True) == "true"
    assert as_string(False) == "false"


def test_as_string_integral_float_has_no_fraction():
    assert as_string(12288000.0) == "12288000"


def test_as_string_map_round_trips_as_json():
    value = {"b": [1, "x", True], "a": {"nested": 2.5}}
    assert json.loads(as_string(value)) == value


def test_as_string_slice_round_trips_as_json():
    value = ["192.168.1.140", "fe80::abc2:4a28:737a:609e"]
    assert json.loads(as_string(value)) == value


def test_as_string_empty():
    assert as_string(None) == ""


def test_str_value():
    assert str_value("value") == "value"
    assert str_value(5) == ""
    assert str_value(None) == ""
    assert str_value(["value"]) == ""