"""Tests for value kinds and their canonical text form."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from filebind.runner import (
    BoolValue,
    BytesValue,
    DateValue,
    FloatValue,
    IntegerValue,
    ListValue,
    NullValue,
    ObjectValue,
    StringValue,
    render_value,
    repr_value,
    to_value,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (StringValue("  keep me \n"), "  keep me \n"),
        (IntegerValue(-12), "-12"),
        (FloatValue(1.0), "1.0"),
        (FloatValue(0.25), "0.25"),
        (BoolValue(True), "true"),
        (BoolValue(False), "false"),
        (NullValue(), "null"),
        (BytesValue(b"\x01\xab"), "hex, 01ab;"),
        (DateValue(datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)), "2024-05-01T12:30:00+00:00"),
        (ListValue((IntegerValue(1), StringValue("two"), NullValue())), '[1,"two",null]'),
        (ListValue(), "[]"),
        (ObjectValue((("id", IntegerValue(3)), ("name", StringValue("bob")))), '{"id":3,"name":"bob"}'),
    ],
    ids=[
        "string",
        "integer",
        "float-whole",
        "float-fraction",
        "true",
        "false",
        "null",
        "bytes",
        "date",
        "list",
        "empty-list",
        "object",
    ],
)
def test_render_value(value, expected: str) -> None:
    assert render_value(value) == expected


def test_repr_value_quotes_strings_only() -> None:
    assert repr_value(StringValue("x")) == '"x"'
    assert repr_value(IntegerValue(1)) == "1"


@pytest.mark.parametrize(
    ("obj", "expected"),
    [
        ("text", StringValue("text")),
        (True, BoolValue(True)),
        (3, IntegerValue(3)),
        (2.5, FloatValue(2.5)),
        (None, NullValue()),
        (b"\x00", BytesValue(b"\x00")),
        ([1, "a"], ListValue((IntegerValue(1), StringValue("a")))),
        ({"k": False}, ObjectValue((("k", BoolValue(False)),))),
    ],
    ids=["str", "bool", "int", "float", "none", "bytes", "list", "dict"],
)
def test_to_value_converts_native_objects(obj: object, expected) -> None:
    assert to_value(obj) == expected


def test_to_value_passes_values_through() -> None:
    value = IntegerValue(9)

    assert to_value(value) is value


def test_to_value_rejects_unsupported_types() -> None:
    with pytest.raises(TypeError, match="set"):
        to_value({1, 2})
