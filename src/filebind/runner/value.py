"""Runtime values and their canonical text form.

Values form a closed set of kinds. ``render_value`` is the single
canonical-string operation used both for persisted file content and for
template substitution; ``repr_value`` is the quoted form used for items
nested inside lists and objects.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import assert_never


@dataclass(frozen=True)
class StringValue:
    value: str


@dataclass(frozen=True)
class IntegerValue:
    value: int


@dataclass(frozen=True)
class FloatValue:
    value: float


@dataclass(frozen=True)
class BoolValue:
    value: bool


@dataclass(frozen=True)
class NullValue:
    pass


@dataclass(frozen=True)
class BytesValue:
    value: bytes


@dataclass(frozen=True)
class DateValue:
    value: datetime


@dataclass(frozen=True)
class ListValue:
    items: tuple[Value, ...] = ()


@dataclass(frozen=True)
class ObjectValue:
    entries: tuple[tuple[str, Value], ...] = ()


type Value = (
    StringValue
    | IntegerValue
    | FloatValue
    | BoolValue
    | NullValue
    | BytesValue
    | DateValue
    | ListValue
    | ObjectValue
)

VALUE_KINDS: tuple[type, ...] = (
    StringValue,
    IntegerValue,
    FloatValue,
    BoolValue,
    NullValue,
    BytesValue,
    DateValue,
    ListValue,
    ObjectValue,
)


def render_value(value: Value) -> str:
    """Return the canonical text form of ``value``.

    Strings pass through unchanged; every other kind uses its display form.
    """
    match value:
        case StringValue(value=text):
            return text
        case BoolValue(value=flag):
            return "true" if flag else "false"
        case IntegerValue(value=number):
            return str(number)
        case FloatValue(value=number):
            return repr(number)
        case NullValue():
            return "null"
        case BytesValue(value=data):
            return f"hex, {data.hex()};"
        case DateValue(value=moment):
            return moment.isoformat()
        case ListValue(items=items):
            return "[" + ",".join(repr_value(item) for item in items) + "]"
        case ObjectValue(entries=entries):
            return "{" + ",".join(f'"{key}":{repr_value(item)}' for key, item in entries) + "}"
        case _:
            assert_never(value)


def repr_value(value: Value) -> str:
    """Like ``render_value`` but with strings double-quoted."""
    if isinstance(value, StringValue):
        return f'"{value.value}"'
    return render_value(value)


def to_value(obj: object) -> Value:
    """Convert a native Python object into a ``Value``."""
    if isinstance(obj, VALUE_KINDS):
        return obj  # type: ignore[return-value]
    if obj is None:
        return NullValue()
    # bool is a subclass of int.
    if isinstance(obj, bool):
        return BoolValue(obj)
    if isinstance(obj, int):
        return IntegerValue(obj)
    if isinstance(obj, float):
        return FloatValue(obj)
    if isinstance(obj, str):
        return StringValue(obj)
    if isinstance(obj, (bytes, bytearray)):
        return BytesValue(bytes(obj))
    if isinstance(obj, datetime):
        return DateValue(obj)
    if isinstance(obj, (list, tuple)):
        return ListValue(tuple(to_value(item) for item in obj))
    if isinstance(obj, Mapping):
        return ObjectValue(tuple((str(key), to_value(item)) for key, item in obj.items()))
    raise TypeError(f"Unsupported value type: {type(obj).__name__}")
