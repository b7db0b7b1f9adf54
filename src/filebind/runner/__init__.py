"""Runtime: values, variable store, templates and file bindings."""

from .bindings import BindingRegistry, strip_line_terminator
from .context_dir import ContextDir
from .session import RunSession
from .template import eval_template
from .value import (
    BoolValue,
    BytesValue,
    DateValue,
    FloatValue,
    IntegerValue,
    ListValue,
    NullValue,
    ObjectValue,
    StringValue,
    Value,
    render_value,
    repr_value,
    to_value,
)
from .variables import VariableSet

__all__ = [
    "BindingRegistry",
    "BoolValue",
    "BytesValue",
    "ContextDir",
    "DateValue",
    "FloatValue",
    "IntegerValue",
    "ListValue",
    "NullValue",
    "ObjectValue",
    "RunSession",
    "StringValue",
    "Value",
    "VariableSet",
    "eval_template",
    "render_value",
    "repr_value",
    "strip_line_terminator",
    "to_value",
]
