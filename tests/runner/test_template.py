"""Tests for placeholder rendering."""

from __future__ import annotations

import pytest

from filebind.exceptions import RunnerError, TemplateVariableNotDefinedError
from filebind.model import SourceInfo, Template
from filebind.runner import VariableSet, eval_template


def test_plain_text_passes_through() -> None:
    assert eval_template(Template("secrets/token.txt"), VariableSet()) == "secrets/token.txt"


@pytest.mark.parametrize(
    "text",
    ["{{env}}/token.txt", "{{ env }}/token.txt", "{{  env\t}}/token.txt"],
    ids=["tight", "spaced", "mixed-whitespace"],
)
def test_placeholder_whitespace_is_ignored(text: str) -> None:
    variables = VariableSet.from_mapping({"env": "prod"})

    assert eval_template(Template(text), variables) == "prod/token.txt"


def test_non_string_variables_use_canonical_form() -> None:
    variables = VariableSet.from_mapping({"shard": 3, "debug": True})

    assert eval_template(Template("data/{{shard}}-{{debug}}.txt"), variables) == "data/3-true.txt"


def test_undefined_variable_raises_with_source_info() -> None:
    template = Template("{{missing}}.txt", SourceInfo(line=4, column=11))

    with pytest.raises(TemplateVariableNotDefinedError) as exc_info:
        eval_template(template, VariableSet())

    error = exc_info.value
    assert isinstance(error, RunnerError)
    assert error.name == "missing"
    assert error.fatal is False
    assert error.describe() == "4:11: you must set the variable missing"


def test_single_braces_are_literal() -> None:
    assert eval_template(Template("{env}"), VariableSet()) == "{env}"
