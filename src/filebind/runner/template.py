"""Placeholder expansion for templated names and filenames."""

from __future__ import annotations

import re

from filebind.constants.template import PLACEHOLDER_PATTERN
from filebind.exceptions import TemplateVariableNotDefinedError
from filebind.model import Template
from filebind.runner.value import render_value
from filebind.runner.variables import VariableSet


def eval_template(template: Template, variables: VariableSet) -> str:
    """Render ``template``, substituting each ``{{ name }}`` with the variable's canonical form.

    Raises:
        TemplateVariableNotDefinedError: A placeholder names a variable that
            is not in ``variables``.
    """

    def _substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        value = variables.get(name)
        if value is None:
            raise TemplateVariableNotDefinedError(name, source_info=template.source_info)
        return render_value(value)

    return PLACEHOLDER_PATTERN.sub(_substitute, template.text)
