"""Declaration-side data models: source positions, templates and bindings."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SourceInfo:
    """1-based position of a construct in its declaration source."""

    line: int = 1
    column: int = 1

    def format(self) -> str:
        """Format as ``line:column``."""
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Template:
    """A string that may contain ``{{ name }}`` placeholders."""

    text: str
    source_info: SourceInfo = field(default_factory=SourceInfo)


@dataclass(frozen=True)
class BindingParam:
    """Declaration binding a variable name to a file, both templated."""

    name: Template
    filename: Template

    @property
    def source_info(self) -> SourceInfo:
        return self.name.source_info
