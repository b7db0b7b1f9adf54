"""Declaration file data model."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from filebind.model import BindingParam
from filebind.runner.value import Value


@dataclass(frozen=True)
class FilebindConfig:
    """Resolved declaration file."""

    context_dir: Path
    variables: dict[str, Value] = field(default_factory=dict)
    bindings: tuple[BindingParam, ...] = ()
    source_path: Path | None = None
