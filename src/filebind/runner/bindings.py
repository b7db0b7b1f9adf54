"""Variables kept in sync with files on disk.

A ``BindingRegistry`` maps variable names to absolute file paths. Binding
declarations are processed once: each mapping is registered whether or not
its file exists yet, and an existing file hydrates the variable. After that,
every assignment is offered to ``bind_variable``, which persists registered
variables with a write-temp, fsync, rename protocol and then restricts the
file to its owner.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from filebind.constants.bindings import BINDING_TEMP_SUFFIX, BOUND_FILE_MODE, LINE_TERMINATORS
from filebind.exceptions import FileReadAccessError, FileWriteAccessError
from filebind.io import read_text_exact, write_text_atomic
from filebind.model import BindingParam, SourceInfo
from filebind.runner.context_dir import ContextDir
from filebind.runner.template import eval_template
from filebind.runner.value import StringValue, Value, render_value
from filebind.runner.variables import VariableSet

logger = logging.getLogger(__name__)


def strip_line_terminator(content: str) -> str:
    """Remove exactly one trailing line terminator, if present."""
    for terminator in LINE_TERMINATORS:
        if content.endswith(terminator):
            return content[: -len(terminator)]
    return content


class BindingRegistry:
    """Tracks which variables are synced to which files."""

    def __init__(self) -> None:
        self._mappings: dict[str, str] = {}

    def register(self, name: str, path: str) -> None:
        """Map ``name`` to ``path``, replacing any previous mapping."""
        previous = self._mappings.get(name)
        if previous is not None and previous != path:
            # The file at the old path is left in place.
            logger.debug("Rebinding %s: %s -> %s", name, previous, path)
        self._mappings[name] = path

    def is_bound(self, name: str) -> bool:
        return name in self._mappings

    def resolve(self, name: str) -> str | None:
        return self._mappings.get(name)

    @property
    def mappings(self) -> dict[str, str]:
        return dict(self._mappings)

    def __len__(self) -> int:
        return len(self._mappings)

    def process_bindings(
        self,
        binding_params: Iterable[BindingParam],
        variables: VariableSet,
        context_dir: ContextDir,
    ) -> None:
        """Register each declaration and hydrate variables from existing files.

        Declarations are handled in order. Template errors propagate as
        raised. The first unreadable file stops the pass with
        ``FileReadAccessError``; mappings registered before it are kept.
        """
        for param in binding_params:
            var_name = eval_template(param.name, variables)
            filename = eval_template(param.filename, variables)
            file_path = context_dir.resolved_path(Path(filename))

            self.register(var_name, str(file_path))

            # os.path.exists reports False on any stat error, matching "no file".
            if not os.path.exists(file_path):
                logger.debug("Bound %s to %s (no file yet)", var_name, file_path)
                continue

            try:
                content = read_text_exact(file_path)
            except (OSError, UnicodeDecodeError) as exc:
                raise FileReadAccessError(file_path, source_info=param.source_info) from exc

            variables.insert(var_name, StringValue(strip_line_terminator(content)))
            logger.debug("Bound %s to %s (hydrated)", var_name, file_path)

    def bind_variable(self, var_name: str, value: Value, source_info: SourceInfo) -> None:
        """Persist ``value`` to the file bound to ``var_name``; no-op when unbound.

        Raises:
            FileWriteAccessError: The parent directory could not be created,
                the value has no UTF-8 encoding, or the temp file could not
                be written, flushed or renamed.
                The target file is unchanged in every such case.
        """
        file_path = self._mappings.get(var_name)
        if file_path is None:
            return

        path = Path(file_path)
        content = render_value(value)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FileWriteAccessError(path, str(exc), source_info=source_info) from exc

        try:
            write_text_atomic(path=path, content=content, temp_suffix=BINDING_TEMP_SUFFIX)
        except (OSError, UnicodeEncodeError) as exc:
            raise FileWriteAccessError(path, str(exc), source_info=source_info) from exc

        _restrict_permissions(path)
        logger.debug("Wrote %s to %s", var_name, path)


def _restrict_permissions(path: Path) -> None:
    """Best-effort ``chmod 600``; failure leaves the file readable by others and is not raised."""
    if os.name != "posix":
        return
    try:
        os.chmod(path, BOUND_FILE_MODE)
    except OSError as exc:
        logger.warning("Could not restrict permissions on %s: %s", path, exc)
