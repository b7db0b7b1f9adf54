"""Run-scoped state that ties the variable store to its file bindings."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from filebind.model import BindingParam, SourceInfo
from filebind.runner.bindings import BindingRegistry
from filebind.runner.context_dir import ContextDir
from filebind.runner.value import Value, render_value
from filebind.runner.variables import VariableSet
from filebind.types import BindingSnapshot

logger = logging.getLogger(__name__)


@dataclass
class RunSession:
    """Variables and bindings owned by a single execution.

    The registry is consulted explicitly on every assignment; values never
    carry a reference back to their file.
    """

    context_dir: ContextDir
    variables: VariableSet = field(default_factory=VariableSet)
    bindings: BindingRegistry = field(default_factory=BindingRegistry)

    def load(self, binding_params: Iterable[BindingParam]) -> None:
        """Process binding declarations before execution starts."""
        self.bindings.process_bindings(binding_params, self.variables, self.context_dir)
        logger.debug("Session has %d bound variable(s)", len(self.bindings))

    def assign(self, name: str, value: Value, source_info: SourceInfo) -> bool:
        """Set ``name`` in the store and persist it when bound.

        Returns whether the value was written to a file. The in-memory
        assignment stands even if persisting raises.
        """
        self.variables.insert(name, value)
        if not self.bindings.is_bound(name):
            return False
        self.bindings.bind_variable(name, value, source_info)
        return True

    def snapshot(self) -> BindingSnapshot:
        """Return ``{name: {"file": path, "value": text or None}}`` for every binding."""
        result: BindingSnapshot = {}
        for name, path in sorted(self.bindings.mappings.items()):
            value = self.variables.get(name)
            result[name] = {
                "file": path,
                "value": render_value(value) if value is not None else None,
            }
        return result
