"""Variable store for one run.

Holds the live name -> value bindings. All access is single-threaded.
"""

from __future__ import annotations

from collections.abc import Mapping

from filebind.runner.value import Value, to_value


class VariableSet:
    """Maps variable names to ``Value`` instances."""

    def __init__(self) -> None:
        self._vars: dict[str, Value] = {}

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, object]) -> VariableSet:
        """Build a store from native Python objects."""
        variables = cls()
        for name, obj in mapping.items():
            variables.insert(name, to_value(obj))
        return variables

    def get(self, name: str) -> Value | None:
        return self._vars.get(name)

    def insert(self, name: str, value: Value) -> None:
        self._vars[name] = value

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __len__(self) -> int:
        return len(self._vars)

    def __repr__(self) -> str:
        return f"VariableSet({self._vars!r})"
