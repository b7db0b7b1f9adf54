"""Declaration file defaults and keys."""

from __future__ import annotations

CONFIG_FILENAME: str = "filebind.yaml"

TOP_LEVEL_KEYS: frozenset[str] = frozenset({"context_dir", "variables", "bindings"})
BINDING_ENTRY_KEYS: frozenset[str] = frozenset({"name", "file"})
