"""Declaration file loading and normalization."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from filebind.config.model import FilebindConfig
from filebind.constants.config import BINDING_ENTRY_KEYS, TOP_LEVEL_KEYS
from filebind.exceptions import ConfigError
from filebind.model import BindingParam, SourceInfo, Template
from filebind.runner.value import Value, to_value


def load_config(path: Path) -> FilebindConfig:
    """Load and validate a binding declaration file.

    Relative ``context_dir`` values are taken from the file's own directory,
    which is also the default context directory.
    """
    path = path.resolve()
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read config file {path}: {exc}") from exc

    try:
        root_node, raw = _compose_and_construct(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in TOP_LEVEL_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")

    context_dir_raw = raw.get("context_dir", ".")
    if not isinstance(context_dir_raw, str) or not context_dir_raw.strip():
        raise ConfigError("context_dir must be a non-empty string")

    return FilebindConfig(
        context_dir=(path.parent / context_dir_raw).resolve(),
        variables=_build_variables(raw.get("variables", {})),
        bindings=_build_bindings(raw.get("bindings"), _binding_positions(root_node)),
        source_path=path,
    )


def _compose_and_construct(text: str) -> tuple[yaml.Node | None, Any]:
    """Parse ``text`` once, returning the node tree (for positions) and its safe-loaded data."""
    loader = yaml.SafeLoader(text)
    try:
        node = loader.get_single_node()
        data = loader.construct_document(node) if node is not None else None
    finally:
        loader.dispose()
    return node, data


def _build_variables(raw: Any) -> dict[str, Value]:
    """Convert the ``variables`` mapping of scalars into values."""
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError("variables must be a mapping")

    variables: dict[str, Value] = {}
    for name, item in raw.items():
        if not isinstance(name, str):
            raise ConfigError(f"variables keys must be strings, got {name!r}")
        if item is not None and not isinstance(item, (str, int, float, bool)):
            raise ConfigError(f"variables.{name} must be a scalar")
        variables[name] = to_value(item)
    return variables


def _build_bindings(raw: Any, positions: list[dict[str, SourceInfo]]) -> tuple[BindingParam, ...]:
    """Validate the ``bindings`` list and attach YAML positions to each template."""
    if not isinstance(raw, list):
        raise ConfigError("bindings must be a list")

    params: list[BindingParam] = []
    for index, entry in enumerate(raw):
        key_name = f"bindings[{index}]"
        if not isinstance(entry, dict):
            raise ConfigError(f"{key_name} must be a mapping")

        unknown = sorted(str(key) for key in entry if key not in BINDING_ENTRY_KEYS)
        if unknown:
            raise ConfigError(f"{key_name} has unknown key(s): {', '.join(unknown)}")

        entry_positions = positions[index] if index < len(positions) else {}
        params.append(
            BindingParam(
                name=_template(entry, "name", key_name, entry_positions),
                filename=_template(entry, "file", key_name, entry_positions),
            )
        )
    return tuple(params)


def _template(entry: dict[str, Any], key: str, key_name: str, positions: dict[str, SourceInfo]) -> Template:
    value = entry.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key_name}.{key} must be a non-empty string")
    return Template(text=value, source_info=positions.get(key, SourceInfo()))


def _binding_positions(root: yaml.Node | None) -> list[dict[str, SourceInfo]]:
    """Return 1-based value positions for each ``bindings`` entry, keyed by field."""
    if not isinstance(root, yaml.MappingNode):
        return []

    for key_node, value_node in root.value:
        if key_node.value != "bindings" or not isinstance(value_node, yaml.SequenceNode):
            continue
        positions: list[dict[str, SourceInfo]] = []
        for item in value_node.value:
            fields: dict[str, SourceInfo] = {}
            if isinstance(item, yaml.MappingNode):
                for field_key, field_value in item.value:
                    mark = field_value.start_mark
                    fields[str(field_key.value)] = SourceInfo(line=mark.line + 1, column=mark.column + 1)
            positions.append(fields)
        return positions
    return []
