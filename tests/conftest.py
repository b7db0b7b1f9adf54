"""Shared pytest fixtures for binding tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from filebind.model import BindingParam, SourceInfo, Template
from filebind.runner import BindingRegistry, ContextDir, VariableSet

type BindingFactory = Callable[..., BindingParam]


@pytest.fixture
def context_dir(tmp_path: Path) -> ContextDir:
    """Return a context directory rooted at the test's temp dir."""
    return ContextDir(tmp_path)


@pytest.fixture
def variables() -> VariableSet:
    return VariableSet()


@pytest.fixture
def registry() -> BindingRegistry:
    return BindingRegistry()


@pytest.fixture
def make_binding() -> BindingFactory:
    """Return a factory building a ``BindingParam`` from plain strings."""

    def _make(name: str, filename: str, line: int = 1) -> BindingParam:
        return BindingParam(
            name=Template(name, SourceInfo(line=line, column=7)),
            filename=Template(filename, SourceInfo(line=line + 1, column=7)),
        )

    return _make
