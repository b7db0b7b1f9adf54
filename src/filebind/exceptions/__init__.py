"""Shared exception hierarchy for Filebind."""

from __future__ import annotations

from .base import FilebindError
from .config import ConfigError
from .runner import FileReadAccessError, FileWriteAccessError, RunnerError, TemplateVariableNotDefinedError

__all__ = [
    "ConfigError",
    "FileReadAccessError",
    "FileWriteAccessError",
    "FilebindError",
    "RunnerError",
    "TemplateVariableNotDefinedError",
]
