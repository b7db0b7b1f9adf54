"""Errors raised while loading and persisting bound variables.

Every error here is non-fatal: the caller decides whether to abort the
current unit of work or the whole run. Callers attach the invoking source
position so reports can point back at the declaration or assignment.
"""

from __future__ import annotations

from pathlib import Path

from filebind.exceptions.base import FilebindError
from filebind.model import SourceInfo


class RunnerError(FilebindError):
    """An error tied to a source position during a run."""

    def __init__(self, message: str, *, source_info: SourceInfo, fatal: bool = False) -> None:
        super().__init__(message)
        self.message = message
        self.source_info = source_info
        self.fatal = fatal

    def describe(self) -> str:
        """Format as ``line:column: message``."""
        return f"{self.source_info.format()}: {self.message}"


class TemplateVariableNotDefinedError(RunnerError):
    """A template placeholder references a variable missing from the store."""

    def __init__(self, name: str, *, source_info: SourceInfo) -> None:
        super().__init__(f"you must set the variable {name}", source_info=source_info)
        self.name = name


class FileReadAccessError(RunnerError):
    """A bound file exists but could not be read to completion."""

    def __init__(self, path: Path, *, source_info: SourceInfo) -> None:
        super().__init__(f"file {path} can not be read", source_info=source_info)
        self.path = path


class FileWriteAccessError(RunnerError):
    """Persisting a bound variable to its file failed."""

    def __init__(self, path: Path, error: str, *, source_info: SourceInfo) -> None:
        super().__init__(f"{path} can not be written ({error})", source_info=source_info)
        self.path = path
        self.error = error
