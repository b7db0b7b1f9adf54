"""Sandbox root used to resolve relative file paths."""

from __future__ import annotations

from pathlib import Path


class ContextDir:
    """Resolves declared file paths against an absolute file root.

    ``current_dir`` is the directory the run was started from; ``file_root``
    defaults to it and is the base for relative paths.
    """

    def __init__(self, current_dir: Path, file_root: Path | None = None) -> None:
        self.current_dir = current_dir.resolve()
        root = file_root if file_root is not None else self.current_dir
        self.file_root = (self.current_dir / root).resolve()

    def resolved_path(self, filename: Path) -> Path:
        if filename.is_absolute():
            return filename
        return self.file_root / filename

    def __repr__(self) -> str:
        return f"ContextDir(current_dir={self.current_dir!s}, file_root={self.file_root!s})"
