"""Text read/write helpers with atomic, durable persistence."""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager, suppress
from pathlib import Path
from typing import BinaryIO

from filebind.constants.bindings import BOUND_FILE_ENCODING, BOUND_FILE_MODE


def temp_path_for(path: Path, temp_suffix: str) -> Path:
    """Return the sibling temporary path used while replacing ``path``."""
    return path.with_name(path.name + temp_suffix)


@contextmanager
def atomic_replace(path: Path, *, temp_suffix: str) -> Iterator[BinaryIO]:
    """Yield a handle on a sibling temp file, then fsync and rename it over ``path``.

    The temp file lives in the same directory as ``path`` so the final
    ``os.replace`` never crosses filesystems. On any exception, raised by
    the caller's block or by the flush or rename, the temp file is removed
    and ``path`` is left exactly as it was.
    """
    temp_path = temp_path_for(path, temp_suffix)
    committed = False
    fd = os.open(temp_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, BOUND_FILE_MODE)
    try:
        with os.fdopen(fd, "wb") as handle:
            yield handle
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(temp_path, path)
        committed = True
    finally:
        if not committed:
            with suppress(FileNotFoundError):
                temp_path.unlink()


def write_text_atomic(*, path: Path, content: str, temp_suffix: str) -> None:
    """Persist ``content`` verbatim (no newline translation) via ``atomic_replace``."""
    with atomic_replace(path, temp_suffix=temp_suffix) as handle:
        handle.write(content.encode(BOUND_FILE_ENCODING))


def read_text_exact(path: Path) -> str:
    """Read a whole file as text without newline translation."""
    return path.read_bytes().decode(BOUND_FILE_ENCODING)
