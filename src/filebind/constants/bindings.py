"""Constants for bound-variable file persistence."""

from __future__ import annotations

BINDING_TEMP_SUFFIX: str = ".tmp"

# Owner read/write only.
BOUND_FILE_MODE: int = 0o600

BOUND_FILE_ENCODING: str = "utf-8"

# Longest first so a CRLF pair is stripped as one terminator.
LINE_TERMINATORS: tuple[str, ...] = ("\r\n", "\n")
