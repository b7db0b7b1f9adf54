"""Configuration-related exceptions."""

from __future__ import annotations

from filebind.exceptions.base import FilebindError


class ConfigError(FilebindError, ValueError):
    """Raised when a declaration file is missing or invalid."""
