"""Root exception type for Filebind."""

from __future__ import annotations


class FilebindError(Exception):
    """Base class for all Filebind errors."""
