"""Loading and validation of binding declaration files."""

from __future__ import annotations

from filebind.config.loader import load_config
from filebind.config.model import FilebindConfig

__all__ = [
    "FilebindConfig",
    "load_config",
]
