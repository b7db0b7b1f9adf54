"""Shared file I/O helpers."""

from .text_io import atomic_replace, read_text_exact, temp_path_for, write_text_atomic

__all__ = ["atomic_replace", "read_text_exact", "temp_path_for", "write_text_atomic"]
