"""Shared type aliases for Filebind."""

from .common import BindingSnapshot

__all__ = ["BindingSnapshot"]
