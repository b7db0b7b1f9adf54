"""Core data models for Filebind."""

from .entities import BindingParam, SourceInfo, Template

__all__ = [
    "BindingParam",
    "SourceInfo",
    "Template",
]
