"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "FILEBIND"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: keep runtime variables in sync with files on disk"
