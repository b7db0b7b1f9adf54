"""Template placeholder syntax."""

from __future__ import annotations

import re

PLACEHOLDER_PATTERN: re.Pattern[str] = re.compile(r"\{\{\s*([A-Za-z_][A-Za-z0-9_.-]*)\s*\}\}")
