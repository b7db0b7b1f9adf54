"""Cross-module type aliases."""

from __future__ import annotations

type BindingSnapshot = dict[str, dict[str, str | None]]
