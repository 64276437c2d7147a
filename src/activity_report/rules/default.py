"""Fallback rules applied when no specific family claims an executable."""

from __future__ import annotations

from .base import family_rules

DEFAULT_RULES = family_rules(
    "default",
    "Unknown Software",
    {"linux": [], "win32": []},
)
