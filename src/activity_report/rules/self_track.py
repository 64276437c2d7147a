"""Windows belonging to this tracker itself."""

from __future__ import annotations

from .base import blank, family_rules

SELF_TRACK_RULES = family_rules(
    "self-track",
    "Self Track (Me :D!)",
    {"linux": ["self-track"], "win32": ["self-track.exe"]},
    derive_details=blank,
)
