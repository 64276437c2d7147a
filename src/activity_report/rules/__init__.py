"""Ordered catalog of classification rules.

Family rules come first and the per-OS defaults last; the resolver relies on
this order. Support for another application means adding a module here and
appending its rules before ``DEFAULT_RULES``.
"""

from __future__ import annotations

from .base import Rule, family_rules
from .chrome import CHROME_RULES
from .default import DEFAULT_RULES
from .self_track import SELF_TRACK_RULES
from .vscode import VSCODE_RULES

RULE_CATALOG: tuple[Rule, ...] = (
    *SELF_TRACK_RULES,
    *VSCODE_RULES,
    *CHROME_RULES,
    *DEFAULT_RULES,
)

__all__ = ["RULE_CATALOG", "Rule", "family_rules"]
