"""Classify captured active-window periods and fold them into a Program -> Project report."""

from __future__ import annotations

from .aggregator import aggregate
from .config import ReportSettings
from .errors import ConfigurationError, InvalidInputError, ReportError
from .models import ActivityPeriod, FinalReport, WindowDetails
from .resolver import resolve
from .rules import RULE_CATALOG, Rule

__version__ = "0.3.0"

__all__ = [
    "ActivityPeriod",
    "ConfigurationError",
    "FinalReport",
    "InvalidInputError",
    "RULE_CATALOG",
    "ReportError",
    "ReportSettings",
    "Rule",
    "WindowDetails",
    "aggregate",
    "resolve",
]
