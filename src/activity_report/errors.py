"""Exceptions raised while building activity reports."""

from __future__ import annotations

from typing import Optional


class ReportError(Exception):
    """Base class for every failure the report engine classifies."""


class ConfigurationError(ReportError):
    """The rule catalog has no fallback rule for the requested platform."""

    def __init__(self, platform: str) -> None:
        super().__init__(f"No default rule found for OS: {platform}")
        self.platform = platform


class InvalidInputError(ReportError):
    """The batch of activity periods cannot be aggregated."""

    def __init__(self, message: str, index: Optional[int] = None) -> None:
        if index is not None:
            message = f"{message} (record {index})"
        super().__init__(message)
        self.index = index
