"""Configuration for building reports."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from datetime import timezone, tzinfo
from typing import Optional

from .durations import TIMESTAMP_FMT

SUPPORTED_PLATFORMS = ("linux", "win32", "darwin")


@dataclass(slots=True)
class ReportSettings:
    """Runtime configuration for the aggregator and renderers."""

    platform: str = field(default_factory=lambda: sys.platform)
    timezone: Optional[tzinfo] = None
    timestamp_format: str = TIMESTAMP_FMT
    not_applicable: str = "N/A"

    @classmethod
    def from_options(
        cls,
        platform: str | None = None,
        utc: bool = False,
    ) -> "ReportSettings":
        resolved = _check_platform(platform or sys.platform)
        return cls(platform=resolved, timezone=timezone.utc if utc else None)

    def with_platform(self, platform: str) -> "ReportSettings":
        """Copy of these settings that picks rules for another OS tag."""
        return replace(self, platform=_check_platform(platform))


def _check_platform(platform: str) -> str:
    if platform not in SUPPORTED_PLATFORMS:
        raise ValueError(
            f"Unsupported platform {platform!r}; expected one of {', '.join(SUPPORTED_PLATFORMS)}"
        )
    return platform
