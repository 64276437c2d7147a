"""Visual Studio Code titles look like ``file - project - Visual Studio Code``."""

from __future__ import annotations

from ..models import ActivityPeriod
from ..normalization import split_title
from .base import family_rules


def vscode_details(period: ActivityPeriod) -> str:
    parts = split_title(period.details.title)
    if len(parts) == 3:
        return parts[0]
    if len(parts) < 3:
        return ""
    return period.details.title


def vscode_project(period: ActivityPeriod) -> str:
    parts = split_title(period.details.title)
    if len(parts) == 3:
        return parts[1]
    if len(parts) == 2:
        # "project - Visual Studio Code" with no file open
        return parts[0]
    if len(parts) < 2:
        return ""
    return period.details.title


VSCODE_RULES = family_rules(
    "vscode",
    "Visual Studio Code",
    {"linux": ["code"], "win32": ["Code.exe"]},
    derive_project_label=vscode_project,
    derive_details=vscode_details,
)
