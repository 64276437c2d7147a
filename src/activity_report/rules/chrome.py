"""Google Chrome: the tab title is the interesting part."""

from __future__ import annotations

from ..models import ActivityPeriod
from ..normalization import remove_first
from .base import family_rules

CHROME_SUFFIX = " - Google Chrome"


def chrome_details(period: ActivityPeriod) -> str:
    return remove_first(period.details.title, CHROME_SUFFIX)


CHROME_RULES = family_rules(
    "chrome",
    "Google Chrome",
    {"linux": ["chrome"], "win32": ["chrome.exe"]},
    derive_details=chrome_details,
)
