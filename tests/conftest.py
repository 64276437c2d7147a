"""Pytest configuration and fixtures."""

import json
import shutil
import tempfile
from datetime import timezone

import pytest

from activity_report.config import ReportSettings
from activity_report.models import ActivityPeriod, WindowDetails

# 2024-01-15 14:00:00 UTC
BASE_MS = 1705327200000


def make_period(start, duration, executable, title="", interactive="active"):
    """Build a period starting ``start`` ms after BASE_MS."""
    return ActivityPeriod(
        start=BASE_MS + start,
        end=BASE_MS + start + duration,
        details=WindowDetails(title=title, executable=executable, interactive=interactive),
    )


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    temp_path = tempfile.mkdtemp()
    yield temp_path
    shutil.rmtree(temp_path)


@pytest.fixture
def linux_settings():
    return ReportSettings(platform="linux", timezone=timezone.utc)


@pytest.fixture
def sample_raw_periods():
    """Raw capture file contents as written by the window tracker."""
    return [
        {
            "start": BASE_MS,
            "end": BASE_MS + 600000,
            "details": {
                "title": "main.ts - myproj - Visual Studio Code",
                "executable": "code",
                "className": "code",
                "interactive": "active",
            },
        },
        {
            "start": BASE_MS + 600000,
            "end": BASE_MS + 660000,
            "details": {
                "title": "Inbox - Google Chrome",
                "executable": "chrome",
                "interactive": "inactive",
            },
        },
    ]


@pytest.fixture
def raw_file(temp_dir, sample_raw_periods):
    path = f"{temp_dir}/2024-01-15.json"
    with open(path, "w", encoding="utf-8") as f:
        json.dump(sample_raw_periods, f)
    return path
