"""Read raw activity periods captured by the window tracker."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from .errors import InvalidInputError
from .models import ActivityPeriod, WindowDetails

logger = logging.getLogger(__name__)


class WindowDetailsPayload(BaseModel):
    title: str = ""
    executable: str = ""
    class_name: Optional[str] = Field(default=None, alias="className")
    interactive: str

    model_config = ConfigDict(populate_by_name=True)


class ActivityPeriodPayload(BaseModel):
    start: int = Field(ge=0)
    end: int = Field(ge=0)
    details: WindowDetailsPayload

    def to_period(self) -> ActivityPeriod:
        return ActivityPeriod(
            start=self.start,
            end=self.end,
            details=WindowDetails(
                title=self.details.title,
                executable=self.details.executable,
                interactive=self.details.interactive,
                class_name=self.details.class_name,
            ),
        )


_PAYLOAD_LIST = TypeAdapter(list[ActivityPeriodPayload])


def parse_periods(data: Any) -> list[ActivityPeriod]:
    """Validate decoded JSON and convert it to ``ActivityPeriod`` records."""
    try:
        payloads = _PAYLOAD_LIST.validate_python(data)
    except ValidationError as exc:
        raise InvalidInputError(f"Malformed activity data: {exc}") from exc
    return [payload.to_period() for payload in payloads]


def load_periods(path: Path) -> list[ActivityPeriod]:
    """Load a raw JSON capture file. I/O errors propagate unchanged."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as handle:
        try:
            data = json.load(handle)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise InvalidInputError(f"{path.name} is not valid UTF-8 JSON: {exc}") from exc
    periods = parse_periods(data)
    logger.info("Loaded %d periods from %s", len(periods), path)
    return periods
