"""Domain models for captured activity and the finished report."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict

ACTIVE = "active"
INACTIVE = "inactive"


@dataclass(slots=True, frozen=True)
class WindowDetails:
    """What the foreground window looked like during a period."""

    title: str
    executable: str
    interactive: str
    class_name: Optional[str] = None


@dataclass(slots=True, frozen=True)
class ActivityPeriod:
    """Represents a contiguous block of time spent in a single window.

    ``start`` and ``end`` are epoch milliseconds.
    """

    start: int
    end: int
    details: WindowDetails

    @property
    def duration_ms(self) -> int:
        return self.end - self.start


class PeriodRecord(BaseModel):
    start_date: str
    end_date: str
    duration: str
    details: str
    interactive: str

    model_config = ConfigDict(frozen=True)


class _Totals(BaseModel):
    """Formatted totals plus the millisecond figures behind them.

    ``None`` active/inactive values mean no period of that kind was seen.
    """

    total_duration: str
    total_active_duration: Optional[str] = None
    total_inactive_duration: Optional[str] = None
    total_ms: int
    active_ms: Optional[int] = None
    inactive_ms: Optional[int] = None

    model_config = ConfigDict(frozen=True)


class ProjectReport(_Totals):
    project: str
    periods: tuple[PeriodRecord, ...] = ()


class ProgramReport(_Totals):
    program: str
    executable: str
    projects: tuple[ProjectReport, ...] = ()


class FinalReport(_Totals):
    start_date: str
    end_date: str
    programs: tuple[ProgramReport, ...] = ()

    def to_json(self, indent: Optional[int] = 2) -> str:
        return self.model_dump_json(indent=indent, exclude_none=True)
