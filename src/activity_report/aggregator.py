"""Fold classified activity periods into a Program -> Project report tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from .config import ReportSettings
from .durations import MAX_TIMESTAMP_MS, format_duration, format_timestamp
from .errors import InvalidInputError
from .models import (
    ACTIVE,
    INACTIVE,
    ActivityPeriod,
    FinalReport,
    PeriodRecord,
    ProgramReport,
    ProjectReport,
)
from .resolver import resolve
from .rules import RULE_CATALOG, Rule

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _RunningTotals:
    total: int = 0
    # None until a period of that kind contributes.
    active: Optional[int] = None
    inactive: Optional[int] = None

    def add(self, duration: int, interactive: str) -> None:
        self.total += duration
        if interactive == ACTIVE:
            self.active = (self.active or 0) + duration
        elif interactive == INACTIVE:
            self.inactive = (self.inactive or 0) + duration

    def formatted(self, total_duration: Optional[str] = None) -> dict:
        return {
            "total_duration": total_duration or format_duration(self.total),
            "total_active_duration": _format_optional(self.active),
            "total_inactive_duration": _format_optional(self.inactive),
            "total_ms": self.total,
            "active_ms": self.active,
            "inactive_ms": self.inactive,
        }


def _format_optional(milliseconds: Optional[int]) -> Optional[str]:
    if milliseconds is None:
        return None
    if milliseconds == 0:
        return ""
    return format_duration(milliseconds)


@dataclass(slots=True)
class _ProjectNode:
    project: str
    periods: list[PeriodRecord] = field(default_factory=list)
    totals: _RunningTotals = field(default_factory=_RunningTotals)


@dataclass(slots=True)
class _ProgramNode:
    program: str
    executable: str
    projects: dict[str, _ProjectNode] = field(default_factory=dict)
    totals: _RunningTotals = field(default_factory=_RunningTotals)


class _ReportBuilder:
    """Mutable accumulator owned by a single ``aggregate`` call."""

    def __init__(self, settings: ReportSettings, catalog: Sequence[Rule]) -> None:
        self._settings = settings
        self._catalog = catalog
        self._programs: dict[str, _ProgramNode] = {}

    def add(self, period: ActivityPeriod) -> None:
        rule = resolve(period, self._settings.platform, self._catalog)
        duration = period.duration_ms
        interactive = period.details.interactive

        program = self._programs.get(rule.program_label)
        if program is None:
            program = _ProgramNode(rule.program_label, period.details.executable or "")
            self._programs[rule.program_label] = program
            logger.debug("New program %r (%s)", program.program, program.executable)

        project_label = rule.derive_project_label(period)
        project = program.projects.get(project_label)
        if project is None:
            project = _ProjectNode(project_label)
            program.projects[project_label] = project
            logger.debug("New project %r under %r", project_label, program.program)

        project.periods.append(
            PeriodRecord(
                start_date=self._timestamp(period.start),
                end_date=self._timestamp(period.end),
                duration=format_duration(duration),
                details=rule.derive_details(period),
                interactive=interactive,
            )
        )
        project.totals.add(duration, interactive)
        program.totals.add(duration, interactive)

    def build(self, periods: Sequence[ActivityPeriod]) -> FinalReport:
        first, last = periods[0], periods[-1]
        overall = _RunningTotals()
        for period in periods:
            overall.add(period.duration_ms, period.details.interactive)
        span = last.end - first.start
        return FinalReport(
            start_date=self._timestamp(first.start),
            end_date=self._timestamp(last.end),
            programs=tuple(self._finalize_program(node) for node in self._programs.values()),
            **{**overall.formatted(format_duration(span)), "total_ms": span},
        )

    def _finalize_program(self, node: _ProgramNode) -> ProgramReport:
        return ProgramReport(
            program=node.program,
            executable=node.executable,
            projects=tuple(
                ProjectReport(
                    project=project.project,
                    periods=tuple(project.periods),
                    **project.totals.formatted(),
                )
                for project in node.projects.values()
            ),
            **node.totals.formatted(),
        )

    def _timestamp(self, milliseconds: int) -> str:
        return format_timestamp(
            milliseconds, self._settings.timezone, self._settings.timestamp_format
        )


def validate_periods(periods: Sequence[ActivityPeriod]) -> None:
    """Reject batches the fold cannot handle.

    Empty batches, periods ending before they start, starts going backwards and
    timestamps outside the range a date can represent all raise
    ``InvalidInputError``.
    """
    if not periods:
        raise InvalidInputError("Cannot build a report from an empty batch of periods")
    previous_start: Optional[int] = None
    for index, period in enumerate(periods):
        if min(period.start, period.end) < 0 or max(period.start, period.end) > MAX_TIMESTAMP_MS:
            raise InvalidInputError("Timestamp is outside the supported date range", index)
        if period.end < period.start:
            raise InvalidInputError("Period ends before it starts", index)
        if previous_start is not None and period.start < previous_start:
            raise InvalidInputError("Periods are not ordered by start time", index)
        previous_start = period.start


def aggregate(
    periods: Iterable[ActivityPeriod],
    settings: Optional[ReportSettings] = None,
    catalog: Sequence[Rule] = RULE_CATALOG,
) -> FinalReport:
    """Classify every period and return the finished, immutable report."""
    batch = list(periods)
    validate_periods(batch)
    settings = settings or ReportSettings()

    builder = _ReportBuilder(settings, catalog)
    for period in batch:
        builder.add(period)
    report = builder.build(batch)
    logger.info(
        "Aggregated %d periods into %d programs for %s.",
        len(batch),
        len(report.programs),
        settings.platform,
    )
    return report
