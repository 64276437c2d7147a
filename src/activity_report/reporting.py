"""Render finished reports for the console and export them to disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .durations import format_duration
from .models import FinalReport, ProgramReport, ProjectReport

logger = logging.getLogger(__name__)

_Node = Union[FinalReport, ProgramReport, ProjectReport]


class ReportPrinter:
    """Render a report as an indented Program -> Project -> period tree."""

    def __init__(self, not_applicable: str = "N/A") -> None:
        self.not_applicable = not_applicable

    def render(self, report: FinalReport) -> str:
        lines = [f"Report {report.start_date} -> {report.end_date}", "=" * 60]
        for program in report.programs:
            lines.append(f"{program.program} [{program.executable}]")
            for project in program.projects:
                lines.append(f"  Project: {project.project or '(none)'}")
                for period in project.periods:
                    lines.append(
                        f"    {period.start_date} - {period.end_date}  "
                        f"{period.duration:<28} {period.interactive:<8} {period.details}"
                    )
                lines.extend(self._totals(project, indent="    "))
            lines.extend(self._totals(program, indent="  "))
            lines.append("")
        lines.append("Overall")
        lines.extend(self._totals(report, indent="  "))
        return "\n".join(lines)

    def _totals(self, node: _Node, indent: str) -> list[str]:
        return [
            f"{indent}Active Time:   {self._value(node.total_active_duration)}",
            f"{indent}Inactive Time: {self._value(node.total_inactive_duration)}",
            f"{indent}Total Time:    {node.total_duration}",
        ]

    def _value(self, duration: Optional[str]) -> str:
        # "" is a total that summed to zero; None means no period contributed.
        if duration is None:
            return self.not_applicable
        return duration or format_duration(0)


def export_file_name(raw_name: str) -> str:
    """``2024-05-01.json`` -> ``activity_report_2024-05-01.json``."""
    return f"activity_report_{Path(raw_name).name.split('.')[0]}.json"


def write_json_report(
    report: FinalReport, raw_name: str, export_dir: Path, indent: Optional[int] = 2
) -> Path:
    export_dir = Path(export_dir)
    export_dir.mkdir(parents=True, exist_ok=True)
    target = export_dir / export_file_name(raw_name)
    target.write_text(report.to_json(indent=indent), encoding="utf-8")
    logger.info("Wrote report to %s", target)
    return target
