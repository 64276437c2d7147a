"""The classification record every software family provides."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping, Sequence

from ..models import ActivityPeriod

LabelFn = Callable[[ActivityPeriod], str]


def blank(period: ActivityPeriod) -> str:
    return ""


def raw_title(period: ActivityPeriod) -> str:
    return period.details.title


@dataclass(slots=True, frozen=True)
class Rule:
    """Maps one family's windows on one OS to program/project/details labels.

    An empty ``executable_matchers`` makes the rule the OS default.
    """

    family: str
    operating_system: str
    executable_matchers: tuple[str, ...]
    program_label: str
    derive_project_label: LabelFn = blank
    derive_details: LabelFn = raw_title

    @property
    def is_default(self) -> bool:
        return not self.executable_matchers

    def matches_executable(self, executable: str) -> bool:
        # Case-sensitive substring test: "code" also matches "vscode-helper".
        return any(matcher in executable for matcher in self.executable_matchers)


def family_rules(
    family: str,
    program_label: str,
    executables: Mapping[str, Sequence[str]],
    *,
    derive_project_label: LabelFn = blank,
    derive_details: LabelFn = raw_title,
) -> list[Rule]:
    """Build one rule per operating system for a software family."""
    return [
        Rule(
            family=family,
            operating_system=operating_system,
            executable_matchers=tuple(matchers),
            program_label=program_label,
            derive_project_label=derive_project_label,
            derive_details=derive_details,
        )
        for operating_system, matchers in executables.items()
    ]
