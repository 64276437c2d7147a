"""Pick the classification rule for a single activity period."""

from __future__ import annotations

import logging
from typing import Iterable

from .errors import ConfigurationError
from .models import ActivityPeriod
from .rules import RULE_CATALOG, Rule

logger = logging.getLogger(__name__)


def resolve(
    period: ActivityPeriod,
    platform: str,
    catalog: Iterable[Rule] = RULE_CATALOG,
) -> Rule:
    """Return the first specific rule matching the executable, else the OS default.

    Catalog order decides ties. Raises ``ConfigurationError`` when neither a
    specific nor a default rule exists for ``platform``.
    """
    rules = [rule for rule in catalog if rule.operating_system == platform]
    executable = period.details.executable
    for rule in rules:
        if not rule.is_default and rule.matches_executable(executable):
            return rule

    for rule in rules:
        if rule.is_default:
            logger.debug("No %s rule for executable %r; using default.", platform, executable)
            return rule

    raise ConfigurationError(platform)
