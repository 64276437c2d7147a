"""Human-readable durations and timestamps."""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from typing import Optional

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S"

# A day short of datetime.max so every UTC offset still yields a valid date.
MAX_TIMESTAMP_MS = int(datetime(9999, 12, 30, tzinfo=timezone.utc).timestamp()) * 1000

_UNITS = (("hour", 3600), ("minute", 60), ("second", 1))


def format_duration(milliseconds: int) -> str:
    """Render e.g. ``3_723_400`` as ``"1 hour, 2 minutes, 3 seconds"``.

    Rounds half up to whole seconds, never uses units above hours and skips
    zero units. A zero duration is ``"0 seconds"``.
    """
    if milliseconds < 0:
        raise ValueError(f"Duration must be non-negative, got {milliseconds}")
    remainder = (milliseconds + 500) // 1000
    parts: list[str] = []
    for name, size in _UNITS:
        amount, remainder = divmod(remainder, size)
        if amount:
            parts.append(f"{amount} {name}{'' if amount == 1 else 's'}")
    return ", ".join(parts) or "0 seconds"


def format_timestamp(
    milliseconds: int,
    tz: Optional[tzinfo] = None,
    fmt: str = TIMESTAMP_FMT,
) -> str:
    """Format epoch milliseconds; ``tz=None`` uses the local zone."""
    return datetime.fromtimestamp(milliseconds / 1000, tz=tz).strftime(fmt)
