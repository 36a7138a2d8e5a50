"""Shared service-layer helper functions."""

from __future__ import annotations

from datetime import UTC, datetime

from dstctl.domain.values import Instant, WallClock


def now_instant() -> Instant:
    """The current time as an Instant."""
    return Instant(datetime.now(UTC))


def parse_moment(text: str) -> Instant | WallClock:
    """Parse a command-line moment.

    Values carrying ``Z`` or a numeric offset are instants; anything else
    is a CET/CEST wall-clock time.

    Examples:
        >>> parse_moment("2025-03-30 02:30")
        WallClock(year=2025, month=3, day=30, hour=2, minute=30, second=0)
        >>> parse_moment("2025-06-15T14:30:00Z").isoformat()
        '2025-06-15T14:30:00.000Z'
    """
    stripped = text.strip()
    if stripped.endswith(("Z", "z")) or _has_numeric_offset(stripped):
        return Instant.parse(stripped)
    return WallClock.parse(stripped)


def _has_numeric_offset(text: str) -> bool:
    # Offsets follow the time part: "...T10:00+02:00" / "...10:00-0130".
    _, sep, time_part = text.replace(" ", "T").partition("T")
    return bool(sep) and ("+" in time_part or "-" in time_part)
