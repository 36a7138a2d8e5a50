"""Local/UTC conversion layer.

Storage and display deliberately use different rules:

- ``preserve_local_time`` stores the digits a user picked as UTC fields,
  with no offset applied, so ``13:00`` is stored as ``...T13:00:00.000Z``.
- ``extract_local_time`` renders a stored instant in CET/CEST, adding the
  offset returned by the rule engine (``14:30Z`` shows as 16:30 in summer,
  15:30 in winter).

``restore_local_time`` is the offset-naive inverse of ``preserve_local_time``
and reads back exactly the digits that were stored.

INVARIANT: Falling inside a DST transition window never raises; it is
logged and left to :func:`~dstctl.domain.dst.check_dst_issue` callers.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

from dstctl.domain.dst import (
    check_dst_issue,
    get_hour_offset_for_date,
    get_time_zone_name,
    to_local,
)
from dstctl.domain.errors import ParseError
from dstctl.domain.values import Instant, WallClock

logger = logging.getLogger(__name__)


def create_utc_date(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int = 0,
    second: int = 0,
) -> str:
    """Return the ISO instant whose UTC fields are exactly the arguments."""
    return Instant.from_fields(year, month, day, hour, minute, second).isoformat()


def preserve_local_time(wall: WallClock | datetime) -> str:
    """Store the visible wall-clock digits of *wall* as UTC fields.

    A ``datetime`` contributes its own calendar fields; any tzinfo is
    ignored.
    """
    if isinstance(wall, datetime):
        wall = WallClock.from_datetime(wall)
    return create_utc_date(wall.year, wall.month, wall.day, wall.hour, wall.minute, wall.second)


def extract_local_time(iso_string: str) -> WallClock:
    """Render a stored instant as CET/CEST wall-clock time."""
    instant = Instant.parse(iso_string)
    offset = get_hour_offset_for_date(instant)
    local = to_local(instant)

    issue = check_dst_issue(local)
    if issue.has_potential_issue:
        logger.warning(
            "dst.issue",
            extra={
                "iso": iso_string,
                "issue_type": str(issue.issue_type),
                "detail": issue.message,
            },
        )

    logger.debug(
        "extract_local_time",
        extra={
            "iso": iso_string,
            "utc_hour": instant.utc.hour,
            "local_hour": local.hour,
            "offset": offset,
            "zone": get_time_zone_name(instant),
        },
    )
    return local


def format_local_time(iso_string: str) -> str:
    """Return the CET/CEST ``HH:MM`` of a stored instant."""
    local = extract_local_time(iso_string)
    return f"{local.hour:02d}:{local.minute:02d}"


def restore_local_time(iso_string: str) -> WallClock:
    """Read back the digits written by :func:`preserve_local_time`."""
    return WallClock.from_datetime(Instant.parse(iso_string).utc)


# ---------------------------------------------------------------------------
# Lenient helpers for request payloads
# ---------------------------------------------------------------------------


def is_valid_iso_date(value: Any) -> bool:
    """True only when *value* is a string already in canonical wire form."""
    if not isinstance(value, str):
        return False
    try:
        return Instant.parse(value).isoformat() == value
    except ParseError:
        return False


def safe_parse_instant(value: Any) -> Instant | None:
    """Parse *value* into an :class:`Instant`, or return None.

    Accepts an ``Instant``, a ``datetime`` (naive values are read as UTC)
    or an ISO string. Empty and unparsable values give None.
    """
    if value is None or value == "":
        return None
    if isinstance(value, Instant):
        return value
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return Instant.from_datetime(value)
    try:
        return Instant.parse(str(value))
    except ParseError:
        logger.debug("safe_parse_instant.rejected", extra={"value": str(value)})
        return None


def describe_instant(value: Any) -> dict[str, Any]:
    """Break an instant down into UTC and CET/CEST fields for diagnostics."""
    instant = safe_parse_instant(value)
    if instant is None:
        return {"valid": False, "input": str(value)}

    offset = get_hour_offset_for_date(instant)
    local = to_local(instant)
    return {
        "valid": True,
        "input": str(value),
        "iso": instant.isoformat(),
        "utc_time": f"{instant.utc:%H:%M:%S}",
        "local": local.isoformat(),
        "local_time": f"{local.hour:02d}:{local.minute:02d}:{local.second:02d}",
        "zone": get_time_zone_name(instant),
        "offset_minutes": offset * 60,
        "dst_issue": check_dst_issue(local).to_dict(),
    }
