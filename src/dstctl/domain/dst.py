"""DST rule engine for Central European Time.

The schedule is computed from the EU rule itself rather than a timezone
database, so results never depend on the host's zone configuration:

- Summer time (CEST, UTC+2) starts on the last Sunday of March at 02:00 CET
  (01:00 UTC); local clocks jump to 03:00.
- Standard time (CET, UTC+1) resumes on the last Sunday of October at
  03:00 CEST (01:00 UTC); local clocks fall back to 02:00.

Every function accepts a *moment*: a naive ``datetime`` or :class:`WallClock`
is read as CET/CEST wall-clock time, an aware ``datetime`` or
:class:`Instant` is an absolute point in time.

INVARIANT: Transitions are recomputed on every call. Nothing is cached, so
no result goes stale across a day boundary.
"""

from __future__ import annotations

import calendar
import math
from datetime import UTC, date, datetime, timedelta

from dstctl.domain.errors import InvalidArgument
from dstctl.domain.types import IssueType, TransitionDirection, ZoneName
from dstctl.domain.values import (
    DSTIssue,
    Instant,
    TransitionEvent,
    TransitionProximity,
    WallClock,
    validate_fields,
)

Moment = datetime | Instant | WallClock

STANDARD_OFFSET_HOURS = 1
SUMMER_OFFSET_HOURS = 2

_TRANSITION_MONTH: dict[TransitionDirection, int] = {
    TransitionDirection.SPRING_FORWARD: 3,
    TransitionDirection.FALL_BACK: 10,
}
# Wall-clock reading at which the clocks change.
_TRANSITION_LOCAL_HOUR: dict[TransitionDirection, int] = {
    TransitionDirection.SPRING_FORWARD: 2,
    TransitionDirection.FALL_BACK: 3,
}
_TRANSITION_UTC_HOUR = 1

# Wall-clock hour repeated (fall) or skipped (spring) on a transition day.
_ISSUE_HOUR = 2

NON_EXISTENT_HOUR_MESSAGE = "This time does not exist because clocks move forward to summer time"
AMBIGUOUS_HOUR_MESSAGE = "This time occurs twice because clocks move back to winter time"

_SECONDS_PER_DAY = 24 * 60 * 60


# ---------------------------------------------------------------------------
# Schedule
# ---------------------------------------------------------------------------


def last_sunday(year: int, month: int) -> date:
    """Return the last Sunday of *month* in *year*."""
    validate_fields(year, month, 1)
    last_day = calendar.monthrange(year, month)[1]
    # date.weekday(): Monday == 0 ... Sunday == 6
    days_past_sunday = (date(year, month, last_day).weekday() + 1) % 7
    return date(year, month, last_day - days_past_sunday)


def transition_for(year: int, direction: TransitionDirection) -> TransitionEvent:
    """Compute the transition of *direction* in *year*."""
    day = last_sunday(year, _TRANSITION_MONTH[direction])
    local = WallClock(day.year, day.month, day.day, _TRANSITION_LOCAL_HOUR[direction])
    instant = Instant.from_fields(day.year, day.month, day.day, _TRANSITION_UTC_HOUR)
    return TransitionEvent(year=year, direction=direction, local=local, instant=instant)


def transitions_for_year(year: int) -> tuple[TransitionEvent, TransitionEvent]:
    """Return ``(spring_forward, fall_back)`` for *year*."""
    return (
        transition_for(year, TransitionDirection.SPRING_FORWARD),
        transition_for(year, TransitionDirection.FALL_BACK),
    )


# ---------------------------------------------------------------------------
# Moment normalisation
# ---------------------------------------------------------------------------


def _is_absolute(moment: Moment) -> bool:
    if isinstance(moment, Instant):
        return True
    if isinstance(moment, WallClock):
        return False
    if isinstance(moment, datetime):
        return moment.tzinfo is not None and moment.utcoffset() is not None
    msg = f"unsupported moment type: {type(moment).__name__}"
    raise InvalidArgument(msg)


def _as_instant_value(moment: Moment) -> Instant:
    if isinstance(moment, Instant):
        return moment
    assert isinstance(moment, datetime)
    return Instant.from_datetime(moment)


def _as_wall_value(moment: Moment) -> WallClock:
    if isinstance(moment, WallClock):
        return moment
    assert isinstance(moment, datetime)
    return WallClock.from_datetime(moment)


def _instant_is_dst(instant: Instant) -> bool:
    spring, fall = transitions_for_year(instant.utc.year)
    return spring.instant <= instant < fall.instant


def _wall_is_dst(wall: WallClock) -> bool:
    spring, fall = transitions_for_year(wall.year)
    return spring.local <= wall < fall.local


def _shift(value: datetime, hours: int) -> datetime:
    try:
        return value + timedelta(hours=hours)
    except OverflowError as exc:
        stamp = value.replace(tzinfo=None).isoformat(timespec="seconds")
        msg = f"{stamp} is outside the supported date range"
        raise InvalidArgument(msg) from exc


def to_local(moment: Moment) -> WallClock:
    """Return the CET/CEST wall-clock reading of *moment*.

    Wall-clock moments are returned unchanged.
    """
    if not _is_absolute(moment):
        return _as_wall_value(moment)
    instant = _as_instant_value(moment)
    offset = SUMMER_OFFSET_HOURS if _instant_is_dst(instant) else STANDARD_OFFSET_HOURS
    return WallClock.from_datetime(_shift(instant.utc, offset))


def to_instant(moment: Moment) -> Instant:
    """Return the absolute instant of *moment*.

    Non-existent spring hours are read as summer time and the repeated fall
    hour as its first (summer time) occurrence.
    """
    if _is_absolute(moment):
        return _as_instant_value(moment)
    wall = _as_wall_value(moment)
    offset = SUMMER_OFFSET_HOURS if _wall_is_dst(wall) else STANDARD_OFFSET_HOURS
    return Instant(_shift(wall.to_datetime().replace(tzinfo=UTC), -offset))


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def is_daylight_saving_time(moment: Moment) -> bool:
    """Return True if *moment* falls in summer time (CEST)."""
    if _is_absolute(moment):
        return _instant_is_dst(_as_instant_value(moment))
    return _wall_is_dst(_as_wall_value(moment))


def get_hour_offset_for_date(moment: Moment) -> int:
    """Hours ahead of UTC: 2 in summer time, 1 otherwise."""
    return SUMMER_OFFSET_HOURS if is_daylight_saving_time(moment) else STANDARD_OFFSET_HOURS


def get_time_zone_name(moment: Moment) -> str:
    """Zone abbreviation matching :func:`get_hour_offset_for_date`."""
    return str(ZoneName.CEST if is_daylight_saving_time(moment) else ZoneName.CET)


def get_next_dst_transition(
    from_moment: Moment,
    want_fall_transition: bool = False,
) -> TransitionEvent:
    """Return the next spring (default) or fall transition after *from_moment*.

    This year's transition is returned while it is still strictly ahead;
    otherwise the following year's.
    """
    direction = (
        TransitionDirection.FALL_BACK if want_fall_transition else TransitionDirection.SPRING_FORWARD
    )
    instant = to_instant(from_moment)
    year = to_local(from_moment).year
    event = transition_for(year, direction)
    if instant >= event.instant:
        event = transition_for(year + 1, direction)
    return event


def _days_between(start: Instant, end: Instant) -> float:
    return (end.utc - start.utc).total_seconds() / _SECONDS_PER_DAY


def is_near_dst_transition(moment: Moment, threshold_days: int = 3) -> TransitionProximity:
    """Report the nearer upcoming transition and whether it is within *threshold_days*.

    Spring and fall are computed independently and the nearer one wins;
    when both are exactly as far away, spring wins. ``days_until`` is the
    whole number of days left (rounded down) and both 0 and
    *threshold_days* count as near.
    """
    if threshold_days < 0:
        msg = f"threshold_days must be >= 0, got {threshold_days}"
        raise InvalidArgument(msg)

    instant = to_instant(moment)
    spring = get_next_dst_transition(moment, want_fall_transition=False)
    fall = get_next_dst_transition(moment, want_fall_transition=True)
    to_spring = _days_between(instant, spring.instant)
    to_fall = _days_between(instant, fall.instant)

    if to_spring <= to_fall:
        nearest, days = spring, to_spring
    else:
        nearest, days = fall, to_fall

    days_until = math.floor(days)
    return TransitionProximity(
        is_near=days_until <= threshold_days,
        transition=nearest,
        days_until=days_until,
        is_spring_transition=nearest.is_spring,
    )


def check_dst_issue(moment: Moment) -> DSTIssue:
    """Classify *moment* as a non-existent, ambiguous, or ordinary local time.

    Only the 02:00–03:00 wall-clock hour of a transition day is affected.
    Absolute moments are converted to local time first.
    """
    wall = to_local(moment)
    if wall.hour != _ISSUE_HOUR:
        return DSTIssue(has_potential_issue=False)

    spring, fall = transitions_for_year(wall.year)
    if wall.date() == spring.date:
        return DSTIssue(
            has_potential_issue=True,
            issue_type=IssueType.NON_EXISTENT_HOUR,
            message=NON_EXISTENT_HOUR_MESSAGE,
        )
    if wall.date() == fall.date:
        return DSTIssue(
            has_potential_issue=True,
            issue_type=IssueType.AMBIGUOUS_HOUR,
            message=AMBIGUOUS_HOUR_MESSAGE,
        )
    return DSTIssue(has_potential_issue=False)
