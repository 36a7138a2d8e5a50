"""Reservation rules built on the DST engine.

Stored reservation times are offset-naive: they were written with
:func:`~dstctl.domain.conversion.preserve_local_time`, so the UTC calendar
fields of ``start_time`` are the wall-clock fields the member booked.

Two groups of checks live here:

- Booking validation (daily limit, minimum notice, DST advisories).
- The transition monitor, which lists bookings around each transition day
  and flags the ones whose stored hour falls in the critical window.

INVARIANT: A DST issue is a warning, never a reason to reject a booking.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any

from dstctl.domain.dst import check_dst_issue, to_instant, transitions_for_year
from dstctl.domain.errors import InvalidArgument
from dstctl.domain.types import ReservationStatus, TransitionDirection
from dstctl.domain.values import Instant, TransitionEvent, WallClock

# Stored (offset-naive) UTC hours that need a manual look on a transition day.
CRITICAL_STORED_HOURS: dict[TransitionDirection, range] = {
    TransitionDirection.SPRING_FORWARD: range(1, 4),
    TransitionDirection.FALL_BACK: range(0, 4),
}


@dataclass(frozen=True)
class Reservation:
    """A booking as exported by the reservation API."""

    id: int
    user_id: int
    start_time: Instant
    end_time: Instant
    status: ReservationStatus = ReservationStatus.ACTIVE

    @property
    def booked_day(self) -> date:
        """The wall-clock day the member booked."""
        return self.start_time.utc.date()

    @property
    def is_active(self) -> bool:
        return self.status is ReservationStatus.ACTIVE

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "start_time": self.start_time.isoformat(),
            "end_time": self.end_time.isoformat(),
            "status": str(self.status),
        }


@dataclass(frozen=True)
class DailyLimit:
    has_reached: bool
    current_count: int


@dataclass(frozen=True)
class ReservationCheck:
    """Outcome of :func:`validate_reservation`."""

    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class MonitoredReservation:
    """A booking found inside a transition window."""

    reservation: Reservation
    transition: TransitionEvent
    on_transition_day: bool
    critical: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.reservation.to_dict(),
            "direction": str(self.transition.direction),
            "transition_date": self.transition.date.isoformat(),
            "on_transition_day": self.on_transition_day,
            "critical": self.critical,
        }


# ---------------------------------------------------------------------------
# Booking validation
# ---------------------------------------------------------------------------


def has_reached_daily_limit(
    user_id: int,
    day: date,
    reservations: Iterable[Reservation],
    max_per_day: int,
) -> DailyLimit:
    """Count *user_id*'s active bookings on *day* against *max_per_day*.

    A limit of 0 means unlimited.
    """
    if max_per_day < 0:
        msg = f"max_per_day must be >= 0, got {max_per_day}"
        raise InvalidArgument(msg)
    if max_per_day == 0:
        return DailyLimit(has_reached=False, current_count=0)

    count = sum(
        1
        for r in reservations
        if r.is_active and r.user_id == user_id and r.booked_day == day
    )
    return DailyLimit(has_reached=count >= max_per_day, current_count=count)


def has_minimum_advance_time(start: WallClock, min_hours: float, now: Instant) -> bool:
    """True if *start* is at least *min_hours* after *now*.

    A non-positive requirement is always satisfied.
    """
    if min_hours <= 0:
        return True
    lead = to_instant(start).utc - now.utc
    return lead >= timedelta(hours=min_hours)


def validate_reservation(
    *,
    user_id: int,
    start: WallClock,
    end: WallClock,
    reservations: Iterable[Reservation],
    now: Instant,
    max_per_day: int = 0,
    min_hours_in_advance: float = 0,
) -> ReservationCheck:
    """Apply every booking rule to a requested slot."""
    errors: list[str] = []
    warnings: list[str] = []

    if end <= start:
        errors.append(f"End time {end} must be after start time {start}")

    limit = has_reached_daily_limit(user_id, start.date(), reservations, max_per_day)
    if limit.has_reached:
        errors.append(
            f"Daily limit reached: {limit.current_count} of {max_per_day} "
            f"reservations on {start.date().isoformat()}"
        )

    if not has_minimum_advance_time(start, min_hours_in_advance, now):
        errors.append(f"Reservations must be made at least {min_hours_in_advance:g} hours ahead")

    for label, wall in (("start", start), ("end", end)):
        issue = check_dst_issue(wall)
        if issue.has_potential_issue:
            warnings.append(f"{label} {wall}: {issue.message}")

    return ReservationCheck(valid=not errors, errors=errors, warnings=warnings)


# ---------------------------------------------------------------------------
# Transition monitor
# ---------------------------------------------------------------------------


def dates_around(day: date, days_around: int = 3) -> list[date]:
    """Return *day* with *days_around* days on either side, in order."""
    if days_around < 0:
        msg = f"days_around must be >= 0, got {days_around}"
        raise InvalidArgument(msg)
    return [day + timedelta(days=offset) for offset in range(-days_around, days_around + 1)]


def scan_transition_window(
    year: int,
    reservations: Iterable[Reservation],
    days_around: int = 3,
) -> list[MonitoredReservation]:
    """List bookings near *year*'s transitions, flagging critical hours.

    Results are ordered by transition, then by start time.
    """
    pool = list(reservations)
    found: list[MonitoredReservation] = []
    for event in transitions_for_year(year):
        window = set(dates_around(event.date, days_around))
        critical_hours = CRITICAL_STORED_HOURS[event.direction]
        hits = sorted(
            (r for r in pool if r.booked_day in window),
            key=lambda r: (r.start_time, r.id),
        )
        for r in hits:
            on_day = r.booked_day == event.date
            found.append(
                MonitoredReservation(
                    reservation=r,
                    transition=event,
                    on_transition_day=on_day,
                    critical=on_day and r.start_time.utc.hour in critical_hours,
                )
            )
    return found
