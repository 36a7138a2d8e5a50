"""Value types crossing the local/UTC boundary.

Two time representations are kept strictly apart:

- :class:`Instant` — an absolute point in time, always held as an aware
  UTC ``datetime``.  Its wire form is ``YYYY-MM-DDTHH:MM:SS.mmmZ``.
- :class:`WallClock` — zone-less calendar fields as a user sees them,
  meaningful only against the CET/CEST rule.

Only :mod:`dstctl.domain.conversion` and the ``to_local`` / ``to_instant``
helpers in :mod:`dstctl.domain.dst` move a value from one side to the other.

The remaining types are computed results of the rule engine and are never
persisted.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Any, Self

from dstctl.domain.errors import InvalidArgument, ParseError
from dstctl.domain.types import IssueType, TransitionDirection

# Inclusive bounds for each calendar field (day is checked per month).
_FIELD_BOUNDS: dict[str, tuple[int, int]] = {
    "year": (1, 9999),
    "month": (1, 12),
    "hour": (0, 23),
    "minute": (0, 59),
    "second": (0, 59),
}


def validate_fields(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> None:
    """Raise :class:`InvalidArgument` unless every field is in range.

    Values are never wrapped: hour 24 is an error, not midnight of the
    following day.
    """
    values = {
        "year": year,
        "month": month,
        "day": day,
        "hour": hour,
        "minute": minute,
        "second": second,
    }
    for name, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            msg = f"{name} must be an integer, got {value!r}"
            raise InvalidArgument(msg)
    for name, (low, high) in _FIELD_BOUNDS.items():
        value = values[name]
        if not low <= value <= high:
            msg = f"{name} {value} is out of range [{low}, {high}]"
            raise InvalidArgument(msg)
    days_in_month = calendar.monthrange(year, month)[1]
    if not 1 <= day <= days_in_month:
        msg = f"day {day} is out of range [1, {days_in_month}] for {year}-{month:02d}"
        raise InvalidArgument(msg)


# ---------------------------------------------------------------------------
# Instant
# ---------------------------------------------------------------------------


@dataclass(frozen=True, order=True)
class Instant:
    """An absolute point in time, canonically UTC."""

    utc: datetime

    def __post_init__(self) -> None:
        if self.utc.tzinfo is None:
            msg = "Instant requires a timezone-aware datetime"
            raise InvalidArgument(msg)
        if self.utc.tzinfo is not UTC:
            try:
                normalised = self.utc.astimezone(UTC)
            except OverflowError as exc:
                msg = f"{self.utc.isoformat()} is outside the supported date range"
                raise InvalidArgument(msg) from exc
            object.__setattr__(self, "utc", normalised)

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse an ISO-8601 string.

        ``Z`` and numeric offsets are normalised to UTC.  Strings without a
        designator are read as UTC, and a bare date is midnight UTC.
        """
        if not isinstance(text, str):
            msg = f"expected an ISO-8601 string, got {type(text).__name__}"
            raise ParseError(msg)
        raw = text.strip()
        if not raw:
            msg = "empty date string"
            raise ParseError(msg)
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError as exc:
            msg = f"malformed ISO-8601 date: {text!r}"
            raise ParseError(msg) from exc
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=UTC)
        return cls(parsed)

    @classmethod
    def from_fields(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
    ) -> Self:
        """Build an instant whose UTC calendar fields are exactly the arguments."""
        validate_fields(year, month, day, hour, minute, second)
        return cls(datetime(year, month, day, hour, minute, second, tzinfo=UTC))

    @classmethod
    def from_datetime(cls, value: datetime) -> Self:
        """Wrap an aware ``datetime``; naive values are rejected."""
        return cls(value)

    def isoformat(self) -> str:
        """Render the wire form, e.g. ``2025-06-15T14:30:00.000Z``."""
        millis = self.utc.microsecond // 1000
        return f"{self.utc.year:04d}-{self.utc:%m-%dT%H:%M:%S}.{millis:03d}Z"

    def __str__(self) -> str:
        return self.isoformat()


# ---------------------------------------------------------------------------
# WallClock
# ---------------------------------------------------------------------------


@dataclass(frozen=True, order=True)
class WallClock:
    """Zone-less wall-clock fields (what a user selects or sees)."""

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    def __post_init__(self) -> None:
        validate_fields(self.year, self.month, self.day, self.hour, self.minute, self.second)

    @classmethod
    def from_datetime(cls, value: datetime) -> Self:
        """Take the calendar fields of *value*, ignoring any tzinfo."""
        return cls(value.year, value.month, value.day, value.hour, value.minute, value.second)

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse ``YYYY-MM-DD[ HH:MM[:SS]]`` (space or ``T`` separated)."""
        if not isinstance(text, str):
            msg = f"expected a date string, got {type(text).__name__}"
            raise ParseError(msg)
        try:
            parsed = datetime.fromisoformat(text.strip())
        except ValueError as exc:
            msg = f"malformed wall-clock time: {text!r}"
            raise ParseError(msg) from exc
        if parsed.tzinfo is not None:
            msg = f"wall-clock time must not carry a UTC offset: {text!r}"
            raise ParseError(msg)
        return cls.from_datetime(parsed)

    def to_datetime(self) -> datetime:
        """Return a naive ``datetime`` with the same fields."""
        return datetime(self.year, self.month, self.day, self.hour, self.minute, self.second)

    def date(self) -> date:
        return date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        return self.to_datetime().isoformat()

    def __str__(self) -> str:
        return self.to_datetime().isoformat(sep=" ")


# ---------------------------------------------------------------------------
# Computed results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TransitionEvent:
    """A spring-forward or fall-back change for one year."""

    year: int
    direction: TransitionDirection
    local: WallClock
    instant: Instant

    @property
    def date(self) -> date:
        return self.local.date()

    @property
    def is_spring(self) -> bool:
        return self.direction is TransitionDirection.SPRING_FORWARD

    def to_dict(self) -> dict[str, Any]:
        return {
            "year": self.year,
            "direction": str(self.direction),
            "date": self.date.isoformat(),
            "local": self.local.isoformat(),
            "utc": self.instant.isoformat(),
        }


@dataclass(frozen=True)
class TransitionProximity:
    """Distance from a moment to the nearer upcoming transition."""

    is_near: bool
    transition: TransitionEvent
    days_until: int
    is_spring_transition: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_near": self.is_near,
            "days_until": self.days_until,
            "is_spring_transition": self.is_spring_transition,
            "transition": self.transition.to_dict(),
        }


@dataclass(frozen=True)
class DSTIssue:
    """Advisory classification of a wall-clock time."""

    has_potential_issue: bool
    issue_type: IssueType = IssueType.NONE
    message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "has_potential_issue": self.has_potential_issue,
            "issue_type": str(self.issue_type),
            "message": self.message,
        }
