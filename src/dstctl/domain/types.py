"""Classification enums for transitions, DST issues, and zone names."""

from __future__ import annotations

from enum import StrEnum


class TransitionDirection(StrEnum):
    """Which way the clocks move on a transition day."""

    SPRING_FORWARD = "spring-forward"
    FALL_BACK = "fall-back"


class IssueType(StrEnum):
    """Classification of a wall-clock time against the transition schedule."""

    NONE = "none"
    NON_EXISTENT_HOUR = "non-existent-hour"
    AMBIGUOUS_HOUR = "ambiguous-hour"


class ZoneName(StrEnum):
    """Central European zone abbreviations."""

    CET = "CET"
    CEST = "CEST"


class ReservationStatus(StrEnum):
    ACTIVE = "active"
    CANCELLED = "cancelled"
