"""User-facing copy for upcoming transitions and DST-hour bookings."""

from __future__ import annotations

from dstctl.domain.values import TransitionProximity

SPRING_LABEL = "summer time (CET → CEST)"
FALL_LABEL = "winter time (CEST → CET)"

SPRING_CLOCKS = "Clocks move forward one hour (from 02:00 to 03:00); the day has 23 hours."
FALL_CLOCKS = "Clocks move back one hour (from 03:00 to 02:00); the day has 25 hours."

SPRING_ADVICE = "Avoid booking between 02:00 and 03:00 on that day: those times do not exist."
FALL_ADVICE = "Bookings between 02:00 and 03:00 on that day happen twice; check the hour."


def days_text(days_until: int) -> str:
    """Render a day count the way the notification banner does."""
    if days_until <= 0:
        return "today"
    if days_until == 1:
        return "tomorrow"
    return f"in {days_until} days"


def transition_notice(proximity: TransitionProximity) -> str:
    """One-line banner describing the nearest transition."""
    spring = proximity.is_spring_transition
    label = SPRING_LABEL if spring else FALL_LABEL
    when = days_text(proximity.days_until)
    on = proximity.transition.date.isoformat()
    clocks = SPRING_CLOCKS if spring else FALL_CLOCKS
    return f"The change to {label} happens {when} ({on}). {clocks}"


def booking_advice(proximity: TransitionProximity) -> str:
    return SPRING_ADVICE if proximity.is_spring_transition else FALL_ADVICE
