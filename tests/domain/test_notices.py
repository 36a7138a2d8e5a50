"""Tests for transition banner and booking advice copy."""

from __future__ import annotations

import pytest

from dstctl.domain.dst import is_near_dst_transition
from dstctl.domain.notices import (
    FALL_ADVICE,
    SPRING_ADVICE,
    booking_advice,
    days_text,
    transition_notice,
)
from dstctl.domain.values import WallClock


@pytest.mark.parametrize(
    "days,expected",
    [(0, "today"), (1, "tomorrow"), (2, "in 2 days"), (7, "in 7 days")],
)
def test_days_text(days: int, expected: str) -> None:
    assert days_text(days) == expected


class TestTransitionNotice:
    def test_spring(self) -> None:
        notice = transition_notice(is_near_dst_transition(WallClock(2025, 3, 29), 3))
        assert "summer time" in notice
        assert "tomorrow" in notice
        assert "2025-03-30" in notice
        assert "23 hours" in notice

    def test_fall(self) -> None:
        notice = transition_notice(is_near_dst_transition(WallClock(2025, 10, 23, 12), 3))
        assert "winter time" in notice
        assert "in 2 days" in notice
        assert "2025-10-26" in notice
        assert "25 hours" in notice


def test_booking_advice() -> None:
    assert booking_advice(is_near_dst_transition(WallClock(2025, 3, 29), 3)) == SPRING_ADVICE
    assert booking_advice(is_near_dst_transition(WallClock(2025, 10, 25), 3)) == FALL_ADVICE
