"""CalendarService — DST schedule queries.

Thin wrappers over :mod:`dstctl.domain.dst` that default thresholds from
settings and shape results for the CLI. Moments are either CET/CEST
wall-clock values or instants (see :func:`parse_moment`).
"""

from __future__ import annotations

from typing import Any

from dstctl.domain.dst import (
    Moment,
    check_dst_issue,
    get_hour_offset_for_date,
    get_next_dst_transition,
    get_time_zone_name,
    is_daylight_saving_time,
    is_near_dst_transition,
    to_instant,
    to_local,
    transitions_for_year,
)
from dstctl.domain.errors import DstError
from dstctl.domain.notices import booking_advice, transition_notice
from dstctl.services._helpers import now_instant
from dstctl.services.base import BaseService
from dstctl.services.result import ServiceResult


def _moment_fields(moment: Moment) -> dict[str, Any]:
    return {
        "local": to_local(moment).isoformat(),
        "utc": to_instant(moment).isoformat(),
    }


class CalendarService(BaseService):
    """Answers "is it summer time?", "when is the next change?" and friends."""

    def status(self, at: Moment | None = None, *, threshold: int | None = None) -> ServiceResult:
        """Offset, zone and nearest transition for *at* (default: now)."""
        op = "status"
        moment = at if at is not None else now_instant()
        if threshold is None:
            threshold = self._settings.warnings.banner_threshold_days
        try:
            proximity = is_near_dst_transition(moment, threshold)
            data = {
                **_moment_fields(moment),
                "is_dst": is_daylight_saving_time(moment),
                "offset_hours": get_hour_offset_for_date(moment),
                "zone": get_time_zone_name(moment),
                "next_transition": proximity.to_dict(),
            }
        except DstError as exc:
            return self._domain_error(op, exc)

        warnings: list[str] = []
        if proximity.is_near:
            warnings.append(transition_notice(proximity))
        return ServiceResult(
            ok=True,
            op=op,
            data=data,
            warnings=warnings,
            meta=self._meta(threshold_days=threshold),
        )

    def transitions(self, year: int) -> ServiceResult:
        """Both transitions of *year*."""
        op = "transitions"
        try:
            spring, fall = transitions_for_year(year)
        except DstError as exc:
            return self._domain_error(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"year": year, "items": [spring.to_dict(), fall.to_dict()]},
        )

    def next_transition(
        self,
        from_moment: Moment | None = None,
        *,
        want_fall: bool = False,
    ) -> ServiceResult:
        """Next spring (default) or fall transition after *from_moment*."""
        op = "next_transition"
        moment = from_moment if from_moment is not None else now_instant()
        try:
            event = get_next_dst_transition(moment, want_fall_transition=want_fall)
        except DstError as exc:
            return self._domain_error(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"from": _moment_fields(moment), **event.to_dict()},
        )

    def near(self, at: Moment | None = None, *, threshold: int | None = None) -> ServiceResult:
        """Whether *at* is within *threshold* days of a transition."""
        op = "near"
        moment = at if at is not None else now_instant()
        if threshold is None:
            threshold = self._settings.warnings.threshold_days
        try:
            proximity = is_near_dst_transition(moment, threshold)
        except DstError as exc:
            return self._domain_error(op, exc)

        warnings: list[str] = []
        if proximity.is_near:
            warnings.append(transition_notice(proximity))
            warnings.append(booking_advice(proximity))
        return ServiceResult(
            ok=True,
            op=op,
            data={"threshold_days": threshold, **proximity.to_dict()},
            warnings=warnings,
            meta=self._meta(),
        )

    def check(self, moment: Moment) -> ServiceResult:
        """Classify *moment* as a non-existent, ambiguous, or ordinary time."""
        op = "check"
        try:
            issue = check_dst_issue(moment)
            fields = _moment_fields(moment)
        except DstError as exc:
            return self._domain_error(op, exc)

        warnings = [issue.message] if issue.has_potential_issue and issue.message else []
        return ServiceResult(
            ok=True,
            op=op,
            data={**fields, **issue.to_dict()},
            warnings=warnings,
        )
