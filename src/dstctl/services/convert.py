"""ConvertService — local/UTC conversion for stored reservation times."""

from __future__ import annotations

from typing import Any

from dstctl.domain.conversion import (
    create_utc_date,
    describe_instant,
    extract_local_time,
    format_local_time,
    preserve_local_time,
    restore_local_time,
)
from dstctl.domain.dst import check_dst_issue, get_time_zone_name
from dstctl.domain.errors import DstError
from dstctl.domain.values import Instant, WallClock
from dstctl.services.base import BaseService
from dstctl.services.result import ServiceResult


def _issue_warnings(wall: WallClock) -> list[str]:
    issue = check_dst_issue(wall)
    if issue.has_potential_issue and issue.message:
        return [f"{wall}: {issue.message}"]
    return []


class ConvertService(BaseService):
    """Moves reservation times between wall-clock and stored form."""

    def utc(
        self,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int = 0,
        second: int = 0,
    ) -> ServiceResult:
        op = "utc"
        try:
            iso = create_utc_date(year, month, day, hour, minute, second)
        except DstError as exc:
            return self._domain_error(op, exc)
        return ServiceResult(ok=True, op=op, data={"iso": iso})

    def preserve(self, wall: WallClock) -> ServiceResult:
        """Storage form of a wall-clock time picked by a member."""
        op = "preserve"
        try:
            iso = preserve_local_time(wall)
        except DstError as exc:
            return self._domain_error(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"local": wall.isoformat(), "iso": iso},
            warnings=_issue_warnings(wall),
        )

    def extract(self, iso_string: str) -> ServiceResult:
        """CET/CEST display form of a stored instant."""
        op = "extract"
        try:
            local = extract_local_time(iso_string)
            zone = get_time_zone_name(Instant.parse(iso_string))
        except DstError as exc:
            return self._domain_error(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"iso": iso_string, "local": local.isoformat(), "zone": zone},
            warnings=_issue_warnings(local),
        )

    def format(self, iso_string: str) -> ServiceResult:
        op = "format"
        try:
            text = format_local_time(iso_string)
        except DstError as exc:
            return self._domain_error(op, exc)
        return ServiceResult(ok=True, op=op, data={"iso": iso_string, "time": text})

    def restore(self, iso_string: str) -> ServiceResult:
        """Wall-clock digits originally written by ``preserve``."""
        op = "restore"
        try:
            wall = restore_local_time(iso_string)
        except DstError as exc:
            return self._domain_error(op, exc)
        return ServiceResult(ok=True, op=op, data={"iso": iso_string, "local": wall.isoformat()})

    def inspect(self, value: Any) -> ServiceResult:
        """Diagnostic breakdown of a stored value."""
        op = "inspect"
        try:
            details = describe_instant(value)
        except DstError as exc:
            return self._domain_error(op, exc)
        if not details["valid"]:
            return self._failure(
                op,
                "PARSE_ERROR",
                f"Not a valid date: {value!r}",
                detail=details,
            )
        warnings: list[str] = []
        message = details["dst_issue"]["message"]
        if message:
            warnings.append(message)
        return ServiceResult(ok=True, op=op, data=details, warnings=warnings)
