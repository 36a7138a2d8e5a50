"""ReservationService — booking validation and the transition monitor.

Bookings are read from a JSON export of the reservation API (see
:mod:`dstctl.infrastructure.reservations`). Limits default from the
``[reservations]`` and ``[monitor]`` settings sections.
"""

from __future__ import annotations

import logging
from pathlib import Path

from dstctl.domain.errors import DstError
from dstctl.domain.reservations import (
    Reservation,
    scan_transition_window,
    validate_reservation,
)
from dstctl.domain.values import Instant, WallClock
from dstctl.infrastructure.reservations import load_reservations
from dstctl.services._helpers import now_instant
from dstctl.services.base import BaseService
from dstctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class ReservationService(BaseService):
    """Applies booking rules and scans exports around transitions."""

    def _load(self, op: str, path: Path | None) -> list[Reservation] | ServiceResult:
        if path is None:
            return []
        try:
            return load_reservations(path)
        except FileNotFoundError:
            return self._failure(op, "FILE_NOT_FOUND", f"No such file: {path}")
        except DstError as exc:
            return self._domain_error(op, exc)

    def validate(
        self,
        *,
        user_id: int,
        start: WallClock,
        end: WallClock,
        export: Path | None = None,
        now: Instant | None = None,
        max_per_day: int | None = None,
        min_hours_in_advance: float | None = None,
    ) -> ServiceResult:
        """Check a requested slot against every booking rule.

        A rule violation is reported as ``valid: false`` with the reasons;
        DST issues only add warnings.
        """
        op = "validate"
        loaded = self._load(op, export)
        if isinstance(loaded, ServiceResult):
            return loaded

        rules = self._settings.reservations
        limit = rules.max_per_day if max_per_day is None else max_per_day
        notice = rules.min_hours_in_advance if min_hours_in_advance is None else min_hours_in_advance
        try:
            outcome = validate_reservation(
                user_id=user_id,
                start=start,
                end=end,
                reservations=loaded,
                now=now or now_instant(),
                max_per_day=limit,
                min_hours_in_advance=notice,
            )
        except DstError as exc:
            return self._domain_error(op, exc)

        logger.debug("validate user=%s start=%s valid=%s", user_id, start, outcome.valid)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "valid": outcome.valid,
                "user_id": user_id,
                "start": start.isoformat(),
                "end": end.isoformat(),
                "errors": outcome.errors,
                "max_per_day": limit,
                "min_hours_in_advance": notice,
            },
            warnings=outcome.warnings,
            meta=self._meta(export=str(export) if export else None),
        )

    def monitor(
        self,
        year: int,
        export: Path,
        *,
        days_around: int | None = None,
    ) -> ServiceResult:
        """List bookings within *days_around* days of *year*'s transitions."""
        op = "monitor"
        loaded = self._load(op, export)
        if isinstance(loaded, ServiceResult):
            return loaded

        window = self._settings.monitor.days_around if days_around is None else days_around
        try:
            found = scan_transition_window(year, loaded, window)
        except DstError as exc:
            return self._domain_error(op, exc)

        items = [m.to_dict() for m in found]
        critical = [m for m in found if m.critical]
        warnings = [
            f"Reservation {m.reservation.id} starts in the critical hours of "
            f"{m.transition.date.isoformat()}; verify it manually"
            for m in critical
        ]
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "year": year,
                "days_around": window,
                "count": len(items),
                "critical_count": len(critical),
                "items": items,
            },
            warnings=warnings,
            meta=self._meta(export=str(export)),
        )
