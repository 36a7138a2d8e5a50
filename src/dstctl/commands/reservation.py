"""Command group: booking rules and the transition monitor."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from dstctl.commands._base import MOMENT, WALL_CLOCK, DstGroup
from dstctl.domain.dst import to_instant
from dstctl.services.reservation import ReservationService

if TYPE_CHECKING:
    from dstctl.commands._context import AppContext
    from dstctl.domain.dst import Moment
    from dstctl.domain.values import WallClock

_RESERVATION_EXAMPLES = """\
  dstctl reservation validate --user 7 --start "2025-06-20 10:00" --end "2025-06-20 11:00"
  dstctl reservation validate --user 7 --start "2025-06-20 10:00" --end "2025-06-20 11:00" \\
      --file reservations.json --max-per-day 2 --min-hours 24
  dstctl reservation monitor 2025 --file reservations.json
  dstctl --json reservation monitor 2025 --file reservations.json --days-around 1"""

_FILE = click.Path(path_type=Path, dir_okay=False)


@click.group(cls=DstGroup, examples=_RESERVATION_EXAMPLES)
@click.pass_obj
def reservation(app: AppContext) -> None:
    """Validate bookings and scan them around clock changes."""


@reservation.command(
    examples="""\
  dstctl reservation validate --user 7 --start "2025-06-20 10:00" --end "2025-06-20 11:00"
  dstctl reservation validate --user 7 --start "2025-03-30 02:30" --end "2025-03-30 03:30"
  dstctl -q reservation validate --user 7 --start "2025-06-20 10:00" \\
      --end "2025-06-20 11:00" --file reservations.json --max-per-day 1"""
)
@click.option("--user", "user_id", type=int, required=True, help="Member id.")
@click.option("--start", type=WALL_CLOCK, required=True, help="Start, CET/CEST wall clock.")
@click.option("--end", type=WALL_CLOCK, required=True, help="End, CET/CEST wall clock.")
@click.option("--file", "export", type=_FILE, default=None, help="JSON export of existing bookings.")
@click.option("--now", type=MOMENT, default=None, help="Pretend the current time is this.")
@click.option(
    "--max-per-day",
    type=click.IntRange(min=0),
    default=None,
    help="Active bookings allowed per member per day; 0 disables.",
)
@click.option(
    "--min-hours",
    "min_hours_in_advance",
    type=click.FloatRange(min=0),
    default=None,
    help="Minimum notice in hours; 0 disables.",
)
@click.pass_obj
def validate(
    app: AppContext,
    user_id: int,
    start: WallClock,
    end: WallClock,
    export: Path | None,
    now: Moment | None,
    max_per_day: int | None,
    min_hours_in_advance: float | None,
) -> None:
    """Check a requested booking against the reservation rules."""
    now_instant = to_instant(now) if now is not None else None
    result = ReservationService(app.settings).validate(
        user_id=user_id,
        start=start,
        end=end,
        export=export,
        now=now_instant,
        max_per_day=max_per_day,
        min_hours_in_advance=min_hours_in_advance,
    )
    app.emit(result)


@reservation.command(
    examples="""\
  dstctl reservation monitor 2025 --file reservations.json
  dstctl reservation monitor 2025 --file reservations.json --days-around 0
  dstctl -q reservation monitor 2026 --file reservations.json"""
)
@click.argument("year", type=int)
@click.option("--file", "export", type=_FILE, required=True, help="JSON export of bookings.")
@click.option(
    "--days-around",
    type=click.IntRange(min=0),
    default=None,
    help="Days either side of each transition (default: [monitor] days_around).",
)
@click.pass_obj
def monitor(app: AppContext, year: int, export: Path, days_around: int | None) -> None:
    """List bookings stored near YEAR's transitions and flag critical ones."""
    app.emit(ReservationService(app.settings).monitor(year, export, days_around=days_around))
