"""Standalone command: transition proximity check."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dstctl.commands._base import MOMENT, DstCommand
from dstctl.services.calendar import CalendarService

if TYPE_CHECKING:
    from dstctl.commands._context import AppContext
    from dstctl.domain.dst import Moment


@click.command(
    cls=DstCommand,
    examples="""\
  dstctl near
  dstctl near --at "2025-03-28 12:00"
  dstctl near --threshold 7
  dstctl -q near --at 2025-10-24T10:00:00Z""",
)
@click.option("--at", "at", type=MOMENT, default=None, help="Moment to check (default: now).")
@click.option(
    "--threshold",
    type=click.IntRange(min=0),
    default=None,
    help="Days counted as near (default: [warnings] threshold_days).",
)
@click.pass_obj
def near(app: AppContext, at: Moment | None, threshold: int | None) -> None:
    """Report whether a clock change is coming up within the threshold."""
    app.emit(CalendarService(app.settings).near(at, threshold=threshold))
