"""Standalone command: current offset, zone and upcoming transition."""

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
  dstctl status
  dstctl status --at "2025-03-28 09:00"
  dstctl status --at 2025-10-26T00:30:00Z --threshold 2
  dstctl --json status""",
)
@click.option("--at", "at", type=MOMENT, default=None, help="Moment to describe (default: now).")
@click.option(
    "--threshold",
    type=click.IntRange(min=0),
    default=None,
    help="Days before a transition to warn (default: [warnings] banner_threshold_days).",
)
@click.pass_obj
def status(app: AppContext, at: Moment | None, threshold: int | None) -> None:
    """Show whether CET or CEST applies and when the clocks next change."""
    app.emit(CalendarService(app.settings).status(at, threshold=threshold))
