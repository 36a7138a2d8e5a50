"""Standalone commands: transition schedule for a year and the next change."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dstctl.commands._base import MOMENT, DstCommand
from dstctl.domain.dst import to_local
from dstctl.services._helpers import now_instant
from dstctl.services.calendar import CalendarService

if TYPE_CHECKING:
    from dstctl.commands._context import AppContext
    from dstctl.domain.dst import Moment


@click.command(
    cls=DstCommand,
    examples="""\
  dstctl transitions
  dstctl transitions 2026
  dstctl -q transitions 2025""",
)
@click.argument("year", type=int, required=False)
@click.pass_obj
def transitions(app: AppContext, year: int | None) -> None:
    """List the spring and fall transitions of YEAR (default: this year in CET/CEST)."""
    if year is None:
        year = to_local(now_instant()).year
    app.emit(CalendarService(app.settings).transitions(year))


@click.command(
    "next",
    cls=DstCommand,
    examples="""\
  dstctl next
  dstctl next --fall
  dstctl next --from "2025-03-30 03:00"
  dstctl --json next --fall --from 2025-11-01T00:00:00Z""",
)
@click.option("--fall", is_flag=True, help="Find the next fall-back change instead of spring.")
@click.option(
    "--from",
    "from_moment",
    type=MOMENT,
    default=None,
    help="Search from this moment (default: now).",
)
@click.pass_obj
def next_cmd(app: AppContext, fall: bool, from_moment: Moment | None) -> None:
    """Show the next spring-forward (or fall-back) transition."""
    app.emit(CalendarService(app.settings).next_transition(from_moment, want_fall=fall))
