"""Standalone command: flag non-existent and ambiguous times."""

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
  dstctl check "2025-03-30 02:30"
  dstctl check "2025-10-26 02:15"
  dstctl check 2025-03-30T01:30:00Z
  dstctl -q check 2025-06-15T10:00""",
)
@click.argument("moment", type=MOMENT)
@click.pass_obj
def check(app: AppContext, moment: Moment) -> None:
    """Check whether MOMENT falls in a skipped or repeated hour."""
    app.emit(CalendarService(app.settings).check(moment))
