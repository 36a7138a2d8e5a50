"""Command group: move reservation times between wall-clock and stored form."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dstctl.commands._base import WALL_CLOCK, DstGroup
from dstctl.services.convert import ConvertService

if TYPE_CHECKING:
    from dstctl.commands._context import AppContext
    from dstctl.domain.values import WallClock

_CONVERT_EXAMPLES = """\
  dstctl convert utc 2025 6 15 14 30
  dstctl convert preserve "2025-06-15 13:00"
  dstctl convert extract 2025-06-15T14:30:00.000Z
  dstctl convert format 2025-01-15T14:30:00Z
  dstctl convert restore 2025-06-15T13:00:00.000Z
  dstctl --json convert inspect 2025-10-26T00:30:00Z"""


@click.group(cls=DstGroup, examples=_CONVERT_EXAMPLES)
@click.pass_obj
def convert(app: AppContext) -> None:
    """Convert between CET/CEST wall-clock times and stored UTC strings."""


@convert.command(
    examples="""\
  dstctl convert utc 2025 6 15 14
  dstctl convert utc 2025 6 15 14 30 5
  dstctl -q convert utc 2025 3 30 2 30"""
)
@click.argument("year", type=int)
@click.argument("month", type=int)
@click.argument("day", type=int)
@click.argument("hour", type=int)
@click.argument("minute", type=int, default=0, required=False)
@click.argument("second", type=int, default=0, required=False)
@click.pass_obj
def utc(
    app: AppContext,
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
) -> None:
    """Build a UTC timestamp from fields, with no zone conversion."""
    app.emit(ConvertService(app.settings).utc(year, month, day, hour, minute, second))


@convert.command(
    examples="""\
  dstctl convert preserve "2025-06-15 13:00"
  dstctl convert preserve 2025-03-30T02:30"""
)
@click.argument("local", type=WALL_CLOCK)
@click.pass_obj
def preserve(app: AppContext, local: WallClock) -> None:
    """Storage form of LOCAL: same digits, labelled UTC."""
    app.emit(ConvertService(app.settings).preserve(local))


@convert.command(
    examples="""\
  dstctl convert extract 2025-06-15T14:30:00.000Z
  dstctl -q convert extract 2025-10-26T00:30:00Z"""
)
@click.argument("iso_string")
@click.pass_obj
def extract(app: AppContext, iso_string: str) -> None:
    """CET/CEST wall-clock time of the instant ISO_STRING."""
    app.emit(ConvertService(app.settings).extract(iso_string))


@convert.command(
    "format",
    examples="""\
  dstctl convert format 2025-06-15T14:30:00Z
  dstctl -q convert format 2025-01-15T14:30:00Z""",
)
@click.argument("iso_string")
@click.pass_obj
def format_cmd(app: AppContext, iso_string: str) -> None:
    """Display ISO_STRING as HH:MM in Spanish local time."""
    app.emit(ConvertService(app.settings).format(iso_string))


@convert.command(
    examples="""\
  dstctl convert restore 2025-06-15T13:00:00.000Z"""
)
@click.argument("iso_string")
@click.pass_obj
def restore(app: AppContext, iso_string: str) -> None:
    """Recover the wall-clock digits stored by ``preserve``."""
    app.emit(ConvertService(app.settings).restore(iso_string))


@convert.command(
    examples="""\
  dstctl convert inspect 2025-03-30T01:30:00Z
  dstctl --json convert inspect not-a-date"""
)
@click.argument("value")
@click.pass_obj
def inspect(app: AppContext, value: str) -> None:
    """Diagnostic breakdown of a stored value."""
    app.emit(ConvertService(app.settings).inspect(value))
