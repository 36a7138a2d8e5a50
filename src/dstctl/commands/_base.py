"""Custom Click base classes and parameter types.

Provides DstCommand and DstGroup that accept an ``examples`` parameter.
When ``--examples`` is passed, the command prints usage examples and exits.
This keeps ``--help`` concise while making examples available on demand.

:data:`MOMENT` and :data:`WALL_CLOCK` turn command-line text into domain
values, reporting malformed input as a usage error.
"""

from __future__ import annotations

from typing import Any

import click

from dstctl.domain.errors import DstError
from dstctl.domain.values import WallClock
from dstctl.services._helpers import parse_moment


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class DstCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class DstGroup(click.Group):
    """Click Group subclass that supports an ``--examples`` flag.

    Sets ``command_class = DstCommand`` so all subcommands automatically
    accept the ``examples`` parameter without explicit ``cls=`` each time.
    """

    command_class = DstCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class MomentType(click.ParamType):
    """Wall-clock time, or an instant when ``Z``/an offset is given."""

    name = "moment"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Any:
        if not isinstance(value, str):
            return value
        try:
            return parse_moment(value)
        except DstError as exc:
            self.fail(str(exc), param, ctx)


class WallClockType(click.ParamType):
    """CET/CEST wall-clock time such as ``2025-03-30 02:30``."""

    name = "wall-clock"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Any:
        if isinstance(value, WallClock):
            return value
        try:
            return WallClock.parse(value)
        except DstError as exc:
            self.fail(str(exc), param, ctx)


MOMENT = MomentType()
WALL_CLOCK = WallClockType()
