"""Subcommand modules for dstctl.

Provides register_commands() which uses deferred imports to keep
``dstctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from dstctl.commands.convert import convert
    from dstctl.commands.reservation import reservation

    cli.add_command(convert)
    cli.add_command(reservation)

    # --- Standalone commands ---
    from dstctl.commands.check import check
    from dstctl.commands.near import near
    from dstctl.commands.status import status
    from dstctl.commands.transitions import next_cmd, transitions

    cli.add_command(status)
    cli.add_command(transitions)
    cli.add_command(next_cmd)
    cli.add_command(near)
    cli.add_command(check)
