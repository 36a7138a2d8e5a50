"""Rich Console factory and theme for dstctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DST_THEME = Theme(
    {
        "dst.ok": "bold green",
        "dst.error": "bold red",
        "dst.warning": "bold yellow",
        "dst.op": "bold cyan",
        "dst.key": "dim",
        "dst.time": "bold",
        "dst.zone.cest": "yellow",
        "dst.zone.cet": "blue",
        "dst.spring": "green",
        "dst.fall": "magenta",
    }
)

_ZONE_STYLES: dict[str, str] = {
    "CEST": "dst.zone.cest",
    "CET": "dst.zone.cet",
}

_DIRECTION_STYLES: dict[str, str] = {
    "spring-forward": "dst.spring",
    "fall-back": "dst.fall",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=DST_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_zone(zone: str) -> str:
    return _ZONE_STYLES.get(zone, "")


def style_for_direction(direction: str) -> str:
    return _DIRECTION_STYLES.get(direction, "")
