"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from dstctl.output.console import (
    create_console,
    get_output,
    style_for_direction,
    style_for_zone,
)

if TYPE_CHECKING:
    from rich.console import Console

    from dstctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render the single most useful value for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    d = result.data
    if result.op == "validate":
        return "valid" if d.get("valid") else "invalid"
    if result.op == "near":
        return str(d.get("is_near", False)).lower()
    if result.op in ("transitions", "monitor"):
        key = "local" if result.op == "transitions" else "id"
        return "\n".join(str(item.get(key, "")) for item in d.get("items", []))

    key = _QUIET_KEYS.get(result.op)
    if key is not None and key in d:
        return str(d[key])
    return f"OK: {result.op}"


_QUIET_KEYS: dict[str, str] = {
    "status": "zone",
    "next_transition": "local",
    "check": "issue_type",
    "utc": "iso",
    "preserve": "iso",
    "extract": "local",
    "format": "time",
    "restore": "local",
    "inspect": "iso",
}


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="dst.ok")
    op = Text(f"  {result.op}", style="dst.op")
    console.print(label, op, sep="", end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="dst.key")
    if key == "zone":
        v = Text(str(value), style=style_for_zone(str(value)))
    elif key == "direction":
        v = Text(str(value), style=style_for_direction(str(value)))
    elif key in ("local", "time", "iso", "utc"):
        v = Text(str(value), style="dst.time")
    elif isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":"), ensure_ascii=False))
    else:
        v = Text(str(value))
    console.print(k, v, sep="", end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(Text(f"    {k}: {v}"))


def _transition_table(items: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Direction", no_wrap=True)
    table.add_column("Date")
    table.add_column("Local", style="dst.time")
    table.add_column("UTC")
    for item in items:
        direction = str(item.get("direction", ""))
        table.add_row(
            Text(direction, style=style_for_direction(direction)),
            str(item.get("date", "")),
            str(item.get("local", "")),
            str(item.get("utc", "")),
        )
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="dst.error")
    op = Text(f"  {result.op}", style="dst.op")
    dash = Text(" — ")
    console.print(label, op, dash, Text(msg), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Calendar renderers ────────────────────────────────────────────────


def _render_status(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    for key in ("local", "utc", "zone", "offset_hours", "is_dst"):
        if key in d:
            _field(console, key, d[key])

    proximity = d.get("next_transition") or {}
    transition = proximity.get("transition") or {}
    if transition:
        console.print()
        days = proximity.get("days_until")
        direction = str(transition.get("direction", ""))
        console.print(
            Text("  next: ", style="dst.key"),
            Text(direction, style=style_for_direction(direction)),
            Text(f" on {transition.get('date', '?')} ({days} days)"),
            sep="",
            end="",
        )
        console.print()
    if verbose:
        _render_meta(console, result)


def _render_transitions(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "year", result.data.get("year"))
    console.print()
    console.print(_transition_table(result.data.get("items", [])))


def _render_next(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("direction", "date", "local", "utc"):
        if key in result.data:
            _field(console, key, result.data[key])
    if verbose and "from" in result.data:
        _field(console, "from", result.data["from"])


def _render_near(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    near = bool(d.get("is_near"))
    _field(console, "is_near", near)
    transition = d.get("transition") or {}
    _field(console, "direction", transition.get("direction", ""))
    _field(console, "date", transition.get("date", ""))
    _field(console, "days_until", d.get("days_until"))
    _field(console, "threshold_days", d.get("threshold_days"))
    if verbose:
        _render_meta(console, result)


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "local", d.get("local", ""))
    _field(console, "utc", d.get("utc", ""))
    issue = str(d.get("issue_type", "none"))
    style = "dst.warning" if d.get("has_potential_issue") else "dst.ok"
    console.print(Text("  issue: ", style="dst.key"), Text(issue, style=style), sep="", end="")
    console.print()


# ── Reservation renderers ─────────────────────────────────────────────


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    valid = bool(d.get("valid"))
    verdict = Text("valid" if valid else "invalid", style="dst.ok" if valid else "dst.error")
    console.print(Text("  reservation: ", style="dst.key"), verdict, sep="", end="")
    console.print()
    for key in ("user_id", "start", "end"):
        _field(console, key, d.get(key, ""))
    for error in d.get("errors", []):
        console.print(Text("  error ", style="dst.error"), Text(error), sep="")
    if verbose:
        _field(console, "max_per_day", d.get("max_per_day"))
        _field(console, "min_hours_in_advance", d.get("min_hours_in_advance"))
        _render_meta(console, result)


def _render_monitor(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    items = d.get("items", [])
    _field(console, "year", d.get("year"))
    _field(console, "days_around", d.get("days_around"))

    if items:
        console.print()
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("ID", no_wrap=True)
        table.add_column("User")
        table.add_column("Start (stored)", style="dst.time")
        table.add_column("End (stored)")
        table.add_column("Transition")
        table.add_column("Flag")
        for item in items:
            direction = str(item.get("direction", ""))
            if item.get("critical"):
                flag = Text("critical", style="dst.error")
            elif item.get("on_transition_day"):
                flag = Text("transition day", style="dst.warning")
            else:
                flag = Text("")
            table.add_row(
                str(item.get("id", "")),
                str(item.get("user_id", "")),
                str(item.get("start_time", "")),
                str(item.get("end_time", "")),
                Text(f"{direction} {item.get('transition_date', '')}", style=style_for_direction(direction)),
                flag,
            )
        console.print(table)

    console.print(
        f"\n{d.get('count', len(items))} reservations, {d.get('critical_count', 0)} critical"
    )
    if verbose:
        _render_meta(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Key-value rendering for conversions and unknown ops."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Any] = {
    # Calendar
    "status": _render_status,
    "transitions": _render_transitions,
    "next_transition": _render_next,
    "near": _render_near,
    "check": _render_check,
    # Reservations
    "validate": _render_validate,
    "monitor": _render_monitor,
}
