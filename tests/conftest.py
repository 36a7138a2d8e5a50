"""Shared pytest fixtures and test helpers for dstctl tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
import structlog
from click.testing import CliRunner

from dstctl.config.settings import DstSettings


@pytest.fixture(autouse=True)
def _no_ambient_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's DSTCTL_* environment out of the tests."""
    for name in (
        "DSTCTL_CONFIG",
        "DSTCTL_WARNINGS__THRESHOLD_DAYS",
        "DSTCTL_WARNINGS__BANNER_THRESHOLD_DAYS",
        "DSTCTL_RESERVATIONS__MAX_PER_DAY",
        "DSTCTL_RESERVATIONS__MIN_HOURS_IN_ADVANCE",
        "DSTCTL_MONITOR__DAYS_AROUND",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None]:
    """Undo configure_logging() calls made by CLI invocations."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("dstctl").setLevel(logging.NOTSET)
    structlog.reset_defaults()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> DstSettings:
    """Code-default settings, with config discovery rooted in a temp dir."""
    return DstSettings.from_cli(search_root=tmp_path)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp dir so the CLI never picks up a stray dstctl.toml.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def booking(
    id: int,
    user_id: int,
    start: str,
    end: str,
    status: str = "active",
) -> dict[str, Any]:
    """One exported reservation record."""
    return {
        "id": id,
        "user_id": user_id,
        "start_time": start,
        "end_time": end,
        "status": status,
    }


SAMPLE_BOOKINGS: list[dict[str, Any]] = [
    # 2025 spring transition is Sunday 2025-03-30
    booking(1, 7, "2025-03-30T02:30:00.000Z", "2025-03-30T03:30:00.000Z"),
    booking(2, 7, "2025-03-28T10:00:00.000Z", "2025-03-28T11:00:00.000Z"),
    booking(3, 8, "2025-03-30T10:00:00.000Z", "2025-03-30T11:00:00.000Z"),
    # 2025 fall transition is Sunday 2025-10-26
    booking(4, 8, "2025-10-26T00:30:00.000Z", "2025-10-26T01:30:00.000Z"),
    booking(5, 9, "2025-10-29T18:00:00.000Z", "2025-10-29T19:00:00.000Z"),
    # Outside both windows
    booking(6, 7, "2025-06-20T10:00:00.000Z", "2025-06-20T11:00:00.000Z"),
    booking(7, 7, "2025-06-20T12:00:00.000Z", "2025-06-20T13:00:00.000Z", "cancelled"),
]


def write_export(path: Path, records: list[dict[str, Any]] | None = None) -> Path:
    """Write a reservation export and return its path."""
    path.write_text(json.dumps(SAMPLE_BOOKINGS if records is None else records))
    return path


@pytest.fixture
def export_file(tmp_path: Path) -> Path:
    """JSON export holding :data:`SAMPLE_BOOKINGS`."""
    return write_export(tmp_path / "reservations.json")
