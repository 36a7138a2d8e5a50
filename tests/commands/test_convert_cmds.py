"""Tests for the convert command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from dstctl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestConvertCommands:
    def test_utc(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "convert", "utc", "2025", "6", "15", "14", "30"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "2025-06-15T14:30:00.000Z"

    def test_utc_defaults_minutes(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "convert", "utc", "2025", "6", "15", "14"])
        assert result.stdout.strip() == "2025-06-15T14:00:00.000Z"

    def test_utc_out_of_range(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["convert", "utc", "2025", "2", "29", "10"])
        assert result.exit_code == 1
        assert "ERROR  utc" in result.stderr
        assert "day 29 is out of range" in result.stderr

    def test_preserve(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "convert", "preserve", "2025-06-15 13:00"])
        assert result.stdout.strip() == "2025-06-15T13:00:00.000Z"

    def test_preserve_rejects_offset(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["convert", "preserve", "2025-06-15T13:00+02:00"])
        assert result.exit_code == 2
        assert "must not carry a UTC offset" in result.stderr

    def test_preserve_warns_in_gap(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["convert", "preserve", "2025-03-30 02:30"])
        assert result.exit_code == 0
        assert "WARNING: 2025-03-30 02:30:00:" in result.stderr

    def test_extract(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "convert", "extract", "2025-06-15T14:30:00.000Z"])
        payload = json.loads(result.stdout)
        assert payload["data"]["local"] == "2025-06-15T16:30:00"
        assert payload["data"]["zone"] == "CEST"

    @pytest.mark.parametrize(
        "iso,expected",
        [("2025-06-15T14:30:00.000Z", "16:30"), ("2025-01-15T14:30:00.000Z", "15:30")],
    )
    def test_format(self, cli_runner: CliRunner, iso: str, expected: str) -> None:
        result = cli_runner.invoke(cli, ["-q", "convert", "format", iso])
        assert result.stdout.strip() == expected

    def test_format_malformed(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "convert", "format", "14:30"])
        assert result.exit_code == 1
        assert result.stderr.startswith("ERROR: format")

    @pytest.mark.parametrize("sub", ["format", "extract", "inspect"])
    def test_last_representable_hour(self, cli_runner: CliRunner, sub: str) -> None:
        result = cli_runner.invoke(cli, ["-q", "convert", sub, "9999-12-31T23:30:00Z"])
        assert result.exit_code == 1
        assert result.stderr.startswith("ERROR: ")
        assert "supported date range" in result.stderr

    def test_restore(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "convert", "restore", "2025-06-15T13:00:00.000Z"])
        assert result.stdout.strip() == "2025-06-15T13:00:00"

    def test_inspect(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["convert", "inspect", "2025-06-15T14:30:00Z"])
        assert result.exit_code == 0
        assert "offset_minutes: 120" in result.stdout
        assert "local_time: 16:30:00" in result.stdout

    def test_inspect_invalid_verbose_detail(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "convert", "inspect", "not-a-date"])
        assert result.exit_code == 1
        assert "Not a valid date" in result.stderr
        assert "input: not-a-date" in result.stderr
