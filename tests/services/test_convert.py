"""Tests for ConvertService."""

from __future__ import annotations

from dstctl.config.settings import DstSettings
from dstctl.domain.values import WallClock
from dstctl.services.convert import ConvertService


class TestUtc:
    def test_builds_iso(self, settings: DstSettings) -> None:
        result = ConvertService(settings).utc(2025, 6, 15, 14, 30)
        assert result.ok
        assert result.data == {"iso": "2025-06-15T14:30:00.000Z"}

    def test_out_of_range(self, settings: DstSettings) -> None:
        result = ConvertService(settings).utc(2025, 6, 15, 24)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_ARGUMENT"


class TestPreserve:
    def test_stores_digits(self, settings: DstSettings) -> None:
        result = ConvertService(settings).preserve(WallClock(2025, 6, 15, 13))
        assert result.data == {"local": "2025-06-15T13:00:00", "iso": "2025-06-15T13:00:00.000Z"}
        assert result.warnings == []

    def test_warns_in_transition_hour(self, settings: DstSettings) -> None:
        result = ConvertService(settings).preserve(WallClock(2025, 3, 30, 2, 30))
        assert result.ok
        assert result.data["iso"] == "2025-03-30T02:30:00.000Z"
        assert result.warnings[0].startswith("2025-03-30 02:30:00:")


class TestExtractAndFormat:
    def test_extract(self, settings: DstSettings) -> None:
        result = ConvertService(settings).extract("2025-06-15T14:30:00.000Z")
        assert result.ok
        assert result.data["local"] == "2025-06-15T16:30:00"
        assert result.data["zone"] == "CEST"

    def test_extract_ambiguous_warns(self, settings: DstSettings) -> None:
        result = ConvertService(settings).extract("2025-10-26T01:30:00Z")
        assert result.ok
        assert result.data["zone"] == "CET"
        assert len(result.warnings) == 1

    def test_extract_malformed(self, settings: DstSettings) -> None:
        result = ConvertService(settings).extract("tomorrow")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "PARSE_ERROR"

    def test_format(self, settings: DstSettings) -> None:
        service = ConvertService(settings)
        assert service.format("2025-06-15T14:30:00.000Z").data["time"] == "16:30"
        assert service.format("2025-01-15T14:30:00.000Z").data["time"] == "15:30"

    def test_format_malformed(self, settings: DstSettings) -> None:
        assert ConvertService(settings).format("").ok is False


class TestRestore:
    def test_reads_stored_digits(self, settings: DstSettings) -> None:
        result = ConvertService(settings).restore("2025-06-15T13:00:00.000Z")
        assert result.data["local"] == "2025-06-15T13:00:00"


class TestInspect:
    def test_valid(self, settings: DstSettings) -> None:
        result = ConvertService(settings).inspect("2025-03-30T01:30:00Z")
        assert result.ok
        assert result.data["zone"] == "CEST"
        assert result.data["local_time"] == "03:30:00"
        assert result.warnings == []

    def test_transition_hour_warns(self, settings: DstSettings) -> None:
        result = ConvertService(settings).inspect("2025-10-26T00:15:00Z")
        assert result.ok
        assert len(result.warnings) == 1

    def test_invalid(self, settings: DstSettings) -> None:
        result = ConvertService(settings).inspect("not-a-date")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "PARSE_ERROR"
        assert result.error.detail == {"valid": False, "input": "not-a-date"}

    def test_outside_date_range(self, settings: DstSettings) -> None:
        result = ConvertService(settings).inspect("9999-12-31T23:30:00Z")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_ARGUMENT"
