"""Tests for the Rich and quiet renderers."""

from __future__ import annotations

from dstctl.config.settings import DstSettings
from dstctl.domain.values import WallClock
from dstctl.output.renderers import render_quiet, render_result
from dstctl.services.calendar import CalendarService
from dstctl.services.result import ServiceError, ServiceResult


def _err(op: str = "extract") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="PARSE_ERROR", message="malformed", detail={"input": "x"}),
    )


class TestRenderResult:
    def test_status(self, settings: DstSettings) -> None:
        result = CalendarService(settings).status(WallClock(2025, 3, 28, 12))
        output = render_result(result)
        assert output.startswith("OK  status")
        assert "zone: CET" in output
        assert "next: spring-forward on 2025-03-30" in output
        assert "meta:" not in output

    def test_status_verbose_shows_settings_used(self, settings: DstSettings) -> None:
        result = CalendarService(settings).status(WallClock(2025, 3, 28, 12))
        output = render_result(result, verbose=True)
        assert "meta:" in output
        assert "threshold_days: 7" in output
        assert "config: None" in output

    def test_transitions_table(self, settings: DstSettings) -> None:
        output = render_result(CalendarService(settings).transitions(2025))
        assert "year: 2025" in output
        assert "spring-forward" in output
        assert "2025-10-26" in output
        assert "2025-10-26T01:00:00.000Z" in output

    def test_next(self, settings: DstSettings) -> None:
        output = render_result(CalendarService(settings).next_transition(WallClock(2025, 1, 15)))
        assert "direction: spring-forward" in output
        assert "date: 2025-03-30" in output
        assert "from:" not in output
        verbose = render_result(
            CalendarService(settings).next_transition(WallClock(2025, 1, 15)), verbose=True
        )
        assert "from:" in verbose

    def test_near(self, settings: DstSettings) -> None:
        output = render_result(CalendarService(settings).near(WallClock(2025, 3, 29)))
        assert "is_near: True" in output
        assert "days_until: 1" in output

    def test_check(self, settings: DstSettings) -> None:
        output = render_result(CalendarService(settings).check(WallClock(2025, 10, 26, 2, 30)))
        assert "issue: ambiguous-hour" in output

    def test_validate(self) -> None:
        result = ServiceResult(
            ok=True,
            op="validate",
            data={
                "valid": False,
                "user_id": 7,
                "start": "2025-06-20T10:00:00",
                "end": "2025-06-20T11:00:00",
                "errors": ["Daily limit reached: 1 of 1 reservations on 2025-06-20"],
                "max_per_day": 1,
                "min_hours_in_advance": 0,
            },
        )
        output = render_result(result)
        assert "reservation: invalid" in output
        assert "Daily limit reached" in output
        assert "max_per_day" not in output
        assert "max_per_day: 1" in render_result(result, verbose=True)

    def test_monitor(self) -> None:
        item = {
            "id": 1,
            "user_id": 7,
            "start_time": "2025-03-30T02:30:00.000Z",
            "end_time": "2025-03-30T03:30:00.000Z",
            "status": "active",
            "direction": "spring-forward",
            "transition_date": "2025-03-30",
            "on_transition_day": True,
            "critical": True,
        }
        result = ServiceResult(
            ok=True,
            op="monitor",
            data={"year": 2025, "days_around": 3, "count": 1, "critical_count": 1, "items": [item]},
        )
        output = render_result(result)
        assert "critical" in output
        assert "1 reservations, 1 critical" in output

    def test_monitor_verbose_shows_export(self) -> None:
        result = ServiceResult(
            ok=True,
            op="monitor",
            data={"year": 2025, "days_around": 3, "count": 0, "critical_count": 0, "items": []},
            meta={"config": None, "export": "reservations.json"},
        )
        assert "export:" not in render_result(result)
        assert "export: reservations.json" in render_result(result, verbose=True)

    def test_generic(self) -> None:
        output = render_result(ServiceResult(ok=True, op="restore", data={"local": "2025-06-15T13:00:00"}))
        assert output == "OK  restore\n  local: 2025-06-15T13:00:00"

    def test_error(self) -> None:
        output = render_result(_err())
        assert output.startswith("ERROR  extract")
        assert "malformed" in output
        assert "detail" not in output
        assert "input: x" in render_result(_err(), verbose=True)


class TestRenderQuiet:
    def test_single_values(self) -> None:
        assert render_quiet(ServiceResult(ok=True, op="format", data={"time": "16:30"})) == "16:30"
        assert render_quiet(ServiceResult(ok=True, op="status", data={"zone": "CEST"})) == "CEST"
        assert render_quiet(ServiceResult(ok=True, op="near", data={"is_near": True})) == "true"
        assert render_quiet(ServiceResult(ok=True, op="validate", data={"valid": False})) == "invalid"

    def test_lists(self, settings: DstSettings) -> None:
        output = render_quiet(CalendarService(settings).transitions(2025))
        assert output == "2025-03-30T02:00:00\n2025-10-26T03:00:00"
        monitor = ServiceResult(ok=True, op="monitor", data={"items": [{"id": 4}, {"id": 9}]})
        assert render_quiet(monitor) == "4\n9"

    def test_unknown_op(self) -> None:
        assert render_quiet(ServiceResult(ok=True, op="mystery")) == "OK: mystery"

    def test_error(self) -> None:
        assert render_quiet(_err()) == "ERROR: extract — malformed"
