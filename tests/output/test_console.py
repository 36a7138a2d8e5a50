"""Tests for the Rich console factory and style helpers."""

from rich.text import Text

from dstctl.output.console import create_console, get_output, style_for_direction, style_for_zone


def test_console_renders_to_buffer() -> None:
    console = create_console(no_color=True)
    console.print(Text("CEST", style="dst.zone.cest"))
    assert get_output(console) == "CEST\n"


def test_theme_styles_resolve() -> None:
    console = create_console()
    for name in ("dst.ok", "dst.error", "dst.warning", "dst.spring", "dst.fall"):
        assert console.get_style(name) is not None


def test_zone_styles() -> None:
    assert style_for_zone("CEST") == "dst.zone.cest"
    assert style_for_zone("CET") == "dst.zone.cet"
    assert style_for_zone("UTC") == ""


def test_direction_styles() -> None:
    assert style_for_direction("spring-forward") == "dst.spring"
    assert style_for_direction("fall-back") == "dst.fall"
    assert style_for_direction("sideways") == ""
