"""Output mode dispatch.

The CLI renders ServiceResult for humans (Rich text and tables), for
scripts (--quiet, one value per line), or for machines (--json).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from dstctl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from dstctl.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output flags taken from the root CLI group."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet; quiet wins over the Rich renderers.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
