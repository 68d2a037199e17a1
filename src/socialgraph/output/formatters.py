"""Pick the output form for a ServiceResult from the global flags."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from socialgraph.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from socialgraph.services.result import ServiceResult


class OutputSettings(BaseModel):
    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """``--json`` wins over ``--quiet``; with neither, render for a human."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
