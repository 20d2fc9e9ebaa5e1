"""Adapt a ServiceResult to the requested output mode.

Three modes, checked in this order: ``--json`` (the full result as
JSON), ``--quiet`` (links or a status line), and Rich rendering for
humans.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from mokareads.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from mokareads.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags taken from the CLI."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format *result* for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
