"""Command: catalog counts."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from mokareads.commands._base import MokaCommand

if TYPE_CHECKING:
    from mokareads.commands._context import AppContext


@click.command(
    cls=MokaCommand,
    examples="""\
  mokareads stats
  mokareads --json stats""",
)
@click.pass_obj
def stats(app: AppContext) -> None:
    """Show record counts per kind and per language."""
    from mokareads.services.catalog import CatalogService

    app.emit(CatalogService(app.library, app.settings).stats())
