"""Command: cheat sheets grouped by topic language."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from mokareads.commands._base import MokaCommand

if TYPE_CHECKING:
    from mokareads.commands._context import AppContext


@click.command(
    cls=MokaCommand,
    examples="""\
  mokareads langs
  mokareads langs rust
  mokareads -v langs
  mokareads --json langs python""",
)
@click.argument("language", required=False)
@click.pass_obj
def langs(app: AppContext, language: str | None) -> None:
    """List cheat sheets per language, easiest first."""
    from mokareads.services.catalog import CatalogService

    app.emit(CatalogService(app.library, app.settings).lang_map(language))
