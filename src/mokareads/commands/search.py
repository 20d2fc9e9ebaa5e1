"""Command: resolve a free-text query against the catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from mokareads.commands._base import MokaCommand

if TYPE_CHECKING:
    from mokareads.commands._context import AppContext


@click.command(
    cls=MokaCommand,
    examples="""\
  mokareads search "Intro to Rust"
  mokareads search kotlin
  mokareads search cheatsheet
  mokareads --json search c++
  mokareads -q search guide""",
)
@click.argument("query")
@click.pass_obj
def search(app: AppContext, query: str) -> None:
    """Find content by exact title, topic language, or kind.

    The first of the three that matches wins.
    """
    from mokareads.services.catalog import CatalogService

    app.emit(CatalogService(app.library, app.settings).search(query))
