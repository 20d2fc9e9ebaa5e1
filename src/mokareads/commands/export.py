"""Command group: catalog export."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from mokareads.commands._base import MokaGroup

if TYPE_CHECKING:
    from mokareads.commands._context import AppContext


@click.group(cls=MokaGroup, examples="  mokareads export rss public/feed.xml")
@click.pass_obj
def export(app: AppContext) -> None:
    """Export catalog content."""


@export.command(examples="  mokareads export rss feed.xml")
@click.argument("output", type=click.Path(path_type=Path, dir_okay=False))
@click.pass_obj
def rss(app: AppContext, output: Path) -> None:
    """Write an RSS 2.0 feed of all articles."""
    from mokareads.services.export import ExportService

    app.emit(ExportService(app.library, app.settings).rss(output))
