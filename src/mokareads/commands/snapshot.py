"""Command group: build, fetch, and inspect snapshot files."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from mokareads.commands._base import MokaGroup
from mokareads.infrastructure.remote import Endpoint

if TYPE_CHECKING:
    from mokareads.commands._context import AppContext
    from mokareads.services.snapshot import SnapshotService

_SNAPSHOT_EXAMPLES = """\
  mokareads snapshot build
  mokareads snapshot build --content-dir ./content --output snapshot.json
  mokareads snapshot fetch
  mokareads snapshot info
  mokareads -q snapshot raw lang_map"""


def _service(app: AppContext) -> SnapshotService:
    from mokareads.infrastructure.library import Library
    from mokareads.services.snapshot import SnapshotService

    # build/fetch replace the snapshot, so start from an empty library.
    return SnapshotService(Library(), app.settings)


@click.group(cls=MokaGroup, examples=_SNAPSHOT_EXAMPLES)
@click.pass_obj
def snapshot(app: AppContext) -> None:
    """Manage the JSON snapshot of the catalog."""


@snapshot.command(
    examples="""\
  mokareads snapshot build
  mokareads snapshot build --content-dir ./content --output public/resources.json"""
)
@click.option(
    "--content-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Content directory (default: [library].content_dir).",
)
@click.option(
    "--output",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Snapshot file (default: [library].snapshot_path).",
)
@click.pass_obj
def build(app: AppContext, content_dir: Path | None, output: Path | None) -> None:
    """Parse the content directory and write a snapshot."""
    app.emit(_service(app).build(content_dir=content_dir, output=output))


@snapshot.command(
    examples="""\
  mokareads snapshot fetch
  MOKAREADS_REMOTE__API_BASE=http://localhost:8000/api/ mokareads snapshot fetch"""
)
@click.option(
    "--output",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Snapshot file (default: [library].snapshot_path).",
)
@click.pass_obj
def fetch(app: AppContext, output: Path | None) -> None:
    """Download the snapshot from the MoKa Reads API."""
    app.emit(_service(app).fetch(output=output))


@snapshot.command(examples="  mokareads snapshot info\n  mokareads snapshot info --path a.json")
@click.option(
    "--path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Snapshot file (default: [library].snapshot_path).",
)
@click.pass_obj
def info(app: AppContext, path: Path | None) -> None:
    """Describe a snapshot file."""
    app.emit(_service(app).info(path))


@snapshot.command(examples="  mokareads -q snapshot raw guides")
@click.argument("endpoint", type=click.Choice([e.value for e in Endpoint]))
@click.pass_obj
def raw(app: AppContext, endpoint: str) -> None:
    """Print one API endpoint verbatim."""
    app.emit(_service(app).raw(Endpoint(endpoint)))
