"""Root CLI group for mokareads with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from mokareads import __version__
from mokareads.commands import register_commands
from mokareads.commands._context import AppContext
from mokareads.config.logging import bind_command
from mokareads.config.settings import MokaSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="mokareads")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with timing.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--content-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Override [library].content_dir.",
)
@click.option(
    "--snapshot",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Override [library].snapshot_path.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    content_dir: Path | None,
    snapshot: Path | None,
) -> None:
    """mokareads: MoKa Reads catalog and search."""
    settings = MokaSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        content_dir=content_dir,
        snapshot=snapshot,
    )
    ctx.obj = AppContext(settings)
    bind_command(ctx.invoked_subcommand)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
