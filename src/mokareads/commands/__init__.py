"""Subcommand modules for mokareads.

register_commands() imports lazily so ``mokareads --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all groups and standalone commands on the root group."""
    # --- Groups ---
    from mokareads.commands.export import export
    from mokareads.commands.show import show
    from mokareads.commands.snapshot import snapshot

    cli.add_command(show)
    cli.add_command(snapshot)
    cli.add_command(export)

    # --- Standalone commands ---
    from mokareads.commands.langs import langs
    from mokareads.commands.search import search
    from mokareads.commands.stats import stats

    cli.add_command(search)
    cli.add_command(langs)
    cli.add_command(stats)
