"""Command group: show a single article, cheat sheet, or guide."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from mokareads.commands._base import MokaGroup
from mokareads.services.catalog import CatalogService

if TYPE_CHECKING:
    from mokareads.commands._context import AppContext

_SHOW_EXAMPLES = """\
  mokareads show article Intro_to_Rust
  mokareads show cheatsheet rust Rust_Basics
  mokareads show guide rust_book"""


@click.group(cls=MokaGroup, examples=_SHOW_EXAMPLES)
@click.pass_obj
def show(app: AppContext) -> None:
    """Show one record by slug."""


@show.command(examples="  mokareads show article Intro_to_Rust")
@click.argument("slug")
@click.pass_obj
def article(app: AppContext, slug: str) -> None:
    """Show an article by slug."""
    app.emit(CatalogService(app.library, app.settings).get_article(slug))


@show.command(examples="  mokareads show cheatsheet c++ Pointers")
@click.argument("lang")
@click.argument("slug")
@click.pass_obj
def cheatsheet(app: AppContext, lang: str, slug: str) -> None:
    """Show a cheat sheet by language and slug."""
    app.emit(CatalogService(app.library, app.settings).get_cheatsheet(lang, slug))


@show.command(examples="  mokareads show guide rust_book")
@click.argument("repo_name")
@click.pass_obj
def guide(app: AppContext, repo_name: str) -> None:
    """Show a guide by repository name."""
    app.emit(CatalogService(app.library, app.settings).get_guide(repo_name))
