"""Click classes that take an ``examples=`` string.

Every mokareads command and group gets an eager ``--examples`` flag that
prints the string and exits, so ``--help`` stays one screen long.
"""

from __future__ import annotations

import textwrap
from typing import Any

import click


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    examples = getattr(ctx.command, "examples", None) or ""
    click.echo(f"{ctx.command_path} examples:\n")
    click.echo(textwrap.indent(textwrap.dedent(examples).strip("\n"), "  "))
    ctx.exit(0)


class _ExamplesMixin:
    """Store ``examples`` and register ``--examples`` when it is non-empty."""

    params: list[click.Parameter]

    def _init_examples(self, examples: str | None) -> None:
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_print_examples,
                    help="Show usage examples and exit.",
                )
            )


class MokaCommand(_ExamplesMixin, click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class MokaGroup(_ExamplesMixin, click.Group):
    """Group whose ``.command()`` builds :class:`MokaCommand` instances."""

    command_class = MokaCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
