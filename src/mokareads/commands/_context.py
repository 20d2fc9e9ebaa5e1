"""AppContext — shared Click context for all commands.

Created once by the root group and passed to subcommands with
``@click.pass_obj``. The library is opened lazily so that ``--help`` and
``--version`` never touch the content directory or snapshot.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from mokareads.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from mokareads.config.settings import MokaSettings
    from mokareads.infrastructure.library import Library
    from mokareads.services.result import ServiceResult


class AppContext:
    """Settings, the lazily opened library, and result emission."""

    def __init__(self, settings: MokaSettings) -> None:
        self.settings = settings
        self._library: Library | None = None

        from mokareads.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from mokareads.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def library(self) -> Library:
        """The library, opened on first access.

        A malformed content document aborts the command with a
        ``MALFORMED_INPUT`` error.
        """
        if self._library is None:
            from mokareads.domain.frontmatter import MalformedInputError
            from mokareads.infrastructure.library import Library
            from mokareads.services.result import ErrorCode, failure

            try:
                self._library = Library.open(self.settings)
            except MalformedInputError as exc:
                self.emit(failure("open_library", ErrorCode.MALFORMED_INPUT, str(exc)))
                raise SystemExit(1) from exc
        return self._library

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; failures go to stderr and exit with status 1.

        Warnings go to stderr so that piped output stays clean. In JSON
        mode they are already part of the payload.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
