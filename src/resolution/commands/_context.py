"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``.  Owns the settings, the lazily built store, and
result emission.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from resolution.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from resolution.config.settings import ResolutionSettings
    from resolution.infrastructure.store import ResolutionStore
    from resolution.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The store is created on first use so ``--help`` and ``--version`` never
    touch the filesystem.
    """

    def __init__(self, settings: ResolutionSettings) -> None:
        self.settings = settings
        self._store: ResolutionStore | None = None

        from resolution.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from resolution.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def store(self) -> ResolutionStore:
        """The store for the configured CSV path (created lazily)."""
        if self._store is None:
            from resolution.infrastructure.store import ResolutionStore

            self._store = ResolutionStore(self.settings.store_path)
        return self._store

    def emit(self, result: ServiceResult) -> None:
        """Print a ServiceResult to stdout.

        * Success (``result.ok``): returns normally.  Warnings go to stderr.
        * Failure: the message is still printed to stdout, then the process
          exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        click.echo(format_result(result, settings=settings))
        if not settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
        if not result.ok:
            raise SystemExit(1)
