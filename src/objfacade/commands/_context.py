"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Owns logging setup, the lazily built ProbeService, and
result emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from objfacade.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from objfacade.config.settings import FacadeSettings
    from objfacade.services.probe import ProbeService
    from objfacade.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: FacadeSettings) -> None:
        self.settings = settings
        self._probe: ProbeService | None = None

        from objfacade.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def probe(self) -> ProbeService:
        """The probe service (created on first access)."""
        if self._probe is None:
            from objfacade.services.probe import ProbeService

            self._probe = ProbeService(self.settings)
        return self._probe

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout, warnings on stderr (inside the payload for --json).
        * Failure: stderr, exit code 1.
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
