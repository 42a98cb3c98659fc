"""Command: list a target's fields and methods with their access policy."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from objfacade.commands._base import FacadeCommand

if TYPE_CHECKING:
    from objfacade.commands._context import AppContext


@click.command(
    cls=FacadeCommand,
    examples="""\
  objfacade describe myapp.models:account
  objfacade --json describe myapp.settings:config""",
)
@click.argument("target")
@click.pass_obj
def describe(app: AppContext, target: str) -> None:
    """Describe the members of TARGET (module:attribute)."""
    app.emit(app.probe.describe(target))
