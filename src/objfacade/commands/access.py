"""Commands: read and write a named value through the access policy."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from objfacade.commands._base import VIA_OPTION, FacadeCommand
from objfacade.domain.types import Via

if TYPE_CHECKING:
    from objfacade.commands._context import AppContext


@click.command(
    "get",
    cls=FacadeCommand,
    examples="""\
  objfacade get myapp.models:account name
  objfacade get myapp.models:account id --via method
  objfacade -q get myapp.models:account balance""",
)
@click.argument("target")
@click.argument("name")
@VIA_OPTION
@click.pass_obj
def get_cmd(app: AppContext, target: str, name: str, via: str) -> None:
    """Read NAME from TARGET (module:attribute)."""
    app.emit(app.probe.get(target, name, via=Via(via)))


@click.command(
    "set",
    cls=FacadeCommand,
    examples="""\
  objfacade set myapp.models:account name Ada
  objfacade set myapp.models:account amount 12 --via method
  objfacade set myapp.models:account note null""",
)
@click.argument("target")
@click.argument("name")
@click.argument("value")
@VIA_OPTION
@click.pass_obj
def set_cmd(app: AppContext, target: str, name: str, value: str, via: str) -> None:
    """Write VALUE to NAME on TARGET (module:attribute).

    VALUE is parsed as JSON; anything that is not valid JSON is a string.
    """
    from objfacade.services.probe import parse_value

    app.emit(app.probe.set(target, name, parse_value(value), via=Via(via)))
