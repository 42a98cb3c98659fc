"""Subcommand modules for objfacade.

register_commands() imports lazily so ``objfacade --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from objfacade.commands.access import get_cmd, set_cmd
    from objfacade.commands.describe import describe

    cli.add_command(describe)
    cli.add_command(get_cmd)
    cli.add_command(set_cmd)
