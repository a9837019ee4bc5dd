"""Subcommand registration for the ``lsbctl`` CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register one subcommand per init-script keyword on the root group."""
    from lsbctl.commands.lsb import build_command
    from lsbctl.domain.request import Command

    for command in Command:
        cli.add_command(build_command(command))
