"""Commands: one per LSB init-script keyword.

Each takes the service name and forwards any trailing tokens unparsed so
the dispatcher can reject them the same way an init script does.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from lsbctl.domain.request import Command, Request

if TYPE_CHECKING:
    from lsbctl.commands._context import AppContext

_HELP: dict[Command, str] = {
    Command.START: "Start a service.",
    Command.STOP: "Stop a service.",
    Command.RESTART: "Restart a service.",
    Command.TRY_RESTART: "Restart a service if it is enabled.",
    Command.RELOAD: "Reload a service's configuration if it is enabled.",
    Command.FORCE_RELOAD: "Reload a service if it is enabled, restarting if needed.",
    Command.STATUS: "Print live status (cached status for non-root callers).",
    Command.CACHED_STATUS: "Print the last known status.",
}


def build_command(command: Command) -> click.Command:
    """Create the Click command that dispatches *command*."""

    @click.command(
        name=command.value,
        help=_HELP[command],
        context_settings={"ignore_unknown_options": True},
    )
    @click.argument("name")
    @click.argument("args", nargs=-1, type=click.UNPROCESSED)
    @click.pass_obj
    def _command(app: AppContext, name: str, args: tuple[str, ...]) -> None:
        app.emit(app.dispatcher.run(Request(name=name, command=command.value, args=args)))

    return _command
