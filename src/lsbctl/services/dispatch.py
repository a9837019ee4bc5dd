"""Dispatcher — the LSB init-script state machine.

Resolution order for a request:

1. No command: usage error (raised).
2. Any residual args: ``Unknown command`` (exit 2).
3. ``status`` / ``cached-status``: allowed for everyone (exit 0).
4. Privilege gate: every other command needs effective uid 0 (exit 4).
5. ``start`` / ``stop`` / ``restart``: call the manager unconditionally.
6. ``try-restart`` / ``reload`` / ``force-reload``: only when the service
   is enabled, otherwise report ``<name> is down`` and fall through.
7. Anything else: ``Unknown command`` (exit 2).

Manager exceptions are not caught here.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from typing import TYPE_CHECKING

import click

from lsbctl.domain.request import Command, Request
from lsbctl.errors import NoCommandError
from lsbctl.output.status import render_disabled, render_status
from lsbctl.services.result import CommandResult, ExitCode

if TYPE_CHECKING:
    from lsbctl.services.manager import ServiceManager

logger = logging.getLogger(__name__)

NOT_ROOT_NOTICE = "Not a root, printing cached statuses\n"
PERMISSION_DENIED = "Permission denied\n"

# command -> (progress verb, manager method)
_ALWAYS: dict[Command, tuple[str, str]] = {
    Command.START: ("Starting", "start"),
    Command.STOP: ("Stopping", "stop"),
    Command.RESTART: ("Restarting", "restart"),
}
_WHEN_ENABLED: dict[Command, tuple[str, str]] = {
    Command.TRY_RESTART: ("Restarting", "try_restart"),
    Command.RELOAD: ("Reloading", "reload"),
    Command.FORCE_RELOAD: ("Reloading", "force_reload"),
}


class Dispatcher:
    """Run init-script commands against a :class:`ServiceManager`.

    Args:
        manager: Backend performing the actual service operations.
        loader: Called on first use when *manager* is not given, so usage
            and privilege errors never require a backend.
        euid: Effective uid used for the privilege gate.  ``None`` reads
            ``os.geteuid()`` at dispatch time.
        color: Colorize status lines.

    Usage::

        dispatcher = Dispatcher(manager)
        result = dispatcher.start("web")
        print(result.stdout, end="")
    """

    def __init__(
        self,
        manager: ServiceManager | None = None,
        *,
        loader: Callable[[], ServiceManager] | None = None,
        euid: int | None = None,
        color: bool = False,
    ) -> None:
        if manager is None and loader is None:
            raise ValueError("Dispatcher needs a manager or a loader")
        self._manager = manager
        self._loader = loader
        self._euid = euid
        self._color = color

    @property
    def manager(self) -> ServiceManager:
        """The service manager, loaded on first access."""
        if self._manager is None:
            assert self._loader is not None
            self._manager = self._loader()
        return self._manager

    @property
    def is_root(self) -> bool:
        euid = os.geteuid() if self._euid is None else self._euid
        return euid == 0

    def run(self, request: Request) -> CommandResult:
        """Dispatch *request* and return what should be printed and the exit code.

        Raises:
            NoCommandError: *request* carries no command.
        """
        if request.command is None:
            raise NoCommandError()
        if request.args:
            return self._usage(request)

        command = Command.parse(request.command)
        logger.debug("Dispatching %s for %s", request.command, request.name)

        if command in (Command.STATUS, Command.CACHED_STATUS):
            return self._status(request, command)

        if not self.is_root:
            logger.debug("Refusing %s for non-root caller", request.command)
            return self._result(
                request, stderr=PERMISSION_DENIED, exit_code=ExitCode.PERMISSION_DENIED
            )

        if command in _ALWAYS:
            verb, method = _ALWAYS[command]
            return self._perform(request, verb, method)

        if command in _WHEN_ENABLED:
            if not self.manager.is_enabled(request.name):
                return self._result(request, stdout=f"{request.name} is down")
            verb, method = _WHEN_ENABLED[command]
            return self._perform(request, verb, method)

        return self._usage(request)

    def status_line(self, request: Request, cached: bool = False) -> str:
        """Render the ``<name>\\t<state>`` line for *request*.

        A disabled service is reported as ``off`` without asking the
        manager for its state.
        """
        name = request.name
        if not self.manager.is_enabled(name):
            return render_disabled(name)
        state = self.manager.cached_status(name) if cached else self.manager.status(name)
        return render_status(name, str(state), color=self._color)

    def print_status(self, request: Request, cached: bool = False) -> None:
        """Write the status line for *request* to stdout."""
        click.echo(self.status_line(request, cached), nl=False, color=self._color)

    # ------------------------------------------------------------------
    # Per-command shortcuts
    # ------------------------------------------------------------------

    def start(self, name: str) -> CommandResult:
        return self._run_command(name, Command.START)

    def stop(self, name: str) -> CommandResult:
        return self._run_command(name, Command.STOP)

    def restart(self, name: str) -> CommandResult:
        return self._run_command(name, Command.RESTART)

    def try_restart(self, name: str) -> CommandResult:
        return self._run_command(name, Command.TRY_RESTART)

    def reload(self, name: str) -> CommandResult:
        return self._run_command(name, Command.RELOAD)

    def force_reload(self, name: str) -> CommandResult:
        return self._run_command(name, Command.FORCE_RELOAD)

    def status(self, name: str) -> CommandResult:
        return self._run_command(name, Command.STATUS)

    def cached_status(self, name: str) -> CommandResult:
        return self._run_command(name, Command.CACHED_STATUS)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _run_command(self, name: str, command: Command) -> CommandResult:
        return self.run(Request(name=name, command=command.value))

    def _status(self, request: Request, command: Command) -> CommandResult:
        cached = command is Command.CACHED_STATUS
        notice = ""
        if command is Command.STATUS and not self.is_root:
            notice = NOT_ROOT_NOTICE
            cached = True
        return self._result(request, stdout=notice + self.status_line(request, cached))

    def _perform(self, request: Request, verb: str, method: str) -> CommandResult:
        result = getattr(self.manager, method)(request.name)
        logger.debug("%s %s returned %r", method, request.name, result)
        return self._result(request, stdout=f"{verb} {request.name}... {result}\n")

    def _usage(self, request: Request) -> CommandResult:
        return self._result(
            request,
            stderr=f"Unknown command '{request.command}'\n",
            exit_code=ExitCode.USAGE,
        )

    @staticmethod
    def _result(
        request: Request,
        *,
        stdout: str = "",
        stderr: str = "",
        exit_code: int = ExitCode.OK,
    ) -> CommandResult:
        return CommandResult(
            op=request.command,
            name=request.name,
            stdout=stdout,
            stderr=stderr,
            exit_code=exit_code,
        )
