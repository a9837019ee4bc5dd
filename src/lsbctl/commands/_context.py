"""AppContext — shared state for the CLI and init-script entry points.

Created once per process.  Provides lazy backend loading and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from lsbctl.config.settings import LsbSettings
    from lsbctl.services.dispatch import Dispatcher
    from lsbctl.services.manager import ServiceManager
    from lsbctl.services.result import CommandResult


class AppContext:
    """Settings plus a :class:`Dispatcher` whose backend loads on demand.

    The backend is only loaded when a command actually needs the service
    manager, so ``--help``, usage errors and the privilege gate never
    import service-manager plugins.
    """

    def __init__(self, settings: LsbSettings) -> None:
        self.settings = settings
        self._dispatcher: Dispatcher | None = None

        from lsbctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def color(self) -> bool:
        """Whether stdout output should carry ANSI colors."""
        return self.settings.use_color(sys.stdout)

    @property
    def dispatcher(self) -> Dispatcher:
        """The dispatcher; its service manager is loaded on first use."""
        if self._dispatcher is None:
            from lsbctl.services.dispatch import Dispatcher

            self._dispatcher = Dispatcher(loader=self._load_manager, color=self.color)
        return self._dispatcher

    def _load_manager(self) -> ServiceManager:
        from lsbctl.plugins.manager import load_service_manager

        return load_service_manager(self.settings)

    def emit(self, result: CommandResult) -> None:
        """Write a CommandResult and exit with its code.

        Output is written verbatim with no added newline.  A zero exit
        code returns normally so the process ends on its own.
        """
        if result.stdout:
            click.echo(result.stdout, nl=False, color=self.color)
        if result.stderr:
            click.echo(result.stderr, nl=False, err=True)
        if result.exit_code:
            raise SystemExit(result.exit_code)
