"""Fatal errors raised outside the normal dispatch outcomes.

Usage and permission problems are reported through a ``CommandResult``;
the exceptions here signal packaging or programmer mistakes and terminate
the process with a diagnostic on stderr.
"""

from __future__ import annotations

import click


class ResolutionError(click.ClickException):
    """The request could not be derived from the process invocation."""


class BackendNotFoundError(click.ClickException):
    """No service-manager backend answered the lookup."""


class NoCommandError(click.UsageError):
    """A request reached dispatch without a command."""

    def __init__(self, message: str = "No command specified") -> None:
        super().__init__(message)
