"""Status line rendering: ``<name>\\t<state>``, optionally colorized.

Colors follow the classic init-script convention: green for a service
that is exactly ``running``, red for any other state.  Disabled services
are reported as ``off`` and never colored.
"""

from __future__ import annotations

import click

RUNNING = "running"
OFF = "off"


def render_status(name: str, state: str, *, color: bool = False) -> str:
    """Return the newline-terminated status line for *name*.

    With *color*, the whole line (newline included) is wrapped in the
    ANSI green or red foreground sequence followed by a reset.
    """
    line = f"{name}\t{state}\n"
    if not color:
        return line
    return click.style(line, fg="green" if state == RUNNING else "red")


def render_disabled(name: str) -> str:
    """Return the status line for an administratively disabled service."""
    return f"{name}\t{OFF}\n"
