"""ServiceManager: the collaborator that actually starts and stops services.

Backends implement this protocol and are handed out by a pluggy plugin
(see :mod:`lsbctl.plugins.hookspecs`).  Every operation returns a short
human-readable result such as ``"started"`` or ``"already running"``.

INVARIANT: the dispatcher never catches backend exceptions.  A failing
operation propagates and ends the process with the backend's own message.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


class ServiceManagerError(Exception):
    """Base class backends may use for operation failures."""


@runtime_checkable
class ServiceManager(Protocol):
    """Operations a service-manager backend exposes per service name."""

    def is_enabled(self, name: str) -> bool: ...

    def status(self, name: str) -> str: ...

    def cached_status(self, name: str) -> str: ...

    def start(self, name: str) -> str: ...

    def stop(self, name: str) -> str: ...

    def restart(self, name: str) -> str: ...

    def try_restart(self, name: str) -> str: ...

    def reload(self, name: str) -> str: ...

    def force_reload(self, name: str) -> str: ...
