"""Pluggy hook specifications for lsbctl backends.

A backend plugin answers ``lsbctl_service_manager`` with an object that
satisfies :class:`lsbctl.services.manager.ServiceManager`.  The first
non-None answer wins.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from lsbctl.config.settings import LsbSettings
    from lsbctl.services.manager import ServiceManager

hookspec = pluggy.HookspecMarker("lsbctl")
hookimpl = pluggy.HookimplMarker("lsbctl")


class LsbctlHookSpec:
    """Hook specifications for the lsbctl plugin system."""

    @hookspec(firstresult=True)
    def lsbctl_service_manager(self, settings: LsbSettings) -> ServiceManager | None:
        """Return the service manager this backend provides, or None to pass."""
