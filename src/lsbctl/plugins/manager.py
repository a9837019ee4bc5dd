"""Backend discovery and loading.

Backends are pip-installed packages exposing a plugin under the
``lsbctl.backends`` entry-point group, or instances registered directly
by embedding code.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING

import pluggy

from lsbctl.errors import BackendNotFoundError
from lsbctl.plugins.hookspecs import LsbctlHookSpec

if TYPE_CHECKING:
    from lsbctl.config.settings import LsbSettings
    from lsbctl.services.manager import ServiceManager

PROJECT_NAME = "lsbctl"
ENTRY_POINT_GROUP = "lsbctl.backends"

logger = logging.getLogger(__name__)


class BackendManager:
    """Manages backend discovery, registration, and service-manager lookup."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(LsbctlHookSpec)

    def discover_and_load(self) -> list[str]:
        """Load backends from the ``lsbctl.backends`` entry points.

        Returns a list of registered plugin names.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a backend instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered backend: %s", resolved_name)

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered backends."""
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def service_manager(self, settings: LsbSettings) -> ServiceManager:
        """Ask the registered backends for a service manager.

        When ``settings.backend`` is set only that plugin is consulted.

        Raises:
            BackendNotFoundError: the named backend is not registered, or
                no backend returned a manager.
        """
        hook = self._pm.hook.lsbctl_service_manager
        if settings.backend is not None:
            chosen = self._pm.get_plugin(settings.backend)
            if chosen is None:
                raise BackendNotFoundError(f"Unknown backend '{settings.backend}'")
            others = [p for p in self._pm.get_plugins() if p is not chosen]
            hook = self._pm.subset_hook_caller("lsbctl_service_manager", others)

        manager = hook(settings=settings)
        if manager is None:
            raise BackendNotFoundError("No service manager backend available")
        logger.debug("Using service manager %s", type(manager).__name__)
        return manager

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly. Hook dispatch
        against class objects leaves ``self`` unbound and fails at runtime.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)

            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point backend %s",
                    plugin_name,
                    exc_info=True,
                )
                continue

            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point backend: %s", plugin_name)


def load_service_manager(settings: LsbSettings) -> ServiceManager:
    """Discover installed backends and return the service manager to use."""
    backends = BackendManager()
    backends.discover_and_load()
    return backends.service_manager(settings)
