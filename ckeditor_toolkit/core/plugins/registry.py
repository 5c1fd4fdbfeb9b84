from __future__ import annotations

"""Live plugin registry.

Maps plugin names to the plugin references that the editor runtime loads.
Catalog plugins are pre-registered as built-ins; custom plugins can be added
at any time from any thread.
"""

import logging
from threading import Lock, RLock
from typing import Any, Dict, List, Optional

from .catalog import CKEditorPlugin
from .exceptions import PluginValidationError

__all__ = [
    "PluginRegistry",
    "get_global_plugin_registry",
    "register_ckeditor_plugin",
]

logger = logging.getLogger(__name__)


class PluginRegistry:
    """Thread-safe name to plugin reference registry.

    Custom registrations shadow built-ins of the same name. Every
    registration is visible to lookups on other threads once
    :meth:`register_plugin` returns.

    Args:
        include_builtin: Pre-register every catalog plugin under its
            export name.
    """

    def __init__(self, include_builtin: bool = True) -> None:
        self._builtin: Dict[str, Any] = (
            {plugin.js_name: plugin for plugin in CKEditorPlugin} if include_builtin else {}
        )
        self._custom: Dict[str, Any] = {}
        self._lock = RLock()
        self._logger = logging.getLogger(f"{__name__}.PluginRegistry")

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def register_plugin(self, name: str, plugin: Any) -> None:
        """Register *plugin* under *name*.

        An existing registration with the same name is replaced.

        Args:
            name: Export name of the plugin.
            plugin: Plugin reference handed to the runtime.

        Raises:
            PluginValidationError: If *name* is empty or *plugin* is None.
        """
        if not name or not name.strip():
            raise PluginValidationError("Plugin name must not be empty")
        if plugin is None:
            raise PluginValidationError("Plugin reference must not be None", plugin_id=name)

        with self._lock:
            previous = self._custom.get(name, self._builtin.get(name))
            self._custom[name] = plugin
            if previous is not None and previous is not plugin:
                self._logger.info("Replaced registered plugin %s", name)
            else:
                self._logger.debug("Registered plugin %s", name)

    def unregister_plugin(self, name: str) -> bool:
        """Remove a custom registration.

        Built-ins cannot be removed; if a custom plugin shadowed one, the
        built-in becomes visible again.

        Returns:
            True if a custom registration was removed.
        """
        with self._lock:
            removed = self._custom.pop(name, None) is not None
            if removed:
                self._logger.debug("Unregistered plugin %s", name)
            return removed

    def clear_custom_plugins(self) -> None:
        """Drop every custom registration, keeping the built-ins."""
        with self._lock:
            count = len(self._custom)
            self._custom.clear()
            self._logger.info("Cleared %d custom plugin registrations", count)

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def get_plugin(self, name: str) -> Optional[Any]:
        with self._lock:
            if name in self._custom:
                return self._custom[name]
            return self._builtin.get(name)

    def has_plugin(self, name: str) -> bool:
        with self._lock:
            return name in self._custom or name in self._builtin

    def is_builtin(self, name: str) -> bool:
        """Return True if *name* resolves to an unshadowed catalog plugin."""
        with self._lock:
            return name in self._builtin and name not in self._custom

    def get_plugin_names(self) -> List[str]:
        """Return all registered names: built-ins first, then custom ones."""
        with self._lock:
            names = list(self._builtin)
            names.extend(n for n in self._custom if n not in self._builtin)
            return names

    # -------------------------------------------------------------------------
    # Statistics and Debugging
    # -------------------------------------------------------------------------

    def get_registry_stats(self) -> Dict[str, Any]:
        """Get registry statistics for debugging.

        Returns:
            Dictionary with registry statistics
        """
        with self._lock:
            shadowed = [n for n in self._custom if n in self._builtin]
            return {
                'builtin_plugins': len(self._builtin),
                'custom_plugins': len(self._custom),
                'shadowed_builtins': sorted(shadowed),
                'total_plugins': len(self._builtin) + len(self._custom) - len(shadowed),
            }


# -------------------------------------------------------------------------
# Process-wide registry
# -------------------------------------------------------------------------

_global_registry: Optional[PluginRegistry] = None
_global_lock = Lock()


def get_global_plugin_registry() -> PluginRegistry:
    """Return the process-wide registry, creating it on first use.

    The shared instance lives for the rest of the process; use
    :meth:`PluginRegistry.clear_custom_plugins` to reset its custom part.
    Code that can take a registry as an argument should prefer an explicit
    :class:`PluginRegistry`.
    """
    global _global_registry
    if _global_registry is None:
        with _global_lock:
            if _global_registry is None:
                _global_registry = PluginRegistry()
                logger.debug("Created global plugin registry")
    return _global_registry


def register_ckeditor_plugin(name: str, plugin: Any) -> None:
    """Register *plugin* in the process-wide registry."""
    get_global_plugin_registry().register_plugin(name, plugin)
