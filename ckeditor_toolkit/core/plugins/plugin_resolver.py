from __future__ import annotations

"""Bind configured plugin names to live plugin references.

:class:`PluginResolver` is the seam between the static resolution engine and
the mutable :class:`~.registry.PluginRegistry`. Given ``(name, premium)``
entries it looks each name up, applies the conflict filter and returns the
references in the order the runtime should load them.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from .conflicts import FilterOptions, filter_conflicting_plugins
from .conflicts import requires_configuration as _requires_configuration
from .exceptions import PluginConfigurationError, PluginValidationError
from .registry import PluginRegistry, get_global_plugin_registry

__all__ = ["PluginConfig", "PluginResolver"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PluginConfig:
    """One plugin entry as it appears in a configuration document."""

    name: str
    premium: bool = False

    @classmethod
    def from_value(cls, value: Any) -> "PluginConfig":
        """Accept a plain name, a mapping or an existing PluginConfig."""
        if isinstance(value, PluginConfig):
            return value
        if isinstance(value, str):
            return cls(value)
        if isinstance(value, dict):
            if not value.get("name"):
                raise PluginValidationError("Plugin entry needs a 'name'")
            return cls(str(value["name"]), bool(value.get("premium", False)))
        raise TypeError(f"Cannot build PluginConfig from {type(value).__name__}")


class PluginResolver:
    """Resolve plugin configurations against a registry.

    Args:
        registry: Registry to look names up in. Defaults to the process-wide
            registry.
        filter_options: Default conflict filter policy for this instance.
    """

    def __init__(self, registry: Optional[PluginRegistry] = None,
                 filter_options: Optional[FilterOptions] = None) -> None:
        self.registry = registry if registry is not None else get_global_plugin_registry()
        self._filter_options = filter_options or FilterOptions()
        self._logger = logging.getLogger(f"{__name__}.PluginResolver")

    @property
    def filter_options(self) -> FilterOptions:
        return self._filter_options

    def set_filter_options(self, options: FilterOptions) -> None:
        self._filter_options = options

    def resolve_plugins(self, configs: Iterable[Any],
                        options: Optional[FilterOptions] = None) -> List[Any]:
        """Return registered plugin references for *configs*.

        Unknown names are logged and skipped. Found entries whose premium
        flag contradicts the registered plugin raise immediately.

        Args:
            configs: Plugin names, mappings or :class:`PluginConfig` entries.
            options: Filter policy for this call; falls back to the instance
                default.

        Raises:
            PluginConfigurationError: If a registered plugin's premium flag
                does not match its configuration.
        """
        found: Dict[str, Any] = {}
        names: List[str] = []
        for raw in configs:
            config = PluginConfig.from_value(raw)
            plugin = self.registry.get_plugin(config.name)
            if plugin is None:
                self._logger.warning("Plugin not found in registry: %s", config.name)
                continue
            self._check_premium(config, plugin)
            found[config.name] = plugin
            names.append(config.name)

        result = filter_conflicting_plugins(names, options or self._filter_options, self._logger)
        if result.removed:
            self._logger.debug("Filtered plugins: %s", ", ".join(result.removed))
        return [found[name] for name in result.filtered]

    def _check_premium(self, config: PluginConfig, plugin: Any) -> None:
        actual = getattr(plugin, "is_premium", None)
        if actual is None or bool(actual) == config.premium:
            return
        raise PluginConfigurationError(
            f"Premium flag mismatch: configured premium={config.premium}, "
            f"registered plugin premium={bool(actual)}",
            plugin_id=config.name,
            expected=str(config.premium),
            actual=str(bool(actual)),
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get_available_plugin_names(self) -> List[str]:
        return self.registry.get_plugin_names()

    def is_plugin_available(self, name: str) -> bool:
        return self.registry.has_plugin(name)

    def requires_configuration(self, name: str) -> bool:
        return _requires_configuration(name)
