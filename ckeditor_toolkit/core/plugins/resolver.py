from __future__ import annotations

"""Dependency resolution over the static plugin graph.

The resolver turns a requested set of catalog plugins into a closed set
(every hard dependency present) and orders such a set so that each plugin
is loaded after its dependencies.
"""

import logging
from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Set

from .catalog import CKEditorPlugin, CORE_PLUGINS, sort_by_catalog_order
from .dependencies import DEFAULT_GRAPH, DependencyGraph
from .exceptions import PluginDependencyError

__all__ = [
    "DependencyMode",
    "DependencyResolver",
    "resolve",
    "resolve_with_recommended",
    "validate",
    "topological_sort",
    "load_order",
    "format_missing",
]

logger = logging.getLogger(__name__)


class DependencyMode(Enum):
    """How a requested plugin set is completed before use."""

    AUTO_RESOLVE = "auto_resolve"
    AUTO_RESOLVE_WITH_RECOMMENDED = "auto_resolve_with_recommended"
    STRICT = "strict"
    MANUAL = "manual"


def format_missing(missing: Dict[CKEditorPlugin, FrozenSet[CKEditorPlugin]]) -> str:
    """Format a missing-dependency map as ``A requires [B, C]; ...``."""
    parts = []
    for plugin in sort_by_catalog_order(missing):
        names = ", ".join(p.js_name for p in sort_by_catalog_order(missing[plugin]))
        parts.append(f"{plugin.js_name} requires [{names}]")
    return "; ".join(parts)


class DependencyResolver:
    """Compute dependency closures and load orders.

    All methods are pure: inputs are never mutated and every call returns a
    fresh collection. Iteration over input sets happens in catalog order so
    results do not depend on hash ordering.

    Args:
        graph: Dependency tables to resolve against.

    Example:
        >>> from ckeditor_toolkit.core.plugins import CKEditorPlugin as P
        >>> order = DependencyResolver().load_order({P.IMAGE_CAPTION, P.TABLE_TOOLBAR})
        >>> order.index(P.IMAGE) < order.index(P.IMAGE_CAPTION)
        True
    """

    def __init__(self, graph: DependencyGraph = DEFAULT_GRAPH) -> None:
        self.graph = graph
        self._logger = logging.getLogger(f"{__name__}.DependencyResolver")

    # ------------------------------------------------------------------
    # Closure
    # ------------------------------------------------------------------
    def resolve(self, requested: Iterable[CKEditorPlugin],
                include_core: bool = True) -> FrozenSet[CKEditorPlugin]:
        """Expand *requested* with all transitive hard dependencies.

        Args:
            requested: Plugins asked for by the caller.
            include_core: Add the universal core plugins (Essentials and
                Paragraph) to the result.

        Returns:
            Frozen set closed under hard dependencies.
        """
        resolved: Set[CKEditorPlugin] = set()
        if include_core:
            resolved.update(CORE_PLUGINS)
        for plugin in sort_by_catalog_order(set(requested)):
            self._resolve_transitive(plugin, resolved)
        self._logger.debug("Resolved %d plugins into %d", len(set(requested)), len(resolved))
        return frozenset(resolved)

    def resolve_with_recommended(self, requested: Iterable[CKEditorPlugin]) -> FrozenSet[CKEditorPlugin]:
        """Resolve *requested*, then add recommended companions.

        Recommendations are looked up for the plugins of the first resolved
        set only; each companion is itself expanded through its hard
        dependencies.
        """
        base = self.resolve(requested)
        result: Set[CKEditorPlugin] = set(base)
        for plugin in sort_by_catalog_order(base):
            for companion in self.graph.direct_recommendations(plugin):
                self._resolve_transitive(companion, result)
        self._logger.debug("Recommendations added %d plugins", len(result) - len(base))
        return frozenset(result)

    def _resolve_transitive(self, plugin: CKEditorPlugin, resolved: Set[CKEditorPlugin]) -> None:
        if plugin in resolved:
            return
        for dep in self.graph.direct_dependencies(plugin):
            self._resolve_transitive(dep, resolved)
        resolved.add(plugin)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    def validate(self, plugins: Iterable[CKEditorPlugin]) -> Dict[CKEditorPlugin, FrozenSet[CKEditorPlugin]]:
        """Report hard dependencies missing from *plugins* as given.

        Returns:
            Mapping of plugin to its missing dependencies. Plugins with
            nothing missing are omitted, so an empty dict means valid.
        """
        present = set(plugins)
        missing: Dict[CKEditorPlugin, FrozenSet[CKEditorPlugin]] = {}
        for plugin in sort_by_catalog_order(present):
            absent = frozenset(d for d in self.graph.direct_dependencies(plugin) if d not in present)
            if absent:
                missing[plugin] = absent
        return missing

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------
    def topological_sort(self, plugins: Iterable[CKEditorPlugin]) -> List[CKEditorPlugin]:
        """Order *plugins* so that each one follows its hard dependencies.

        Only edges between members of *plugins* are considered. A plugin met
        again while it is still being visited is skipped, so an accidental
        cycle yields some order instead of an error.
        """
        members = set(plugins)
        ordered: List[CKEditorPlugin] = []
        visited: Set[CKEditorPlugin] = set()
        visiting: Set[CKEditorPlugin] = set()

        def visit(plugin: CKEditorPlugin) -> None:
            if plugin in visiting or plugin in visited:
                return
            visiting.add(plugin)
            for dep in self.graph.direct_dependencies(plugin):
                if dep in members:
                    visit(dep)
            visiting.discard(plugin)
            visited.add(plugin)
            ordered.append(plugin)

        for plugin in sort_by_catalog_order(members):
            visit(plugin)
        return ordered

    def load_order(self, plugins: Iterable[CKEditorPlugin]) -> List[CKEditorPlugin]:
        """Resolve *plugins* and return the result in load order."""
        return self.topological_sort(self.resolve(plugins))

    # ------------------------------------------------------------------
    # Modes
    # ------------------------------------------------------------------
    def resolve_for_mode(self, requested: Iterable[CKEditorPlugin],
                         mode: DependencyMode = DependencyMode.AUTO_RESOLVE) -> FrozenSet[CKEditorPlugin]:
        """Complete *requested* according to *mode*.

        Raises:
            PluginDependencyError: In STRICT mode when any hard dependency is
                missing. ``missing_dependencies`` lists every offender.
        """
        requested = frozenset(requested)
        if mode is DependencyMode.AUTO_RESOLVE:
            return self.resolve(requested)
        if mode is DependencyMode.AUTO_RESOLVE_WITH_RECOMMENDED:
            return self.resolve_with_recommended(requested)
        if mode is DependencyMode.STRICT:
            plugins = requested | frozenset(CORE_PLUGINS)
            missing = self.validate(plugins)
            if missing:
                raise PluginDependencyError(
                    f"Missing plugin dependencies: {format_missing(missing)}",
                    missing_dependencies=missing,
                )
            return plugins
        if mode is DependencyMode.MANUAL:
            return requested
        raise ValueError(f"Unsupported dependency mode: {mode!r}")


_default_resolver = DependencyResolver()


def resolve(requested: Iterable[CKEditorPlugin], include_core: bool = True) -> FrozenSet[CKEditorPlugin]:
    return _default_resolver.resolve(requested, include_core)


def resolve_with_recommended(requested: Iterable[CKEditorPlugin]) -> FrozenSet[CKEditorPlugin]:
    return _default_resolver.resolve_with_recommended(requested)


def validate(plugins: Iterable[CKEditorPlugin]) -> Dict[CKEditorPlugin, FrozenSet[CKEditorPlugin]]:
    return _default_resolver.validate(plugins)


def topological_sort(plugins: Iterable[CKEditorPlugin]) -> List[CKEditorPlugin]:
    return _default_resolver.topological_sort(plugins)


def load_order(plugins: Iterable[CKEditorPlugin]) -> List[CKEditorPlugin]:
    return _default_resolver.load_order(plugins)
