from __future__ import annotations

"""Static plugin dependency graph.

Two tables describe how catalog plugins relate to each other:

* hard dependencies: plugins that MUST be loaded whenever the key plugin is
  loaded;
* recommendations: companions that improve the editing experience but are
  not required.

Both tables are built once at import time and exposed read-only through
:class:`DependencyGraph`. Edge order inside each entry is significant: it is
the order in which dependencies are visited during resolution and sorting.
"""

import logging
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple

from .catalog import CKEditorPlugin as P
from .catalog import sort_by_catalog_order
from .exceptions import DependencyCycleError

__all__ = [
    "DependencyGraph",
    "DEFAULT_GRAPH",
    "MUTUALLY_EXCLUSIVE_GROUPS",
    "dependencies_of",
    "recommended_of",
    "dependents_of",
    "removal_impact",
    "has_dependencies",
    "dependency_tree",
]

logger = logging.getLogger(__name__)

Table = Mapping[P, Tuple[P, ...]]

_HARD_DEPENDENCIES: Dict[P, Tuple[P, ...]] = {
    # Image features all build on the base Image plugin
    P.IMAGE_TOOLBAR: (P.IMAGE,),
    P.IMAGE_CAPTION: (P.IMAGE,),
    P.IMAGE_STYLE: (P.IMAGE,),
    P.IMAGE_RESIZE: (P.IMAGE,),
    P.IMAGE_UPLOAD: (P.IMAGE,),
    P.IMAGE_INSERT: (P.IMAGE,),
    P.IMAGE_BLOCK: (P.IMAGE,),
    P.IMAGE_INLINE: (P.IMAGE,),
    P.LINK_IMAGE: (P.IMAGE, P.LINK),
    P.AUTO_IMAGE: (P.IMAGE, P.CLIPBOARD),
    # Tables
    P.TABLE_TOOLBAR: (P.TABLE,),
    P.TABLE_PROPERTIES: (P.TABLE,),
    P.TABLE_CELL_PROPERTIES: (P.TABLE,),
    P.TABLE_CAPTION: (P.TABLE,),
    P.TABLE_COLUMN_RESIZE: (P.TABLE,),
    # Links
    P.AUTO_LINK: (P.LINK,),
    # Lists
    P.TODO_LIST: (P.LIST,),
    P.LIST_PROPERTIES: (P.LIST,),
    P.LIST_FORMATTING: (P.LIST,),
    P.ADJACENT_LISTS_SUPPORT: (P.LIST,),
    # IndentBlock implements the indent commands for paragraphs
    P.INDENT_BLOCK: (P.INDENT,),
    # Special characters
    P.SPECIAL_CHARACTERS_ESSENTIALS: (P.SPECIAL_CHARACTERS,),
    P.SPECIAL_CHARACTERS_ARROWS: (P.SPECIAL_CHARACTERS,),
    P.SPECIAL_CHARACTERS_CURRENCY: (P.SPECIAL_CHARACTERS,),
    P.SPECIAL_CHARACTERS_LATIN: (P.SPECIAL_CHARACTERS,),
    P.SPECIAL_CHARACTERS_MATHEMATICAL: (P.SPECIAL_CHARACTERS,),
    P.SPECIAL_CHARACTERS_TEXT: (P.SPECIAL_CHARACTERS,),
    # HTML support
    P.STYLE: (P.GENERAL_HTML_SUPPORT,),
    P.HTML_COMMENT: (P.GENERAL_HTML_SUPPORT,),
    P.HTML_EMBED: (P.GENERAL_HTML_SUPPORT,),
    P.SOURCE_EDITING: (P.GENERAL_HTML_SUPPORT,),
    # Upload adapters feed the image upload pipeline
    P.SIMPLE_UPLOAD_ADAPTER: (P.IMAGE_UPLOAD,),
    P.BASE64_UPLOAD_ADAPTER: (P.IMAGE_UPLOAD,),
    # Cloud services
    P.CLOUD_SERVICES_UPLOAD_ADAPTER: (P.CLOUD_SERVICES,),
    P.CLOUD_SERVICES: (P.CLOUD_SERVICES_CORE,),
    P.EASY_IMAGE: (P.CLOUD_SERVICES, P.IMAGE_UPLOAD),
    # Misc
    P.MINIMAP: (P.WIDGET,),
    P.EMOJI_PICKER: (P.EMOJI,),
}

_RECOMMENDED: Dict[P, Tuple[P, ...]] = {
    P.IMAGE: (P.IMAGE_TOOLBAR, P.IMAGE_CAPTION, P.IMAGE_STYLE, P.IMAGE_RESIZE),
    P.TABLE: (P.TABLE_TOOLBAR, P.TABLE_PROPERTIES, P.TABLE_CELL_PROPERTIES),
    P.LINK: (P.AUTO_LINK,),
    P.HEADING: (P.PARAGRAPH,),
    P.CODE_BLOCK: (P.AUTOFORMAT,),
    P.SPECIAL_CHARACTERS: (P.SPECIAL_CHARACTERS_ESSENTIALS,),
    P.SOURCE_EDITING: (P.GENERAL_HTML_SUPPORT, P.HTML_EMBED),
    P.STYLE: (P.GENERAL_HTML_SUPPORT,),
    P.INDENT: (P.INDENT_BLOCK,),
    P.CLOUD_SERVICES: (P.CLOUD_SERVICES_UPLOAD_ADAPTER,),
    P.EMOJI: (P.EMOJI_PICKER,),
    P.LIST: (P.LIST_PROPERTIES, P.TODO_LIST),
}

# Groups of plugin names of which at most one may be loaded. The first
# member seen in a request wins.
MUTUALLY_EXCLUSIVE_GROUPS: Tuple[Tuple[str, ...], ...] = (
    (P.STANDARD_EDITING_MODE.js_name, P.RESTRICTED_EDITING_MODE.js_name),
)


class DependencyGraph:
    """Read-only view over a hard-dependency and a recommendation table.

    Args:
        hard_dependencies: Mapping of plugin to the plugins it requires.
        recommended: Mapping of plugin to its suggested companions.
    """

    def __init__(self, hard_dependencies: Mapping[P, Iterable[P]],
                 recommended: Optional[Mapping[P, Iterable[P]]] = None) -> None:
        self._hard: Table = MappingProxyType(
            {key: tuple(deps) for key, deps in hard_dependencies.items()}
        )
        self._recommended: Table = MappingProxyType(
            {key: tuple(recs) for key, recs in (recommended or {}).items()}
        )

    @property
    def hard_dependencies(self) -> Table:
        return self._hard

    @property
    def recommended(self) -> Table:
        return self._recommended

    # ------------------------------------------------------------------
    # Point queries
    # ------------------------------------------------------------------
    def direct_dependencies(self, plugin: P) -> Tuple[P, ...]:
        """Hard dependencies of *plugin* in table order (empty if none)."""
        return self._hard.get(plugin, ())

    def direct_recommendations(self, plugin: P) -> Tuple[P, ...]:
        return self._recommended.get(plugin, ())

    def dependencies_of(self, plugin: P) -> FrozenSet[P]:
        return frozenset(self.direct_dependencies(plugin))

    def recommended_of(self, plugin: P) -> FrozenSet[P]:
        return frozenset(self.direct_recommendations(plugin))

    def has_dependencies(self, plugin: P) -> bool:
        return bool(self._hard.get(plugin))

    def dependents_of(self, plugin: P) -> FrozenSet[P]:
        """Return every plugin that lists *plugin* as a hard dependency."""
        return frozenset(key for key, deps in self._hard.items() if plugin in deps)

    def removal_impact(self, plugin: P, current: Iterable[P]) -> FrozenSet[P]:
        """Return the members of *current* that would break if *plugin* were removed."""
        return frozenset(p for p in current if plugin in self._hard.get(p, ()))

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------
    def dependency_tree(self, plugin: P) -> str:
        """Render the hard-dependency tree of *plugin* as ASCII art.

        A plugin that reappears on its own ancestor path is printed once more
        with a ``(circular)`` marker and not expanded further.
        """
        lines: List[str] = []
        self._render_tree(plugin, "", True, set(), lines)
        return "".join(lines)

    def _render_tree(self, plugin: P, prefix: str, is_last: bool,
                     path: set, lines: List[str]) -> None:
        branch = "└── " if is_last else "├── "
        if plugin in path:
            lines.append(f"{prefix}{branch}{plugin.js_name} (circular)\n")
            return

        lines.append(f"{prefix}{branch}{plugin.js_name}\n")
        path.add(plugin)
        deps = self.direct_dependencies(plugin)
        child_prefix = prefix + ("    " if is_last else "│   ")
        for index, dep in enumerate(deps):
            self._render_tree(dep, child_prefix, index == len(deps) - 1, path, lines)
        path.discard(plugin)

    def check_acyclic(self) -> None:
        """Verify that the hard-dependency table has no cycle.

        Raises:
            DependencyCycleError: If a cycle exists. ``cycle`` holds the
                offending path with the first plugin repeated at the end.
        """
        visited: set = set()
        stack: List[P] = []
        on_stack: set = set()

        def visit(plugin: P) -> None:
            visited.add(plugin)
            stack.append(plugin)
            on_stack.add(plugin)
            for dep in self.direct_dependencies(plugin):
                if dep in on_stack:
                    cycle = stack[stack.index(dep):] + [dep]
                    names = " -> ".join(p.js_name for p in cycle)
                    raise DependencyCycleError(
                        f"Dependency cycle detected: {names}", cycle=cycle
                    )
                if dep not in visited:
                    visit(dep)
            stack.pop()
            on_stack.discard(plugin)

        for plugin in sort_by_catalog_order(self._hard.keys()):
            if plugin not in visited:
                visit(plugin)
        logger.debug("Dependency table is acyclic (%d entries)", len(self._hard))


DEFAULT_GRAPH = DependencyGraph(_HARD_DEPENDENCIES, _RECOMMENDED)


def dependencies_of(plugin: P) -> FrozenSet[P]:
    return DEFAULT_GRAPH.dependencies_of(plugin)


def recommended_of(plugin: P) -> FrozenSet[P]:
    return DEFAULT_GRAPH.recommended_of(plugin)


def dependents_of(plugin: P) -> FrozenSet[P]:
    return DEFAULT_GRAPH.dependents_of(plugin)


def removal_impact(plugin: P, current: Iterable[P]) -> FrozenSet[P]:
    return DEFAULT_GRAPH.removal_impact(plugin, current)


def has_dependencies(plugin: P) -> bool:
    return DEFAULT_GRAPH.has_dependencies(plugin)


def dependency_tree(plugin: P) -> str:
    return DEFAULT_GRAPH.dependency_tree(plugin)
