from __future__ import annotations

"""Conflict filtering for flat plugin-name lists.

Unlike the resolver, which works on catalog members, the filter works on
plain names as they arrive from configuration files or a live registry. It
removes plugins that cannot be loaded in this embedding, plugins that need
manual setup and all but the first member of each mutually exclusive group.

Names that are not in the catalog are assumed to be custom plugins and are
never touched.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from .catalog import CKEditorPlugin
from .dependencies import MUTUALLY_EXCLUSIVE_GROUPS

__all__ = [
    "FilterOptions",
    "FilterResult",
    "filter_conflicting_plugins",
    "is_known_plugin",
    "is_unavailable",
    "requires_configuration",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterOptions:
    """Policy toggles for :func:`filter_conflicting_plugins`.

    Attributes:
        strict_plugin_loading: Keep unavailable and config-required plugins.
            Mutual exclusion is still enforced.
        allow_config_required_plugins: Keep plugins that need manual setup.
    """

    strict_plugin_loading: bool = False
    allow_config_required_plugins: bool = False


@dataclass
class FilterResult:
    """Outcome of a filter run.

    ``filtered`` keeps the input order; ``removed`` lists dropped names in
    the order they were dropped.
    """

    filtered: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)


def is_known_plugin(name: str) -> bool:
    """Return True if *name* is a catalog plugin."""
    return CKEditorPlugin.from_js_name(name) is not None


def is_unavailable(name: str) -> bool:
    """Return True if *name* is a catalog plugin that cannot be loaded on its own."""
    plugin = CKEditorPlugin.from_js_name(name)
    return plugin is not None and not plugin.embeddable


def requires_configuration(name: str) -> bool:
    plugin = CKEditorPlugin.from_js_name(name)
    return plugin is not None and plugin.requires_configuration


def filter_conflicting_plugins(names: Iterable[str],
                               options: Optional[FilterOptions] = None,
                               log: Optional[logging.Logger] = None,
                               exclusive_groups: Sequence[Tuple[str, ...]] = MUTUALLY_EXCLUSIVE_GROUPS,
                               ) -> FilterResult:
    """Drop unloadable and conflicting plugin names.

    Steps, in order:

    1. Unless strict, drop unavailable plugins (debug log per drop).
    2. Unless strict or explicitly allowed, drop config-required plugins
       (warning per drop).
    3. Always keep only the first-seen member of each mutually exclusive
       group (warning per drop).

    Duplicates are not collapsed.

    Args:
        names: Plugin names in requested order.
        options: Policy toggles; defaults to :class:`FilterOptions()`.
        log: Logger receiving drop notices; defaults to this module's logger.
        exclusive_groups: Mutually exclusive name groups to enforce.

    Returns:
        FilterResult with retained and removed names.
    """
    options = options or FilterOptions()
    log = log or logger
    remaining = list(names)
    removed: List[str] = []

    if options.strict_plugin_loading:
        log.debug("Strict plugin loading enabled - skipping automatic filtering")
    else:
        kept = []
        for name in remaining:
            if is_unavailable(name):
                log.debug("Removing unavailable plugin: %s", name)
                removed.append(name)
            else:
                kept.append(name)
        remaining = kept

        if not options.allow_config_required_plugins:
            kept = []
            for name in remaining:
                if requires_configuration(name):
                    log.warning(
                        "Removing plugin %s: it requires additional configuration "
                        "(enable allow_config_required_plugins to keep it)", name
                    )
                    removed.append(name)
                else:
                    kept.append(name)
            remaining = kept

    for group in exclusive_groups:
        winner: Optional[str] = None
        kept = []
        for name in remaining:
            if name not in group:
                kept.append(name)
            elif winner is None or name == winner:
                winner = name
                kept.append(name)
            else:
                log.warning(
                    "Removing plugin %s: it conflicts with %s (mutually exclusive)",
                    name, winner,
                )
                removed.append(name)
        remaining = kept

    return FilterResult(filtered=remaining, removed=removed)
