from __future__ import annotations

"""Plugin dependency resolution for the editor.

This package provides:
- the closed catalog of built-in editor plugins
- the static hard-dependency and recommendation graph
- closure, validation and load-order computation
- conflict filtering over plugin-name lists
- the live plugin registry and the runtime plugin resolver
- custom plugin definitions and editor presets
"""

from .catalog import Category, CKEditorPlugin, CORE_PLUGINS, sort_by_catalog_order
from .conflicts import (
    FilterOptions,
    FilterResult,
    filter_conflicting_plugins,
    is_known_plugin,
    is_unavailable,
    requires_configuration,
)
from .custom import CustomPlugin, custom_plugins_from, validate_import_path
from .dependencies import (
    DEFAULT_GRAPH,
    MUTUALLY_EXCLUSIVE_GROUPS,
    DependencyGraph,
    dependencies_of,
    dependency_tree,
    dependents_of,
    has_dependencies,
    recommended_of,
    removal_impact,
)
from .exceptions import (
    DependencyCycleError,
    PluginConfigurationError,
    PluginDependencyError,
    PluginError,
    PluginValidationError,
)
from .plugin_resolver import PluginConfig, PluginResolver
from .presets import EditorPreset
from .registry import PluginRegistry, get_global_plugin_registry, register_ckeditor_plugin
from .resolver import (
    DependencyMode,
    DependencyResolver,
    load_order,
    resolve,
    resolve_with_recommended,
    topological_sort,
    validate,
)

__all__ = [
    # Catalog
    "Category",
    "CKEditorPlugin",
    "CORE_PLUGINS",
    "sort_by_catalog_order",

    # Graph and resolution
    "DependencyGraph",
    "DEFAULT_GRAPH",
    "MUTUALLY_EXCLUSIVE_GROUPS",
    "dependencies_of",
    "recommended_of",
    "dependents_of",
    "removal_impact",
    "has_dependencies",
    "dependency_tree",
    "DependencyMode",
    "DependencyResolver",
    "resolve",
    "resolve_with_recommended",
    "validate",
    "topological_sort",
    "load_order",

    # Conflict filtering
    "FilterOptions",
    "FilterResult",
    "filter_conflicting_plugins",
    "is_known_plugin",
    "is_unavailable",
    "requires_configuration",

    # Runtime binding
    "PluginRegistry",
    "get_global_plugin_registry",
    "register_ckeditor_plugin",
    "PluginConfig",
    "PluginResolver",

    # Definitions
    "CustomPlugin",
    "validate_import_path",
    "custom_plugins_from",
    "EditorPreset",

    # Exceptions
    "PluginError",
    "PluginDependencyError",
    "DependencyCycleError",
    "PluginValidationError",
    "PluginConfigurationError",
]
