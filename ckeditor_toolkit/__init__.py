"""Top-level package for CKEditor Toolkit.

Resolves editor plugin sets, filters conflicting plugins and renders the
configuration document an editor instance is started with. Front-ends
(CLI, web backends) should only depend on the public API exposed here
rather than importing internal modules directly.
"""

from .core.plugins import (
    CKEditorPlugin,
    CustomPlugin,
    DependencyMode,
    EditorPreset,
    FilterOptions,
    filter_conflicting_plugins,
    load_order,
    resolve,
    topological_sort,
)
from .core.services import EditorConfiguration, EditorConfigurationBuilder

__all__: list[str] = [
    "CKEditorPlugin",
    "CustomPlugin",
    "DependencyMode",
    "EditorPreset",
    "FilterOptions",
    "filter_conflicting_plugins",
    "resolve",
    "topological_sort",
    "load_order",
    "EditorConfiguration",
    "EditorConfigurationBuilder",
]
