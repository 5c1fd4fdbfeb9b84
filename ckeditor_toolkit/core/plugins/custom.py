"""Custom plugin definitions.

A custom plugin is any editor plugin that is not part of the built-in
catalog: a third-party npm package, a local module or a premium feature.
Its import path is validated up front so configuration files cannot make the
runtime load arbitrary files or remote scripts.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Tuple

from .catalog import Category
from .exceptions import PluginValidationError

__all__ = ["CustomPlugin", "custom_plugins_from", "validate_import_path"]

# Accepted forms:
#   my-package, lodash/merge              npm package with optional subpath
#   @scope/package, @scope/package/sub    scoped npm package
#   ./plugin.js, ../../shared/plugin      relative path, at most two levels up
_VALID_IMPORT_PATH = re.compile(
    r"^(?:"
    r"@[a-z0-9][a-z0-9._-]*/[a-z0-9][a-z0-9._/-]*"
    r"|[a-z0-9][a-z0-9._/-]*"
    r"|(?:\.{1,2}/){1,2}(?:[a-z0-9_.-]+/)*[a-z0-9_.-]+"
    r")$",
    re.IGNORECASE,
)
_WINDOWS_DRIVE = re.compile(r"^[a-zA-Z]:")
_MAX_LEVELS_UP = 2


def _levels_up(path: str) -> int:
    """Deepest point *path* reaches above its starting directory."""
    depth = 0
    deepest = 0
    for segment in path.split("/"):
        if segment == "..":
            depth -= 1
            deepest = min(deepest, depth)
        elif segment and segment != ".":
            depth += 1
    return -deepest


def validate_import_path(path: str) -> str:
    """Check that *path* is a package name or a shallow relative path.

    Args:
        path: Module specifier as it would appear in an ``import`` statement.

    Returns:
        The path, unchanged.

    Raises:
        PluginValidationError: If the path is absolute, a URL, climbs more
            than two directories or is otherwise malformed.
    """
    if path.startswith("/") or _WINDOWS_DRIVE.match(path):
        raise PluginValidationError(f"Absolute paths are not allowed in import path: {path}")
    if "://" in path:
        raise PluginValidationError(f"URLs are not allowed in import path: {path}")
    if _levels_up(path) > _MAX_LEVELS_UP:
        raise PluginValidationError(
            f"Deep path traversal (more than 2 levels up) is not allowed in import path: {path}"
        )
    if not _VALID_IMPORT_PATH.match(path):
        raise PluginValidationError(
            "Invalid importPath format. Must be a valid npm package name or "
            f"relative path: {path}"
        )
    return path


@dataclass(frozen=True)
class CustomPlugin:
    """A plugin loaded from outside the built-in catalog.

    Two custom plugins are equal when their ``js_name`` matches.

    Attributes:
        js_name: Export name of the plugin class.
        import_path: Module to import it from. None means the main editor
            package (or the premium package when ``premium`` is set).
        toolbar_items: Toolbar buttons the plugin contributes.
        dependencies: Names of plugins it needs, loaded before it.
        premium: Import from the premium features package.
    """

    js_name: str
    import_path: Optional[str] = field(default=None, compare=False)
    toolbar_items: Tuple[str, ...] = field(default=(), compare=False)
    dependencies: Tuple[str, ...] = field(default=(), compare=False)
    premium: bool = field(default=False, compare=False)

    def __post_init__(self):
        if not self.js_name or not self.js_name.strip():
            raise PluginValidationError("Plugin name must not be empty")
        if self.import_path:
            validate_import_path(self.import_path)
        object.__setattr__(self, "toolbar_items", tuple(self.toolbar_items))
        object.__setattr__(self, "dependencies", tuple(self.dependencies))

    @property
    def is_premium(self) -> bool:
        return self.premium

    @property
    def category(self) -> Category:
        return Category.CUSTOM

    @classmethod
    def of(cls, js_name: str, import_path: str) -> "CustomPlugin":
        return cls(js_name, import_path=import_path)

    @classmethod
    def from_ckeditor5(cls, js_name: str) -> "CustomPlugin":
        """Plugin exported by the main editor package but not catalogued."""
        return cls(js_name)

    @classmethod
    def from_premium(cls, js_name: str) -> "CustomPlugin":
        return cls(js_name, premium=True)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CustomPlugin":
        """Build a plugin from a configuration mapping.

        Accepts ``name`` (or ``js_name``), ``import_path`` (or
        ``importPath``), ``toolbar_items``, ``dependencies`` and ``premium``.
        """
        name = data.get("name") or data.get("js_name")
        if not name:
            raise PluginValidationError("Custom plugin entry needs a 'name'")
        return cls(
            js_name=name,
            import_path=data.get("import_path", data.get("importPath")),
            toolbar_items=tuple(data.get("toolbar_items", data.get("toolbarItems", ())) or ()),
            dependencies=tuple(data.get("dependencies", ()) or ()),
            premium=bool(data.get("premium", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Wire form used in the rendered ``customPlugins`` list."""
        result: Dict[str, Any] = {"name": self.js_name, "premium": self.premium}
        if self.import_path:
            result["importPath"] = self.import_path
        if self.toolbar_items:
            result["toolbarItems"] = list(self.toolbar_items)
        if self.dependencies:
            result["dependencies"] = list(self.dependencies)
        return result


def custom_plugins_from(entries: Iterable[Dict[str, Any]]) -> Tuple[CustomPlugin, ...]:
    return tuple(CustomPlugin.from_dict(entry) for entry in entries)
