from __future__ import annotations

"""High-level service that assembles a complete editor configuration.

Entry-point for any front-end (CLI, web backend, build script) that needs
the final plugin list, toolbar and option blocks for one editor instance.
The builder starts from the packaged defaults (``editor_defaults`` and
``plugin_policy`` config sections), lets the caller adjust them and runs the
resolution pipeline in :meth:`EditorConfigurationBuilder.build`:

1. complete the requested plugins according to the dependency mode
2. order them so dependencies load first
3. append custom plugins
4. drop unloadable and mutually exclusive plugins
5. pick the toolbar (explicit, then preset, then plugin buttons)

Example:
    >>> config = (EditorConfigurationBuilder()
    ...           .with_preset(EditorPreset.BASIC)
    ...           .add_plugin(CKEditorPlugin.TABLE)
    ...           .build())
    >>> "Table" in config.plugin_names
    True
"""

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from ckeditor_toolkit.config import ConfigManager
from ckeditor_toolkit.core.generators.config_renderer import render_config_document
from ckeditor_toolkit.core.models.editor_config import EditorConfig
from ckeditor_toolkit.core.models.editor_options import (
    EditorTheme,
    EditorType,
    parse_enum,
    parse_enum_strict,
)
from ckeditor_toolkit.core.models.upload import UploadConfig, UploadContext
from ckeditor_toolkit.core.plugins.catalog import CKEditorPlugin
from ckeditor_toolkit.core.plugins.conflicts import FilterOptions, filter_conflicting_plugins
from ckeditor_toolkit.core.plugins.custom import CustomPlugin
from ckeditor_toolkit.core.plugins.exceptions import PluginValidationError
from ckeditor_toolkit.core.plugins.presets import EditorPreset
from ckeditor_toolkit.core.plugins.resolver import DependencyMode, DependencyResolver
from ckeditor_toolkit.core.utils import to_json

logger = logging.getLogger(__name__)

__all__ = ["EditorConfiguration", "EditorConfigurationBuilder", "to_plugin"]

PluginLike = Union[CKEditorPlugin, str]

_AUTO_MODES = (DependencyMode.AUTO_RESOLVE, DependencyMode.AUTO_RESOLVE_WITH_RECOMMENDED)


def to_plugin(value: PluginLike) -> CKEditorPlugin:
    """Return the catalog plugin for an enum member, wire name or member name.

    Raises:
        PluginValidationError: If *value* names no catalog plugin.
    """
    if isinstance(value, CKEditorPlugin):
        return value
    plugin = CKEditorPlugin.from_js_name(value)
    if plugin is None:
        try:
            plugin = CKEditorPlugin[str(value).strip().upper()]
        except KeyError:
            raise PluginValidationError(f"Unknown plugin: {value}", plugin_id=str(value)) from None
    return plugin


def _to_preset(value: Union[EditorPreset, str]) -> EditorPreset:
    if isinstance(value, EditorPreset):
        return value
    return parse_enum_strict(value, EditorPreset)


@dataclass(frozen=True)
class EditorConfiguration:
    """Result of :meth:`EditorConfigurationBuilder.build`.

    Attributes:
        plugins: Catalog plugins that survived filtering, in load order.
        plugin_names: Every plugin name to load, catalog then custom.
        removed_plugins: Names dropped by the conflict filter.
        toolbar: Toolbar items; ``"|"`` separates groups.
        options: Option blocks rendered next to the plugin list.
    """

    plugins: Tuple[CKEditorPlugin, ...]
    plugin_names: Tuple[str, ...]
    removed_plugins: Tuple[str, ...]
    toolbar: Tuple[str, ...]
    custom_plugins: Tuple[CustomPlugin, ...] = ()
    options: Dict[str, Any] = field(default_factory=dict)
    preset: Optional[EditorPreset] = None
    editor_type: EditorType = EditorType.CLASSIC
    theme: EditorTheme = EditorTheme.AUTO
    dependency_mode: DependencyMode = DependencyMode.AUTO_RESOLVE
    upload: UploadConfig = field(default_factory=UploadConfig)

    def has_plugin(self, name: PluginLike) -> bool:
        if isinstance(name, CKEditorPlugin):
            name = name.js_name
        return name in self.plugin_names

    def validate_upload(self, context: Optional[UploadContext]) -> Optional[str]:
        """Check an upload against this editor's limits; None means accepted."""
        return self.upload.validate(context)

    def to_document(self) -> Dict[str, Any]:
        """Render the JSON-compatible document consumed by the editor runtime."""
        document = render_config_document(
            self.plugin_names, self.toolbar, self.options, self.custom_plugins
        )
        document["editorType"] = self.editor_type.js_name
        document["theme"] = self.theme.js_name
        return document

    def to_json(self, indent: Optional[int] = 2) -> str:
        return to_json(self.to_document(), indent=indent)


class EditorConfigurationBuilder:
    """Fluent builder for :class:`EditorConfiguration`.

    Every ``with_*``/``add_*`` method returns the builder. The builder may
    be reused: :meth:`build` does not change its state.

    Args:
        config_manager: Source of the default sections; the shared
            :class:`ConfigManager` when omitted.
        resolver: Dependency resolver to use.
    """

    def __init__(self, config_manager: Optional[ConfigManager] = None,
                 resolver: Optional[DependencyResolver] = None) -> None:
        self._logger = logging.getLogger(f"{__name__}.EditorConfigurationBuilder")
        manager = config_manager or ConfigManager()
        defaults = manager.get_editor_defaults()
        policy = manager.get_plugin_policy()

        self._resolver = resolver or DependencyResolver()
        self._requested: Dict[CKEditorPlugin, None] = {}
        self._custom: Dict[str, CustomPlugin] = {}
        self._toolbar: List[str] = []
        self._preset: Optional[EditorPreset] = None

        preset_name = defaults.get("preset")
        if preset_name:
            self.with_preset(parse_enum(preset_name, EditorPreset, EditorPreset.STANDARD,
                                        context="editor_defaults"))

        self._editor_type = parse_enum(defaults.get("editor_type"), EditorType,
                                       EditorType.CLASSIC, context="editor_defaults")
        self._theme = parse_enum(defaults.get("theme"), EditorTheme,
                                 EditorTheme.AUTO, context="editor_defaults")
        self._mode = parse_enum(policy.get("dependency_mode"), DependencyMode,
                                DependencyMode.AUTO_RESOLVE, context="plugin_policy")
        self._filter_options = FilterOptions(
            strict_plugin_loading=bool(policy.get("strict_plugin_loading", False)),
            allow_config_required_plugins=bool(policy.get("allow_config_required_plugins", False)),
        )
        self._upload = UploadConfig.from_dict(defaults.get("upload") or {})
        self._autosave_waiting_time = (defaults.get("autosave") or {}).get("waiting_time")

        self._config = EditorConfig()
        self._config.set_language(defaults.get("language") or EditorConfig.DEFAULT_LANGUAGE)
        self._config.set_placeholder(defaults.get("placeholder"))

    # ------------------------------------------------------------------
    # Plugins
    # ------------------------------------------------------------------
    def with_preset(self, preset: Optional[Union[EditorPreset, str]]) -> "EditorConfigurationBuilder":
        """Start over from *preset*'s plugins and toolbar.

        ``None`` clears the preset and the requested plugins.
        """
        self._preset = _to_preset(preset) if preset is not None else None
        self._requested = dict.fromkeys(self._preset.plugins if self._preset else ())
        return self

    def with_plugins(self, *plugins: PluginLike) -> "EditorConfigurationBuilder":
        """Replace the requested plugins; the preset is cleared."""
        self._preset = None
        self._requested = dict.fromkeys(to_plugin(p) for p in plugins)
        return self

    def add_plugin(self, plugin: PluginLike) -> "EditorConfigurationBuilder":
        self._requested[to_plugin(plugin)] = None
        return self

    def add_plugins(self, plugins: Iterable[PluginLike]) -> "EditorConfigurationBuilder":
        for plugin in plugins:
            self.add_plugin(plugin)
        return self

    def remove_plugin(self, plugin: PluginLike) -> "EditorConfigurationBuilder":
        """Remove *plugin* from the requested set.

        Logs a warning naming the requested plugins that need it. In the
        auto-resolving modes those plugins bring it back at build time.
        """
        plugin = to_plugin(plugin)
        if plugin not in self._requested:
            self._logger.debug("Plugin %s was not requested", plugin.js_name)
            return self
        del self._requested[plugin]
        impacted = self._resolver.graph.removal_impact(plugin, self._requested)
        if impacted:
            self._logger.warning(
                "Removing %s affects plugins that depend on it: %s",
                plugin.js_name, ", ".join(sorted(p.js_name for p in impacted)),
            )
        return self

    def add_custom_plugin(self, plugin: Union[CustomPlugin, Mapping[str, Any]]) -> "EditorConfigurationBuilder":
        """Add a plugin from outside the catalog; a mapping goes through
        :meth:`CustomPlugin.from_dict`."""
        if not isinstance(plugin, CustomPlugin):
            plugin = CustomPlugin.from_dict(dict(plugin))
        if plugin.js_name in self._custom:
            self._logger.info("Replacing custom plugin definition: %s", plugin.js_name)
        self._custom[plugin.js_name] = plugin
        return self

    def with_dependency_mode(self, mode: Union[DependencyMode, str]) -> "EditorConfigurationBuilder":
        self._mode = mode if isinstance(mode, DependencyMode) else parse_enum_strict(mode, DependencyMode)
        return self

    def with_filter_options(self, options: FilterOptions) -> "EditorConfigurationBuilder":
        self._filter_options = options
        return self

    # ------------------------------------------------------------------
    # Editor options
    # ------------------------------------------------------------------
    def with_toolbar(self, *items: str) -> "EditorConfigurationBuilder":
        """Use exactly these toolbar items instead of a derived toolbar."""
        self._toolbar = list(items)
        return self

    def with_config(self, config: Union[EditorConfig, Mapping[str, Any]]) -> "EditorConfigurationBuilder":
        """Merge option blocks into the current ones; later keys win.

        A mapping only touches the keys it names. An :class:`EditorConfig`
        replaces every key it holds, ``language`` and ``placeholder``
        included.
        """
        if isinstance(config, EditorConfig):
            blocks = config.to_dict()
        else:
            validated = EditorConfig.from_dict(config).to_dict()
            blocks = {key: validated[key] for key in config}
        for key, value in blocks.items():
            self._config.set(key, value)
        return self

    def with_language(self, language: str) -> "EditorConfigurationBuilder":
        self._config.set_language(language)
        return self

    def with_placeholder(self, text: Optional[str]) -> "EditorConfigurationBuilder":
        self._config.set_placeholder(text)
        return self

    def with_type(self, editor_type: Union[EditorType, str]) -> "EditorConfigurationBuilder":
        if not isinstance(editor_type, EditorType):
            editor_type = parse_enum_strict(editor_type, EditorType)
        self._editor_type = editor_type
        return self

    def with_theme(self, theme: Union[EditorTheme, str]) -> "EditorConfigurationBuilder":
        if not isinstance(theme, EditorTheme):
            theme = parse_enum_strict(theme, EditorTheme)
        self._theme = theme
        return self

    def with_license_key(self, key: str) -> "EditorConfigurationBuilder":
        self._config.set_license_key(key)
        return self

    def with_upload_config(self, upload: UploadConfig) -> "EditorConfigurationBuilder":
        self._upload = upload
        return self

    # ------------------------------------------------------------------
    # Build files
    # ------------------------------------------------------------------
    @classmethod
    def from_mapping(cls, data: Mapping[str, Any],
                     config_manager: Optional[ConfigManager] = None) -> "EditorConfigurationBuilder":
        """Create a builder from a parsed build file.

        Recognised keys (all optional): ``preset``, ``plugins`` (added to
        the preset), ``remove``, ``custom_plugins``, ``dependency_mode``,
        ``toolbar``, ``editor_type``, ``theme``, ``language``,
        ``placeholder``, ``license_key``, ``filter`` (the
        :class:`FilterOptions` fields), ``upload`` and ``config`` (option
        blocks keyed by wire name).

        Raises:
            EditorConfigError: If ``config`` holds an invalid block.
            PluginValidationError: For unknown plugin names or bad custom
                plugin definitions.
            ValueError: For unknown enum values or bad upload limits.
        """
        builder = cls(config_manager)
        if "preset" in data:
            builder.with_preset(data["preset"])
        builder.add_plugins(data.get("plugins") or ())
        for plugin in data.get("remove") or ():
            builder.remove_plugin(plugin)
        for entry in data.get("custom_plugins") or ():
            builder.add_custom_plugin(entry)
        if data.get("dependency_mode"):
            builder.with_dependency_mode(data["dependency_mode"])
        if data.get("toolbar"):
            builder.with_toolbar(*data["toolbar"])
        if data.get("editor_type"):
            builder.with_type(data["editor_type"])
        if data.get("theme"):
            builder.with_theme(data["theme"])
        if data.get("language"):
            builder.with_language(data["language"])
        if "placeholder" in data:
            builder.with_placeholder(data["placeholder"])
        if data.get("license_key"):
            builder.with_license_key(data["license_key"])
        if data.get("filter"):
            builder.with_filter_options(FilterOptions(**data["filter"]))
        if data.get("upload"):
            builder.with_upload_config(UploadConfig.from_dict(data["upload"]))
        if data.get("config"):
            builder.with_config(data["config"])
        return builder

    @property
    def config(self) -> EditorConfig:
        """The option blocks being built; setters may be called on it directly."""
        return self._config

    @property
    def requested_plugins(self) -> List[CKEditorPlugin]:
        return list(self._requested)

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------
    def build(self) -> EditorConfiguration:
        """Run the resolution pipeline.

        Raises:
            PluginDependencyError: In STRICT mode when a requested plugin's
                hard dependency was not requested too.
        """
        requested = list(self._requested)
        if self._mode in _AUTO_MODES:
            for custom in self._custom.values():
                for dep in custom.dependencies:
                    plugin = CKEditorPlugin.from_js_name(dep)
                    if plugin is not None and plugin not in requested:
                        requested.append(plugin)

        resolved = self._resolver.resolve_for_mode(requested, self._mode)
        ordered = self._resolver.topological_sort(resolved)
        self._logger.debug("Resolved %d requested plugins to %d (%s)",
                           len(requested), len(ordered), self._mode.value)

        names = [plugin.js_name for plugin in ordered]
        names.extend(name for name in self._custom if name not in names)

        # Filter in request order so a mutual exclusion keeps the member asked for first
        by_request = list(dict.fromkeys([plugin.js_name for plugin in requested] + names))
        result = filter_conflicting_plugins(by_request, self._filter_options, log=self._logger)
        kept = set(result.filtered)
        plugin_names = tuple(name for name in names if name in kept)
        plugins = tuple(p for p in ordered if p.js_name in kept)
        custom_plugins = tuple(c for c in self._custom.values() if c.js_name in kept)

        options = self._config.to_dict()
        if (CKEditorPlugin.AUTOSAVE in plugins and "autosave" not in options
                and self._autosave_waiting_time is not None):
            options["autosave"] = {"waitingTime": int(self._autosave_waiting_time)}

        toolbar = self._derive_toolbar(plugins, custom_plugins, options)

        self._logger.info("Built editor configuration: %d plugins, %d removed, %d toolbar items",
                          len(result.filtered), len(result.removed), len(toolbar))
        return EditorConfiguration(
            plugins=plugins,
            plugin_names=plugin_names,
            removed_plugins=tuple(result.removed),
            toolbar=tuple(toolbar),
            custom_plugins=custom_plugins,
            options=options,
            preset=self._preset,
            editor_type=self._editor_type,
            theme=self._theme,
            dependency_mode=self._mode,
            upload=copy.deepcopy(self._upload),
        )

    def _derive_toolbar(self, plugins: Tuple[CKEditorPlugin, ...],
                        custom_plugins: Tuple[CustomPlugin, ...],
                        options: Dict[str, Any]) -> List[str]:
        # The renderer would otherwise take the options toolbar; resolve it here once.
        options_toolbar = options.pop("toolbar", None)
        if self._toolbar:
            return list(self._toolbar)
        if options_toolbar:
            return list(options_toolbar)
        if self._preset is not None and self._preset.default_toolbar:
            return list(self._preset.default_toolbar)
        items: Dict[str, None] = {}
        for plugin in plugins:
            items.update(dict.fromkeys(plugin.toolbar_items))
        for custom in custom_plugins:
            items.update(dict.fromkeys(custom.toolbar_items))
        return list(items)
