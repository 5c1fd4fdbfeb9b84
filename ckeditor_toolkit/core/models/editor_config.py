"""Editor configuration model.

:class:`EditorConfig` collects per-feature option blocks (toolbar, fonts,
links, images, tables, uploads...) under the key names the editor runtime
expects. Unknown keys can be passed through with :meth:`EditorConfig.set` so
new runtime features need no code change here.

The small value objects below render themselves with :meth:`to_dict`; fields
left at None are omitted from the output.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .. import utils
from .exceptions import EditorConfigError

__all__ = [
    "EditorConfig",
    "ToolbarStyle",
    "ButtonStyle",
    "StyleDefinition",
    "HeadingOption",
    "CodeBlockLanguage",
    "MentionFeed",
]

logger = logging.getLogger(__name__)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _non_null_fields(obj: Any, skip: Tuple[str, ...] = ()) -> Dict[str, Any]:
    return {
        _camel(f.name): getattr(obj, f.name)
        for f in fields(obj)
        if f.name not in skip and getattr(obj, f.name) is not None
    }


# ----------------------------------------------------------------------
# Value objects
# ----------------------------------------------------------------------


@dataclass(frozen=True)
class ButtonStyle:
    """Colours for one toolbar button."""

    background: Optional[str] = None
    hover_background: Optional[str] = None
    active_background: Optional[str] = None
    icon_color: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _non_null_fields(self)


@dataclass(frozen=True)
class ToolbarStyle:
    """Toolbar colours, plus per-button overrides keyed by plugin name."""

    background: Optional[str] = None
    border_color: Optional[str] = None
    border_radius: Optional[str] = None
    button_background: Optional[str] = None
    button_hover_background: Optional[str] = None
    button_active_background: Optional[str] = None
    button_on_background: Optional[str] = None
    button_on_color: Optional[str] = None
    icon_color: Optional[str] = None
    button_styles: Mapping[str, ButtonStyle] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        result = _non_null_fields(self, skip=("button_styles",))
        if self.button_styles:
            result["buttonStyles"] = {
                name: style.to_dict() for name, style in self.button_styles.items()
            }
        return result


@dataclass(frozen=True)
class StyleDefinition:
    """Named style applied by the Style dropdown."""

    name: str
    element: str
    classes: Tuple[str, ...] = ()

    @classmethod
    def block(cls, name: str, element: str, *classes: str) -> "StyleDefinition":
        return cls(name, element, tuple(classes))

    @classmethod
    def inline(cls, name: str, *classes: str) -> "StyleDefinition":
        return cls(name, "span", tuple(classes))

    @classmethod
    def code_block(cls, name: str, *classes: str) -> "StyleDefinition":
        return cls(name, "pre", tuple(classes))

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "element": self.element, "classes": list(self.classes)}


@dataclass(frozen=True)
class HeadingOption:
    """Entry of the heading dropdown."""

    model: str
    title: str
    css_class: str
    view: Optional[str] = None

    @classmethod
    def paragraph(cls, title: str, css_class: str) -> "HeadingOption":
        return cls("paragraph", title, css_class)

    @classmethod
    def heading(cls, level: int, title: str, css_class: str) -> "HeadingOption":
        if not 1 <= level <= 6:
            raise EditorConfigError(f"Heading level must be between 1 and 6, got {level}",
                                    key="heading")
        return cls(f"heading{level}", title, css_class, view=f"h{level}")

    def to_dict(self) -> Dict[str, Any]:
        result = {"model": self.model, "title": self.title, "class": self.css_class}
        if self.view:
            result["view"] = self.view
        return result


@dataclass(frozen=True)
class CodeBlockLanguage:
    language: str
    label: str
    css_class: Optional[str] = None

    @classmethod
    def of(cls, language: str, label: str) -> "CodeBlockLanguage":
        return cls(language, label)

    def to_dict(self) -> Dict[str, Any]:
        result = {"language": self.language, "label": self.label}
        if self.css_class:
            result["class"] = self.css_class
        return result


@dataclass(frozen=True)
class MentionFeed:
    """Autocomplete feed triggered by *marker*."""

    marker: str
    feed: Tuple[str, ...]
    minimum_characters: int = 0

    @classmethod
    def users(cls, *names: str) -> "MentionFeed":
        return cls("@", tuple(names))

    @classmethod
    def tags(cls, *tags: str) -> "MentionFeed":
        return cls("#", tuple(tags))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "marker": self.marker,
            "feed": list(self.feed),
            "minimumCharacters": self.minimum_characters,
        }


# ----------------------------------------------------------------------
# Configuration document
# ----------------------------------------------------------------------


class EditorConfig:
    """Fluent builder for the editor option blocks.

    Every setter returns ``self``. Values are validated when set, never when
    rendered.

    Example:
        >>> cfg = EditorConfig().set_language("de").set_toolbar("bold", "|", "link")
        >>> cfg.to_dict()["toolbar"]
        ['bold', '|', 'link']
    """

    DEFAULT_LANGUAGE = "en"

    def __init__(self) -> None:
        self._configs: Dict[str, Any] = {
            "placeholder": "",
            "language": self.DEFAULT_LANGUAGE,
        }

    # ------------------------------------------------------------------
    # General
    # ------------------------------------------------------------------
    def set_placeholder(self, text: Optional[str]) -> "EditorConfig":
        self._configs["placeholder"] = text if text is not None else ""
        return self

    def set_language(self, language: str) -> "EditorConfig":
        if not language or not language.strip():
            raise EditorConfigError("Language must not be empty", key="language")
        self._configs["language"] = language.strip()
        return self

    def set_toolbar(self, *items: str) -> "EditorConfig":
        """Set toolbar items; ``"|"`` is a separator. No items is a no-op."""
        if not items:
            return self
        self._configs["toolbar"] = list(items)
        return self

    def set_license_key(self, key: str) -> "EditorConfig":
        if not key:
            raise EditorConfigError("License key must not be empty", key="licenseKey")
        self._configs["licenseKey"] = key
        return self

    def set(self, key: str, value: Any) -> "EditorConfig":
        """Store *value* under *key* verbatim, for options without a setter.

        ``simpleUpload`` still goes through :meth:`set_simple_upload`.
        """
        if not key:
            raise EditorConfigError("Configuration key must not be empty")
        if key == "simpleUpload":
            if not isinstance(value, Mapping):
                raise EditorConfigError("simpleUpload must be a mapping", key=key)
            return self.set_simple_upload(value.get("uploadUrl", ""), value.get("headers"))
        self._configs[key] = value
        return self

    def get(self, key: str, default: Any = None) -> Any:
        return self._configs.get(key, default)

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def set_font_size(self, *sizes: Any, support_all_values: bool = False) -> "EditorConfig":
        block: Dict[str, Any] = {"options": list(sizes)}
        if support_all_values:
            block["supportAllValues"] = True
        self._configs["fontSize"] = block
        return self

    def set_font_family(self, *families: str, support_all_values: bool = False) -> "EditorConfig":
        block: Dict[str, Any] = {"options": list(families)}
        if support_all_values:
            block["supportAllValues"] = True
        self._configs["fontFamily"] = block
        return self

    def set_font_color(self, colors: Iterable[Any], columns: Optional[int] = None,
                       background: bool = False) -> "EditorConfig":
        """Set the palette for font colour, or background colour if *background*."""
        block: Dict[str, Any] = {"colors": list(colors)}
        if columns is not None:
            block["columns"] = columns
        self._configs["fontBackgroundColor" if background else "fontColor"] = block
        return self

    # ------------------------------------------------------------------
    # Features
    # ------------------------------------------------------------------
    def set_link(self, default_protocol: str,
                 add_target_to_external_links: bool = False) -> "EditorConfig":
        self._configs["link"] = {
            "defaultProtocol": default_protocol,
            "addTargetToExternalLinks": add_target_to_external_links,
        }
        return self

    def set_image(self, toolbar: Iterable[str], styles: Iterable[str] = ()) -> "EditorConfig":
        self._configs["image"] = {"toolbar": list(toolbar), "styles": list(styles)}
        return self

    def set_table(self, content_toolbar: Iterable[str]) -> "EditorConfig":
        self._configs["table"] = {"contentToolbar": list(content_toolbar)}
        return self

    def set_code_block(self, indent_sequence: str, *languages: CodeBlockLanguage) -> "EditorConfig":
        self._configs["codeBlock"] = {
            "indentSequence": indent_sequence,
            "languages": [lang.to_dict() for lang in languages],
        }
        return self

    def set_media_embed(self, previews_in_data: bool) -> "EditorConfig":
        self._configs["mediaEmbed"] = {"previewsInData": previews_in_data}
        return self

    def set_mention(self, *feeds: MentionFeed) -> "EditorConfig":
        self._configs["mention"] = {"feeds": [feed.to_dict() for feed in feeds]}
        return self

    def set_simple_upload(self, upload_url: str,
                          headers: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        """Configure the simple upload adapter.

        Raises:
            UnsafeUrlError: If *upload_url* uses a non-HTTP scheme or points
                at an internal host.
        """
        utils.validate_upload_url(upload_url)
        block: Dict[str, Any] = {"uploadUrl": upload_url}
        if headers:
            block["headers"] = dict(headers)
        self._configs["simpleUpload"] = block
        return self

    def get_simple_upload_url(self) -> Optional[str]:
        block = self._configs.get("simpleUpload")
        return block.get("uploadUrl") if block else None

    def set_autosave(self, waiting_time: int) -> "EditorConfig":
        """Set the autosave debounce in milliseconds."""
        if waiting_time < 0:
            raise EditorConfigError(
                f"Autosave waiting time must not be negative, got {waiting_time}", key="autosave"
            )
        self._configs["autosave"] = {"waitingTime": waiting_time}
        return self

    def set_html_support(self, allow_all: bool) -> "EditorConfig":
        """Allow every element and attribute, or none beyond the defaults."""
        allow: List[Dict[str, Any]] = []
        if allow_all:
            allow.append({
                "name": {"pattern": ".*"},
                "attributes": True,
                "classes": True,
                "styles": True,
            })
        self._configs["htmlSupport"] = {"allow": allow}
        return self

    def set_style(self, *definitions: StyleDefinition) -> "EditorConfig":
        self._configs["style"] = {"definitions": [d.to_dict() for d in definitions]}
        return self

    def set_heading(self, *options: HeadingOption) -> "EditorConfig":
        self._configs["heading"] = {"options": [o.to_dict() for o in options]}
        return self

    def set_toolbar_style(self, style: Optional[ToolbarStyle]) -> "EditorConfig":
        """Set toolbar colours; None removes any previous style."""
        if style is None:
            self._configs.pop("toolbarStyle", None)
        else:
            self._configs["toolbarStyle"] = style.to_dict()
        return self

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    def get_configs(self) -> Mapping[str, Any]:
        """Read-only view of the current option blocks."""
        return MappingProxyType(self._configs)

    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self._configs)

    def to_json(self, indent: Optional[int] = 2) -> str:
        return utils.to_json(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EditorConfig":
        """Build a config from a mapping of wire keys.

        Keys go through :meth:`set`, so ``simpleUpload.uploadUrl`` is
        validated; every other key is taken verbatim.
        """
        config = cls()
        for key, value in data.items():
            if key == "toolbar" and isinstance(value, (list, tuple)):
                config.set_toolbar(*value)
            elif key == "placeholder":
                config.set_placeholder(value)
            else:
                config.set(key, value)
        return config
