"""Configuration data models: editor options, upload policy and option blocks."""

from .exceptions import EditorConfigError, UnsafeUrlError
from .editor_options import EditorTheme, EditorType, parse_enum, parse_enum_strict
from .upload import UploadConfig, UploadContext, UploadResult
from .editor_config import (
    ButtonStyle,
    CodeBlockLanguage,
    EditorConfig,
    HeadingOption,
    MentionFeed,
    StyleDefinition,
    ToolbarStyle,
)
from .events import (
    AutosaveEvent,
    ChangeSource,
    ContentChangeEvent,
    EditorError,
    EditorErrorEvent,
    EditorEvent,
    EditorReadyEvent,
    ErrorSeverity,
    FallbackEvent,
    FallbackMode,
)

__all__ = [
    "EditorConfigError",
    "UnsafeUrlError",
    "EditorType",
    "EditorTheme",
    "parse_enum",
    "parse_enum_strict",
    "UploadConfig",
    "UploadContext",
    "UploadResult",
    "EditorConfig",
    "ToolbarStyle",
    "ButtonStyle",
    "StyleDefinition",
    "HeadingOption",
    "CodeBlockLanguage",
    "MentionFeed",
    "EditorEvent",
    "EditorReadyEvent",
    "EditorErrorEvent",
    "EditorError",
    "ErrorSeverity",
    "ContentChangeEvent",
    "ChangeSource",
    "AutosaveEvent",
    "FallbackEvent",
    "FallbackMode",
]
