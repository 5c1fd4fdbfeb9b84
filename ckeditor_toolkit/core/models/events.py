"""Editor lifecycle events.

Plain data objects delivered to listeners registered on an
:class:`~ckeditor_toolkit.core.services.event_dispatcher.EventDispatcher`.
``source`` is whatever object represents the editor on the host side.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

__all__ = [
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


def _now_ms() -> int:
    return int(time.time() * 1000)


class ErrorSeverity(Enum):
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"


class ChangeSource(Enum):
    USER_INPUT = "user_input"
    API = "api"
    UNDO_REDO = "undo_redo"
    PASTE = "paste"
    COLLABORATION = "collaboration"
    UNKNOWN = "unknown"


class FallbackMode(Enum):
    """What the host shows when the editor cannot start."""

    TEXTAREA = "textarea"
    READ_ONLY = "readonly"
    ERROR_MESSAGE = "error"
    HIDDEN = "hidden"

    @property
    def js_name(self) -> str:
        return self.value

    @classmethod
    def from_js_name(cls, js_name: Optional[str]) -> "FallbackMode":
        """Return the mode for *js_name*, or ERROR_MESSAGE if unknown."""
        for mode in cls:
            if mode.value == js_name:
                return mode
        return cls.ERROR_MESSAGE


@dataclass(frozen=True)
class EditorError:
    code: str
    message: str
    severity: ErrorSeverity = ErrorSeverity.ERROR
    recoverable: bool = True
    stack_trace: Optional[str] = None

    def __str__(self) -> str:
        return f"EditorError[code={self.code}, severity={self.severity.name}, message={self.message}]"


@dataclass(frozen=True)
class EditorEvent:
    """Base class of all editor events."""

    source: Any
    from_client: bool = True


@dataclass(frozen=True)
class EditorReadyEvent(EditorEvent):
    initialization_time_ms: int = 0


@dataclass(frozen=True)
class EditorErrorEvent(EditorEvent):
    error: Optional[EditorError] = None


@dataclass(frozen=True)
class ContentChangeEvent(EditorEvent):
    old_content: Optional[str] = None
    new_content: Optional[str] = None
    change_source: ChangeSource = ChangeSource.UNKNOWN

    @property
    def has_changed(self) -> bool:
        return self.old_content != self.new_content

    @property
    def length_delta(self) -> int:
        return len(self.new_content or "") - len(self.old_content or "")


@dataclass(frozen=True)
class AutosaveEvent(EditorEvent):
    content: str = ""
    success: bool = True
    error_message: Optional[str] = None
    timestamp: int = field(default_factory=_now_ms)


@dataclass(frozen=True)
class FallbackEvent(EditorEvent):
    mode: FallbackMode = FallbackMode.ERROR_MESSAGE
    reason: str = ""
    original_error: Optional[str] = None
