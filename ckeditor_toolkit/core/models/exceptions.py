"""Exceptions raised while building an editor configuration document."""

from __future__ import annotations

from typing import Optional

__all__ = ["EditorConfigError", "UnsafeUrlError"]


class EditorConfigError(ValueError):
    """Raised when a configuration value is rejected at the point of input.

    Args:
        message: Human readable reason.
        key: Configuration key being set, when known.
    """

    def __init__(self, message: str, key: Optional[str] = None) -> None:
        super().__init__(message)
        self.key = key


class UnsafeUrlError(EditorConfigError):
    """Raised when an upload URL targets a non-HTTP scheme or an internal host."""

    def __init__(self, message: str, url: str, key: Optional[str] = None) -> None:
        super().__init__(message, key)
        self.url = url
