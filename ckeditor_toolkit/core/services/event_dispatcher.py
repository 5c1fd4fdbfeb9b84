from __future__ import annotations

"""Thread-safe event dispatch for editor lifecycle events.

Listeners are stored per event class in immutable tuples that are replaced
on every change, so a dispatch in progress keeps iterating over the list it
started with while other threads add or remove listeners. A failing
listener is logged and does not stop the remaining ones.
"""

import logging
from threading import RLock
from typing import Any, Callable, Dict, Optional, Tuple, Type

from ckeditor_toolkit.core.models.events import (
    AutosaveEvent,
    ContentChangeEvent,
    EditorError,
    EditorErrorEvent,
    EditorEvent,
    EditorReadyEvent,
    ErrorSeverity,
    FallbackEvent,
)

logger = logging.getLogger(__name__)

__all__ = [
    "EventDispatcher",
    "Registration",
    "ErrorHandler",
    "logging_error_handler",
    "compose_error_handlers",
]

Listener = Callable[[Any], None]
# Returns True when the error is fully handled and listeners must not run.
ErrorHandler = Callable[[EditorError], bool]

_STATS_KEYS: Dict[Type[EditorEvent], str] = {
    EditorReadyEvent: "ready",
    EditorErrorEvent: "error",
    AutosaveEvent: "autosave",
    ContentChangeEvent: "content_change",
    FallbackEvent: "fallback",
}


class Registration:
    """Handle returned by :meth:`EventDispatcher.add_listener`.

    Calling it (or :meth:`remove`) unregisters the listener. Removing twice
    is harmless.
    """

    def __init__(self, dispatcher: "EventDispatcher", event_type: Type[EditorEvent],
                 listener: Listener) -> None:
        self._dispatcher = dispatcher
        self._event_type = event_type
        self._listener = listener

    def remove(self) -> bool:
        return self._dispatcher.remove_listener(self._event_type, self._listener)

    def __call__(self) -> bool:
        return self.remove()


class EventDispatcher:
    """Dispatch editor events to registered listeners.

    Args:
        error_handler: Consulted by :meth:`fire_error` before listeners.
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None) -> None:
        self._listeners: Dict[Type[EditorEvent], Tuple[Listener, ...]] = {}
        self._lock = RLock()
        self.error_handler = error_handler
        self._logger = logging.getLogger(f"{__name__}.EventDispatcher")

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def add_listener(self, event_type: Type[EditorEvent], listener: Listener) -> Registration:
        with self._lock:
            self._listeners[event_type] = self._listeners.get(event_type, ()) + (listener,)
        return Registration(self, event_type, listener)

    def remove_listener(self, event_type: Type[EditorEvent], listener: Listener) -> bool:
        """Remove the first registration of *listener*; True if one was found."""
        with self._lock:
            current = self._listeners.get(event_type, ())
            if listener not in current:
                return False
            index = current.index(listener)
            self._listeners[event_type] = current[:index] + current[index + 1:]
            return True

    def cleanup(self) -> None:
        """Remove every listener."""
        with self._lock:
            self._listeners.clear()

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def fire(self, event: EditorEvent) -> None:
        """Deliver *event* to the listeners registered for its class."""
        listeners = self._listeners.get(type(event), ())
        name = type(event).__name__
        for listener in listeners:
            try:
                listener(event)
            except Exception as exc:
                self._logger.warning("Error in %s listener: %s", name, exc, exc_info=True)

    def fire_error(self, error: EditorError, source: Any = None) -> bool:
        """Report *error* to the error handler, then to error listeners.

        Returns:
            True if the error handler consumed the error (listeners were not
            called), False otherwise.
        """
        if self.error_handler is not None:
            try:
                if self.error_handler(error):
                    return True
            except Exception as exc:
                self._logger.warning("Error in error handler: %s", exc, exc_info=True)
        self.fire(EditorErrorEvent(source, True, error))
        return False

    # -------------------------------------------------------------------------
    # Statistics and Debugging
    # -------------------------------------------------------------------------

    def get_listener_stats(self) -> Dict[str, int]:
        """Listener counts per event kind plus a ``total``."""
        listeners = dict(self._listeners)
        stats = {key: len(listeners.get(cls, ())) for cls, key in _STATS_KEYS.items()}
        stats["total"] = sum(len(items) for items in listeners.values())
        return stats


def logging_error_handler(target: Optional[logging.Logger] = None) -> ErrorHandler:
    """Return a handler that logs errors by severity and lets them propagate."""
    log = target or logger

    def handle(error: EditorError) -> bool:
        if error.severity is ErrorSeverity.WARNING:
            log.warning("[%s] %s", error.code, error.message)
        elif error.severity is ErrorSeverity.FATAL:
            log.critical("FATAL [%s] %s\n%s", error.code, error.message, error.stack_trace or "")
        else:
            log.error("[%s] %s", error.code, error.message)
        return False

    return handle


def compose_error_handlers(*handlers: ErrorHandler) -> ErrorHandler:
    """Chain handlers; the first returning True stops the chain."""

    def handle(error: EditorError) -> bool:
        return any(handler(error) for handler in handlers)

    return handle
