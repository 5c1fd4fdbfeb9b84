from __future__ import annotations

"""High-level orchestration services (configuration building, event dispatch)."""

from .configuration_service import EditorConfiguration, EditorConfigurationBuilder  # noqa: F401
from .event_dispatcher import (  # noqa: F401
    EventDispatcher,
    Registration,
    compose_error_handlers,
    logging_error_handler,
)

__all__: list[str] = [
    "EditorConfiguration",
    "EditorConfigurationBuilder",
    "EventDispatcher",
    "Registration",
    "logging_error_handler",
    "compose_error_handlers",
]
