from __future__ import annotations

"""Plugin system exception classes.

Errors raised while resolving, validating and binding editor plugins.
Routine anomalies (unknown names, filtered conflicts) are logged instead of
raised; the classes below cover the cases where the caller has to act.
"""

from typing import Any, Dict, Optional, Sequence


class PluginError(Exception):
    """Base exception for all plugin-related errors.

    All plugin exceptions inherit from this base class so callers can catch
    the whole family in one place.
    """

    def __init__(self, message: str, plugin_id: Optional[str] = None,
                 cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.plugin_id = plugin_id
        self.cause = cause

    def __str__(self) -> str:
        if self.plugin_id:
            return f"[Plugin: {self.plugin_id}] {super().__str__()}"
        return super().__str__()


class PluginDependencyError(PluginError):
    """Raised when plugin dependencies are not satisfied in strict mode.

    ``missing_dependencies`` maps every offending plugin to the full set of
    dependencies it lacks, so all problems can be fixed in one pass.
    """

    def __init__(self, message: str, plugin_id: Optional[str] = None,
                 missing_dependencies: Optional[Dict[Any, Any]] = None,
                 cause: Optional[Exception] = None) -> None:
        super().__init__(message, plugin_id, cause)
        self.missing_dependencies = dict(missing_dependencies or {})


class DependencyCycleError(PluginDependencyError):
    """Raised when the authored dependency table contains a cycle."""

    def __init__(self, message: str, cycle: Optional[Sequence[Any]] = None,
                 cause: Optional[Exception] = None) -> None:
        super().__init__(message, cause=cause)
        self.cycle = list(cycle or [])


class PluginValidationError(PluginError, ValueError):
    """Raised when a plugin definition is malformed.

    This includes invalid custom plugin names and import paths that point
    outside the allowed module locations.
    """

    def __init__(self, message: str, plugin_id: Optional[str] = None,
                 validation_errors: Optional[list[str]] = None,
                 cause: Optional[Exception] = None) -> None:
        super().__init__(message, plugin_id, cause)
        self.validation_errors = validation_errors or []


class PluginConfigurationError(PluginError):
    """Raised when a registered plugin is found but cannot be used as requested.

    Distinct from a missing plugin, which is only logged and skipped.
    """

    def __init__(self, message: str, plugin_id: Optional[str] = None,
                 expected: Optional[str] = None,
                 actual: Optional[str] = None,
                 cause: Optional[Exception] = None) -> None:
        super().__init__(message, plugin_id, cause)
        self.expected = expected
        self.actual = actual
