"""Shared fixtures for the CKEditor Toolkit test-suite.

Every test runs with its own configuration and log directory so the user's
``~/.ckeditor_toolkit`` is never read or written.
"""

import logging
from pathlib import Path

import pytest

from ckeditor_toolkit.config import ConfigManager
from ckeditor_toolkit.core.plugins import PluginRegistry
from ckeditor_toolkit.core.services import EventDispatcher

_WATCHED_LOGGERS = (
    "",
    "ckeditor_toolkit",
    "ckeditor_toolkit.core.plugins",
    "ckeditor_toolkit.core.services.configuration_service",
)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch) -> Path:
    """Point the config manager at an empty per-test directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("CKEDITOR_TOOLKIT_CONFIG_DIR", str(config_dir))
    monkeypatch.setenv("CKEDITOR_TOOLKIT_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("CKEDITOR_TOOLKIT_DEBUG_RESOLUTION", raising=False)
    monkeypatch.delenv("CKEDITOR_TOOLKIT_DEBUG_MODULES", raising=False)
    ConfigManager._instance = None
    yield config_dir
    ConfigManager._instance = None


@pytest.fixture
def restore_logging():
    """Undo any logging configuration applied during the test."""
    saved = {}
    for name in _WATCHED_LOGGERS:
        logger = logging.getLogger(name)
        saved[name] = (logger.level, list(logger.handlers))
    yield
    for name, (level, handlers) in saved.items():
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            if handler not in handlers:
                handler.close()
        logger.handlers[:] = handlers
        logger.setLevel(level)


@pytest.fixture
def registry() -> PluginRegistry:
    """Fresh registry with all catalog plugins pre-registered."""
    return PluginRegistry()


@pytest.fixture
def empty_registry() -> PluginRegistry:
    return PluginRegistry(include_builtin=False)


@pytest.fixture
def dispatcher() -> EventDispatcher:
    return EventDispatcher()


@pytest.fixture
def write_user_config(isolated_config):
    """Write a YAML override file into the isolated config directory."""

    def _write(filename: str, text: str) -> Path:
        isolated_config.mkdir(parents=True, exist_ok=True)
        path = isolated_config / filename
        path.write_text(text, encoding="utf-8")
        ConfigManager._instance = None
        return path

    return _write

