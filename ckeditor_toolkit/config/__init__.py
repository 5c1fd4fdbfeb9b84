"""Packaged YAML configuration and the :class:`ConfigManager` that reads it.

Default files in this folder are merged with user overrides at start-up.
"""

from .manager import ConfigManager

__all__ = [
    "ConfigManager",
]
