from __future__ import annotations

"""Central logging configuration for CKEditor Toolkit.

Import and call :func:`setup_logging` at application start-up.
"""

import logging
import logging.config
import os
import sys
from typing import List, Optional

import yaml

from ckeditor_toolkit.config import ConfigManager

__all__ = ["setup_logging", "RESOLUTION_LOGGER"]

RESOLUTION_LOGGER = "ckeditor_toolkit.core.plugins"

_TRUTHY = {"1", "true", "yes", "on"}


def setup_logging(level: Optional[int] = None) -> None:
    """Configure logging for the application using configuration from YAML files.

    Args:
        level: When given, forces the ``ckeditor_toolkit`` logger and the
            console handler to this level (used by ``--debug``).
    """
    log_dir = os.environ.get("CKEDITOR_TOOLKIT_LOG_DIR", "logs")
    log_file = os.path.join(log_dir, "app.log")

    try:
        os.makedirs(log_dir, exist_ok=True)
        logging_config = ConfigManager().get_logging_config()

        if logging_config and isinstance(logging_config, dict) and logging_config.get("version"):
            # Update the filename dynamically
            if "handlers" in logging_config and "file" in logging_config["handlers"]:
                logging_config["handlers"]["file"]["filename"] = log_file

            logging.config.dictConfig(logging_config)
            logging.getLogger("ckeditor_toolkit").info("===== Logging initialised from config files =====")
        else:
            # No valid config found, use minimal fallback
            _setup_minimal_logging()
    except (OSError, ValueError, TypeError, yaml.YAMLError) as exc:
        # Error loading config, fall back to minimal logging
        sys.stderr.write(f"Error loading logging config: {exc}\n")
        _setup_minimal_logging()

    if level is not None:
        _force_level(level)

    _apply_debug_overrides()


def _setup_minimal_logging() -> None:
    """Set up minimal console-only logging when config is unavailable."""
    minimal_config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'simple': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'simple',
                'level': 'INFO',
            },
        },
        'root': {
            'level': 'INFO',
            'handlers': ['console'],
        },
        # Keep a resolution logger entry so the env override can flip it
        'loggers': {
            RESOLUTION_LOGGER: {
                'level': 'INFO',
            }
        }
    }

    logging.config.dictConfig(minimal_config)
    logging.error("===== Logging initialised with minimal fallback (config error) =====")


def _force_level(level: int) -> None:
    package_logger = logging.getLogger("ckeditor_toolkit")
    package_logger.setLevel(level)
    for handler in package_logger.handlers + logging.getLogger().handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            handler.setLevel(level)


def _debug_targets() -> List[str]:
    targets: List[str] = []
    if os.environ.get('CKEDITOR_TOOLKIT_DEBUG_RESOLUTION', '').strip().lower() in _TRUTHY:
        targets.append(RESOLUTION_LOGGER)
        targets.append('ckeditor_toolkit.core.services.configuration_service')
    extra_modules = os.environ.get('CKEDITOR_TOOLKIT_DEBUG_MODULES', '').strip()
    if extra_modules:
        targets.extend(m.strip() for m in extra_modules.split(',') if m.strip())
    return targets


def _apply_debug_overrides() -> None:
    """Apply environment-driven module-specific debug overrides.

    Supports:
    - CKEDITOR_TOOLKIT_DEBUG_RESOLUTION=true -> DEBUG for plugin resolution
    - CKEDITOR_TOOLKIT_DEBUG_MODULES=comma,separated,logger,names -> DEBUG for listed loggers
    """
    for name in _debug_targets():
        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG)
        # Ensure at least one handler emits DEBUG for this logger
        has_debug_handler = any(h.level <= logging.DEBUG for h in logger.handlers)
        if not has_debug_handler:
            h = logging.StreamHandler()
            h.setLevel(logging.DEBUG)
            h.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
            logger.addHandler(h)
        logger.info("Debug override active for logger '%s'", name)
