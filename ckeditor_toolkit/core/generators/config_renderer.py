from __future__ import annotations

"""Render the final editor configuration document.

The document is a plain JSON-compatible mapping: ``plugins`` (load order),
``toolbar``, optional ``customPlugins`` and every option block, copied
verbatim. The editor runtime consumes it as-is.
"""

import copy
import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence

from ckeditor_toolkit.core.plugins.custom import CustomPlugin
from ckeditor_toolkit.core.utils import to_json

logger = logging.getLogger(__name__)

__all__ = ["render_config_document", "to_json"]

_RESERVED_KEYS = ("plugins", "toolbar", "customPlugins")


def render_config_document(plugin_names: Sequence[str],
                           toolbar: Sequence[str],
                           options: Optional[Mapping[str, Any]] = None,
                           custom_plugins: Iterable[CustomPlugin] = ()) -> Dict[str, Any]:
    """Assemble the configuration document.

    Args:
        plugin_names: Plugin names in load order.
        toolbar: Toolbar items; ``"|"`` separates groups.
        options: Option blocks keyed by feature name (``fontSize``,
            ``table``, ``licenseKey``...). Unknown keys are kept verbatim.
        custom_plugins: Custom plugin definitions; rendered under
            ``customPlugins`` when not empty.

    Returns:
        New dictionary; inputs are not shared with it.
    """
    document: Dict[str, Any] = {
        "plugins": list(plugin_names),
        "toolbar": list(toolbar),
    }

    custom = [plugin.to_dict() for plugin in custom_plugins]
    if custom:
        document["customPlugins"] = custom

    for key, value in (options or {}).items():
        if key in _RESERVED_KEYS:
            # Options may carry a toolbar from EditorConfig; the explicit one wins.
            if key == "toolbar" and not toolbar:
                document["toolbar"] = list(value)
            else:
                logger.debug("Ignoring option %s: set by the renderer", key)
            continue
        document[key] = copy.deepcopy(value)

    logger.debug("Rendered config document: %d plugins, %d toolbar items, %d option keys",
                 len(document["plugins"]), len(document["toolbar"]),
                 len(document) - 2 - (1 if custom else 0))
    return document
