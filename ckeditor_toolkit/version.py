# -*- coding: utf-8 -*-
"""Application version detection utilities.

Provides a single public function, ``get_app_version()``, used by the
command line ``--version`` flag and by rendered build documents.
"""

from __future__ import annotations

from importlib import metadata
from pathlib import Path
from typing import Optional

DISTRIBUTION_NAME = "ckeditor-toolkit"

_CACHED_VERSION: Optional[str] = None


def get_app_version() -> str:
    """Return the application version string (e.g., ``v1.2.3``).

    Order: version.txt next to the package root (written by release
    builds), then installed distribution metadata, then "vdev".
    """
    global _CACHED_VERSION
    if _CACHED_VERSION:
        return _CACHED_VERSION

    version_file = Path(__file__).resolve().parent.parent / "version.txt"
    text = ""
    if version_file.exists():
        text = version_file.read_text(encoding="ascii", errors="ignore").strip()
    if not text:
        try:
            text = metadata.version(DISTRIBUTION_NAME)
        except metadata.PackageNotFoundError:
            text = ""

    if text:
        _CACHED_VERSION = text if text.startswith("v") else f"v{text}"
    else:
        _CACHED_VERSION = "vdev"
    return _CACHED_VERSION
