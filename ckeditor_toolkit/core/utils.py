from __future__ import annotations

"""Simple reusable helper functions.

These helpers are side-effect-free and perform no I/O; they can be used
across all layers of the toolkit.
"""

import ipaddress
import json
import logging
from typing import Any, Dict
from urllib.parse import urlsplit

from .models.exceptions import UnsafeUrlError

__all__ = [
    "validate_upload_url",
    "is_internal_host",
    "to_json",
    "deep_merge",
]

logger = logging.getLogger(__name__)

_ALLOWED_SCHEMES = ("http", "https")
_INTERNAL_SUFFIXES = (".local", ".internal", ".localhost")


def is_internal_host(host: str) -> bool:
    """Return True if *host* names a loopback, private or link-local target.

    Hostnames are checked by suffix only; no DNS lookup is made.
    """
    host = host.strip().rstrip(".").lower()
    if not host or host == "localhost" or host.endswith(_INTERNAL_SUFFIXES):
        return True

    try:
        address = ipaddress.ip_address(host)
    except ValueError:
        return False

    mapped = getattr(address, "ipv4_mapped", None)
    if mapped is not None:
        address = mapped
    return (
        address.is_private
        or address.is_loopback
        or address.is_link_local
        or address.is_unspecified
        or address.is_reserved
    )


def validate_upload_url(url: str) -> str:
    """Reject upload URLs that could be used to reach internal services.

    Args:
        url: Absolute HTTP(S) URL the editor will POST uploads to.

    Returns:
        The URL, unchanged.

    Raises:
        UnsafeUrlError: If the scheme is not HTTP(S) or the host is internal.

    Examples:
        >>> validate_upload_url("https://example.com:8443/upload?token=abc")
        'https://example.com:8443/upload?token=abc'
    """
    if not url or not url.strip():
        raise UnsafeUrlError("Upload URL must not be empty", url=url or "")

    parts = urlsplit(url.strip())
    scheme = parts.scheme.lower()
    if scheme not in _ALLOWED_SCHEMES:
        raise UnsafeUrlError(
            f"Upload URL protocol '{scheme or '(none)'}' is not allowed; use http or https",
            url=url,
        )

    try:
        host = parts.hostname or ""
    except ValueError as exc:
        raise UnsafeUrlError(f"Upload URL is malformed: {exc}", url=url) from exc

    if is_internal_host(host):
        logger.warning("Rejected upload URL pointing at %s", host or "(no host)")
        raise UnsafeUrlError(
            f"Upload URL must not point to internal/private addresses: {host or '(no host)'}",
            url=url,
        )
    return url


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of *base* with *override* merged in recursively."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def to_json(document: Dict[str, Any], indent: int | None = 2) -> str:
    """Serialise a configuration document, keeping key order and non-ASCII text."""
    return json.dumps(document, indent=indent, ensure_ascii=False)
