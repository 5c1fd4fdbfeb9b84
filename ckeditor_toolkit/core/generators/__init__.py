from __future__ import annotations

"""Modules responsible for generating the editor configuration document."""

from .config_renderer import render_config_document, to_json  # noqa: F401

__all__: list[str] = [
    "render_config_document",
    "to_json",
]
