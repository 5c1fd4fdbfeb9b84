from __future__ import annotations

"""Editor type and theme options plus tolerant enum parsing."""

import logging
from enum import Enum
from typing import Optional, Type, TypeVar

__all__ = ["EditorType", "EditorTheme", "parse_enum", "parse_enum_strict"]

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


class _JsNamedEnum(Enum):
    @property
    def js_name(self) -> str:
        return self.name.lower()

    def __str__(self) -> str:
        return self.js_name


class EditorType(_JsNamedEnum):
    """Editor build to instantiate."""

    CLASSIC = "classic"
    BALLOON = "balloon"
    INLINE = "inline"
    DECOUPLED = "decoupled"


class EditorTheme(_JsNamedEnum):
    """Colour theme. AUTO follows the host page preference."""

    AUTO = "auto"
    LIGHT = "light"
    DARK = "dark"


def parse_enum(value: Optional[str], enum_type: Type[E], default: E,
               context: Optional[str] = None) -> E:
    """Parse *value* as a member name of *enum_type*, case-insensitively.

    Never raises: a missing value falls back to *default* with a debug
    message, an unknown one with a warning.

    Args:
        value: Text to parse, e.g. ``"dark"``.
        enum_type: Enum class to look the member up in.
        default: Member returned when *value* cannot be used.
        context: Optional label prefixed to log messages.
    """
    prefix = f"[{context}] " if context else ""
    if not value:
        logger.debug("%sNull or empty value for %s, using default: %s",
                     prefix, enum_type.__name__, default)
        return default
    try:
        return enum_type[value.strip().upper()]
    except KeyError:
        logger.warning("%sInvalid %s value: '%s', using default: %s",
                       prefix, enum_type.__name__, value, default)
        return default


def parse_enum_strict(value: Optional[str], enum_type: Type[E]) -> E:
    """Parse *value* like :func:`parse_enum` but raise on bad input.

    Raises:
        ValueError: If *value* is empty or not a member name. The message
            lists the valid values.
    """
    if not value:
        raise ValueError(f"{enum_type.__name__} value must not be null or empty")
    try:
        return enum_type[value.strip().upper()]
    except KeyError as exc:
        valid = ", ".join(member.name for member in enum_type)
        raise ValueError(
            f"Invalid {enum_type.__name__} value: '{value}'. Valid values: [{valid}]"
        ) from exc
