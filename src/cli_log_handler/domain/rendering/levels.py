"""Severity levels and their display label/color table."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Final

from cli_log_handler.domain.shared.exceptions import InvalidLevelError
from cli_log_handler.domain.shared.messages import ErrorMessages


class Level(IntEnum):
    """Ordered log severity."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4


class Color(IntEnum):
    """ANSI SGR foreground color codes."""

    NONE = 0
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    GRAY = 90


@dataclass(frozen=True)
class LevelStyle:
    """Display label and color for one level."""

    label: str
    color: Color


LEVEL_LABELS: Final = MappingProxyType(
    {
        Level.DEBUG: "DEBUG",
        Level.INFO: "INFO",
        Level.WARN: "WARN",
        Level.ERROR: "ERROR",
        Level.FATAL: "ERROR",
    }
)

LEVEL_COLORS: Final = MappingProxyType(
    {
        Level.DEBUG: Color.GRAY,
        Level.INFO: Color.BLUE,
        Level.WARN: Color.YELLOW,
        Level.ERROR: Color.RED,
        Level.FATAL: Color.RED,
    }
)

LOGGING_LEVEL_NAMES: Final = MappingProxyType(
    {
        Level.DEBUG: "DEBUG",
        Level.INFO: "INFO",
        Level.WARN: "WARNING",
        Level.ERROR: "ERROR",
        Level.FATAL: "CRITICAL",
    }
)

FALLBACK_STYLE: Final = LevelStyle(label="UNKNOWN", color=Color.NONE)

_STYLES: Final = MappingProxyType(
    {level: LevelStyle(LEVEL_LABELS[level], LEVEL_COLORS[level]) for level in Level}
)

_LEVEL_NAMES: Final = MappingProxyType(
    {
        "debug": Level.DEBUG,
        "info": Level.INFO,
        "warn": Level.WARN,
        "warning": Level.WARN,
        "error": Level.ERROR,
        "fatal": Level.FATAL,
        "critical": Level.FATAL,
    }
)


def resolve_level(level: object) -> LevelStyle:
    """Return the label and color for ``level``.

    Anything that is not one of the five levels resolves to ``FALLBACK_STYLE``
    instead of raising.
    """
    if isinstance(level, bool) or not isinstance(level, int):
        return FALLBACK_STYLE
    return _STYLES.get(level, FALLBACK_STYLE)


def level_from_logging(levelno: int) -> Level:
    """Map a standard library logging level number onto a Level."""
    if levelno <= logging.DEBUG:
        return Level.DEBUG
    if levelno <= logging.INFO:
        return Level.INFO
    if levelno <= logging.WARNING:
        return Level.WARN
    if levelno <= logging.ERROR:
        return Level.ERROR
    return Level.FATAL


def parse_level(name: str) -> Level:
    """Parse a level name such as ``"warn"`` or ``"CRITICAL"``."""
    try:
        return _LEVEL_NAMES[name.strip().lower()]
    except (KeyError, AttributeError):
        raise InvalidLevelError(
            str(name),
            ErrorMessages.INVALID_LEVEL_NAME.format(
                name=name, valid_levels=sorted(_LEVEL_NAMES)
            ),
        ) from None
