"""Shared string enumerations."""

from __future__ import annotations

from enum import StrEnum


class ColorMode(StrEnum):
    """How a handler decides between styled and plain output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"
