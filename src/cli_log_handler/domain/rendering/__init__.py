"""Rendering context: levels, entries and line layout."""

from cli_log_handler.domain.rendering.entities import LogEntry, RenderedField
from cli_log_handler.domain.rendering.levels import (
    FALLBACK_STYLE,
    LEVEL_COLORS,
    LEVEL_LABELS,
    LOGGING_LEVEL_NAMES,
    Color,
    Level,
    LevelStyle,
    level_from_logging,
    parse_level,
    resolve_level,
)
from cli_log_handler.domain.rendering.services import (
    format_value,
    order_fields,
    render_line,
)

__all__ = [
    "LogEntry",
    "RenderedField",
    "Level",
    "Color",
    "LevelStyle",
    "LEVEL_LABELS",
    "LEVEL_COLORS",
    "LOGGING_LEVEL_NAMES",
    "FALLBACK_STYLE",
    "resolve_level",
    "level_from_logging",
    "parse_level",
    "order_fields",
    "format_value",
    "render_line",
]
