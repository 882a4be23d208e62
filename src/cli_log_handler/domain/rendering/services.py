"""Pure rendering functions: field ordering, value formatting and line layout."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Final

from cli_log_handler.domain.rendering.entities import LogEntry, RenderedField
from cli_log_handler.domain.rendering.levels import LevelStyle

LABEL_WIDTH: Final = 5
MESSAGE_WIDTH: Final = 30

ESCAPE: Final = "\033["
RESET: Final = "\033[0m"


def order_fields(fields: Mapping[str, Any]) -> list[RenderedField]:
    """Return the entry's fields sorted by name, ascending."""
    return sorted(
        (RenderedField(name, value) for name, value in fields.items()),
        key=lambda f: f.name,
    )


def format_value(value: Any) -> str:
    """Natural string form of a field value; booleans render as true/false."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def colorize(text: str, color: int) -> str:
    return f"{ESCAPE}{int(color)}m{text}{RESET}"


def render_line(
    entry: LogEntry,
    style: LevelStyle,
    fields: Sequence[RenderedField],
    *,
    styled: bool,
    label_width: int = LABEL_WIDTH,
    message_width: int = MESSAGE_WIDTH,
) -> str:
    """Build one complete output line, trailing newline included.

    Layout is ``<label> <message> name=value ...``. Widths are minimums: the
    label and message are padded on the right but never cut. In styled mode the
    padded label and each field name are wrapped in the level's color.
    """
    label = style.label.ljust(label_width)
    message = entry.message.ljust(message_width)

    if styled:
        parts = [f"{colorize(label, style.color)} {message}"]
        parts.extend(
            f" {colorize(f.name, style.color)}={format_value(f.value)}" for f in fields
        )
    else:
        parts = [f"{label} {message}"]
        parts.extend(f" {f.name}={format_value(f.value)}" for f in fields)

    parts.append("\n")
    return "".join(parts)
