"""Log entry and rendered field types."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from cli_log_handler.domain.rendering.levels import Level


class LogEntry(BaseModel):
    """One logging event: level, message and named field values.

    ``level`` accepts any int so that out-of-range severities coming from a
    caller still reach the renderer, which gives them a fallback style.
    """

    model_config = ConfigDict(frozen=True)

    level: Level | int
    message: str
    fields: Mapping[str, Any] = Field(default_factory=dict)


@dataclass(frozen=True)
class RenderedField:
    """A (name, value) pair taken from an entry, used for ordering."""

    name: str
    value: Any
