"""Bridge from the standard library logging package into the Handler."""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

from cli_log_handler.domain.rendering.entities import LogEntry
from cli_log_handler.domain.rendering.levels import level_from_logging
from cli_log_handler.domain.shared.enums import ColorMode
from cli_log_handler.infrastructure.handler import Handler

# Attributes every LogRecord carries; anything else came in through ``extra=``.
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}

ERROR_FIELD = "error"


def record_to_entry(record: logging.LogRecord) -> LogEntry:
    """Build a LogEntry from a LogRecord.

    Values passed with ``extra=`` become fields. An attached exception becomes
    the ``error`` field unless the caller already set one.
    """
    fields: dict[str, Any] = {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RESERVED_ATTRS and not key.startswith("_")
    }
    if record.exc_info and record.exc_info[1] is not None:
        fields.setdefault(ERROR_FIELD, record.exc_info[1])

    return LogEntry(
        level=level_from_logging(record.levelno),
        message=record.getMessage(),
        fields=fields,
    )


class RendererLoggingHandler(logging.Handler):
    """``logging.Handler`` that renders records through a Handler.

    Write failures go through ``handleError`` as with any other logging
    handler.
    """

    def __init__(
        self,
        handler: Handler | None = None,
        *,
        stream: IO[Any] | None = None,
        color: ColorMode | str = ColorMode.AUTO,
        label_width: int = 5,
        message_width: int = 30,
        level: int = logging.NOTSET,
    ) -> None:
        super().__init__(level)
        if handler is None:
            handler = Handler(
                stream if stream is not None else sys.stderr,
                color=color,
                label_width=label_width,
                message_width=message_width,
            )
        self.renderer = handler

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.renderer.handle_log(record_to_entry(record))
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)
