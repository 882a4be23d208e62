"""Thread-safe handler that writes rendered log lines to an output stream."""

from __future__ import annotations

import io
import os
import sys
import threading
from collections.abc import Mapping
from typing import IO, TYPE_CHECKING, Any

from cli_log_handler.domain.rendering.entities import LogEntry
from cli_log_handler.domain.rendering.levels import resolve_level
from cli_log_handler.domain.rendering.services import (
    LABEL_WIDTH,
    MESSAGE_WIDTH,
    order_fields,
    render_line,
)
from cli_log_handler.domain.shared.enums import ColorMode
from cli_log_handler.domain.shared.exceptions import ConfigurationError
from cli_log_handler.domain.shared.messages import ErrorMessages

if TYPE_CHECKING:
    from cli_log_handler.config.settings import RenderSettings


def detect_styling(
    color: ColorMode | str = ColorMode.AUTO,
    platform: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> bool:
    """Decide whether output should carry ANSI color sequences.

    ``auto`` disables styling on Windows, whose default console does not
    interpret escape sequences, and when ``NO_COLOR`` is set.
    """
    try:
        mode = ColorMode(color)
    except ValueError:
        raise ConfigurationError(
            ErrorMessages.INVALID_COLOR_MODE.format(
                mode=color, valid_modes=[m.value for m in ColorMode]
            ),
            parameter="color",
        ) from None
    if mode is ColorMode.ALWAYS:
        return True
    if mode is ColorMode.NEVER:
        return False

    platform = sys.platform if platform is None else platform
    environ = os.environ if environ is None else environ
    if platform == "win32":
        return False
    return environ.get("NO_COLOR") is None


def is_binary_stream(writer: Any) -> bool:
    """Whether ``writer`` takes bytes rather than str."""
    if isinstance(writer, io.TextIOBase):
        return False
    if isinstance(writer, (io.RawIOBase, io.BufferedIOBase)):
        return True
    mode = getattr(writer, "mode", None)
    return isinstance(mode, str) and "b" in mode


class Handler:
    """Renders log entries and writes one line per entry to ``writer``.

    The styling decision is made once, at construction. A lock serializes
    writes so that lines from concurrent callers never interleave.
    """

    def __init__(
        self,
        writer: IO[Any],
        *,
        color: ColorMode | str = ColorMode.AUTO,
        styled: bool | None = None,
        label_width: int = LABEL_WIDTH,
        message_width: int = MESSAGE_WIDTH,
    ) -> None:
        if writer is None:
            raise ConfigurationError(ErrorMessages.WRITER_REQUIRED, parameter="writer")
        if not callable(getattr(writer, "write", None)):
            raise ConfigurationError(
                ErrorMessages.WRITER_NOT_WRITABLE.format(writer=writer), parameter="writer"
            )
        for name, value in (("label_width", label_width), ("message_width", message_width)):
            if value < 0:
                raise ConfigurationError(
                    ErrorMessages.WIDTH_NEGATIVE.format(name=name, value=value), parameter=name
                )

        self._writer = writer
        self._binary = is_binary_stream(writer)
        self._lock = threading.Lock()
        self._styled = detect_styling(color) if styled is None else styled
        self._label_width = label_width
        self._message_width = message_width

    @classmethod
    def from_settings(cls, writer: IO[Any], settings: RenderSettings) -> Handler:
        return cls(
            writer,
            color=settings.color,
            label_width=settings.label_width,
            message_width=settings.message_width,
        )

    @property
    def writer(self) -> IO[Any]:
        return self._writer

    @property
    def styled(self) -> bool:
        return self._styled

    def format(self, entry: LogEntry) -> str:
        """Return the line ``handle_log`` would write for ``entry``."""
        return render_line(
            entry,
            resolve_level(entry.level),
            order_fields(entry.fields),
            styled=self._styled,
            label_width=self._label_width,
            message_width=self._message_width,
        )

    def handle_log(self, entry: LogEntry) -> None:
        """Write ``entry`` as a single line.

        Errors raised by the stream propagate unchanged; the write is not
        retried.
        """
        line = self.format(entry)
        data = line.encode("utf-8") if self._binary else line

        with self._lock:
            if self._binary:
                self._write_all(data)
            else:
                self._writer.write(data)
            flush = getattr(self._writer, "flush", None)
            if flush is not None:
                flush()

    def _write_all(self, data: bytes) -> None:
        # Raw streams may accept only part of the buffer per call.
        view = memoryview(data)
        while view:
            written = self._writer.write(view)
            if written is None:
                written = len(view)
            view = view[written:]
