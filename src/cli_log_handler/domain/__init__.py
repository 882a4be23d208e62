"""
Domain Layer

Pure formatting logic, free of I/O:
- shared/: Cross-cutting enumerations, messages and exceptions
- rendering/: Levels, log entries, field ordering and line layout
"""

from cli_log_handler.domain.rendering import Level, LogEntry
from cli_log_handler.domain.shared.exceptions import LogHandlerError

__all__ = [
    "Level",
    "LogEntry",
    "LogHandlerError",
]
