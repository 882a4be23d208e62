"""Infrastructure layer - output stream integration.

Contains the Handler that owns the output stream and its write lock.
"""

from cli_log_handler.infrastructure.handler import Handler, detect_styling

__all__ = [
    "Handler",
    "detect_styling",
]
