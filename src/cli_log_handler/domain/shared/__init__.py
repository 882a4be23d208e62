"""
Shared Domain Kernel

Contains enumerations, messages and exceptions shared across the package.
"""

from cli_log_handler.domain.shared.enums import ColorMode
from cli_log_handler.domain.shared.exceptions import (
    ConfigurationError,
    InvalidLevelError,
    LogHandlerError,
)

__all__ = [
    "ColorMode",
    "LogHandlerError",
    "ConfigurationError",
    "InvalidLevelError",
]
