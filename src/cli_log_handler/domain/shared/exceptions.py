"""Base exception classes for log handler errors."""

from __future__ import annotations


class LogHandlerError(Exception):
    """Base exception for all log handler errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ConfigurationError(LogHandlerError):
    """Raised when a handler is constructed with unusable arguments."""

    def __init__(self, message: str, parameter: str | None = None) -> None:
        super().__init__(message, code="CONFIGURATION_ERROR")
        self.parameter = parameter


class InvalidLevelError(LogHandlerError):
    """Raised when a level name cannot be parsed."""

    def __init__(self, name: str, message: str | None = None) -> None:
        msg = message or f"Invalid log level: '{name}'"
        super().__init__(msg, code="INVALID_LEVEL")
        self.name = name
