"""Centralized message constants for error messages and log templates."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    # Handler construction
    WRITER_REQUIRED = "Handler requires a writable output stream"
    WRITER_NOT_WRITABLE = "Output stream {writer!r} has no write() method"
    WIDTH_NEGATIVE = "{name} must be non-negative, got {value}"
    INVALID_COLOR_MODE = "Invalid color mode: {mode!r}. Must be one of {valid_modes}"

    # Levels
    INVALID_LEVEL_NAME = "Invalid log level: '{name}'. Must be one of {valid_levels}"

    # Settings
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"


class LogTemplates:
    """Log message templates for the package's own diagnostics.

    Use these with logger.info(), logger.error(), etc. and pass values as parameters.
    """

    LOGGING_CONFIGURED = "Logging configured (level=%s, color=%s)"
    LOGGING_FALLBACK = "Could not apply logging config, falling back to basic config: %s"
    UNCAUGHT_ERROR = "Uncaught error"
