"""
Exception Tests

Tests the log handler exception hierarchy.
"""

import pytest

from cli_log_handler.domain.shared.exceptions import (
    ConfigurationError,
    InvalidLevelError,
    LogHandlerError,
)


class TestLogHandlerExceptions:
    """Tests for log handler exceptions."""

    def test_base_error_with_message(self):
        """Should create LogHandlerError with message."""
        error = LogHandlerError("Something went wrong")

        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.code == "LogHandlerError"

    def test_base_error_with_custom_code(self):
        """Should use custom error code when provided."""
        error = LogHandlerError("Custom error", code="CUSTOM_CODE")

        assert error.code == "CUSTOM_CODE"

    def test_configuration_error(self):
        """Should carry the offending parameter name."""
        error = ConfigurationError("bad writer", parameter="writer")

        assert str(error) == "bad writer"
        assert error.code == "CONFIGURATION_ERROR"
        assert error.parameter == "writer"

    def test_configuration_error_without_parameter(self):
        """Should default parameter to None."""
        assert ConfigurationError("bad").parameter is None

    def test_invalid_level_default_message(self):
        """Should generate default message for InvalidLevelError."""
        error = InvalidLevelError("verbose")

        assert "verbose" in str(error)
        assert error.code == "INVALID_LEVEL"
        assert error.name == "verbose"

    @pytest.mark.parametrize("cls", [ConfigurationError, InvalidLevelError])
    def test_subclasses_share_base(self, cls):
        """Should derive every error from LogHandlerError."""
        assert issubclass(cls, LogHandlerError)
