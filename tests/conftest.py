import io
import logging

import pytest

# ============================================================================
# Stream Fixtures
# ============================================================================


@pytest.fixture
def stream():
    """In-memory text stream acting as the output sink."""
    return io.StringIO()


@pytest.fixture
def plain_handler(stream):
    """Handler bound to ``stream`` with styling forced off."""
    from cli_log_handler.infrastructure.handler import Handler

    return Handler(stream, styled=False)


@pytest.fixture
def styled_handler(stream):
    """Handler bound to ``stream`` with styling forced on."""
    from cli_log_handler.infrastructure.handler import Handler

    return Handler(stream, styled=True)


# ============================================================================
# Entry Fixtures
# ============================================================================


@pytest.fixture
def startup_entry():
    """Info entry with two fields given in non-sorted order."""
    from cli_log_handler.domain.rendering.entities import LogEntry
    from cli_log_handler.domain.rendering.levels import Level

    return LogEntry(level=Level.INFO, message="starting", fields={"port": 8080, "env": "prod"})


# ============================================================================
# Global State Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Make every test load settings afresh."""
    from cli_log_handler.config.settings import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level changed by a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
