"""Entry point helpers: logging setup and fatal error reporting."""

from __future__ import annotations

import logging
import logging.config
from collections.abc import Callable
from typing import Any

from cli_log_handler.config.settings import Settings
from cli_log_handler.domain.shared.messages import LogTemplates

logger = logging.getLogger(__name__)

_HANDLER_FACTORY = "cli_log_handler.utils.logging.RendererLoggingHandler"


def build_logging_config(settings: Settings) -> dict[str, Any]:
    """Return a dictConfig mapping that routes the root logger to stderr."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "handlers": {
            "console": {
                "()": _HANDLER_FACTORY,
                "stream": "ext://sys.stderr",
                "color": str(settings.render.color),
                "label_width": settings.render.label_width,
                "message_width": settings.render.message_width,
            },
        },
        "root": {"level": settings.log_level, "handlers": ["console"]},
    }


def setup_logging(settings: Settings | None = None) -> None:
    if settings is None:
        from cli_log_handler.config.settings import get_settings

        settings = get_settings()

    resolved_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    try:
        logging.config.dictConfig(build_logging_config(settings))
    except (ValueError, TypeError, AttributeError, ImportError) as e:
        logging.basicConfig(
            level=resolved_level,
            format="%(levelname)-5s %(message)s",
        )
        logger.warning(LogTemplates.LOGGING_FALLBACK, e)

    logging.getLogger().setLevel(resolved_level)
    logger.debug(LogTemplates.LOGGING_CONFIGURED, settings.log_level, settings.render.color)


def run(command: Callable[[], int | None]) -> int:
    """Run ``command`` and turn an uncaught exception into a fatal log line.

    Returns the command's exit code (``None`` counts as 0), or 1 after logging
    ``Uncaught error`` with the exception attached.
    """
    try:
        result = command()
    except Exception as e:
        logger.critical(LogTemplates.UNCAUGHT_ERROR, exc_info=e)
        return 1
    return 0 if result is None else result
