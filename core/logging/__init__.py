# Structured logging for the job queue
import sys
import logging
import structlog
from typing import Optional

from core.config.settings import Settings

# Global flag to prevent duplicate logging configuration
_logging_configured = False


def configure_logging(settings: Settings) -> None:
    """Configure stdlib logging and structlog from ``settings.logging``."""
    global _logging_configured

    # Prevent duplicate configuration
    if _logging_configured:
        return

    level = settings.logging.level.upper()
    handlers: list[logging.Handler] = []
    if settings.logging.console_enabled:
        handlers.append(logging.StreamHandler(sys.stderr))
    else:
        handlers.append(logging.NullHandler())

    logging.basicConfig(format="%(message)s", level=level, handlers=handlers)

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.logging.json_format
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        # Loggers are re-bound on every call so test capture can swap processors
        cache_logger_on_first_use=False,
    )

    _logging_configured = True


def get_logger(name: str, component: Optional[str] = None) -> structlog.BoundLogger:
    """Get a structured logger instance, optionally bound to a component."""
    if component:
        return structlog.get_logger(name, component=component)
    return structlog.get_logger(name)
