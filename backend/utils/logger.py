"""
DevWatch Structured Logging Module.

Provides consistent, structured logging throughout the application.
Requires Python 3.11+.
"""

import logging
import sys
from pathlib import Path
from typing import IO, Any

import structlog
from structlog.types import Processor

from utils.config import get_settings

# Open LOG_FILE_PATH handle, kept across configure_logging calls
_log_file: IO[str] | None = None


def _add_app_context(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Add application context to all log entries."""
    settings = get_settings()
    event_dict["app"] = settings.app_name
    event_dict["version"] = settings.app_version
    return event_dict


def _open_stream(file_path: Path | None) -> IO[str]:
    """Return the log stream, reusing the open file if the path is unchanged."""
    global _log_file

    if _log_file is not None and file_path is not None and _log_file.name == str(file_path):
        return _log_file

    _close_log_file()
    if file_path is None:
        return sys.stderr

    _log_file = file_path.open("a", encoding="utf-8")
    return _log_file


def _close_log_file() -> None:
    global _log_file

    if _log_file is not None:
        _log_file.close()
        _log_file = None


def configure_logging() -> None:
    """
    Configure structured logging for the application.

    Call this once at application startup. Log lines go to stderr (or
    the configured file) so they never mix with the change console.
    """
    settings = get_settings()
    level = getattr(logging, settings.logging.level.upper())

    # Common processors for all output formats
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
        _add_app_context,
    ]

    if settings.logging.format == "json":
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(
                colors=settings.logging.file_path is None,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    stream = _open_stream(settings.logging.file_path)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=stream, level=level, force=True)


def shutdown_logging() -> None:
    """
    Release the log file opened by configure_logging.

    Logging falls back to structlog defaults afterwards.
    """
    structlog.reset_defaults()
    logging.basicConfig(stream=sys.stderr, force=True)
    _close_log_file()


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


# Pre-configured logger for quick imports
logger = get_logger("devwatch")


class LoggerMixin:
    """
    Mixin class to add logging capability to any class.

    Usage:
        class MyClass(LoggerMixin):
            def my_method(self):
                self.log.info("doing something", key="value")
    """

    @property
    def log(self) -> structlog.stdlib.BoundLogger:
        """Get logger bound to this class name."""
        if not hasattr(self, "_logger"):
            self._logger = get_logger(self.__class__.__name__)
        return self._logger
