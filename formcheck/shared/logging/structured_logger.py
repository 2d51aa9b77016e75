"""
Structured logger implementation.

This module provides a structured logging implementation that
emits one JSON object per log entry.
"""

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO, Union

from .logger_interface import LoggerInterface, LogLevel


class JsonFormatter(logging.Formatter):
    """
    Formatter that renders every record as one JSON line.

    Entries built by StructuredLogger are emitted as they are; records
    from plain ``logging.getLogger(__name__)`` loggers below it are
    converted to the same shape.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = getattr(record, "structured", None)
        if entry is None:
            entry = {
                "timestamp": datetime.fromtimestamp(
                    record.created, timezone.utc
                ).replace(tzinfo=None).isoformat(),
                "level": record.levelname,
                "logger": record.name,
                "message": record.getMessage(),
                "context": {}
            }
            if record.exc_info:
                exc_type, exc_value, exc_tb = record.exc_info
                entry["exception"] = {
                    "type": exc_type.__name__,
                    "message": str(exc_value),
                    "traceback": traceback.format_exception(exc_type, exc_value, exc_tb)
                }
        return json.dumps(entry, default=str)


class StructuredLogger(LoggerInterface):
    """
    Structured logger implementation.

    Wraps a standard library logger and serializes each entry, together
    with the logger's bound context, as a JSON line.
    """

    def __init__(
        self,
        name: str,
        level: LogLevel = LogLevel.INFO,
        output: TextIO = sys.stderr
    ):
        """
        Initialize the structured logger.

        Args:
            name: Logger name
            level: Initial log level
            output: Output stream for logs
        """
        self.name = name
        self._level = level
        self._output = output
        self._context: Dict[str, Any] = {}

        self._logger = logging.getLogger(name)
        self._logger.setLevel(level.numeric)

        # Reconfiguring the same name replaces the previous stream handler
        for handler in list(self._logger.handlers):
            if getattr(handler, "_formcheck_handler", False):
                self._logger.removeHandler(handler)

        handler = logging.StreamHandler(output)
        handler.setFormatter(JsonFormatter())
        handler._formcheck_handler = True
        self._logger.addHandler(handler)

    def _log(
        self,
        level: LogLevel,
        message: str,
        exc_info: Optional[Exception] = None,
        **kwargs: Any
    ) -> None:
        """
        Internal logging method.

        Args:
            level: Log level
            message: Message to log
            exc_info: Optional exception
            **kwargs: Additional context
        """
        if level.numeric < self._level.numeric:
            return

        log_entry = {
            "timestamp": datetime.utcnow().isoformat(),
            "level": level.value,
            "logger": self.name,
            "message": message,
            "context": {**self._context, **kwargs}
        }

        if exc_info:
            log_entry["exception"] = {
                "type": exc_info.__class__.__name__,
                "message": str(exc_info),
                "traceback": traceback.format_exception(
                    type(exc_info),
                    exc_info,
                    exc_info.__traceback__
                )
            }

        self._logger.log(level.numeric, message, extra={"structured": log_entry})

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""
        self._log(LogLevel.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""
        self._log(LogLevel.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""
        self._log(LogLevel.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""
        self._log(LogLevel.ERROR, message, **kwargs)

    def exception(self, message: str, exc_info: Optional[Exception] = None, **kwargs: Any) -> None:
        """Log an exception."""
        self._log(LogLevel.ERROR, message, exc_info=exc_info, **kwargs)

    def set_level(self, level: LogLevel) -> None:
        """Set the logging level."""
        self._level = level
        self._logger.setLevel(level.numeric)

    def get_level(self) -> LogLevel:
        """Get the current logging level."""
        return self._level

    def add_context(self, **kwargs: Any) -> None:
        """Add context data."""
        self._context.update(kwargs)

    def clear_context(self) -> None:
        """Clear all context data."""
        self._context.clear()

    def get_context(self) -> Dict[str, Any]:
        """Get the current context data."""
        return self._context.copy()


def configure_logging(
    name: str = "formcheck",
    level: Union[LogLevel, str] = LogLevel.INFO,
    output: TextIO = sys.stderr
) -> StructuredLogger:
    """
    Configure and return a StructuredLogger instance.

    Args:
        name: Logger name
        level: Logging level, as a LogLevel or its name
        output: Output stream for logs

    Returns:
        StructuredLogger: Configured logger instance
    """
    if isinstance(level, str):
        level = LogLevel.from_name(level)
    return StructuredLogger(name=name, level=level, output=output)

