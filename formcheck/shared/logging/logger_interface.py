"""
Logger interface for standardized logging across formcheck.

This module defines the interface for logging implementations,
ensuring consistent logging behavior across the package.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from enum import Enum
import logging


class LogLevel(Enum):
    """Standard log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def numeric(self) -> int:
        """Numeric level as understood by the logging module."""
        return getattr(logging, self.value)

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        """
        Look up a level by name, case-insensitively.

        Raises:
            ValueError: If the name is not a known level
        """
        try:
            return cls(name.upper())
        except ValueError:
            raise ValueError(f"Unknown log level: {name}") from None


class LoggerInterface(ABC):
    """
    Interface for logging implementations.

    All implementations accept a message plus keyword context that is
    attached to the emitted entry.
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""
        pass

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""
        pass

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""
        pass

    @abstractmethod
    def exception(self, message: str, exc_info: Optional[Exception] = None, **kwargs: Any) -> None:
        """
        Log an exception.

        Args:
            message: The message to log
            exc_info: Optional exception to log
            **kwargs: Additional context data
        """
        pass

    @abstractmethod
    def set_level(self, level: LogLevel) -> None:
        """
        Set the logging level.

        Args:
            level: The log level to set
        """
        pass

    @abstractmethod
    def get_level(self) -> LogLevel:
        """
        Get the current logging level.

        Returns:
            LogLevel: The current log level
        """
        pass

    @abstractmethod
    def add_context(self, **kwargs: Any) -> None:
        """
        Add context data to all subsequent log messages.

        Args:
            **kwargs: Context data to add
        """
        pass

    @abstractmethod
    def clear_context(self) -> None:
        """Clear all context data."""
        pass

    @abstractmethod
    def get_context(self) -> Dict[str, Any]:
        """
        Get the current context data.

        Returns:
            Dict[str, Any]: Current context data
        """
        pass
