"""
CLI handler for managing command execution.

This module provides a base handler for CLI commands, with shared
success and error reporting.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional
import logging

from ..formatters.output_formatter import OutputFormatter
from ....shared.exceptions.error_context import ErrorContextManager

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


@dataclass
class CommandResult:
    """Result of a command execution."""

    success: bool
    message: str
    data: Optional[Any] = None
    error: Optional[Exception] = None
    exit_code: int = EXIT_OK


class CommandHandler(ABC):
    """
    Base class for command handlers.

    Subclasses implement ``execute`` and report through
    ``handle_success``, ``handle_invalid`` and ``handle_error``.
    """

    def __init__(self, formatter: OutputFormatter, as_json: bool = False):
        """
        Initialize the handler.

        Args:
            formatter: Output formatter
            as_json: Whether to print JSON instead of rich output
        """
        self.formatter = formatter
        self.as_json = as_json

    @abstractmethod
    def execute(self, **kwargs: Any) -> CommandResult:
        """
        Execute the command.

        Args:
            **kwargs: Command arguments

        Returns:
            CommandResult: Command execution result
        """
        pass

    def handle_error(
        self,
        error: Exception,
        message: str = "An error occurred"
    ) -> CommandResult:
        """
        Report a command failure.

        Args:
            error: Exception that occurred
            message: Error message

        Returns:
            CommandResult: Error result
        """
        context = ErrorContextManager.create_context(error)
        logger.error(f"{message}: {context.error_type}: {context.error_message}")

        if self.as_json:
            print(self.formatter.format_json({"error": message, **context.to_dict()}))
        else:
            self.formatter.print(
                self.formatter.format_error(message, context.error_message)
            )

        return CommandResult(
            success=False,
            message=message,
            error=error,
            exit_code=EXIT_ERROR
        )

    def handle_invalid(self, message: str, data: Any) -> CommandResult:
        """
        Report input that failed validation.

        Args:
            message: Summary message
            data: Validation result data

        Returns:
            CommandResult: Result with the invalid exit code
        """
        return CommandResult(
            success=False,
            message=message,
            data=data,
            exit_code=EXIT_INVALID
        )

    def handle_success(
        self,
        message: str,
        data: Optional[Any] = None,
        details: Optional[str] = None
    ) -> CommandResult:
        """
        Handle command execution success.

        Args:
            message: Success message
            data: Optional result data
            details: Optional success details

        Returns:
            CommandResult: Success result
        """
        if not self.as_json:
            self.formatter.print(
                self.formatter.format_success(message, details)
            )

        return CommandResult(
            success=True,
            message=message,
            data=data
        )
