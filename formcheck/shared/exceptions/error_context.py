"""
Error context management.

This module captures exception details in a structured form so they
can be attached to log entries and CLI error output.
"""

import traceback
from datetime import datetime
from typing import Any, Dict, Optional, List
from dataclasses import dataclass, field

from .errors import FormcheckError


@dataclass
class ErrorContext:
    """
    Structured error context information.

    Captures the exception type, message, optional stack trace and any
    caller-supplied context such as the form name or input file.
    """

    timestamp: datetime = field(default_factory=datetime.utcnow)
    error_type: str = ""
    error_message: str = ""
    stack_trace: Optional[List[str]] = None
    context_data: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error context to dictionary.

        Returns:
            Dict[str, Any]: Dictionary representation
        """
        return {
            "timestamp": self.timestamp.isoformat(),
            "error_type": self.error_type,
            "error_message": self.error_message,
            "stack_trace": self.stack_trace,
            "context_data": self.context_data,
        }

    def add_context(self, **kwargs: Any) -> None:
        """Add context data."""
        self.context_data.update(kwargs)


class ErrorContextManager:
    """Helpers for building and rendering error contexts."""

    @staticmethod
    def create_context(
        error: Exception,
        include_stack_trace: bool = False,
        **context_data: Any
    ) -> ErrorContext:
        """
        Create error context from exception.

        Details carried by a FormcheckError are merged into the context
        data; explicit keyword arguments take precedence.

        Args:
            error: The exception to create context from
            include_stack_trace: Whether to include stack trace
            **context_data: Additional context data

        Returns:
            ErrorContext: Created error context
        """
        data: Dict[str, Any] = {}
        if isinstance(error, FormcheckError):
            data.update({k: v for k, v in error.details.items() if v is not None})
        data.update(context_data)

        context = ErrorContext(
            error_type=error.__class__.__name__,
            error_message=str(error),
            context_data=data
        )

        if include_stack_trace:
            context.stack_trace = traceback.format_exception(
                type(error),
                error,
                error.__traceback__
            )

        return context

    @staticmethod
    def format_context(context: ErrorContext) -> str:
        """
        Format error context as string.

        Args:
            context: Error context to format

        Returns:
            str: Formatted error context
        """
        parts = [
            f"Error: {context.error_type}",
            f"Message: {context.error_message}",
        ]

        if context.context_data:
            context_str = ", ".join(
                f"{k}={v}" for k, v in context.context_data.items()
            )
            parts.append(f"Context: {context_str}")

        if context.stack_trace:
            parts.append("Stack Trace:")
            parts.extend(context.stack_trace)

        return "\n".join(parts)
