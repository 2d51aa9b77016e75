"""
Exception hierarchy for formcheck.

Validation failures are never raised; they are reported in the error
report returned by the engine. The exceptions below signal caller misuse
(malformed rules), unreadable rule files, unknown forms and bad
configuration.
"""

from typing import Any, Optional


class FormcheckError(Exception):
    """Base class for all formcheck errors."""

    def __init__(self, message: str, **details: Any):
        """
        Initialize the error.

        Args:
            message: Error message
            **details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details


class RuleDefinitionError(FormcheckError):
    """Raised when a rule is declared with missing or invalid parameters."""

    def __init__(self, message: str, kind: Optional[str] = None, **details: Any):
        super().__init__(message, kind=kind, **details)
        self.kind = kind


class RuleSetLoadError(FormcheckError):
    """Raised when a rule set file cannot be read or parsed."""


class FormNotFoundError(FormcheckError, KeyError):
    """Raised when a named form is not registered."""

    def __init__(self, name: str):
        super().__init__(f"Unknown form: {name}", name=name)
        self.name = name

    def __str__(self) -> str:
        return self.message


class ConfigurationError(FormcheckError):
    """Raised when configuration files are missing or invalid."""
