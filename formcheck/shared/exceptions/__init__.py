"""Exceptions and error context helpers."""

from .errors import (
    FormcheckError,
    RuleDefinitionError,
    RuleSetLoadError,
    FormNotFoundError,
    ConfigurationError
)
from .error_context import ErrorContext, ErrorContextManager

__all__ = [
    'FormcheckError',
    'RuleDefinitionError',
    'RuleSetLoadError',
    'FormNotFoundError',
    'ConfigurationError',
    'ErrorContext',
    'ErrorContextManager'
]
