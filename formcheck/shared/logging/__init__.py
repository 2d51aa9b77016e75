"""Structured logging for formcheck."""

from .logger_interface import LoggerInterface, LogLevel
from .structured_logger import JsonFormatter, StructuredLogger, configure_logging

__all__ = [
    'LoggerInterface',
    'LogLevel',
    'JsonFormatter',
    'StructuredLogger',
    'configure_logging'
]
