"""
Utility functions and helper modules.

This module contains:
- Error types and error reports
- Logging configuration
- Output formatting
- Filesystem helpers
"""

from .error_handling import (
    ConfigurationError,
    EmptyIndexWarning,
    FileAccessError,
    FileIndexError,
    IndexNotFoundError,
    IndexReadError,
    PersistenceError,
    TraversalError,
    format_error_report,
    wrap_os_error,
)
from .formatter import format_index_result, format_search_result
from .logging_config import configure_logging, get_logger

__all__ = [
    # Error handling
    "ConfigurationError",
    "EmptyIndexWarning",
    "FileAccessError",
    "FileIndexError",
    "IndexNotFoundError",
    "IndexReadError",
    "PersistenceError",
    "TraversalError",
    "format_error_report",
    "wrap_os_error",
    # Formatting
    "format_index_result",
    "format_search_result",
    # Logging
    "configure_logging",
    "get_logger",
]
