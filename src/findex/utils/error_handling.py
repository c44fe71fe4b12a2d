"""
Error types and reporting for findex.

Every failure findex can raise derives from ``FileIndexError``. Each error
carries a category, a severity, the path involved, recovery suggestions and a
free-form context dictionary so callers (the CLI in particular) can print a
useful diagnostic without parsing messages.

Indexing and searching are fail-fast: the first error aborts the operation and
is raised to the caller. Nothing is collected and skipped.

Error Categories:
    - TRAVERSAL: A directory could not be enumerated
    - FILE_ACCESS: A discovered file could not be opened or read
    - PERSISTENCE: The index table could not be written
    - INDEX_MISSING: The index table does not exist
    - INDEX_CORRUPT: The index table exists but cannot be parsed
    - CONFIGURATION: Invalid configuration values

Classes:
    FileIndexError: Base exception class
    TraversalError, FileAccessError, PersistenceError: Indexing failures
    IndexNotFoundError, IndexReadError: Search failures
    ConfigurationError: Invalid IndexConfig
    EmptyIndexWarning: Non-fatal signal for an index with no rows

Functions:
    wrap_os_error: Build a typed error from an OSError, keeping the cause
    format_error_report: Render an error as a human-readable diagnostic

Example:
    >>> from findex.utils.error_handling import FileAccessError, wrap_os_error
    >>> try:
    ...     open("missing.bin", "rb")
    ... except OSError as e:
    ...     err = wrap_os_error(e, "missing.bin", "open", FileAccessError)
    >>> err.context["cause"]
    'FileNotFoundError'
"""

from __future__ import annotations

import time
from enum import Enum
from pathlib import Path
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Error categories for classification."""

    TRAVERSAL = "traversal"
    FILE_ACCESS = "file_access"
    PERSISTENCE = "persistence"
    INDEX_MISSING = "index_missing"
    INDEX_CORRUPT = "index_corrupt"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


class FileIndexError(Exception):
    """Base exception for findex errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        file_path: Path | None = None,
        suggestions: list[str] | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message: str = message
        self.category: ErrorCategory = category
        self.severity: ErrorSeverity = severity
        self.file_path: Path | None = file_path
        self.suggestions: list[str] = suggestions or []
        self.context: dict[str, Any] = context or {}
        self.timestamp: float = time.time()


class TraversalError(FileIndexError):
    """A directory could not be enumerated."""

    def __init__(
        self, message: str, file_path: Path, context: dict[str, Any] | None = None
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.TRAVERSAL,
            severity=ErrorSeverity.HIGH,
            file_path=file_path,
            suggestions=[
                "Check that the directory exists and the path is correct",
                "Check directory permissions",
            ],
            context=context,
        )


class FileAccessError(FileIndexError):
    """A discovered file could not be opened or read."""

    def __init__(
        self, message: str, file_path: Path, context: dict[str, Any] | None = None
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.FILE_ACCESS,
            severity=ErrorSeverity.HIGH,
            file_path=file_path,
            suggestions=[
                "Check file permissions",
                "Check for dangling symlinks",
            ],
            context=context,
        )


class PersistenceError(FileIndexError):
    """The index table could not be written."""

    def __init__(
        self, message: str, file_path: Path, context: dict[str, Any] | None = None
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.PERSISTENCE,
            severity=ErrorSeverity.CRITICAL,
            file_path=file_path,
            suggestions=[
                "Check that the index location is writable",
                "Choose another location with --index-file",
            ],
            context=context,
        )


class IndexNotFoundError(FileIndexError):
    """The index table does not exist."""

    def __init__(
        self, message: str, file_path: Path, context: dict[str, Any] | None = None
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.INDEX_MISSING,
            severity=ErrorSeverity.HIGH,
            file_path=file_path,
            suggestions=[
                "Build the index first with -i/--index and -d/--directory",
            ],
            context=context,
        )


class IndexReadError(FileIndexError):
    """The index table exists but cannot be read or parsed."""

    def __init__(
        self,
        message: str,
        file_path: Path,
        line_number: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.INDEX_CORRUPT,
            severity=ErrorSeverity.HIGH,
            file_path=file_path,
            suggestions=[
                "Rebuild the index with -i/--index",
                "Verify the file is a findex table",
            ],
            context=context,
        )
        self.line_number: int | None = line_number


class ConfigurationError(FileIndexError):
    """Configuration-related errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.HIGH,
            suggestions=[
                "Check the configuration values",
                "Use the default configuration",
            ],
            context=context,
        )


class EmptyIndexWarning(UserWarning):
    """The index table holds a header but no records. Treat as "no matches"."""

    def __init__(self, message: str, file_path: Path) -> None:
        super().__init__(message)
        self.message = message
        self.file_path = file_path


def wrap_os_error(
    exception: OSError,
    file_path: str | Path,
    operation: str,
    error_cls: type[TraversalError] | type[FileAccessError] | type[PersistenceError],
) -> FileIndexError:
    """
    Build a typed findex error from an OSError.

    The caller is expected to ``raise ... from exception`` so the original
    traceback stays attached.

    Args:
        exception: The underlying OS error
        file_path: Path being processed
        operation: Operation that failed (e.g. "open", "read", "list")
        error_cls: The findex error type to build

    Returns:
        An instance of ``error_cls`` with the cause recorded in its context
    """
    path = Path(file_path)
    reason = exception.strerror or str(exception)
    context = {
        "operation": operation,
        "cause": type(exception).__name__,
        "errno": exception.errno,
    }
    return error_cls(f"Cannot {operation} {path}: {reason}", path, context=context)


def format_error_report(error: FileIndexError) -> str:
    """Create a human-readable report for a single error."""
    report = [f"Error: {error.message}"]
    if error.file_path is not None:
        report.append(f"  Path: {error.file_path}")
    line_number = getattr(error, "line_number", None)
    if line_number is not None:
        report.append(f"  Line: {line_number}")
    cause = error.context.get("cause")
    if cause:
        report.append(f"  Cause: {cause}")
    if error.suggestions:
        report.append("  Suggestions:")
        for suggestion in error.suggestions:
            report.append(f"    - {suggestion}")
    return "\n".join(report)
