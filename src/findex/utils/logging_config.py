from __future__ import annotations

import json
import logging
import logging.handlers
import sys
import time
from enum import Enum
from pathlib import Path
from typing import Any


class LogLevel(str, Enum):
    """Available log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Available log formats."""

    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"
    STRUCTURED = "structured"


# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime"}


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {k: v for k, v in record.__dict__.items() if k not in _RESERVED_ATTRS}


class IndexLogger:
    """
    Logging front-end for findex with multiple output formats
    and configurable levels.
    """

    def __init__(
        self,
        name: str = "findex",
        level: LogLevel = LogLevel.INFO,
        format_type: LogFormat = LogFormat.SIMPLE,
        log_file: Path | None = None,
        max_file_size: int = 10 * 1024 * 1024,  # 10MB
        backup_count: int = 5,
        enable_console: bool = True,
        enable_file: bool = False,
    ):
        self.name = name
        self.level = level
        self.format_type = format_type
        self.log_file = log_file
        self.max_file_size = max_file_size
        self.backup_count = backup_count
        self.enable_console = enable_console
        self.enable_file = enable_file

        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.value))

        # Clear existing handlers
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        self._setup_handlers()

    def _setup_handlers(self) -> None:
        """Setup logging handlers based on configuration."""
        if self.enable_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(getattr(logging, self.level.value))
            console_handler.setFormatter(self._get_formatter())
            self.logger.addHandler(console_handler)

        if self.enable_file and self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                self.log_file,
                maxBytes=self.max_file_size,
                backupCount=self.backup_count,
                encoding="utf-8",
            )
            file_handler.setLevel(getattr(logging, self.level.value))
            file_handler.setFormatter(self._get_formatter())
            self.logger.addHandler(file_handler)

    def _get_formatter(self) -> logging.Formatter:
        """Get formatter based on format type."""
        if self.format_type == LogFormat.DETAILED:
            return StructuredFormatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
            )
        elif self.format_type == LogFormat.JSON:
            return JsonFormatter()
        elif self.format_type == LogFormat.STRUCTURED:
            return StructuredFormatter()
        else:
            return logging.Formatter("%(levelname)s: %(message)s")

    def debug(self, message: str, **kwargs: Any) -> None:
        self.logger.debug(message, extra=kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self.logger.info(message, extra=kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self.logger.warning(message, extra=kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self.logger.error(message, extra=kwargs)

    def log_file_indexed(self, file_path: str, file_name: str, size: int, content_type: str) -> None:
        """Log a single indexed file."""
        self.debug(
            "Successfully indexed file",
            operation="file_indexed",
            file_path=file_path,
            file_name=file_name,
            size=size,
            content_type=content_type,
        )

    def log_index_written(
        self, index_path: str, file_count: int, elapsed_ms: float, **kwargs: Any
    ) -> None:
        """Log the summary of a completed index build."""
        self.info(
            f"Successfully created index file: {index_path} ({file_count} files, {elapsed_ms:.2f}ms)",
            operation="index_written",
            index_path=index_path,
            file_count=file_count,
            elapsed_ms=elapsed_ms,
            **kwargs,
        )

    def log_traversal_error(self, file_path: str, error: str, **kwargs: Any) -> None:
        """Log an error that aborted an index build."""
        self.error(
            f"Error encountered while walking through files: {file_path} - {error}",
            operation="traversal_error",
            file_path=file_path,
            error=error,
            **kwargs,
        )

    def log_search_complete(
        self, query: str, results_count: int, elapsed_ms: float, **kwargs: Any
    ) -> None:
        """Log search completion."""
        self.debug(
            f"Search completed: query='{query}', results={results_count}, time={elapsed_ms:.2f}ms",
            operation="search_complete",
            query=query,
            results_count=results_count,
            elapsed_ms=elapsed_ms,
            **kwargs,
        )

    def log_empty_index(self, index_path: str) -> None:
        self.warning("Index file is empty.", operation="empty_index", index_path=index_path)


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": time.time(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        log_entry.update(_extra_fields(record))

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


class StructuredFormatter(logging.Formatter):
    """Human-readable formatter that appends ``key=value`` pairs for extra fields."""

    def format(self, record: logging.LogRecord) -> str:
        if self._fmt and self._fmt != "%(message)s":
            base = super().format(record)
            # the base formatter already rendered exc_info
            exc_rendered = True
        else:
            record.asctime = self.formatTime(record, self.datefmt)
            base = f"{record.asctime} [{record.levelname}] {record.name}: {record.getMessage()}"
            exc_rendered = False

        extra_fields = [f"{key}={value}" for key, value in _extra_fields(record).items()]
        if extra_fields:
            base += f" | {' '.join(extra_fields)}"

        if record.exc_info and not exc_rendered:
            base += f"\n{self.formatException(record.exc_info)}"

        return base


# Default logger used when callers do not inject one
_global_logger: IndexLogger | None = None


def get_logger() -> IndexLogger:
    """Get the default logger instance."""
    global _global_logger
    if _global_logger is None:
        _global_logger = IndexLogger()
    return _global_logger


def configure_logging(
    level: LogLevel = LogLevel.INFO,
    format_type: LogFormat = LogFormat.SIMPLE,
    log_file: Path | None = None,
    enable_console: bool = True,
    enable_file: bool = False,
    **kwargs: Any,
) -> IndexLogger:
    """Build a logger from options and make it the default."""
    global _global_logger
    _global_logger = IndexLogger(
        level=level,
        format_type=format_type,
        log_file=log_file,
        enable_console=enable_console,
        enable_file=enable_file,
        **kwargs,
    )
    return _global_logger


def configure_cli_logging(
    verbose: bool,
    format_type: LogFormat | None = None,
    log_file: Path | None = None,
) -> IndexLogger:
    """
    Logging preset for the command line.

    Verbose runs log at DEBUG in the detailed console format; otherwise INFO
    records are emitted as JSON lines. ``format_type`` overrides either choice.
    """
    level = LogLevel.DEBUG if verbose else LogLevel.INFO
    if format_type is None:
        format_type = LogFormat.DETAILED if verbose else LogFormat.JSON
    return configure_logging(
        level=level,
        format_type=format_type,
        log_file=log_file,
        enable_file=log_file is not None,
    )
