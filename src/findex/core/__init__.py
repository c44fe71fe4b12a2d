"""
Core functionality for the findex package.

This module contains the fundamental components:
- The FileIndex facade
- Configuration management
- Core data types
"""

from .api import FileIndex
from .config import IndexConfig
from .types import (
    FileRecord,
    IndexResult,
    IndexStats,
    OutputFormat,
    SearchResult,
    SearchStats,
)

__all__ = [
    "FileIndex",
    "IndexConfig",
    "FileRecord",
    "IndexResult",
    "IndexStats",
    "OutputFormat",
    "SearchResult",
    "SearchStats",
]
