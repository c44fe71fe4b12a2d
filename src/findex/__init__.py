"""
findex: a flat metadata index of a directory tree, searchable by file name.

findex walks a directory, records the name, size, sniffed content type and
path of every file, and stores the records in a CSV table. A later lookup
scans that table for file names containing a substring.

Key Features:
    - **Deterministic traversal**: depth-first, entries sorted by name
    - **Content sniffing**: MIME type from the first 512 bytes, never from
      the file extension
    - **Flat table**: one UTF-8 CSV file, header ``Name,Size,Type,Path``
    - **Fail-fast**: the first unreadable directory or file aborts the run and
      no partial table is written
    - **Injected configuration and logging**: no process-wide flag state

Main Classes:
    FileIndex: Facade binding configuration and logger to build/search
    IndexConfig: Index location, sampling and traversal settings
    FileRecord: One indexed file
    SearchResult: Matches plus an optional empty-index warning

Example Usage:
    API:
        >>> from findex import build_index, search_index
        >>> records = build_index("data")
        >>> result = search_index("index.csv", "json")
        >>> [r.path for r in result]

    CLI:
        $ findex -i -d data
        $ findex -s json
        $ findex -i -d data -s json -v
"""

from .analysis.content_sniffing import sniff
from .core.api import FileIndex
from .core.config import IndexConfig
from .core.types import (
    FileRecord,
    IndexResult,
    IndexStats,
    OutputFormat,
    SearchResult,
    SearchStats,
)
from .indexing.indexer import Indexer, build_index
from .search.searcher import Searcher
from .search.searcher import search as search_index
from .utils.error_handling import (
    ConfigurationError,
    EmptyIndexWarning,
    FileAccessError,
    FileIndexError,
    IndexNotFoundError,
    IndexReadError,
    PersistenceError,
    TraversalError,
)
from .utils.logging_config import IndexLogger, configure_logging, get_logger

# Package metadata
__version__ = "0.1.0"
__license__ = "MIT"
__description__ = "Flat metadata index of a directory tree with name lookup"

# Public API
__all__ = [
    # Main classes
    "FileIndex",
    "IndexConfig",
    "Indexer",
    "Searcher",
    # Entry points
    "build_index",
    "search_index",
    "sniff",
    # Data types
    "FileRecord",
    "IndexResult",
    "IndexStats",
    "OutputFormat",
    "SearchResult",
    "SearchStats",
    # Logging
    "IndexLogger",
    "configure_logging",
    "get_logger",
    # Exception classes
    "FileIndexError",
    "TraversalError",
    "FileAccessError",
    "PersistenceError",
    "IndexNotFoundError",
    "IndexReadError",
    "ConfigurationError",
    "EmptyIndexWarning",
    # Package metadata
    "__version__",
    "__license__",
    "__description__",
]
