"""
Name lookups against a persisted index table.

Classes:
    Searcher: Loads an index table and filters its records by name

Functions:
    search: Convenience wrapper around ``Searcher.run``

Matching is a plain, case-sensitive substring test on the record name. There
is no tokenization, no wildcard and no fuzzy matching. Results keep the row
order of the table, which is the traversal order of the run that built it.

Example:
    >>> from findex.search.searcher import search
    >>> result = search("index.csv", "json")
    >>> if result.is_empty_index:
    ...     print("index has no records")
    >>> for record in result:
    ...     print(record.path)
"""

from __future__ import annotations

import os
import time
from pathlib import Path

from ..core.types import SearchResult, SearchStats
from ..indexing.table import read_table
from ..utils.error_handling import EmptyIndexWarning, FileIndexError
from ..utils.logging_config import IndexLogger, get_logger
from .matchers import filter_by_name


class Searcher:
    def __init__(self, logger: IndexLogger | None = None, encoding: str = "utf-8") -> None:
        self.logger = logger or get_logger()
        self.encoding = encoding

    def run(self, index_path: str | os.PathLike[str], query: str) -> SearchResult:
        """
        Return the records whose name contains ``query``.

        An index without data rows is not an error: the result is empty and
        carries an ``EmptyIndexWarning``.

        Raises:
            IndexNotFoundError: If the table does not exist
            IndexReadError: If the table is unreadable or malformed
        """
        t0 = time.perf_counter()
        path = Path(index_path)
        try:
            contents = read_table(path, encoding=self.encoding)
        except FileIndexError as e:
            self.logger.error(
                f"Failed to read index file: {e.message}",
                operation="search_error",
                index_path=str(path),
                category=e.category.value,
            )
            raise

        stats = SearchStats(
            rows_scanned=len(contents.records),
            rows_skipped=contents.rows_skipped,
        )

        if not contents.records:
            self.logger.log_empty_index(str(path))
            stats.elapsed_ms = (time.perf_counter() - t0) * 1000.0
            return SearchResult(
                query=query,
                index_path=path,
                stats=stats,
                warning=EmptyIndexWarning(f"Index file {path} is empty", path),
            )

        matches = list(filter_by_name(contents.records, query))
        stats.matches = len(matches)
        stats.elapsed_ms = (time.perf_counter() - t0) * 1000.0
        self.logger.log_search_complete(query, len(matches), stats.elapsed_ms, index_path=str(path))
        return SearchResult(query=query, records=matches, index_path=path, stats=stats)


def search(
    index_path: str | os.PathLike[str],
    query: str,
    logger: IndexLogger | None = None,
) -> SearchResult:
    """Search the table at ``index_path`` for records whose name contains ``query``."""
    return Searcher(logger).run(index_path, query)
