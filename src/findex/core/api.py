"""
Main API for findex.

``FileIndex`` ties one ``IndexConfig`` and one logger to the two operations
findex offers: building the index table of a directory tree, and looking up
records by name in that table. The two operations share nothing but the table
file, so they can be used independently or chained.

Example:
    >>> from findex import FileIndex, IndexConfig
    >>>
    >>> fi = FileIndex(IndexConfig(index_path="index.csv"))
    >>> built = fi.build("data")
    >>> print(f"{built.stats.files_indexed} files -> {built.index_path}")
    >>> for record in fi.search("json"):
    ...     print(record.name, record.size, record.content_type)
"""

from __future__ import annotations

import os

from ..indexing.indexer import Indexer
from ..search.searcher import Searcher
from ..utils.logging_config import IndexLogger, get_logger
from .config import IndexConfig
from .types import IndexResult, SearchResult


class FileIndex:
    def __init__(self, config: IndexConfig | None = None, logger: IndexLogger | None = None) -> None:
        self.cfg = config or IndexConfig()
        self.cfg.validate()
        self.logger = logger or get_logger()

    def build(self, root_dir: str | os.PathLike[str]) -> IndexResult:
        """Index ``root_dir`` into the configured table, replacing any previous one."""
        return Indexer(self.cfg, self.logger).run(root_dir)

    def search(self, query: str) -> SearchResult:
        """Look up ``query`` in the configured table."""
        return Searcher(self.logger, encoding=self.cfg.encoding).run(
            self.cfg.resolve_index_path(), query
        )

    def build_and_search(self, root_dir: str | os.PathLike[str], query: str) -> tuple[IndexResult, SearchResult]:
        built = self.build(root_dir)
        return built, self.search(query)
