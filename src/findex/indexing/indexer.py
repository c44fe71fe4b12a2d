"""
Directory indexing for findex.

This module walks a directory tree, extracts per-file metadata (name, size,
sniffed content type, path) and persists the resulting records as the index
table.

Classes:
    Indexer: Walks a root directory and writes the index table

Functions:
    build_index: Convenience wrapper returning the list of records

Traversal Rules:
    - Depth-first pre-order; within a directory entries are visited sorted by
      name (or in native order when ``IndexConfig.sort_entries`` is off)
    - Entries whose name starts with ``IndexConfig.exclude_prefix`` (".git")
      are skipped; excluded directories are never entered
    - Symlinks are not followed unless ``IndexConfig.follow_symlinks`` is set
    - Any error aborts the whole run and no table is written

Example:
    >>> from findex.core.config import IndexConfig
    >>> from findex.indexing.indexer import Indexer
    >>>
    >>> indexer = Indexer(IndexConfig(index_path="index.csv"))
    >>> result = indexer.run("data")
    >>> for record in result.records:
    ...     print(record.path, record.content_type)
"""

from __future__ import annotations

import os
import stat
import time
from collections.abc import Iterator
from pathlib import Path

from ..analysis.content_sniffing import sniff
from ..core.config import IndexConfig
from ..core.types import FileRecord, IndexResult, IndexStats
from ..utils.error_handling import (
    FileAccessError,
    FileIndexError,
    TraversalError,
    wrap_os_error,
)
from ..utils.helpers import join_path, list_dir, pad_sample, read_sample
from ..utils.logging_config import IndexLogger, get_logger
from .table import write_table


class Indexer:
    """
    Builds a fresh index of one directory tree per run.

    Each run overwrites the table at ``cfg.index_path``; nothing from a
    previous index is reused.
    """

    def __init__(self, cfg: IndexConfig | None = None, logger: IndexLogger | None = None) -> None:
        self.cfg = cfg or IndexConfig()
        self.cfg.validate()
        self.logger = logger or get_logger()
        self.stats = IndexStats()

    def _is_excluded(self, name: str) -> bool:
        return name.startswith(self.cfg.exclude_prefix)

    def _list_dir(self, path: str) -> list[os.DirEntry[str]]:
        try:
            return list_dir(path, sort_entries=self.cfg.sort_entries)
        except OSError as e:
            raise wrap_os_error(e, path, "list directory", TraversalError) from e

    def _check_root(self, root: str) -> os.stat_result:
        try:
            st = os.stat(root)
        except OSError as e:
            raise wrap_os_error(e, root, "access directory", TraversalError) from e
        if not stat.S_ISDIR(st.st_mode):
            raise TraversalError(
                f"Cannot index {root}: not a directory",
                Path(root),
                context={"operation": "access directory", "cause": "NotADirectoryError"},
            )
        return st

    def iter_files(self, root_dir: str | os.PathLike[str]) -> Iterator[tuple[str, os.DirEntry[str]]]:
        """
        Yield ``(path, entry)`` for every non-excluded, non-directory entry.

        Raises:
            TraversalError: If the root is not a directory or a directory
                cannot be enumerated
        """
        root = os.fspath(root_dir)
        root_st = self._check_root(root)

        if self._is_excluded(os.path.basename(os.path.normpath(root))):
            self.stats.entries_skipped += 1
            return

        seen_dirs = {(root_st.st_dev, root_st.st_ino)}
        self.stats.dirs_visited += 1
        stack: list[tuple[str, Iterator[os.DirEntry[str]]]] = [(root, iter(self._list_dir(root)))]

        while stack:
            parent, entries = stack[-1]
            entry = next(entries, None)
            if entry is None:
                stack.pop()
                continue

            path = join_path(parent, entry.name)
            if self._is_excluded(entry.name):
                self.stats.entries_skipped += 1
                self.logger.debug("Skipping excluded entry", operation="skip", file_path=path)
                continue

            try:
                is_dir = entry.is_dir(follow_symlinks=self.cfg.follow_symlinks)
            except OSError as e:
                raise wrap_os_error(e, path, "inspect", TraversalError) from e

            if not is_dir:
                yield path, entry
                continue

            if self.cfg.follow_symlinks:
                try:
                    st = entry.stat()
                except OSError as e:
                    raise wrap_os_error(e, path, "inspect", TraversalError) from e
                key = (st.st_dev, st.st_ino)
                if key in seen_dirs:
                    # symlink cycle
                    self.stats.entries_skipped += 1
                    self.logger.debug("Skipping already visited directory", operation="skip", file_path=path)
                    continue
                seen_dirs.add(key)

            self.stats.dirs_visited += 1
            stack.append((path, iter(self._list_dir(path))))

    def index_file(self, path: str, entry: os.DirEntry[str]) -> FileRecord:
        """
        Extract the record for one file.

        Raises:
            FileAccessError: If the file cannot be inspected, opened or read
        """
        try:
            st = entry.stat(follow_symlinks=self.cfg.follow_symlinks)
        except OSError as e:
            raise wrap_os_error(e, path, "inspect", FileAccessError) from e

        try:
            f = open(path, "rb")
        except OSError as e:
            raise wrap_os_error(e, path, "open", FileAccessError) from e
        with f:
            try:
                sample = read_sample(f, self.cfg.sample_size)
            except OSError as e:
                raise wrap_os_error(e, path, "read", FileAccessError) from e

        if self.cfg.pad_sample:
            sample = pad_sample(sample, self.cfg.sample_size)

        record = FileRecord(
            name=entry.name,
            size=st.st_size,
            content_type=sniff(sample),
            path=path,
        )
        self.logger.log_file_indexed(record.path, record.name, record.size, record.content_type)
        return record

    def scan(self, root_dir: str | os.PathLike[str]) -> list[FileRecord]:
        """Walk ``root_dir`` and return its records in traversal order, without persisting."""
        self.stats = IndexStats()
        records: list[FileRecord] = []
        for path, entry in self.iter_files(root_dir):
            record = self.index_file(path, entry)
            records.append(record)
            self.stats.files_indexed += 1
            self.stats.bytes_total += record.size
        return records

    def run(self, root_dir: str | os.PathLike[str]) -> IndexResult:
        """
        Index ``root_dir`` and write the table.

        Raises:
            TraversalError: If the tree cannot be walked
            FileAccessError: If a discovered file cannot be read
            PersistenceError: If the table cannot be written
        """
        t0 = time.perf_counter()
        index_path = self.cfg.resolve_index_path()
        try:
            records = self.scan(root_dir)
            write_table(records, index_path, encoding=self.cfg.encoding)
        except FileIndexError as e:
            self.logger.log_traversal_error(str(e.file_path), e.message, category=e.category.value)
            raise

        self.stats.elapsed_ms = (time.perf_counter() - t0) * 1000.0
        self.logger.log_index_written(
            str(index_path), len(records), self.stats.elapsed_ms, root=os.fspath(root_dir)
        )
        return IndexResult(records=records, index_path=index_path, stats=self.stats)


def build_index(
    root_dir: str | os.PathLike[str],
    config: IndexConfig | None = None,
    logger: IndexLogger | None = None,
) -> list[FileRecord]:
    """Index ``root_dir``, write the table and return the records."""
    return Indexer(config, logger).run(root_dir).records
