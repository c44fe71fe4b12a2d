"""
Configuration module for findex.

This module defines ``IndexConfig``, the explicit configuration object passed to
the indexer and the facade. Nothing in findex reads process-wide flags: every
setting that influences a run lives here.

Classes:
    IndexConfig: Index location, sampling and traversal settings

Key Configuration Areas:
    - Persistence: where the index table lives and its encoding
    - Sampling: how many leading bytes are read, and whether short samples
      are zero-padded before sniffing
    - Traversal: the excluded name prefix, entry ordering, symlink handling

Example:
    >>> from findex.core.config import IndexConfig
    >>> config = IndexConfig(index_path="out/index.csv", sort_entries=True)
    >>> config.validate()
    >>> config.resolve_index_path()
    PosixPath('out/index.csv')
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..analysis.content_sniffing import SNIFF_LEN
from ..utils.error_handling import ConfigurationError

DEFAULT_INDEX_FILE = "index.csv"


@dataclass(slots=True)
class IndexConfig:
    # Persistence
    index_path: str | Path = field(
        default=DEFAULT_INDEX_FILE, metadata={"help": "Location of the index table."}
    )
    encoding: str = "utf-8"

    # Sampling
    sample_size: int = SNIFF_LEN
    # Zero-fill samples shorter than sample_size before sniffing. Short files
    # then classify as application/octet-stream, matching earlier indexes.
    pad_sample: bool = True

    # Traversal
    exclude_prefix: str = ".git"
    sort_entries: bool = True  # False = native os.scandir order
    follow_symlinks: bool = False

    def resolve_index_path(self) -> Path:
        return Path(self.index_path)

    def validate(self) -> None:
        """Validate configuration and raise ConfigurationError on issues.

        Raises:
            ConfigurationError: If the configuration is invalid.
        """
        if not str(self.index_path):
            raise ConfigurationError(
                "Index path must not be empty",
                context={"field": "index_path"},
            )

        if self.sample_size <= 0:
            raise ConfigurationError(
                "Sample size must be positive",
                context={"field": "sample_size", "value": self.sample_size},
            )

        if not self.exclude_prefix:
            raise ConfigurationError(
                "Exclude prefix must not be empty",
                context={"field": "exclude_prefix"},
            )

        try:
            "".encode(self.encoding)
        except LookupError as e:
            raise ConfigurationError(
                f"Unknown encoding: {self.encoding}",
                context={"field": "encoding", "value": self.encoding},
            ) from e
