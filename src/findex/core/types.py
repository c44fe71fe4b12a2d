from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from ..utils.error_handling import EmptyIndexWarning


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"
    TABLE = "table"


# Column order of the persisted table
TABLE_HEADER: tuple[str, str, str, str] = ("Name", "Size", "Type", "Path")


@dataclass(slots=True)
class FileRecord:
    """Indexed metadata of one file."""

    name: str
    size: int
    content_type: str
    path: str

    def to_row(self) -> list[str]:
        return [self.name, str(self.size), self.content_type, self.path]


@dataclass(slots=True)
class IndexStats:
    files_indexed: int = 0
    dirs_visited: int = 0
    entries_skipped: int = 0
    bytes_total: int = 0
    elapsed_ms: float = 0.0


@dataclass(slots=True)
class IndexResult:
    records: list[FileRecord] = field(default_factory=list)
    index_path: Path = Path("index.csv")
    stats: IndexStats = field(default_factory=IndexStats)


@dataclass(slots=True)
class SearchStats:
    rows_scanned: int = 0
    rows_skipped: int = 0
    matches: int = 0
    elapsed_ms: float = 0.0


@dataclass(slots=True)
class SearchResult:
    query: str
    records: list[FileRecord] = field(default_factory=list)
    index_path: Path = Path("index.csv")
    stats: SearchStats = field(default_factory=SearchStats)
    warning: EmptyIndexWarning | None = None

    @property
    def is_empty_index(self) -> bool:
        return self.warning is not None

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[FileRecord]:
        return iter(self.records)
