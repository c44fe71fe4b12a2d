from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..core.types import FileRecord


def name_matches(record: FileRecord, query: str) -> bool:
    """Case-sensitive substring test on the record's base name. ``""`` matches everything."""
    return query in record.name


def filter_by_name(records: Iterable[FileRecord], query: str) -> Iterator[FileRecord]:
    """Yield matching records, preserving input order."""
    for record in records:
        if name_matches(record, query):
            yield record
