"""
Persistence of index records as a flat CSV table.

Layout (UTF-8, standard CSV quoting, LF line endings):

    Name,Size,Type,Path
    user1.json,16,application/octet-stream,data/user1.json
    ...

The table is always rewritten as a whole through a temporary sibling file, so
a failed write never leaves a partial table behind. Reading is strict about
structure (header, four fields per row, integer sizes) but tolerates blank
lines.

File names that are not valid in the table encoding round-trip as their
raw bytes.

Functions:
    write_table: Serialize records, replacing any existing table
    read_table: Parse a table back into records
"""

from __future__ import annotations

import csv
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from ..core.types import TABLE_HEADER, FileRecord
from ..utils.error_handling import IndexNotFoundError, IndexReadError, PersistenceError, wrap_os_error
from ..utils.helpers import atomic_write_text

# Undecodable file names come from os.scandir as lone surrogates; they are
# written back as their original bytes.
TABLE_ERRORS = "surrogateescape"


@dataclass(slots=True)
class TableContents:
    records: list[FileRecord] = field(default_factory=list)
    has_header: bool = False
    rows_skipped: int = 0


def write_table(records: Iterable[FileRecord], path: str | Path, encoding: str = "utf-8") -> int:
    """
    Write ``records`` to ``path`` with a header row.

    Returns:
        Number of data rows written

    Raises:
        PersistenceError: If the destination cannot be created or written
    """
    path = Path(path)
    count = 0

    def write(f: TextIO) -> None:
        nonlocal count
        writer = csv.writer(f, lineterminator="\n")
        # The minimal writer only quotes characters of its line terminator,
        # so rows holding a carriage return are fully quoted.
        quoted = csv.writer(f, lineterminator="\n", quoting=csv.QUOTE_ALL)
        writer.writerow(TABLE_HEADER)
        for record in records:
            row = record.to_row()
            if any("\r" in value for value in row):
                quoted.writerow(row)
            else:
                writer.writerow(row)
            count += 1

    try:
        atomic_write_text(path, write, encoding=encoding, errors=TABLE_ERRORS)
    except OSError as e:
        raise wrap_os_error(e, path, "write index table", PersistenceError) from e
    except UnicodeEncodeError as e:
        raise PersistenceError(
            f"Cannot encode index table {path} as {encoding}: {e.reason}",
            path,
            context={"operation": "write index table", "cause": type(e).__name__},
        ) from e
    return count


def _parse_row(row: list[str], path: Path, line_number: int) -> FileRecord:
    if len(row) != len(TABLE_HEADER):
        raise IndexReadError(
            f"Malformed index row: expected {len(TABLE_HEADER)} fields, got {len(row)}",
            path,
            line_number=line_number,
        )
    name, size_text, content_type, file_path = row
    if not (size_text.isascii() and size_text.isdigit()):
        raise IndexReadError(
            f"Malformed index row: invalid size {size_text!r}",
            path,
            line_number=line_number,
        )
    return FileRecord(name=name, size=int(size_text), content_type=content_type, path=file_path)


def read_table(path: str | Path, encoding: str = "utf-8") -> TableContents:
    """
    Load an index table.

    A file with no lines at all, or with only the header, yields no records.
    Blank rows are skipped and counted in ``rows_skipped``.

    Raises:
        IndexNotFoundError: If the table does not exist
        IndexReadError: If the table cannot be read or is malformed
    """
    path = Path(path)
    contents = TableContents()
    line_number = 0

    try:
        with open(path, encoding=encoding, errors=TABLE_ERRORS, newline="") as f:
            reader = csv.reader(f, strict=True)
            for row in reader:
                line_number = reader.line_num
                if not row:
                    contents.rows_skipped += 1
                    continue
                if not contents.has_header:
                    if tuple(row) != TABLE_HEADER:
                        raise IndexReadError(
                            f"Not an index table: unexpected header {row!r}",
                            path,
                            line_number=line_number,
                        )
                    contents.has_header = True
                    continue
                contents.records.append(_parse_row(row, path, line_number))
    except FileNotFoundError as e:
        raise IndexNotFoundError(
            f"Index file {path} does not exist",
            path,
            context={"cause": type(e).__name__},
        ) from e
    except UnicodeDecodeError as e:
        raise IndexReadError(
            f"Index file {path} is not valid {encoding}",
            path,
            context={"cause": type(e).__name__},
        ) from e
    except csv.Error as e:
        raise IndexReadError(
            f"Failed to parse index file {path}: {e}",
            path,
            line_number=line_number + 1,
            context={"cause": type(e).__name__},
        ) from e
    except OSError as e:
        raise IndexReadError(
            f"Failed to read index file {path}: {e.strerror or e}",
            path,
            context={"cause": type(e).__name__, "errno": e.errno},
        ) from e

    return contents
