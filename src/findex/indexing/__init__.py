"""
Directory indexing and the persisted index table.

- Traversal and per-file metadata extraction
- CSV serialization of index records
"""

from .indexer import Indexer, build_index
from .table import TableContents, read_table, write_table

__all__ = [
    "Indexer",
    "build_index",
    "TableContents",
    "read_table",
    "write_table",
]
