"""
Name lookups against a persisted index table.
"""

from .matchers import filter_by_name, name_matches
from .searcher import Searcher, search

__all__ = [
    "Searcher",
    "search",
    "filter_by_name",
    "name_matches",
]
