"""
Command-line interface for findex.

The ``findex`` console script and ``python -m findex`` both dispatch to
``main``.
"""

from .main import cli, main

__all__ = [
    "cli",
    "main",
]
