"""
CLI entry point for findex.

This module serves as the entry point when findex.cli is executed as a module
with `python -m findex.cli`.
"""

from .main import main

if __name__ == "__main__":
    main()
