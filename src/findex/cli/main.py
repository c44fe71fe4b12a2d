"""
Command-line interface for findex.

Usage:
    Build an index of a directory:
        $ findex -i -d ./data

    Search an existing index by file name:
        $ findex -s json

    Rebuild, then search, with debug logging:
        $ findex -i -d ./data -s json -v

Valid combinations are index only, search only, and index then search.
``-i`` without ``-d`` and a call with neither ``-i`` nor ``-s`` are usage
errors (exit code 2). Indexing and search failures are reported on stderr
with exit code 1. An index without records is reported as a warning and is
not a failure.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.console import Console

from .. import __version__
from ..core.api import FileIndex
from ..core.config import DEFAULT_INDEX_FILE, IndexConfig
from ..core.types import OutputFormat
from ..utils.error_handling import FileIndexError, format_error_report
from ..utils.formatter import (
    format_index_result,
    format_search_result,
    render_index_table,
    render_search_table,
)
from ..utils.logging_config import LogFormat, configure_cli_logging


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-i", "--index", "do_index", is_flag=True, default=False, help="Build the index.")
@click.option(
    "-d",
    "--directory",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory to index (required with --index).",
)
@click.option("-s", "--search", "query", default=None, help="Find indexed files whose name contains QUERY.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Verbose (debug) logging.")
@click.option(
    "--index-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_INDEX_FILE,
    show_default=True,
    help="Location of the index table.",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice([e.value for e in OutputFormat]),
    default=OutputFormat.TEXT.value,
    show_default=True,
    help="Output format.",
)
@click.option(
    "--log-format",
    type=click.Choice([e.value for e in LogFormat]),
    default=None,
    help="Log format (default: detailed with -v, json otherwise).",
)
@click.option("--log-file", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Also log to this file.")
@click.version_option(__version__, prog_name="findex")
def cli(
    do_index: bool,
    directory: Path | None,
    query: str | None,
    verbose: bool,
    index_file: Path,
    fmt: str,
    log_format: str | None,
    log_file: Path | None,
) -> None:
    """findex - index a directory tree and look files up by name"""
    if do_index and directory is None:
        raise click.UsageError(
            "No directory provided. Use -d/--directory with -i/--index to choose what to index."
        )
    if not do_index and query is None:
        raise click.UsageError(
            "No search query or index flag provided. Use -s/--search and/or -i/--index."
        )

    logger = configure_cli_logging(
        verbose,
        format_type=LogFormat(log_format) if log_format else None,
        log_file=log_file,
    )
    output = OutputFormat(fmt)
    console = Console()

    try:
        engine = FileIndex(IndexConfig(index_path=index_file), logger=logger)

        if do_index:
            built = engine.build(directory)
            if output == OutputFormat.TABLE:
                render_index_table(built, console)
            else:
                click.echo(format_index_result(built, output))

        if query is not None:
            result = engine.search(query)
            if result.warning is not None:
                click.echo(f"Warning: {result.warning.message}", err=True)
            if output == OutputFormat.TABLE:
                render_search_table(result, console)
            elif output == OutputFormat.JSON or result.records:
                click.echo(format_search_result(result, output))
    except FileIndexError as e:
        click.echo(format_error_report(e), err=True)
        sys.exit(1)


def main() -> None:
    cli(prog_name="findex")


if __name__ == "__main__":
    main()
