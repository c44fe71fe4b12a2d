"""
Output formatting for findex.

Renders index summaries and search matches for the command line in one of
three formats:

    - TEXT: one line per match, ``[name size type path]``; the summary is a
      single ``key=value`` line
    - JSON: orjson-encoded objects for programmatic use
    - TABLE: rich tables on the console

Functions:
    format_search_result / format_index_result: Render to a string
    render_search_table / render_index_table: Print rich tables
    to_json_bytes: Serialize a result with orjson
"""

from __future__ import annotations

from dataclasses import asdict

import orjson
from rich.console import Console
from rich.table import Table

from ..core.types import FileRecord, IndexResult, OutputFormat, SearchResult, TABLE_HEADER


def display_text(value: str) -> str:
    """Replace undecodable file name bytes (lone surrogates) with U+FFFD."""
    return value.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def record_to_dict(record: FileRecord) -> dict[str, object]:
    return {
        "name": display_text(record.name),
        "size": record.size,
        "type": record.content_type,
        "path": display_text(record.path),
    }


def to_json_bytes(result: SearchResult | IndexResult) -> bytes:
    """Serialize a search or index result with orjson (indented)."""
    if isinstance(result, SearchResult):
        payload = {
            "query": display_text(result.query),
            "index": str(result.index_path),
            "matches": [record_to_dict(r) for r in result.records],
            "empty_index": result.is_empty_index,
            "stats": asdict(result.stats),
        }
    else:
        payload = {
            "index": str(result.index_path),
            "file_count": len(result.records),
            "stats": asdict(result.stats),
        }
    return orjson.dumps(payload, option=orjson.OPT_INDENT_2)


def format_record(record: FileRecord) -> str:
    return f"[{display_text(record.name)} {record.size} {record.content_type} {display_text(record.path)}]"


def format_search_text(result: SearchResult) -> str:
    return "\n".join(format_record(r) for r in result.records)


def format_index_text(result: IndexResult) -> str:
    s = result.stats
    return (
        f"index={result.index_path} file_count={len(result.records)} "
        f"dirs_visited={s.dirs_visited} skipped={s.entries_skipped} elapsed_ms={s.elapsed_ms:.2f}"
    )


def render_search_table(result: SearchResult, console: Console | None = None) -> None:
    if console is None:
        console = Console()
    table = Table(title=f"Matches for '{result.query}' in {result.index_path}")
    for column in TABLE_HEADER:
        table.add_column(column, justify="right" if column == "Size" else "left")
    for r in result.records:
        table.add_row(display_text(r.name), str(r.size), r.content_type, display_text(r.path))
    console.print(table)
    console.print(f"[dim]matches={result.stats.matches} rows={result.stats.rows_scanned}[/dim]")


def render_index_table(result: IndexResult, console: Console | None = None) -> None:
    if console is None:
        console = Console()
    s = result.stats
    table = Table(title="Index summary", show_header=False)
    table.add_column("key", style="bold")
    table.add_column("value")
    table.add_row("index", str(result.index_path))
    table.add_row("files", str(len(result.records)))
    table.add_row("directories", str(s.dirs_visited))
    table.add_row("skipped", str(s.entries_skipped))
    table.add_row("bytes", str(s.bytes_total))
    table.add_row("elapsed_ms", f"{s.elapsed_ms:.2f}")
    console.print(table)


def format_search_result(result: SearchResult, fmt: OutputFormat) -> str:
    if fmt == OutputFormat.JSON:
        return to_json_bytes(result).decode("utf-8")
    return format_search_text(result)


def format_index_result(result: IndexResult, fmt: OutputFormat) -> str:
    if fmt == OutputFormat.JSON:
        return to_json_bytes(result).decode("utf-8")
    return format_index_text(result)
