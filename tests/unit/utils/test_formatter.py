"""Tests for findex.utils.formatter module."""

from pathlib import Path

import orjson
from rich.console import Console

from findex.core.types import FileRecord, IndexResult, IndexStats, OutputFormat, SearchResult, SearchStats
from findex.utils.error_handling import EmptyIndexWarning
from findex.utils.formatter import (
    format_index_result,
    format_record,
    format_search_result,
    display_text,
    record_to_dict,
    render_index_table,
    render_search_table,
    to_json_bytes,
)

RECORDS = [
    FileRecord("user1.json", 16, "application/octet-stream", "data/user1.json"),
    FileRecord("user2.json", 17, "application/octet-stream", "data/user2.json"),
]


def _search_result(records=RECORDS, warning=None) -> SearchResult:
    return SearchResult(
        query="json",
        records=list(records),
        index_path=Path("index.csv"),
        stats=SearchStats(rows_scanned=2, matches=len(records)),
        warning=warning,
    )


def _index_result() -> IndexResult:
    return IndexResult(
        records=list(RECORDS),
        index_path=Path("out/index.csv"),
        stats=IndexStats(files_indexed=2, dirs_visited=1, entries_skipped=1, bytes_total=33, elapsed_ms=1.234),
    )


class TestText:
    def test_format_record(self):
        assert format_record(RECORDS[0]) == "[user1.json 16 application/octet-stream data/user1.json]"

    def test_search_lines(self):
        assert format_search_result(_search_result(), OutputFormat.TEXT).splitlines() == [
            "[user1.json 16 application/octet-stream data/user1.json]",
            "[user2.json 17 application/octet-stream data/user2.json]",
        ]

    def test_no_matches_is_empty_string(self):
        assert format_search_result(_search_result(records=[]), OutputFormat.TEXT) == ""

    def test_index_summary(self):
        assert format_index_result(_index_result(), OutputFormat.TEXT) == (
            "index=out/index.csv file_count=2 dirs_visited=1 skipped=1 elapsed_ms=1.23"
        )


class TestDisplayText:
    def test_plain_names_unchanged(self):
        assert display_text("café.md") == "café.md"

    def test_undecodable_bytes_replaced(self):
        name = b"caf\xe9.txt".decode("utf-8", "surrogateescape")
        record = FileRecord(name, 5, "text/plain; charset=utf-8", "data/" + name)

        assert format_record(record) == "[caf\ufffd.txt 5 text/plain; charset=utf-8 data/caf\ufffd.txt]"
        assert orjson.loads(orjson.dumps(record_to_dict(record)))["name"] == "caf\ufffd.txt"


class TestJson:
    def test_record_keys(self):
        assert record_to_dict(RECORDS[0]) == {
            "name": "user1.json",
            "size": 16,
            "type": "application/octet-stream",
            "path": "data/user1.json",
        }

    def test_search_payload(self):
        payload = orjson.loads(to_json_bytes(_search_result()))
        assert payload["query"] == "json"
        assert payload["index"] == "index.csv"
        assert [m["name"] for m in payload["matches"]] == ["user1.json", "user2.json"]
        assert payload["empty_index"] is False
        assert payload["stats"]["matches"] == 2

    def test_empty_index_flag(self):
        result = _search_result(records=[], warning=EmptyIndexWarning("empty", Path("index.csv")))
        payload = orjson.loads(format_search_result(result, OutputFormat.JSON))
        assert payload["empty_index"] is True
        assert payload["matches"] == []

    def test_index_payload(self):
        payload = orjson.loads(format_index_result(_index_result(), OutputFormat.JSON))
        assert payload["index"] == "out/index.csv"
        assert payload["file_count"] == 2
        assert payload["stats"]["bytes_total"] == 33


class TestTables:
    def test_search_table(self):
        console = Console(record=True, width=200)
        render_search_table(_search_result(), console)
        out = console.export_text()
        for column in ("Name", "Size", "Type", "Path"):
            assert column in out
        assert "user2.json" in out
        assert "matches=2 rows=2" in out

    def test_index_table(self):
        console = Console(record=True, width=120)
        render_index_table(_index_result(), console)
        out = console.export_text()
        assert "out/index.csv" in out
        assert "33" in out
