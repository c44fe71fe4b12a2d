"""Tests for findex.utils.logging_config module."""

import json
import logging

from findex.utils.logging_config import (
    IndexLogger,
    JsonFormatter,
    LogFormat,
    LogLevel,
    StructuredFormatter,
    configure_cli_logging,
    configure_logging,
    get_logger,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("findex", logging.INFO, __file__, 10, "hello %s", ("world",), None)
    record.__dict__.update(extra)
    return record


class TestFormatters:
    def test_json_formatter_includes_extra(self):
        out = json.loads(JsonFormatter().format(_record(operation="index_written", file_count=3)))
        assert out["message"] == "hello world"
        assert out["level"] == "INFO"
        assert out["logger"] == "findex"
        assert out["operation"] == "index_written"
        assert out["file_count"] == 3
        assert "args" not in out

    def test_structured_formatter_appends_pairs(self):
        line = StructuredFormatter().format(_record(file_path="a/b.txt"))
        assert "[INFO] findex: hello world" in line
        assert line.endswith("| file_path=a/b.txt")

    def test_structured_formatter_with_fmt(self):
        line = StructuredFormatter("%(levelname)s %(message)s").format(_record(size=4))
        assert line == "INFO hello world | size=4"


class TestIndexLogger:
    def test_console_handler(self):
        lg = IndexLogger(name="findex.tests.console")
        assert len(lg.logger.handlers) == 1
        assert isinstance(lg.logger.handlers[0], logging.StreamHandler)

    def test_no_handlers(self):
        assert IndexLogger(name="findex.tests.none", enable_console=False).logger.handlers == []

    def test_reconfigure_replaces_handlers(self):
        IndexLogger(name="findex.tests.twice")
        lg = IndexLogger(name="findex.tests.twice")
        assert len(lg.logger.handlers) == 1

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "findex.log"
        lg = IndexLogger(
            name="findex.tests.file",
            format_type=LogFormat.JSON,
            log_file=log_file,
            enable_console=False,
            enable_file=True,
        )
        lg.log_index_written("index.csv", 2, 1.5, root="data")
        for handler in lg.logger.handlers:
            handler.close()

        entry = json.loads(log_file.read_text(encoding="utf-8").strip())
        assert entry["operation"] == "index_written"
        assert entry["file_count"] == 2
        assert entry["root"] == "data"
        assert entry["message"] == "Successfully created index file: index.csv (2 files, 1.50ms)"

    def test_debug_events_filtered_at_info(self, quiet_logger, caplog):
        with caplog.at_level(logging.INFO, logger="findex.tests"):
            quiet_logger.log_file_indexed("data/a.txt", "a.txt", 3, "text/plain; charset=utf-8")
        assert caplog.records == []

    def test_file_indexed_at_debug(self, caplog):
        lg = IndexLogger(name="findex.tests.debug", level=LogLevel.DEBUG, enable_console=False)
        with caplog.at_level(logging.DEBUG, logger="findex.tests.debug"):
            lg.log_file_indexed("data/a.txt", "a.txt", 3, "text/plain; charset=utf-8")
        (record,) = caplog.records
        assert record.file_path == "data/a.txt"
        assert record.file_name == "a.txt"
        assert record.size == 3


class TestGlobalLogger:
    def test_get_logger_is_cached(self):
        assert get_logger() is get_logger()

    def test_configure_logging_sets_default(self):
        lg = configure_logging(level=LogLevel.WARNING, enable_console=False)
        assert get_logger() is lg
        assert lg.logger.level == logging.WARNING

    def test_cli_preset_verbose(self):
        lg = configure_cli_logging(verbose=True)
        assert lg.level == LogLevel.DEBUG
        assert lg.format_type == LogFormat.DETAILED

    def test_cli_preset_quiet(self):
        lg = configure_cli_logging(verbose=False)
        assert lg.level == LogLevel.INFO
        assert lg.format_type == LogFormat.JSON

    def test_cli_preset_override(self):
        assert configure_cli_logging(verbose=False, format_type=LogFormat.SIMPLE).format_type == LogFormat.SIMPLE
