"""Tests for findex.core.config module."""

from pathlib import Path

import pytest

from findex.analysis.content_sniffing import SNIFF_LEN
from findex.core.config import DEFAULT_INDEX_FILE, IndexConfig
from findex.utils.error_handling import ConfigurationError, ErrorCategory


class TestIndexConfig:
    def test_defaults(self):
        cfg = IndexConfig()
        assert cfg.index_path == DEFAULT_INDEX_FILE == "index.csv"
        assert cfg.encoding == "utf-8"
        assert cfg.sample_size == SNIFF_LEN == 512
        assert cfg.pad_sample is True
        assert cfg.exclude_prefix == ".git"
        assert cfg.sort_entries is True
        assert cfg.follow_symlinks is False
        cfg.validate()

    def test_resolve_index_path(self, tmp_path: Path):
        assert IndexConfig(index_path=str(tmp_path / "i.csv")).resolve_index_path() == tmp_path / "i.csv"
        assert IndexConfig().resolve_index_path() == Path("index.csv")

    @pytest.mark.parametrize(
        "kwargs, field",
        [
            ({"index_path": ""}, "index_path"),
            ({"sample_size": 0}, "sample_size"),
            ({"sample_size": -5}, "sample_size"),
            ({"exclude_prefix": ""}, "exclude_prefix"),
            ({"encoding": "not-a-codec"}, "encoding"),
        ],
    )
    def test_invalid_values(self, kwargs, field):
        with pytest.raises(ConfigurationError) as exc_info:
            IndexConfig(**kwargs).validate()
        assert exc_info.value.category == ErrorCategory.CONFIGURATION
        assert exc_info.value.context["field"] == field

    def test_unknown_encoding_keeps_cause(self):
        with pytest.raises(ConfigurationError) as exc_info:
            IndexConfig(encoding="nope").validate()
        assert isinstance(exc_info.value.__cause__, LookupError)
