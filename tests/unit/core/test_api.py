"""Tests for findex.core.api and the package-level entry points."""

from __future__ import annotations

import findex
from findex import FileIndex, IndexConfig, build_index, search_index
from findex.search.searcher import search
from findex.utils import logging_config

import pytest


class TestFileIndex:
    def test_build_then_search(self, json_tree, index_config, quiet_logger):
        fi = FileIndex(index_config, logger=quiet_logger)

        built = fi.build(json_tree)
        assert built.stats.files_indexed == 2
        assert built.index_path == index_config.resolve_index_path()

        result = fi.search("user1")
        assert [r.name for r in result] == ["user1.json"]

    def test_build_and_search(self, json_tree, index_config, quiet_logger):
        built, result = FileIndex(index_config, logger=quiet_logger).build_and_search(json_tree, "json")
        assert len(result) == len(built.records) == 2

    def test_search_results_equal_indexed_records(self, nested_tree, index_config, quiet_logger):
        fi = FileIndex(index_config, logger=quiet_logger)
        built = fi.build(nested_tree)
        assert fi.search("").records == built.records

    def test_search_before_build(self, index_config, quiet_logger):
        with pytest.raises(findex.IndexNotFoundError):
            FileIndex(index_config, logger=quiet_logger).search("x")

    def test_invalid_config_rejected(self):
        with pytest.raises(findex.ConfigurationError):
            FileIndex(IndexConfig(exclude_prefix=""))

    def test_default_logger(self, index_config):
        fi = FileIndex(index_config)
        assert fi.logger is logging_config.get_logger()


class TestPackageExports:
    def test_entry_points(self, json_tree, index_config, quiet_logger):
        records = build_index(json_tree, index_config, quiet_logger)
        result = search_index(index_config.resolve_index_path(), "json", quiet_logger)
        assert result.records == records

    def test_search_entry_point_is_callable(self, json_tree, index_config, quiet_logger):
        assert findex.search_index is search
        build_index(json_tree, index_config, quiet_logger)
        result = findex.search_index(index_config.resolve_index_path(), "json", logger=quiet_logger)
        assert [r.name for r in result] == ["user1.json", "user2.json"]

    def test_version(self):
        assert findex.__version__ == "0.1.0"

    def test_all_names_exist(self):
        for name in findex.__all__:
            assert hasattr(findex, name), name
