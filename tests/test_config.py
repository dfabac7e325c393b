"""Tests for ndb.config."""

import pytest

from ndb.config import NDB_LOCAL, NdbConfig, load_config
from ndb.errors import ConfigError


class TestLoadConfig:
    def test_defaults(self):
        cfg = load_config({})
        assert cfg.default_path == NDB_LOCAL == "/lib/ndb/local"
        assert cfg.encoding == "utf-8"

    def test_env_overrides(self):
        cfg = load_config({"NDB_FILE": "/tmp/ndb", "NDB_ENCODING": "latin-1"})
        assert cfg.default_path == "/tmp/ndb"
        assert cfg.encoding == "latin-1"

    def test_empty_env_values_ignored(self):
        cfg = load_config({"NDB_FILE": ""})
        assert cfg.default_path == NDB_LOCAL

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("NDB_FILE", "/srv/ndb/local")
        assert load_config().default_path == "/srv/ndb/local"

    def test_strict_rejects_bad_encoding(self):
        with pytest.raises(ConfigError):
            load_config({"NDB_ENCODING": "no-such-codec"}, strict=True)

    def test_lenient_keeps_bad_encoding(self):
        cfg = load_config({"NDB_ENCODING": "no-such-codec"})
        assert cfg.validate() == ["encoding: unknown codec 'no-such-codec'"]


class TestNdbConfig:
    def test_valid(self):
        assert NdbConfig().validate() == []

    def test_empty_path(self):
        assert NdbConfig(default_path="").validate() == [
            "default_path: must not be empty"
        ]
