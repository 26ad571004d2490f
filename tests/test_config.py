"""
Tests for SolrConfig and configuration file loading.
"""

import json

import pytest

from solrwire.config import SolrConfig, load_config
from solrwire.core.http_client import HttpConnection


@pytest.mark.unit
class TestSolrConfig:
    """Tests for SolrConfig."""

    def test_defaults(self):
        config = SolrConfig()
        assert config.base_url == "http://localhost:8983/solr"
        assert config.timeout == 30.0
        assert config.schema_file == "schema.xml"
        assert config.log_level == "INFO"
        assert config.log_file is None

    def test_from_dict(self):
        config = SolrConfig.from_dict({
            "base_url": "https://search.example.org/solr/books",
            "timeout": 5,
            "log_level": "debug",
        })
        assert config.base_url == "https://search.example.org/solr/books"
        assert config.timeout == 5.0
        assert config.log_level == "DEBUG"

    def test_from_dict_none(self):
        assert SolrConfig.from_dict(None) == SolrConfig()

    def test_invalid_values(self):
        with pytest.raises(ValueError, match="http"):
            SolrConfig(base_url="localhost:8983")
        with pytest.raises(ValueError, match="timeout must be positive"):
            SolrConfig(timeout=0)
        with pytest.raises(ValueError, match="log_level"):
            SolrConfig(log_level="VERBOSE")

    def test_create_connection(self):
        connection = SolrConfig(base_url="http://solr:8983/solr/core0", timeout=3).create_connection()
        assert isinstance(connection, HttpConnection)
        assert connection.base_url == "http://solr:8983/solr/core0"
        assert connection.timeout == 3


@pytest.mark.unit
class TestLoadConfig:
    """Tests for JSON configuration files."""

    def test_from_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"base_url": "http://solr:8983/solr/core1", "schema_file": "managed-schema.xml"}))
        config = SolrConfig.from_file(str(path))
        assert config.base_url == "http://solr:8983/solr/core1"
        assert config.schema_file == "managed-schema.xml"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            load_config(str(tmp_path / "absent.json"))

    def test_wrong_extension(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("base_url: x")
        with pytest.raises(ValueError, match=".json"):
            load_config(str(path))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_config(str(path))

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")
        with pytest.raises(ValueError, match="JSON object"):
            load_config(str(path))

    def test_empty_path(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            load_config("")
