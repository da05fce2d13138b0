"""Unit tests for configuration loading."""

import pytest
import yaml

from stackmap.config import StackmapConfig, config_path, load_config, write_config
from stackmap.core.exceptions import ConfigError


class TestLoadConfig:

    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "config.yaml")
        assert config == StackmapConfig()
        assert config.catalog.path == ".stackmap/seed.json"
        assert config.search.cap == 12
        assert config.rules.default_rule_id == "R2"
        assert config.rules.weights.app_type == 10

    def test_partial_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("search:\n  cap: 5\nrules:\n  weights:\n    budget: 7\n")

        config = load_config(path)

        assert config.search.cap == 5
        assert config.search.min_query_length == 2
        assert config.rules.weights.budget == 7
        assert config.rules.weights.needs_rag == 5

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == StackmapConfig()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("search: [unclosed")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_bytes(b"catalog:\n  path: \xff\xfe\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError) as exc:
            load_config(path)
        assert "mapping" in str(exc.value)

    def test_validation_error(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("search:\n  cap: 0\n")
        with pytest.raises(ConfigError):
            load_config(path)


class TestWriteConfig:

    def test_write_and_reload(self, tmp_path):
        path = config_path(tmp_path)
        written = write_config(StackmapConfig(), path)

        assert written == tmp_path / ".stackmap" / "config.yaml"
        data = yaml.safe_load(written.read_text())
        assert data["catalog"]["path"] == ".stackmap/seed.json"
        assert data["rules"]["builder_keywords"] == ["builder", "lovable", "bolt"]
        assert load_config(written) == StackmapConfig()
