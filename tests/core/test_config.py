"""Tests for daybook.core.config."""

import json
import os

import pytest
import yaml

from daybook.core.config import Config
from daybook.core.exceptions import ConfigurationError


class TestConfig:
    def test_defaults(self):
        config = Config()
        assert config.get("logging.level") == "WARNING"
        assert config.get_bool("entries.reject_duplicates") is False
        assert config.get_bool("authors.unique_names") is False
        assert config.get("admin.display_name") == "admin"
        assert config.get_bool("seed.demo_data") is True

    def test_yaml_config_file(self, tmp_config_file):
        config = Config(config_file=tmp_config_file)
        assert config.get("logging.level") == "DEBUG"
        assert config.get_bool("entries.reject_duplicates") is True
        assert config.get("admin.password") == "s3cret!"
        # untouched defaults survive the merge
        assert config.get("seed.demo_data") is True

    def test_json_config_file(self, tmp_dir):
        path = os.path.join(tmp_dir, "config.json")
        with open(path, "w") as f:
            json.dump({"authors": {"unique_names": True}}, f)
        config = Config(config_file=path)
        assert config.get_bool("authors.unique_names") is True

    def test_missing_file_raises(self, tmp_dir):
        with pytest.raises(ConfigurationError, match="not found"):
            Config(config_file=os.path.join(tmp_dir, "nope.yaml"))

    def test_unsupported_extension_raises(self, tmp_dir):
        path = os.path.join(tmp_dir, "config.toml")
        with open(path, "w") as f:
            f.write("x = 1\n")
        with pytest.raises(ConfigurationError, match="Unsupported"):
            Config(config_file=path)

    def test_non_mapping_file_raises(self, tmp_dir):
        path = os.path.join(tmp_dir, "config.yaml")
        with open(path, "w") as f:
            yaml.dump(["a", "b"], f)
        with pytest.raises(ConfigurationError, match="mapping"):
            Config(config_file=path)

    def test_env_overrides_file(self, tmp_config_file, monkeypatch):
        monkeypatch.setenv("DAYBOOK_LOGGING__LEVEL", "ERROR")
        config = Config(config_file=tmp_config_file)
        assert config.get("logging.level") == "ERROR"

    def test_env_bool_coercion(self, monkeypatch):
        monkeypatch.setenv("DAYBOOK_ENTRIES__REJECT_DUPLICATES", "yes")
        monkeypatch.setenv("DAYBOOK_SEED__DEMO_DATA", "0")
        config = Config()
        assert config.get_bool("entries.reject_duplicates") is True
        assert config.get_bool("seed.demo_data") is False

    def test_bad_bool_raises(self, monkeypatch):
        monkeypatch.setenv("DAYBOOK_AUTHORS__UNIQUE_NAMES", "maybe")
        config = Config()
        with pytest.raises(ConfigurationError, match="boolean"):
            config.get_bool("authors.unique_names")

    def test_custom_env_prefix(self, monkeypatch):
        monkeypatch.setenv("DIARY_ADMIN__PASSWORD", "hunter22")
        config = Config(env_prefix="DIARY_")
        assert config.get("admin.password") == "hunter22"

    def test_get_missing_key(self):
        config = Config()
        assert config.get("nonexistent.key") is None
        assert config.get("nonexistent.key", "fallback") == "fallback"
