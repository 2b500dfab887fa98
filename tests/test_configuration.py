"""Tests for engine configuration."""

import json

import pytest
import yaml

from obscurestring.core.config import EngineConfig, get_engine_config, reset_engine_config


class TestEngineConfig:
    """Test EngineConfig defaults and validation."""

    def test_defaults(self):
        config = EngineConfig()

        assert config.cache_enabled is True
        assert config.cache_size == 100
        assert config.async_chunk_size == 10_000
        assert config.input_policy == "empty"

    def test_invalid_values_fall_back(self):
        config = EngineConfig(cache_size=-1, async_chunk_size=0, input_policy="explode")

        assert config.cache_size == 100
        assert config.async_chunk_size == 10_000
        assert config.input_policy == "empty"

    def test_input_policy_is_case_insensitive(self):
        assert EngineConfig(input_policy="REJECT").input_policy == "reject"

    def test_to_dict(self):
        assert EngineConfig(cache_size=5).to_dict() == {
            "cache_enabled": True,
            "cache_size": 5,
            "async_chunk_size": 10_000,
            "input_policy": "empty",
        }


class TestEngineConfigFromEnvironment:
    """Test loading configuration from environment variables."""

    def test_reads_all_variables(self, monkeypatch):
        monkeypatch.setenv("OBSCURESTRING_CACHE_ENABLED", "false")
        monkeypatch.setenv("OBSCURESTRING_CACHE_SIZE", "25")
        monkeypatch.setenv("OBSCURESTRING_ASYNC_CHUNK_SIZE", "500")
        monkeypatch.setenv("OBSCURESTRING_INPUT_POLICY", "coerce")

        config = EngineConfig.from_environment()

        assert config.cache_enabled is False
        assert config.cache_size == 25
        assert config.async_chunk_size == 500
        assert config.input_policy == "coerce"

    @pytest.mark.parametrize("value", ["yes", "1", ""])
    def test_unrecognized_bool_keeps_default(self, monkeypatch, value):
        monkeypatch.setenv("OBSCURESTRING_CACHE_ENABLED", value)
        assert EngineConfig.from_environment().cache_enabled is True

    @pytest.mark.parametrize("value", ["abc", "-3", "0"])
    def test_invalid_int_keeps_default(self, monkeypatch, value):
        monkeypatch.setenv("OBSCURESTRING_CACHE_SIZE", value)
        assert EngineConfig.from_environment().cache_size == 100

    def test_global_config_is_cached_until_reset(self, monkeypatch):
        first = get_engine_config()
        assert get_engine_config() is first

        monkeypatch.setenv("OBSCURESTRING_CACHE_SIZE", "9")
        reset_engine_config()
        assert get_engine_config().cache_size == 9


class TestEngineConfigFromFile:
    """Test loading configuration from YAML and JSON files."""

    def test_yaml_engine_section(self, tmp_path):
        path = tmp_path / "obscurestring.yaml"
        path.write_text(yaml.safe_dump({"engine": {"cache_size": 12, "input_policy": "reject"}}))

        config = EngineConfig.load_from_file(path)

        assert config.cache_size == 12
        assert config.input_policy == "reject"

    def test_json_top_level(self, tmp_path):
        path = tmp_path / "obscurestring.json"
        path.write_text(json.dumps({"cache_enabled": False, "unknown": 1}))

        config = EngineConfig.load_from_file(path)

        assert config.cache_enabled is False

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("")

        assert EngineConfig.load_from_file(path) == EngineConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            EngineConfig.load_from_file(tmp_path / "missing.yaml")

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("cache_size = 3")

        with pytest.raises(ValueError, match="Unsupported config format"):
            EngineConfig.load_from_file(path)
