"""Tests for Config Pydantic Settings."""

from pathlib import Path

import pydantic
import pytest

from pkgsearch.config import Config, SessionBackend, SessionConfig


class TestConfigDefaults:
    def test_defaults(self):
        config = Config()

        assert config.session.backend is SessionBackend.MEMORY
        assert config.session.ttl_seconds == 900
        assert config.catalog.url.endswith("/the-channel/channel.json")
        assert config.discord.public_key == ""

    def test_env_prefix_is_pkgsearch(self):
        assert Config.model_config.get("env_prefix") == "PKGSEARCH_"


class TestConfigSources:
    """Tests for environment and YAML overrides."""

    def test_nested_env_override(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("PKGSEARCH_SESSION__BACKEND", "redis")
        monkeypatch.setenv("PKGSEARCH_SESSION__TTL_SECONDS", "60")

        config = Config()

        assert config.session.backend is SessionBackend.REDIS
        assert config.session.ttl_seconds == 60

    def test_yaml_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        config_file = tmp_path / "pkgsearch.yaml"
        config_file.write_text(
            "catalog:\n"
            "  url: https://mirror.example.com/channel.json\n"
            "discord:\n"
            "  application_id: '123'\n"
        )
        monkeypatch.setenv("PKGSEARCH_CONFIG_FILE", str(config_file))

        config = Config()

        assert config.catalog.url == "https://mirror.example.com/channel.json"
        assert config.discord.application_id == "123"

    def test_env_beats_yaml(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        config_file = tmp_path / "pkgsearch.yaml"
        config_file.write_text("logging:\n  level: DEBUG\n")
        monkeypatch.setenv("PKGSEARCH_CONFIG_FILE", str(config_file))
        monkeypatch.setenv("PKGSEARCH_LOGGING__LEVEL", "WARNING")

        assert Config().logging.level == "WARNING"

    def test_missing_yaml_file_is_ignored(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        monkeypatch.setenv("PKGSEARCH_CONFIG_FILE", str(tmp_path / "missing.yaml"))

        assert Config().session.ttl_seconds == 900


class TestSessionConfig:
    def test_ttl_must_be_positive(self):
        with pytest.raises(pydantic.ValidationError):
            SessionConfig(ttl_seconds=0)
