"""
Unit Tests for Config
=====================

Test Coverage
-------------
- Environment parsing
- Boolean and string helpers
- Validation behaviour per environment
- Fallbacks for unreadable values
"""

import logging

import pytest

from src.core.config import Config, Environment
from src.modules.commands import Unknown, parse_command


@pytest.mark.unit
class TestEnvironment:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("production", Environment.PRODUCTION),
            ("  TESTING ", Environment.TESTING),
            ("bogus", Environment.DEVELOPMENT),
        ],
    )
    def test_from_string(self, raw, expected):
        assert Environment.from_string(raw) == expected


@pytest.mark.unit
class TestConfigLoad:
    def test_load_reads_environment(self, isolated_config, monkeypatch):
        monkeypatch.setenv("DISCORD_TOKEN", "token-123")
        monkeypatch.setenv("DEBUG", "yes")
        monkeypatch.setenv("LOG_JSON", "false")
        monkeypatch.setenv("ENVIRONMENT", "testing")

        isolated_config.validate()

        assert Config.DISCORD_TOKEN == "token-123"
        assert Config.DEBUG is True
        assert Config.LOG_JSON is False
        assert Config.is_testing()

    def test_unset_log_json_means_auto(self, isolated_config, monkeypatch):
        monkeypatch.delenv("LOG_JSON", raising=False)

        isolated_config.load()

        assert Config.LOG_JSON is None

    def test_invalid_log_level_falls_back_to_info(self, isolated_config, monkeypatch):
        monkeypatch.setenv("DISCORD_TOKEN", "token-123")
        monkeypatch.setenv("LOG_LEVEL", "LOUD")

        isolated_config.validate()

        assert Config.LOG_LEVEL == "INFO"

    def test_missing_token_tolerated_outside_production(self, isolated_config, monkeypatch):
        monkeypatch.delenv("DISCORD_TOKEN", raising=False)
        monkeypatch.setenv("ENVIRONMENT", "development")

        isolated_config.validate()

        assert Config.DISCORD_TOKEN == ""

    def test_missing_token_fails_in_production(self, isolated_config, monkeypatch):
        monkeypatch.delenv("DISCORD_TOKEN", raising=False)
        monkeypatch.setenv("ENVIRONMENT", "production")

        with pytest.raises(ValueError, match="DISCORD_TOKEN"):
            isolated_config.validate()

    def test_padded_production_name_still_enforces_token(self, isolated_config, monkeypatch):
        monkeypatch.delenv("DISCORD_TOKEN", raising=False)
        monkeypatch.setenv("ENVIRONMENT", "Production ")

        with pytest.raises(ValueError, match="DISCORD_TOKEN"):
            isolated_config.validate()

        assert Config.ENVIRONMENT == "production"

    def test_command_prefix_is_not_a_setting(self, isolated_config, monkeypatch):
        monkeypatch.setenv("COMMAND_PREFIX", "!")

        isolated_config.load()

        assert not hasattr(Config, "COMMAND_PREFIX")
        assert parse_command("!steps 100") == Unknown(text="!steps 100")

    def test_queue_size_below_minimum_uses_default(self, isolated_config, monkeypatch, caplog):
        monkeypatch.setenv("LOG_QUEUE_SIZE", "5")

        with caplog.at_level(logging.WARNING):
            isolated_config.load()

        assert Config.LOG_QUEUE_SIZE == 10_000
        assert any("LOG_QUEUE_SIZE" in record.getMessage() for record in caplog.records)

    def test_unparsable_queue_size_uses_default(self, isolated_config, monkeypatch):
        monkeypatch.setenv("LOG_QUEUE_SIZE", "lots")

        isolated_config.load()

        assert Config.LOG_QUEUE_SIZE == 10_000

    def test_unreadable_flag_keeps_default(self, isolated_config, monkeypatch):
        monkeypatch.setenv("LOG_COLORS", "maybe")

        isolated_config.load()

        assert Config.LOG_COLORS is True

    def test_queue_size_from_environment(self, isolated_config, monkeypatch):
        monkeypatch.setenv("LOG_QUEUE_SIZE", "500")

        isolated_config.load()

        assert Config.LOG_QUEUE_SIZE == 500
