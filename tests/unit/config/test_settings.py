"""
Tests for settings loading and the token precondition.

Every test runs in an empty temporary directory so a developer's own .env
file cannot leak in.
"""

import pytest

from timeoutbot.config.settings import Settings, load_settings
from timeoutbot.errors import ConfigurationError

_ENV_VARS = ("TOKEN", "LOG_LEVEL", "LOG_FILE", "ENVIRONMENT", "BOT__OWNER_IDS",
             "BOT__COMMAND_PREFIX", "BOT__DEV_GUILD_ID", "BOT__SYNC_ON_STARTUP")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class TestLoadSettings:
    def test_token_read_from_environment(self, monkeypatch):
        monkeypatch.setenv("TOKEN", "abc.def.ghi")
        settings = load_settings()
        assert settings.token == "abc.def.ghi"
        assert settings.require_token() == "abc.def.ghi"

    def test_token_read_from_env_file(self, tmp_path):
        env_file = tmp_path / "bot.env"
        env_file.write_text("TOKEN=from-file\nLOG_LEVEL=DEBUG\n")

        settings = load_settings(env_file=env_file)

        assert settings.token == "from-file"
        assert settings.log_level == "DEBUG"

    def test_defaults(self):
        settings = load_settings()
        assert settings.token == ""
        assert settings.log_level == "INFO"
        assert settings.bot.command_prefix == ""
        assert settings.bot.owner_ids == []
        assert settings.bot.dev_guild_id is None
        assert settings.bot.sync_on_startup is False

    def test_nested_bot_settings(self, monkeypatch):
        monkeypatch.setenv("BOT__OWNER_IDS", "[1, 2]")
        monkeypatch.setenv("BOT__DEV_GUILD_ID", "999")
        settings = load_settings()
        assert settings.bot.owner_ids == [1, 2]
        assert settings.bot.dev_guild_id == 999

    def test_invalid_value_raises_configuration_error(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        with pytest.raises(ConfigurationError):
            load_settings()

    def test_missing_env_file_raises_configuration_error(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_settings(env_file=tmp_path / "nope.env")


class TestRequireToken:
    def test_missing_token(self):
        with pytest.raises(ConfigurationError, match="TOKEN"):
            Settings(_env_file=None).require_token()

    def test_blank_token(self):
        with pytest.raises(ConfigurationError):
            Settings(_env_file=None, token="   ").require_token()

    def test_surrounding_whitespace_is_stripped(self):
        assert Settings(_env_file=None, token=" tok \n").require_token() == "tok"
