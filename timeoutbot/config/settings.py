"""
Application settings and configuration management.

Uses Pydantic Settings for validation and environment variable support.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict, SettingsError

from timeoutbot.errors import ConfigurationError


class BotSettings(BaseSettings):
    """Discord bot configuration."""

    name: str = Field(default="timeoutbot", description="Bot display name")
    command_prefix: str = Field(
        default="",
        description="Prefix for text commands such as `register`. "
                    "Empty means the bot only answers to @mentions.",
    )
    owner_ids: list[int] = Field(
        default_factory=list,
        description="User IDs allowed to run owner-only commands. "
                    "If empty, the application owner (or team) is used. "
                    "Set via BOT__OWNER_IDS='[123456,789012]'",
    )
    dev_guild_id: int | None = Field(
        default=None,
        description="If set, syncs slash commands to this guild on startup (dev mode).",
    )
    sync_on_startup: bool = Field(
        default=False,
        description="Sync slash commands globally on startup "
                    "(up to 1 hour propagation). Otherwise use the `register` command.",
    )

    model_config = SettingsConfigDict(env_prefix="BOT__")


class Settings(BaseSettings):
    """Main application settings."""

    # Discord bot token, read from TOKEN
    token: str = Field(default="", description="Discord bot token")

    # Environment
    environment: Literal["development", "production"] = Field(
        default="development", description="Deployment environment"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    log_file: Path | None = Field(default=None, description="Log file path")

    bot: BotSettings = Field(default_factory=BotSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    def require_token(self) -> str:
        """
        Return the bot token.

        Raises:
            ConfigurationError: If TOKEN is unset or blank
        """
        token = self.token.strip()
        if not token:
            raise ConfigurationError(
                "Discord bot token not set. Add TOKEN=<your-token> to the environment or your .env file."
            )
        return token


def load_settings(env_file: str | Path | None = None) -> Settings:
    """
    Load settings from file and environment.

    Args:
        env_file: Path to .env file (optional)

    Returns:
        Loaded settings instance

    Raises:
        ConfigurationError: If a value fails validation, or env_file does not exist
    """
    if env_file is not None and not Path(env_file).is_file():
        raise ConfigurationError(f"Env file not found: {env_file}")

    try:
        if env_file:
            return Settings(_env_file=env_file)
        return Settings()
    except (ValidationError, SettingsError) as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
