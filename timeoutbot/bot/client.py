"""
TimeoutBot — discord.py bot client.

Manages the bot lifecycle:
- Requests only the gateway intents the commands need
- Accepts text commands by @mention (and an optional prefix)
- Loads command cogs (ModerationCog, AdminCog)
- Optionally syncs slash commands at startup (dev guild or global)
"""

from __future__ import annotations

import discord
from discord.ext import commands

from timeoutbot.bot.runtime import sync_command_tree
from timeoutbot.config.logging import get_logger
from timeoutbot.config.settings import Settings

logger = get_logger(__name__)


def build_intents() -> discord.Intents:
    """
    Minimal intents: guild metadata for member lookups, and message events so
    the mention-prefixed `register` command can be received. Message content is
    not needed because mentions of the bot always include it.
    """
    intents = discord.Intents.none()
    intents.guilds = True
    intents.guild_messages = True
    intents.dm_messages = True
    return intents


def build_command_prefix(prefix: str):
    """Return a prefix callable that accepts @mentions, plus `prefix` if set."""
    if prefix:
        return commands.when_mentioned_or(prefix)
    return commands.when_mentioned


class TimeoutBot(commands.Bot):
    """
    Discord moderation bot exposing /timeout and `register`.

    Args:
        settings: Full application settings (token, bot options, logging)
    """

    def __init__(self, settings: Settings) -> None:
        super().__init__(
            command_prefix=build_command_prefix(settings.bot.command_prefix),
            intents=build_intents(),
            owner_ids=set(settings.bot.owner_ids) or None,
            help_command=None,
        )
        self.settings = settings

    async def setup_hook(self) -> None:
        """
        Called after login, before connecting to the Gateway.

        Loads cogs and, if configured, syncs slash commands.
        """
        from timeoutbot.bot.cogs.admin import AdminCog
        from timeoutbot.bot.cogs.moderation import ModerationCog
        await self.add_cog(ModerationCog(self))
        await self.add_cog(AdminCog(self))
        logger.info("Cogs loaded")

        await self.sync_on_startup()

    async def sync_on_startup(self) -> None:
        """Sync slash commands if BOT__DEV_GUILD_ID or BOT__SYNC_ON_STARTUP is set."""
        dev_guild_id = self.settings.bot.dev_guild_id
        if dev_guild_id is None and not self.settings.bot.sync_on_startup:
            logger.info("Slash commands not synced at startup; use the `register` command")
            return

        try:
            names = await sync_command_tree(self, dev_guild_id)
            if dev_guild_id is not None:
                logger.info(f"Slash commands synced to dev guild {dev_guild_id} (instant): {names}")
            else:
                logger.info("Slash commands synced globally (may take up to 1 hour to propagate)")
        except discord.errors.Forbidden:
            logger.warning(
                "Could not sync slash commands (403 Forbidden). "
                "The bot is missing the 'applications.commands' OAuth2 scope. "
                "Re-invite the bot with both 'bot' and 'applications.commands' scopes."
            )
        except discord.HTTPException as e:
            logger.warning(f"Slash command sync failed: {e}. The bot will still start.")

    async def on_ready(self) -> None:
        """Called when the bot successfully connects to Discord."""
        logger.info(f"Logged in as {self.user} (id: {self.user.id})")
        logger.info(f"Connected to {len(self.guilds)} guild(s)")

    async def on_command_error(self, ctx: commands.Context, error: commands.CommandError) -> None:
        """Log text-command failures; non-owners trying `register` are ignored."""
        if isinstance(error, (commands.CommandNotFound, commands.NotOwner)):
            logger.debug(f"Ignored command error from {ctx.author}: {error}")
            return
        await super().on_command_error(ctx, error)
