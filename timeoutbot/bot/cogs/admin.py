"""
AdminCog: owner-only `register` command.

Invoked by mention (or the configured prefix) rather than as a slash command,
so it still works before any slash commands have been registered.
"""

from __future__ import annotations

from discord.ext import commands

from timeoutbot.bot.runtime import BotRuntime, ContextRuntime
from timeoutbot.config.logging import get_logger

logger = get_logger(__name__)


async def register_commands(runtime: BotRuntime, guild_id: int | None) -> list[str]:
    """
    Sync slash commands to `guild_id`, or globally when it is None, and report back.
    """
    scope = f"guild {guild_id}" if guild_id is not None else "all guilds"
    names = await runtime.register_commands(guild_id)
    logger.info(f"Registered {len(names)} slash command(s) for {scope}: {', '.join(names)}")

    await runtime.reply(f"Registered {len(names)} command(s) for {scope}.")
    return names


class AdminCog(commands.Cog):
    """Owner-only maintenance commands."""

    def __init__(self, bot) -> None:
        self.bot = bot

    @commands.command(name="register")
    @commands.is_owner()
    async def register(self, ctx: commands.Context) -> None:
        """
        Sync slash commands with Discord.

        In a server, commands are registered for that server only and show up
        immediately. In DMs, they are registered globally.
        """
        runtime = ContextRuntime(self.bot, ctx)
        guild_id = ctx.guild.id if ctx.guild is not None else None
        await register_commands(runtime, guild_id)
