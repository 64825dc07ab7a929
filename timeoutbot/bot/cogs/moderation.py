"""
ModerationCog: the /timeout slash command.

Adapts the discord.Interaction into an InteractionRuntime and hands off to
issue_timeout(). Duration problems are answered with an ephemeral message by
the parser; anything the Discord API rejects ends up in cog_app_command_error.
"""

from __future__ import annotations

import discord
from discord import app_commands
from discord.ext import commands

from timeoutbot.bot.runtime import InteractionRuntime
from timeoutbot.config.logging import get_logger
from timeoutbot.moderation import issue_timeout

logger = get_logger(__name__)


def describe_command_error(error: app_commands.AppCommandError) -> str:
    """Short, user-facing explanation for a failed /timeout."""
    original = getattr(error, "original", error)
    if isinstance(original, discord.NotFound):
        return "Couldn't find that member in this server."
    if isinstance(original, discord.Forbidden):
        return "I'm not allowed to time that member out. Check my permissions and role position."
    return "Something went wrong while running that command."


class ModerationCog(commands.Cog):
    """Provides the /timeout slash command."""

    def __init__(self, bot) -> None:
        self.bot = bot

    @app_commands.command(name="timeout", description="Temporarily mute a member")
    @app_commands.describe(
        target="Member to time out",
        duration="How long, e.g. 10m or 1h (max 1h)",
        reason="Reason recorded in the audit log",
    )
    @app_commands.guild_only()
    async def timeout(
        self,
        interaction: discord.Interaction,
        target: discord.User,
        duration: str,
        reason: str,
    ) -> None:
        """
        /timeout target:<user> duration:<Nm|1h> reason:<text>

        Examples:
          /timeout target:@someone duration:10m reason:spam
          /timeout target:@someone duration:1h reason:cool off
        """
        runtime = InteractionRuntime(self.bot, interaction)
        await issue_timeout(runtime, interaction.guild_id, target.id, duration, reason)

    async def cog_app_command_error(
        self, interaction: discord.Interaction, error: app_commands.AppCommandError
    ) -> None:
        command_name = getattr(interaction.command, "name", "unknown")
        logger.error(f"/{command_name} failed: {error}", exc_info=error)

        message = describe_command_error(error)
        try:
            if interaction.response.is_done():
                await interaction.followup.send(message, ephemeral=True)
            else:
                await interaction.response.send_message(message, ephemeral=True)
        except discord.HTTPException as e:
            logger.warning(f"Could not send error notice for /{command_name}: {e}")
