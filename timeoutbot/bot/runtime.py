"""
Bot runtime interface.

The moderation logic never touches discord.py objects directly; it talks to a
BotRuntime, which exposes the handful of platform capabilities a command needs:

    reply()              send a message back to the invoker
    defer()              acknowledge now, reply later
    fetch_member()       look a guild member up by ID
    edit_member()        apply a timeout with an audit-log reason
    register_commands()  sync the slash-command tree

InteractionRuntime and ContextRuntime are the real implementations, bound to a
slash-command interaction or a prefix-command context. Tests substitute a fake.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

import discord
from discord.ext import commands


class BotRuntime(ABC):
    """Platform capabilities available to a single command invocation."""

    @abstractmethod
    async def reply(self, content: str, *, ephemeral: bool = False) -> None:
        """
        Send a message to the invoking user.

        Args:
            content: Message text
            ephemeral: If True, only the invoker can see the message
        """

    async def defer(self) -> None:
        """
        Acknowledge the invocation before slow platform calls.

        Later reply() calls still reach the invoker. The default does nothing.
        """

    @abstractmethod
    async def fetch_member(self, guild_id: int, user_id: int) -> discord.Member:
        """
        Fetch a guild member from the API.

        Raises:
            discord.NotFound: If the user is not a member of the guild
            discord.HTTPException: If the request fails
        """

    @abstractmethod
    async def edit_member(
        self, member: discord.Member, *, timed_out_until: datetime, reason: str
    ) -> discord.Member:
        """
        Suspend a member's communication until `timed_out_until`.

        Returns:
            The member as returned by the API after the edit

        Raises:
            discord.Forbidden: If the bot lacks permission or the target outranks it
            discord.HTTPException: If the request fails
        """

    @abstractmethod
    async def register_commands(self, guild_id: int | None = None) -> list[str]:
        """
        Sync slash commands with Discord.

        Args:
            guild_id: Sync to this guild only; None syncs globally

        Returns:
            Names of the commands that were registered
        """


async def sync_command_tree(bot: commands.Bot, guild_id: int | None = None) -> list[str]:
    """Sync `bot.tree` globally, or copied into a single guild."""
    if guild_id is not None:
        guild = discord.Object(id=guild_id)
        bot.tree.copy_global_to(guild=guild)
        synced = await bot.tree.sync(guild=guild)
    else:
        synced = await bot.tree.sync()
    return [command.name for command in synced]


class DiscordRuntime(BotRuntime):
    """BotRuntime backed by a running discord.py bot; subclasses decide how to reply."""

    def __init__(self, bot: commands.Bot) -> None:
        self.bot = bot

    async def fetch_member(self, guild_id: int, user_id: int) -> discord.Member:
        guild = self.bot.get_guild(guild_id)
        if guild is None:
            guild = await self.bot.fetch_guild(guild_id)
        return await guild.fetch_member(user_id)

    async def edit_member(
        self, member: discord.Member, *, timed_out_until: datetime, reason: str
    ) -> discord.Member:
        edited = await member.edit(timed_out_until=timed_out_until, reason=reason)
        # Member.edit returns None when the API answers 204 No Content
        return edited if edited is not None else member

    async def register_commands(self, guild_id: int | None = None) -> list[str]:
        return await sync_command_tree(self.bot, guild_id)


class InteractionRuntime(DiscordRuntime):
    """Runtime for a slash-command interaction."""

    def __init__(self, bot: commands.Bot, interaction: discord.Interaction) -> None:
        super().__init__(bot)
        self.interaction = interaction

    async def reply(self, content: str, *, ephemeral: bool = False) -> None:
        # An interaction can only be responded to once; later messages are followups
        if self.interaction.response.is_done():
            await self.interaction.followup.send(content, ephemeral=ephemeral)
        else:
            await self.interaction.response.send_message(content, ephemeral=ephemeral)

    async def defer(self) -> None:
        # Discord drops interactions not answered within 3 seconds
        if not self.interaction.response.is_done():
            await self.interaction.response.defer()


class ContextRuntime(DiscordRuntime):
    """Runtime for a prefix/mention command. Plain messages cannot be ephemeral."""

    def __init__(self, bot: commands.Bot, ctx: commands.Context) -> None:
        super().__init__(bot)
        self.ctx = ctx

    async def reply(self, content: str, *, ephemeral: bool = False) -> None:
        await self.ctx.reply(content, mention_author=False)
