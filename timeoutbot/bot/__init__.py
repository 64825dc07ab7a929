"""
Discord Bot Layer.

The discord.py client, the command cogs, and the runtime adapters that let the
moderation logic talk to Discord.
"""

from timeoutbot.bot.client import TimeoutBot

__all__ = ["TimeoutBot"]
