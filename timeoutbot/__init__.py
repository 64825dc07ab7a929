"""
timeoutbot - a small Discord moderation bot.

Provides a guild-only /timeout slash command that temporarily mutes a member,
plus an owner-only `register` command for syncing slash commands.
"""

__version__ = "0.1.0"
