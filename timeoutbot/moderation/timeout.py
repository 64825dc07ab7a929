"""
Timeout workflow: parse the duration, fetch the member, apply the timeout, confirm.

Platform failures (member not found, missing permissions, HTTP errors) are not
caught here. They propagate to the command's error handler.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from timeoutbot.bot.runtime import BotRuntime
from timeoutbot.config.logging import get_logger
from timeoutbot.errors import PreconditionViolation
from timeoutbot.moderation.duration import parse_duration

logger = get_logger(__name__)


@dataclass(frozen=True)
class TimeoutResult:
    """A timeout that was successfully applied."""

    display_name: str
    expires_at: datetime
    duration: str
    reason: str


def confirmation_message(display_name: str, duration: str) -> str:
    return f"Timed {display_name} out for `{duration}`."


async def issue_timeout(
    runtime: BotRuntime,
    guild_id: int | None,
    target_id: int,
    duration: str,
    reason: str,
    now: datetime | None = None,
) -> TimeoutResult | None:
    """
    Time a guild member out.

    Args:
        runtime: Platform capabilities for this invocation
        guild_id: Guild the command was invoked in
        target_id: User ID of the member to time out
        duration: Raw duration token, e.g. "30m" or "1h"
        reason: Audit-log reason, passed through verbatim
        now: Reference time for the expiration (defaults to the current time)

    Returns:
        The applied timeout, or None if the duration was rejected (the invoker
        has already been told why)

    Raises:
        PreconditionViolation: If guild_id is missing
        discord.HTTPException: If fetching or editing the member fails
    """
    expires_at = await parse_duration(runtime, duration, now)
    if expires_at is None:
        return None

    if guild_id is None:
        raise PreconditionViolation("/timeout was invoked outside of a guild")

    await runtime.defer()
    member = await runtime.fetch_member(guild_id, target_id)
    member = await runtime.edit_member(member, timed_out_until=expires_at, reason=reason)

    logger.info(
        f"Timed out user {target_id} in guild {guild_id} until "
        f"{expires_at.isoformat()} ({duration}): {reason}"
    )

    await runtime.reply(confirmation_message(member.display_name, duration))
    return TimeoutResult(
        display_name=member.display_name,
        expires_at=expires_at,
        duration=duration,
        reason=reason,
    )
