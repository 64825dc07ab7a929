"""
Duration parsing for /timeout.

Accepted tokens (case-sensitive):
    <N>m   N minutes, 0 <= N <= 60
    1h     exactly 60 minutes

A token that ends in "m" but does not start with a plain non-negative integer
("abcm", "-5m", "1.5m") is treated like any other malformed token.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

from timeoutbot.bot.runtime import BotRuntime
from timeoutbot.config.logging import get_logger
from timeoutbot.errors import DurationError, DurationTooLong, InvalidDurationFormat

logger = get_logger(__name__)

MAX_TIMEOUT_MINUTES = 60

# ASCII digits only; str.isdigit() would also accept e.g. Arabic-Indic digits
_MINUTES_RE = re.compile(r"([0-9]+)m")


def interpret_duration(token: str) -> timedelta:
    """
    Turn a duration token into a timedelta.

    Raises:
        InvalidDurationFormat: If the token is not `<N>m` or `1h`
        DurationTooLong: If N is greater than 60
    """
    if token == "1h":
        return timedelta(minutes=MAX_TIMEOUT_MINUTES)

    match = _MINUTES_RE.fullmatch(token)
    if match is None:
        raise InvalidDurationFormat(token)

    minutes = int(match.group(1))
    if minutes > MAX_TIMEOUT_MINUTES:
        raise DurationTooLong(token)
    return timedelta(minutes=minutes)


def compute_expiration(duration: timedelta, now: datetime | None = None) -> datetime:
    """Return now + duration as an aware UTC datetime truncated to whole seconds."""
    if now is None:
        now = datetime.now(timezone.utc)
    return (now + duration).replace(microsecond=0)


async def parse_duration(
    runtime: BotRuntime, token: str, now: datetime | None = None
) -> datetime | None:
    """
    Parse a duration token into the instant the timeout should end.

    On a rejected token the invoker gets an ephemeral explanation and None is
    returned; the caller should stop without doing anything else.
    """
    try:
        duration = interpret_duration(token)
    except DurationError as e:
        logger.debug(f"Rejected duration {token!r}: {e}")
        await runtime.reply(str(e), ephemeral=True)
        return None

    return compute_expiration(duration, now)
