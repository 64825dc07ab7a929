"""
Moderation Layer.

The logic behind /timeout, written against the BotRuntime interface so it can
run without a Discord connection:

    parse_duration()  "30m" / "1h"  →  expiration datetime (or an ephemeral error)
    issue_timeout()   parse → fetch member → apply timeout → confirm
"""

from timeoutbot.moderation.duration import (
    MAX_TIMEOUT_MINUTES,
    compute_expiration,
    interpret_duration,
    parse_duration,
)
from timeoutbot.moderation.timeout import TimeoutResult, confirmation_message, issue_timeout

__all__ = [
    "MAX_TIMEOUT_MINUTES",
    "TimeoutResult",
    "compute_expiration",
    "confirmation_message",
    "interpret_duration",
    "issue_timeout",
    "parse_duration",
]
