"""Exception types raised by timeoutbot."""


class TimeoutBotError(Exception):
    """Base class for all timeoutbot errors."""


class ConfigurationError(TimeoutBotError):
    """Startup configuration is missing or invalid."""


class PreconditionViolation(TimeoutBotError):
    """A value the command framework guarantees was not present."""


class DurationError(TimeoutBotError):
    """
    A duration token was rejected.

    The message is safe to show to the invoking user as-is.
    """

    message = "Must be in format {}m or 1h"

    def __init__(self, token: str) -> None:
        super().__init__(self.message)
        self.token = token


class InvalidDurationFormat(DurationError):
    """Token is not `<minutes>m` or `1h`."""


class DurationTooLong(DurationError):
    """Token asks for more than the maximum timeout length."""

    message = "1h max for timeouts rn"
