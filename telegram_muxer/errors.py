"""Exceptions raised by telegram_muxer."""


class MuxerError(Exception):
    """Base class for every error raised by the framework."""


class InvalidPatternError(MuxerError):
    """Raised in strict mode when a route pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str = ""):
        self.pattern = pattern
        self.reason = reason
        message = f"Invalid route pattern {pattern!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class TransportError(MuxerError):
    """Raised when the update source fails; terminates the run loop."""


class ConfigurationError(MuxerError):
    """Raised when the bot cannot be built from the given token or settings."""
