class TalesError(Exception):
    """Base exception for the Tales of Terminal engine."""


class NameValidationError(TalesError, ValueError):
    """Raised when a player handle fails validation.

    The ``reason`` attribute carries the message meant for the player.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class WorldConfigError(TalesError):
    """Raised when a world cannot be generated with the requested entity counts."""


class ConfigError(TalesError):
    """Raised when an engine settings file cannot be read or validated."""


class SessionOverError(TalesError):
    """Raised when an action is attempted after the session reached a terminal state."""


class RandomScriptExhausted(TalesError):
    """Raised when a scripted random source runs out of values."""
