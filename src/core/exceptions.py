"""Custom exceptions shared by all layers. Anything the application raises on purpose derives from GameError."""


class GameError(Exception):
    """Base class for every error raised on purpose by the application."""


class InvalidFENError(GameError):
    """The supplied string cannot be read as a FEN piece placement."""


class InvalidRequestError(GameError):
    """A request field could not be interpreted (raised from the pydantic validators)."""


class ConfigError(GameError):
    """Environment variables hold a value the application cannot use."""
