"""
Custom exceptions.

Recoverable game outcomes (not your turn, game over, illegal move) are NOT exceptions: they come back as status codes.
Exceptions are reserved for faults that should abort the whole call.
"""


class GameError(Exception):
    """Top-level exception for anything raised by this application."""


class InvalidRequestError(GameError, ValueError):
    """A request could not be interpreted. Subclasses ValueError so pydantic validators report it as a validation error."""


class BoardEncodingError(GameError):
    """A packed board value (or a legacy per-square record) cannot be encoded / decoded."""


class LedgerError(GameError):
    """The storage backend holds data that cannot be read back."""
