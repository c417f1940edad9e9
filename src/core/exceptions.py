"""Custom exceptions. Every layer raises a subclass of GameError so callers can catch the top-level type."""


class GameError(Exception):
    """Base class for all errors raised by this project."""


class InvalidBoardError(GameError):
    """Board does not have exactly 9 cells, or contains unknown cell values."""


class IllegalMoveError(GameError):
    """A mark was placed on a cell that is already occupied."""


class InvalidNavigationError(GameError):
    """Jump target is outside the recorded history."""


class GameStateError(GameError):
    """The stored data does not describe a consistent game."""


class InvalidRequestError(GameError):
    """Request payload failed validation."""


class RepositoryError(GameError):
    """Record could not be found (or stored)."""
