"""
Custom errors used across layers.

The API layer translates these into HTTP responses; everything below it just raises.
"""


class GameError(Exception):
    """Base class for anything that goes wrong while playing a game."""


class InvalidMoveError(GameError):
    """The requested move is not in the generated move set of the piece (or there is no piece of yours to move)."""


class GameStateError(GameError):
    """The operation is not allowed given the current state of the game."""


class InvalidRequestError(GameError):
    """A request coming in from the boundary could not be interpreted."""


class ConfigurationError(GameError):
    """Settings could not be parsed."""
