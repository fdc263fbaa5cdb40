"""
Custom exceptions shared across layers.

NOTE: playing an illegal move is NOT an error. The game simply ignores it. These exceptions are for
malformed data coming in from outside (requests, stored records).
"""


class GameError(Exception):
    """Top level exception: any of the errors below can be caught with this one."""


class InvalidFENError(GameError):
    """Board position string could not be parsed."""


class InvalidRequestError(GameError):
    """Request contents do not make sense (raised by the request model validators)."""


class GameStateError(GameError):
    """Stored game data could not be turned back into a game."""


class RepositoryError(GameError):
    """Lookup in the repository failed."""
