"""
Exceptions raised by the tennisgame package.

Player-facing errors (bad names, unknown players, points scored after the
game is decided) are raised synchronously from the call that caused them and
leave the game untouched. ScoreGraphError signals a broken score graph and is
only ever raised while the graph is being built.
"""


class TennisError(Exception):
    """Base class for all tennisgame errors."""


class InvalidPlayerError(TennisError, ValueError):
    """Raised when a game is created with missing, empty or equal player names."""


class UnknownPlayerError(InvalidPlayerError):
    """Raised when a point is registered for a name that is not in the game."""

    def __init__(self, player_name):
        super().__init__(f"unknown player name: {player_name!r}")
        self.player_name = player_name


class GameAlreadyWonError(TennisError, RuntimeError):
    """Raised when a point is registered on a game that already has a winner."""

    def __init__(self, winner: str):
        super().__init__(f"game is already won by {winner}")
        self.winner = winner


class ScoreGraphError(TennisError, ValueError):
    """Raised when a score state or the score graph violates its contract."""
