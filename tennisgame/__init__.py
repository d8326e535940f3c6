"""
Score keeping for a single game of tennis.

A TennisGame follows a graph of immutable score states that is built once per
process and shared by every game:

    >>> game = TennisGame("Alice", "Bob")
    >>> game.won_point("Alice")
    >>> game.get_score()
    'Fifteen-Love'
"""

from tennisgame.errors import (
    GameAlreadyWonError,
    InvalidPlayerError,
    ScoreGraphError,
    TennisError,
    UnknownPlayerError,
)
from tennisgame.game import TennisGame

__all__ = [
    "TennisGame",
    "TennisError",
    "InvalidPlayerError",
    "UnknownPlayerError",
    "GameAlreadyWonError",
    "ScoreGraphError",
]
