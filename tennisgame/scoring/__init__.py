"""
Score state machine for a single game of tennis.

This package provides the immutable score states, the graph builder that
wires them together once per process, and the pure transition functions used
to move through the graph.
"""

from tennisgame.scoring.constants import POINT_NAMES, translate
from tennisgame.scoring.graph import ScoreGraph, ScoreLookupKey, get_initial_state
from tennisgame.scoring.state import (
    DisplayContext,
    Player,
    PlayerNames,
    ScoreState,
    StateKind,
)
from tennisgame.scoring.transitions import StateTransitionEngine

__all__ = [
    "POINT_NAMES",
    "translate",
    "ScoreGraph",
    "ScoreLookupKey",
    "get_initial_state",
    "DisplayContext",
    "Player",
    "PlayerNames",
    "ScoreState",
    "StateKind",
    "StateTransitionEngine",
]
