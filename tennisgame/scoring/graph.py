"""
Construction of the shared score graph.

The graph is built once, bottom-up, over a 5x5 table of point counts. Higher
counts are filled first so that every state's successors already exist when
the state itself is created. Each generic state is stored together with its
mirror image (players swapped), which is assembled from mirrors that are
already in the table instead of being recomputed.
"""

from dataclasses import dataclass
from typing import Dict, Tuple
import logging
import threading

from tennisgame.errors import ScoreGraphError
from tennisgame.scoring.constants import MAX_DISPLAY_COUNT, MAX_LOOKUP_COUNT
from tennisgame.scoring.state import (
    ADVANTAGE,
    DEUCE,
    WIN,
    Player,
    ScoreState,
    StateKind,
)

logger = logging.getLogger("tennisgame.scoring")


@dataclass(frozen=True)
class ScoreLookupKey:
    """
    Pair of point counts used to find states while the graph is built.

    Attributes:
        score_a: Points won by player A, 0..4
        score_b: Points won by player B, 0..4
    """

    score_a: int
    score_b: int

    def increment(self, player: Player) -> "ScoreLookupKey":
        """Get the key reached when a player wins a point."""
        if player is Player.A:
            return ScoreLookupKey(self.score_a + 1, self.score_b)
        return ScoreLookupKey(self.score_a, self.score_b + 1)

    def flip(self) -> "ScoreLookupKey":
        """Get the key with the two counts swapped."""
        return ScoreLookupKey(self.score_b, self.score_a)

    def __hash__(self) -> int:
        # counts never exceed 4, so the low three bits hold score_b alone
        return (self.score_a << 3) ^ self.score_b

    def __str__(self) -> str:
        return f"({self.score_a}, {self.score_b})"


class ScoreGraph:
    """
    Complete, immutable set of score states for one game of tennis.

    The graph holds no mutable state once built and can be shared by any
    number of games and threads. Use get_instance() for the process-wide
    graph.
    """

    _instance = None
    _lock = threading.Lock()

    def __init__(self):
        self._table: Dict[ScoreLookupKey, ScoreState] = {}
        self.root = self._build()

    @classmethod
    def get_instance(cls) -> "ScoreGraph":
        """
        Get the shared graph, building it on first use.

        Returns:
            ScoreGraph instance
        """
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def _build(self) -> ScoreState:
        table = self._table

        # Both players at Forty or beyond with equal counts is deuce
        table[ScoreLookupKey(3, 3)] = DEUCE
        table[ScoreLookupKey(4, 4)] = DEUCE

        table[ScoreLookupKey(4, 3)] = ADVANTAGE[Player.A]
        table[ScoreLookupKey(3, 4)] = ADVANTAGE[Player.B]

        # Wins that were not preceded by an advantage
        for count in range(MAX_DISPLAY_COUNT - 1, -1, -1):
            key = ScoreLookupKey(MAX_LOOKUP_COUNT, count)
            table[key] = WIN[Player.A]
            table[key.flip()] = WIN[Player.B]

        for i in range(MAX_LOOKUP_COUNT, -1, -1):
            for j in range(i, -1, -1):
                key = ScoreLookupKey(i, j)
                if key in table:
                    continue

                on_player_a = self._get(key.increment(Player.A))
                on_player_b = self._get(key.increment(Player.B))
                if i == j:
                    table[key] = ScoreState.tied(i, on_player_a, on_player_b)
                else:
                    state = ScoreState.generic(i, j, on_player_a, on_player_b)
                    table[key] = state
                    # if (i, j) was missing then (j, i) is missing as well
                    table[key.flip()] = self._mirror(state)

        root = self._get(ScoreLookupKey(0, 0))
        logger.debug(
            f"Built score graph: {len(self._table)} keys, {len(self.states())} states"
        )
        return root

    def _get(self, key: ScoreLookupKey) -> ScoreState:
        state = self._table.get(key)
        if state is None:
            raise ScoreGraphError(f"no state registered for {key}")
        return state

    def _mirror(self, state: ScoreState) -> ScoreState:
        # A's successor in the mirror is the mirror of B's successor and vice versa
        return ScoreState.generic(
            state.score_b,
            state.score_a,
            self.flip(state.on_player_b),
            self.flip(state.on_player_a),
        )

    def flip(self, state: ScoreState) -> ScoreState:
        """
        Get the mirror image of a state, with the roles of the players swapped.

        Args:
            state: A state of this graph

        Returns:
            The state of this graph that mirrors the given one
        """
        if state.kind is StateKind.GENERIC:
            return self._get(ScoreLookupKey(state.score_b, state.score_a))
        if state.kind in (StateKind.TIED, StateKind.DEUCE):
            return state
        if state.kind is StateKind.ADVANTAGE:
            return ADVANTAGE[state.player.other]
        if state.kind is StateKind.WIN:
            return WIN[state.player.other]
        raise ScoreGraphError(f"unknown state kind: {state.kind!r}")

    def lookup(self, score_a: int, score_b: int) -> ScoreState:
        """
        Get the state for a pair of point counts.

        Args:
            score_a: Points won by player A, 0..4
            score_b: Points won by player B, 0..4

        Returns:
            The state shown at that count
        """
        return self._get(ScoreLookupKey(score_a, score_b))

    def states(self) -> Tuple[ScoreState, ...]:
        """Get every distinct state of the graph."""
        seen: Dict[int, ScoreState] = {}
        for state in self._table.values():
            seen.setdefault(id(state), state)
        return tuple(seen.values())


def get_initial_state() -> ScoreState:
    """Get the 0-0 state of the shared graph."""
    return ScoreGraph.get_instance().root
