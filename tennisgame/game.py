"""
A single game of tennis between two named players.

TennisGame binds the shared score graph to two player names. Its only
mutable data is the reference to the current score state (and the log of
accepted points); the graph itself is never touched.
"""

from typing import Any, Dict, List, Optional, Tuple
import logging
import uuid

from tennisgame.errors import (
    GameAlreadyWonError,
    InvalidPlayerError,
    UnknownPlayerError,
)
from tennisgame.events import EngineEventType, EventBus
from tennisgame.scoring.graph import ScoreGraph
from tennisgame.scoring.state import Player, PlayerNames, ScoreState, StateKind
from tennisgame.scoring.transitions import StateTransitionEngine

logger = logging.getLogger("tennisgame.game")


def _check_name(name: Any, label: str) -> str:
    if name is None:
        raise InvalidPlayerError(f"{label} must not be None")
    if not isinstance(name, str):
        raise InvalidPlayerError(f"{label} must be a string, got {name!r}")
    if not name:
        raise InvalidPlayerError(f"{label} must not be empty")
    return name


class TennisGame:
    """
    Score keeper for one game of tennis, from Love-All to a winner.

    A game is driven by one caller at a time. Rejected calls raise and leave
    the game exactly as it was.

    Attributes:
        id: Unique identifier for this game
        context: Display context holding the two player names
    """

    def __init__(
        self,
        player_a_name: str,
        player_b_name: str,
        graph: Optional[ScoreGraph] = None,
    ):
        """
        Create a game at Love-All.

        Args:
            player_a_name: Name of the first player
            player_b_name: Name of the second player, distinct from the first
            graph: Score graph to play on; defaults to the shared graph

        Raises:
            InvalidPlayerError: If a name is missing or empty, or both are equal
        """
        _check_name(player_a_name, "player_a_name")
        _check_name(player_b_name, "player_b_name")
        if player_a_name == player_b_name:
            raise InvalidPlayerError(
                f"player names must be distinct but both were: {player_a_name}"
            )

        self.id = str(uuid.uuid4())
        self.context = PlayerNames(player_a_name, player_b_name)
        self._graph = graph or ScoreGraph.get_instance()
        self._state = self._graph.root
        self._points: List[str] = []
        self.event_bus = EventBus.get_instance()

    @property
    def player_a_name(self) -> str:
        return self.context.player_a_name

    @property
    def player_b_name(self) -> str:
        return self.context.player_b_name

    @property
    def state(self) -> ScoreState:
        """Current score state."""
        return self._state

    @property
    def points(self) -> Tuple[str, ...]:
        """Names of the winners of every accepted point, in order."""
        return tuple(self._points)

    @property
    def is_finished(self) -> bool:
        return self._state.is_terminal

    @property
    def winner(self) -> Optional[str]:
        """Name of the player who won the game, or None while it is open."""
        if not self._state.is_terminal:
            return None
        return self.context.name_of(self._state.player)

    def _resolve(self, player_name: str) -> Player:
        if player_name == self.context.player_a_name:
            return Player.A
        if player_name == self.context.player_b_name:
            return Player.B
        raise UnknownPlayerError(player_name)

    def won_point(self, player_name: str) -> None:
        """
        Register a point won by a player.

        Args:
            player_name: Name of the player who won the point, matched exactly

        Raises:
            UnknownPlayerError: If the name belongs to neither player
            GameAlreadyWonError: If the game already has a winner
        """
        try:
            player = self._resolve(player_name)
            new_state = StateTransitionEngine.point_won(
                self._state, player, self.context
            )
        except (UnknownPlayerError, GameAlreadyWonError) as e:
            logger.warning(f"Game {self.id}: point for {player_name!r} rejected: {e}")
            self.event_bus.emit(
                EngineEventType.POINT_REJECTED,
                {
                    "game_id": self.id,
                    "player_name": player_name,
                    "reason": str(e),
                    "score": self.get_score(),
                },
            )
            raise

        self._state = new_state
        self._points.append(player_name)
        score = self.get_score()
        logger.debug(f"Game {self.id}: point to {player_name}, score {score}")

        self.event_bus.emit(
            EngineEventType.POINT_WON,
            {
                "game_id": self.id,
                "player_name": player_name,
                "point_number": len(self._points),
                "score": score,
            },
        )
        if new_state.kind is StateKind.WIN:
            logger.info(f"Game {self.id}: {score}")
            self.event_bus.emit(
                EngineEventType.GAME_ENDED,
                {
                    "game_id": self.id,
                    "winner": self.winner,
                    "points_played": len(self._points),
                    "score": score,
                },
            )

    def get_score(self) -> str:
        """Get the current score as announced, e.g. "Thirty-Fifteen"."""
        return self._state.render(self.context)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the game to a dictionary suitable for serialization.

        Returns:
            Dictionary representation of the game
        """
        return {
            "id": self.id,
            "player_a": self.player_a_name,
            "player_b": self.player_b_name,
            "kind": self._state.kind.name,
            "score": self.get_score(),
            "points": list(self._points),
            "is_finished": self.is_finished,
            "winner": self.winner,
        }

    def to_adapter_format(self) -> Dict[str, Any]:
        """
        Convert the game to a format suitable for platform adapters.

        Returns:
            Dictionary in adapter-friendly format
        """
        won = {self.player_a_name: 0, self.player_b_name: 0}
        for name in self._points:
            won[name] += 1
        return {
            "score": self.get_score(),
            "winner": self.winner,
            "players": [
                {"name": name, "points_won": count} for name, count in won.items()
            ],
        }

    def __repr__(self) -> str:
        return (
            f"TennisGame({self.player_a_name!r}, {self.player_b_name!r}, "
            f"score={self.get_score()!r})"
        )
