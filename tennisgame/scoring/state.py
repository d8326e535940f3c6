"""
Immutable score states for a single game of tennis.

Every score a game can show is one ScoreState. The kind of a state decides
which payload it carries and how it moves on when a point is won:

- GENERIC: both counts in 0..3 and different; holds both successors
- TIED: both counts equal and below deuce; holds both successors
- DEUCE: singleton; successors are the two advantage states
- ADVANTAGE: one player a point ahead after deuce
- WIN: terminal, rejects further points

States hold no player names. Names come from a DisplayContext at render time,
so a single graph of states can be shared by every game.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, Optional, Tuple

from tennisgame.errors import ScoreGraphError
from tennisgame.scoring.constants import MAX_DISPLAY_COUNT


class Player(Enum):
    """The two sides of a game."""

    A = "A"
    B = "B"

    @property
    def other(self) -> "Player":
        """The opponent of this player."""
        return Player.B if self is Player.A else Player.A


class StateKind(Enum):
    """Possible kinds of score state."""

    GENERIC = auto()
    TIED = auto()
    DEUCE = auto()
    ADVANTAGE = auto()
    WIN = auto()


class DisplayContext(ABC):
    """
    Supplies the player names used when rendering scores and error messages.

    A context is never consulted when deciding transitions.
    """

    @property
    @abstractmethod
    def player_a_name(self) -> str:
        """Name of player A."""

    @property
    @abstractmethod
    def player_b_name(self) -> str:
        """Name of player B."""

    def name_of(self, player: Player) -> str:
        """Get the name bound to a player."""
        return self.player_a_name if player is Player.A else self.player_b_name


class PlayerNames(DisplayContext):
    """DisplayContext backed by two fixed names."""

    def __init__(self, player_a_name: str, player_b_name: str):
        self._player_a_name = player_a_name
        self._player_b_name = player_b_name

    @property
    def player_a_name(self) -> str:
        return self._player_a_name

    @property
    def player_b_name(self) -> str:
        return self._player_b_name

    def __repr__(self) -> str:
        return f"PlayerNames({self._player_a_name!r}, {self._player_b_name!r})"


_DEBUG_NAMES = PlayerNames("player A", "player B")


def _check_count(count: Optional[int], label: str) -> None:
    if not isinstance(count, int) or isinstance(count, bool):
        raise ScoreGraphError(f"{label} must be an int, got {count!r}")
    if count < 0:
        raise ScoreGraphError(f"negative {label} not allowed: {count}")
    if count > MAX_DISPLAY_COUNT:
        raise ScoreGraphError(
            f"{label} {count} cannot be shown as a count, "
            "use an advantage, deuce or win state"
        )


# States are compared by identity: the graph shares every node, and two
# structurally equal nodes from different graphs are still different nodes.
@dataclass(frozen=True, eq=False)
class ScoreState:
    """
    Immutable node of the score graph.

    Attributes:
        kind: Kind of state, decides which of the other fields are set
        score_a: Count of player A (GENERIC and TIED only)
        score_b: Count of player B (GENERIC and TIED only)
        player: Player holding the advantage or the win (ADVANTAGE and WIN only)
        on_player_a: State reached when player A scores (GENERIC and TIED only)
        on_player_b: State reached when player B scores (GENERIC and TIED only)
    """

    kind: StateKind
    score_a: Optional[int] = None
    score_b: Optional[int] = None
    player: Optional[Player] = None
    on_player_a: Optional["ScoreState"] = field(default=None, repr=False)
    on_player_b: Optional["ScoreState"] = field(default=None, repr=False)

    def __post_init__(self):
        if self.kind in (StateKind.GENERIC, StateKind.TIED):
            _check_count(self.score_a, "score_a")
            _check_count(self.score_b, "score_b")
            if self.kind is StateKind.TIED and self.score_a != self.score_b:
                raise ScoreGraphError(
                    f"tied state needs equal counts, got {self.score_a}-{self.score_b}"
                )
            if self.kind is StateKind.GENERIC and self.score_a == self.score_b:
                raise ScoreGraphError(
                    f"equal counts {self.score_a}-{self.score_b} need a tied state"
                )
            if self.on_player_a is None:
                raise ScoreGraphError("on_player_a must not be None")
            if self.on_player_b is None:
                raise ScoreGraphError("on_player_b must not be None")
            if self.player is not None:
                raise ScoreGraphError(f"{self.kind.name} state has no player")
        elif self.kind is StateKind.DEUCE:
            if self._has_payload() or self.player is not None:
                raise ScoreGraphError("deuce state carries no payload")
        elif self.kind in (StateKind.ADVANTAGE, StateKind.WIN):
            if not isinstance(self.player, Player):
                raise ScoreGraphError(
                    f"{self.kind.name} state needs a player, got {self.player!r}"
                )
            if self._has_payload():
                raise ScoreGraphError(f"{self.kind.name} state carries no counts")
        else:
            raise ScoreGraphError(f"unknown state kind: {self.kind!r}")

    def _has_payload(self) -> bool:
        return any(
            value is not None
            for value in (
                self.score_a,
                self.score_b,
                self.on_player_a,
                self.on_player_b,
            )
        )

    @classmethod
    def generic(
        cls,
        score_a: int,
        score_b: int,
        on_player_a: "ScoreState",
        on_player_b: "ScoreState",
    ) -> "ScoreState":
        return cls(
            StateKind.GENERIC,
            score_a=score_a,
            score_b=score_b,
            on_player_a=on_player_a,
            on_player_b=on_player_b,
        )

    @classmethod
    def tied(
        cls, score: int, on_player_a: "ScoreState", on_player_b: "ScoreState"
    ) -> "ScoreState":
        return cls(
            StateKind.TIED,
            score_a=score,
            score_b=score,
            on_player_a=on_player_a,
            on_player_b=on_player_b,
        )

    @property
    def is_terminal(self) -> bool:
        """True once the game has a winner."""
        return self.kind is StateKind.WIN

    def on_player_a_point(self, context: DisplayContext) -> "ScoreState":
        """Get the state reached when player A wins the next point."""
        from tennisgame.scoring.transitions import StateTransitionEngine

        return StateTransitionEngine.on_player_a_point(self, context)

    def on_player_b_point(self, context: DisplayContext) -> "ScoreState":
        """Get the state reached when player B wins the next point."""
        from tennisgame.scoring.transitions import StateTransitionEngine

        return StateTransitionEngine.on_player_b_point(self, context)

    def render(self, context: DisplayContext) -> str:
        """Get the display string of this state."""
        from tennisgame.scoring.transitions import StateTransitionEngine

        return StateTransitionEngine.render(self, context)

    def __str__(self) -> str:
        return self.render(_DEBUG_NAMES)


DEUCE = ScoreState(StateKind.DEUCE)

ADVANTAGE: Dict[Player, ScoreState] = {
    Player.A: ScoreState(StateKind.ADVANTAGE, player=Player.A),
    Player.B: ScoreState(StateKind.ADVANTAGE, player=Player.B),
}

WIN: Dict[Player, ScoreState] = {
    Player.A: ScoreState(StateKind.WIN, player=Player.A),
    Player.B: ScoreState(StateKind.WIN, player=Player.B),
}


def successors(state: ScoreState) -> Tuple[ScoreState, ...]:
    """
    Get the states reachable from a state in one point.

    Returns:
        (state after A scores, state after B scores), or an empty tuple for a
        won game
    """
    if state.kind in (StateKind.GENERIC, StateKind.TIED):
        return (state.on_player_a, state.on_player_b)
    if state.kind is StateKind.DEUCE:
        return (ADVANTAGE[Player.A], ADVANTAGE[Player.B])
    if state.kind is StateKind.ADVANTAGE:
        if state.player is Player.A:
            return (WIN[Player.A], DEUCE)
        return (DEUCE, WIN[Player.B])
    return ()
