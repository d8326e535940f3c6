"""
State transition functions for tennis scoring.

This module provides pure functions for moving between score states and for
rendering them. Nothing here mutates a state; the graph supplies every
successor, so a transition is a lookup.
"""

from tennisgame.errors import GameAlreadyWonError
from tennisgame.scoring.constants import translate
from tennisgame.scoring.state import (
    DisplayContext,
    Player,
    ScoreState,
    StateKind,
    successors,
)


class StateTransitionEngine:
    """
    Pure functions for state transitions in a game of tennis.

    This class contains static methods that dispatch on the kind of a state.
    Each transition takes a state and returns the successor from the graph,
    without modifying the original.
    """

    @staticmethod
    def point_won(
        state: ScoreState, player: Player, context: DisplayContext
    ) -> ScoreState:
        """
        Get the state reached when a player wins a point.

        Args:
            state: Current score state
            player: Player who won the point
            context: Display context, used for the error message of a won game

        Returns:
            The successor state

        Raises:
            GameAlreadyWonError: If the game already has a winner
        """
        if context is None:
            raise ValueError("context must not be None")
        if not isinstance(player, Player):
            raise ValueError(f"expected a Player, got {player!r}")

        if state.kind is StateKind.WIN:
            raise GameAlreadyWonError(context.name_of(state.player))

        on_player_a, on_player_b = successors(state)
        return on_player_a if player is Player.A else on_player_b

    @staticmethod
    def on_player_a_point(state: ScoreState, context: DisplayContext) -> ScoreState:
        """Get the state reached when player A wins a point."""
        return StateTransitionEngine.point_won(state, Player.A, context)

    @staticmethod
    def on_player_b_point(state: ScoreState, context: DisplayContext) -> ScoreState:
        """Get the state reached when player B wins a point."""
        return StateTransitionEngine.point_won(state, Player.B, context)

    @staticmethod
    def render(state: ScoreState, context: DisplayContext) -> str:
        """
        Render a state as the score announced to the players.

        Args:
            state: Score state to render
            context: Display context supplying the player names

        Returns:
            Display string, e.g. "Thirty-Fifteen" or "Advantage Alice"
        """
        kind = state.kind
        if kind is StateKind.GENERIC:
            return f"{translate(state.score_a)}-{translate(state.score_b)}"
        if kind is StateKind.TIED:
            return f"{translate(state.score_a)}-All"
        if kind is StateKind.DEUCE:
            return "Deuce"
        if kind is StateKind.ADVANTAGE:
            return f"Advantage {context.name_of(state.player)}"
        return f"Win for {context.name_of(state.player)}"
