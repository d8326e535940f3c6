"""
Dummy adapter for the tennisgame engine, used for testing and simulation.

This module provides a non-interactive adapter for automated tests and
simulations where nobody watches the game.
"""

from typing import Any, Callable, Dict, List, Optional, Union
from enum import Enum
import random

from tennisgame.adapters.base import PlatformAdapter


class DummyAdapter(PlatformAdapter):
    """
    Dummy adapter for testing and simulation.

    Point winners come from a scripted list first, then from a strategy
    function, and finally from a random choice. Everything rendered or
    notified is kept for later inspection.
    """

    def __init__(
        self,
        auto_winners: Optional[List[str]] = None,
        strategy_function: Optional[Callable[[List[str]], str]] = None,
        rng: Optional[random.Random] = None,
        verbose: bool = False,
    ):
        """
        Initialize the dummy adapter.

        Args:
            auto_winners: Optional list of point winners to hand out in order
            strategy_function: Optional function that takes the player names
                               and returns the winner of the next point
            rng: Random generator for the fallback choice
            verbose: Whether to print states and events (useful for debugging)
        """
        self.auto_winners = list(auto_winners or [])
        self.strategy_function = strategy_function
        self.rng = rng or random.Random()
        self.verbose = verbose

        self.winner_index = 0
        self.events = []
        self.rendered_states = []

    async def render_game_state(self, state: Dict[str, Any]) -> None:
        """Store the game state for later inspection."""
        self.rendered_states.append(state)

        if self.verbose:
            print(f"Score: {state.get('score')}")

    async def request_point_winner(
        self,
        player_names: List[str],
        timeout_seconds: Optional[float] = None,
    ) -> str:
        """
        Return the next scripted winner, or pick one.

        Args:
            player_names: Names of the two players
            timeout_seconds: Ignored by this adapter

        Returns:
            Name of the point winner
        """
        winner = None

        if self.winner_index < len(self.auto_winners):
            winner = self.auto_winners[self.winner_index]
            self.winner_index += 1
        elif self.strategy_function:
            winner = self.strategy_function(player_names)

        if winner is None:
            winner = self.rng.choice(player_names)

        if self.verbose:
            print(f"Point to {winner}")

        return winner

    async def notify_game_event(
        self, event_type: Union[str, Enum], data: Dict[str, Any]
    ) -> None:
        """Store the event for later inspection."""
        event_type_str = event_type.name if isinstance(event_type, Enum) else event_type
        self.events.append((event_type_str, data))

        if self.verbose:
            print(f"Event: {event_type_str} {data}")

    def get_events_by_type(self, event_type: Union[str, Enum]) -> List[Dict[str, Any]]:
        """
        Get all events of a specific type.

        Args:
            event_type: The type of events to retrieve

        Returns:
            A list of event data dictionaries
        """
        event_type_str = event_type.name if isinstance(event_type, Enum) else event_type
        return [data for typ, data in self.events if typ == event_type_str]

    def clear(self) -> None:
        """Clear all stored events and states and restart the script."""
        self.events.clear()
        self.rendered_states.clear()
        self.winner_index = 0
