"""
Base adapter interface for the tennisgame engine.

This module defines the interface that platform-specific adapters must
implement to show a game and to tell the engine who won each point.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional, Union
import asyncio
from enum import Enum


class PlatformAdapter(ABC):
    """
    Base interface for platform-specific adapters.

    Implementations of this interface bridge the gap between the
    platform-agnostic score engine and a concrete platform. They render the
    score, report game events and supply the winner of each point.
    """

    @abstractmethod
    async def render_game_state(self, state: Dict[str, Any]) -> None:
        """
        Render the current game state to the platform.

        Args:
            state: Adapter-format snapshot of the game (score, winner, players)
        """
        pass

    @abstractmethod
    async def request_point_winner(
        self,
        player_names: List[str],
        timeout_seconds: Optional[float] = None,
    ) -> str:
        """
        Ask the platform who won the next point.

        Args:
            player_names: Names of the two players
            timeout_seconds: Optional time limit for the answer

        Returns:
            Name of the player who won the point

        Raises:
            TimeoutError: If no answer arrives within the time limit
        """
        pass

    @abstractmethod
    async def notify_game_event(
        self, event_type: Union[str, Enum], data: Dict[str, Any]
    ) -> None:
        """
        Notify the platform of a game event.

        Args:
            event_type: The type of event that occurred
            data: Data associated with the event
        """
        pass

    # The following methods have default implementations but can be overridden

    async def initialize(self) -> None:
        """Set up resources before the engine starts using the adapter."""
        pass

    async def shutdown(self) -> None:
        """Release resources when the engine shuts down."""
        pass

    def get_sync_methods(self) -> Dict[str, Callable]:
        """
        Get synchronous wrappers of the adapter's coroutines.

        Each wrapper runs its coroutine to completion on a fresh event loop,
        for callers that have no loop of their own.

        Returns:
            A dictionary mapping method names to synchronous wrapper functions
        """

        def wrap_async(async_func):
            def sync_wrapper(*args, **kwargs):
                loop = asyncio.new_event_loop()
                try:
                    return loop.run_until_complete(async_func(*args, **kwargs))
                finally:
                    loop.close()

            return sync_wrapper

        return {
            name: wrap_async(getattr(self, name))
            for name in (
                "render_game_state",
                "request_point_winner",
                "notify_game_event",
                "initialize",
                "shutdown",
            )
        }
