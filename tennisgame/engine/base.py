"""
Base engine class for tennisgame.

This module provides the abstract base class for score engines. An engine
owns a game, drives it through a platform adapter and publishes what happens
on the event bus.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from tennisgame.adapters import PlatformAdapter
from tennisgame.events import EventBus


class ScoreEngine(ABC):
    """
    Abstract base class for score engines.

    This class defines the common interface of engines: lifecycle methods,
    starting a game, registering points and rendering the score.
    """

    def __init__(
        self, adapter: PlatformAdapter, config: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize the engine.

        Args:
            adapter: Platform adapter to use for rendering and input
            config: Configuration options for the engine
        """
        self.adapter = adapter
        self.config = config or {}
        self.event_bus = EventBus.get_instance()
        self.game = None

    @abstractmethod
    async def initialize(self) -> None:
        """
        Initialize the engine and prepare for a game.
        """
        await self.adapter.initialize()

    @abstractmethod
    async def shutdown(self) -> None:
        """
        Shut down the engine and clean up resources.
        """
        await self.adapter.shutdown()

    @abstractmethod
    async def start_game(
        self, player_a: Optional[str] = None, player_b: Optional[str] = None
    ) -> Any:
        """
        Start a new game.

        Args:
            player_a: Name of the first player
            player_b: Name of the second player

        Returns:
            The new game
        """
        pass

    @abstractmethod
    async def score_point(self, player_name: str) -> str:
        """
        Register a point for a player.

        Args:
            player_name: Name of the player who won the point

        Returns:
            The score after the point
        """
        pass

    @abstractmethod
    async def render_state(self) -> None:
        """
        Render the current game state.
        """
        pass
