"""
Tennis engine implementation.

This module provides the TennisEngine class, which implements the ScoreEngine
interface for a single game of tennis.
"""

from typing import Any, Dict, List, Optional, Tuple
import logging
import time

from tennisgame.adapters import PlatformAdapter
from tennisgame.engine.base import ScoreEngine
from tennisgame.errors import UnknownPlayerError
from tennisgame.events import EngineEventType
from tennisgame.game import TennisGame

logger = logging.getLogger("tennisgame.engine")

DEFAULT_CONFIG: Dict[str, Any] = {
    "player_a": "Player A",
    "player_b": "Player B",
    # Render the score after every accepted point
    "render_every_point": True,
    # Seconds the adapter gets to name a point winner; None waits forever
    "point_timeout": None,
    # Unknown names accepted from the adapter before play_game() gives up
    "max_rejected_points": 10,
}


class TennisEngine(ScoreEngine):
    """
    Engine implementation for a single game of tennis.

    Game events published on the event bus are collected while the engine
    works and forwarded to the adapter once the action that caused them is
    complete.
    """

    def __init__(
        self, adapter: PlatformAdapter, config: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize the tennis engine.

        Args:
            adapter: Platform adapter to use for rendering and input
            config: Configuration options, merged over DEFAULT_CONFIG
        """
        super().__init__(adapter, {**DEFAULT_CONFIG, **(config or {})})
        self.game: Optional[TennisGame] = None
        self._pending_events: List[Tuple[str, Dict[str, Any]]] = []
        self._unsubscribe = None

    async def initialize(self) -> None:
        """
        Initialize the engine and start listening for game events.
        """
        await super().initialize()

        if self._unsubscribe is None:
            self._unsubscribe = self.event_bus.on_any(self._collect_event)

        self.event_bus.emit(
            EngineEventType.ENGINE_INIT,
            {
                "engine_type": "tennis",
                "config": self.config,
                "timestamp": time.time(),
            },
        )

    async def shutdown(self) -> None:
        """
        Shut down the engine and clean up resources.
        """
        self.event_bus.emit(
            EngineEventType.ENGINE_SHUTDOWN, {"timestamp": time.time()}
        )

        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._pending_events.clear()

        await super().shutdown()

    def _collect_event(self, event: Tuple[str, Dict[str, Any]]) -> None:
        event_type, data = event
        if self.game is not None and data.get("game_id") == self.game.id:
            self._pending_events.append((event_type, data))

    async def _flush_events(self) -> None:
        events, self._pending_events = self._pending_events, []
        for event_type, data in events:
            await self.adapter.notify_game_event(event_type, data)

    def _require_game(self) -> TennisGame:
        if self.game is None:
            raise RuntimeError("Game not started. Call start_game() first.")
        return self.game

    async def start_game(
        self, player_a: Optional[str] = None, player_b: Optional[str] = None
    ) -> TennisGame:
        """
        Start a new game at Love-All.

        Args:
            player_a: Name of the first player; defaults to config["player_a"]
            player_b: Name of the second player; defaults to config["player_b"]

        Returns:
            The new game

        Raises:
            InvalidPlayerError: If the names are missing, empty or equal
        """
        self.game = TennisGame(
            player_a if player_a is not None else self.config["player_a"],
            player_b if player_b is not None else self.config["player_b"],
        )
        logger.debug(f"Started game {self.game.id}: {self.game!r}")

        self.event_bus.emit(
            EngineEventType.GAME_CREATED,
            {
                "game_id": self.game.id,
                "player_a": self.game.player_a_name,
                "player_b": self.game.player_b_name,
                "timestamp": time.time(),
            },
        )
        await self._flush_events()
        await self.render_state()
        return self.game

    async def score_point(self, player_name: str) -> str:
        """
        Register a point for a player.

        Args:
            player_name: Name of the player who won the point

        Returns:
            The score after the point

        Raises:
            RuntimeError: If no game has been started
            UnknownPlayerError: If the name belongs to neither player
            GameAlreadyWonError: If the game already has a winner
        """
        game = self._require_game()
        try:
            game.won_point(player_name)
        finally:
            await self._flush_events()

        if self.config["render_every_point"] or game.is_finished:
            await self.render_state()
        return game.get_score()

    async def play_game(self) -> str:
        """
        Ask the adapter for point winners until the game is decided.

        Returns:
            Name of the winner

        Raises:
            RuntimeError: If no game has been started, or the adapter keeps
                          naming unknown players
        """
        game = self._require_game()
        names = [game.player_a_name, game.player_b_name]
        rejected = 0

        while not game.is_finished:
            winner = await self.adapter.request_point_winner(
                names, self.config["point_timeout"]
            )
            try:
                await self.score_point(winner)
            except UnknownPlayerError:
                rejected += 1
                if rejected >= self.config["max_rejected_points"]:
                    raise RuntimeError(
                        f"Adapter named {rejected} unknown players, giving up"
                    )

        return game.winner

    async def render_state(self) -> None:
        """
        Render the current game state.
        """
        if self.game is None:
            return
        await self.adapter.render_game_state(self.game.to_adapter_format())
