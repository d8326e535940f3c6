"""
Command-line interface adapter for the tennisgame engine.

This module provides an adapter for console-based scoring: the score is
printed after every point and the scorer types who won the next one.
"""

import asyncio
from typing import Any, Dict, List, Optional, Union
from enum import Enum

from tennisgame.adapters.base import PlatformAdapter
from tennisgame.common.io_interface import (
    AsyncIOInterfaceWrapper,
    ConsoleIOInterface,
    IOInterface,
)


class CLIAdapter(PlatformAdapter):
    """
    Command-line interface adapter for the tennisgame engine.

    Blocking console reads run in a worker thread, so the engine's event
    loop keeps running while the scorer types.
    """

    def __init__(self, io_interface: Optional[IOInterface] = None):
        """
        Initialize the CLI adapter.

        Args:
            io_interface: Optional IOInterface to use for I/O. If None, a
                          console IOInterface is used.
        """
        self.io_interface = io_interface or ConsoleIOInterface()
        self._io = AsyncIOInterfaceWrapper(self.io_interface)
        # Prompt still waiting for an answer after a timed-out request
        self._pending: Optional[asyncio.Future] = None

    async def shutdown(self) -> None:
        """Shutdown the CLI adapter."""
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
        self._io.close()

    async def render_game_state(self, state: Dict[str, Any]) -> None:
        """
        Print the current score.

        Args:
            state: Adapter-format snapshot of the game
        """
        players = state.get("players", [])
        tally = " - ".join(
            f"{player.get('name')} {player.get('points_won', 0)}" for player in players
        )
        await self._io.output(f"{state.get('score')}  ({tally})")

    async def request_point_winner(
        self,
        player_names: List[str],
        timeout_seconds: Optional[float] = None,
    ) -> str:
        """
        Ask on the console who won the next point.

        A prompt left unanswered by a timed-out request stays open, and the
        next request waits for that same answer instead of asking again.

        Args:
            player_names: Names of the two players
            timeout_seconds: Optional time limit for the answer

        Returns:
            Name of the point winner

        Raises:
            TimeoutError: If no answer arrives within the time limit
        """
        if self._pending is None:
            self._pending = asyncio.ensure_future(
                self._io.get_point_winner(player_names)
            )
        pending = self._pending
        try:
            if not timeout_seconds:
                return await pending
            return await asyncio.wait_for(asyncio.shield(pending), timeout_seconds)
        except asyncio.TimeoutError:
            raise TimeoutError(
                f"No point winner entered within {timeout_seconds} seconds"
            ) from None
        finally:
            if pending.done():
                self._pending = None

    async def notify_game_event(
        self, event_type: Union[str, Enum], data: Dict[str, Any]
    ) -> None:
        """
        Notify the user of a game event via the console.

        Args:
            event_type: The type of event that occurred
            data: Data associated with the event
        """
        if isinstance(event_type, Enum):
            event_type = event_type.name

        message = self._format_event_message(event_type, data)
        if message:
            await self._io.output(message)

    def _format_event_message(
        self, event_type: str, data: Dict[str, Any]
    ) -> Optional[str]:
        """
        Format an event message based on the event type.

        Returns:
            Formatted message string or None if no message needed
        """
        if event_type == "GAME_CREATED":
            return f"New game: {data.get('player_a')} vs {data.get('player_b')}"

        elif event_type == "POINT_WON":
            return f"Point {data.get('point_number')} to {data.get('player_name')}"

        elif event_type == "POINT_REJECTED":
            return f"Point not counted: {data.get('reason')}"

        elif event_type == "GAME_ENDED":
            return (
                f"Game to {data.get('winner')} "
                f"after {data.get('points_played')} points"
            )

        return None
