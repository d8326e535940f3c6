"""
This module contains the IOInterface abstract base class and its implementations.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Sequence

import aiofiles


def _match_player(answer: str, player_names: Sequence[str]) -> Optional[str]:
    if answer in player_names:
        return answer
    numbers = {str(i + 1): name for i, name in enumerate(player_names)}
    if answer in numbers:
        return numbers[answer]
    folded = [name for name in player_names if name.lower() == answer.lower()]
    if len(folded) == 1:
        return folded[0]
    return None


class IOInterface(ABC):
    """
    Abstract base class for an IO interface.

    This class defines the interface for input/output operations used by
    adapters to show scores and to ask who won a point.
    """

    @abstractmethod
    def output(self, message: str) -> None:
        """Output a message to the interface."""
        pass

    @abstractmethod
    def input(self, prompt: str) -> str:
        """Get input from the user with a prompt."""
        pass

    def get_point_winner(self, player_names: Sequence[str]) -> str:
        """
        Ask who won the next point.

        The answer may be the player's exact name, their number (1 or 2), or
        their name in any case when that matches only one player.
        """
        attempts = 0
        while attempts < 3:
            answer = self.input(
                f"Who won the point? ({' / '.join(player_names)}) "
            ).strip()
            winner = _match_player(answer, player_names)
            if winner is not None:
                return winner
            self.output(
                f"Invalid choice, valid players are: {', '.join(player_names)}"
            )
            attempts += 1
        raise ValueError("Too many invalid answers. Game aborted.")


class DummyIOInterface(IOInterface):
    """
    A dummy IO interface for simulation purposes. Does not perform any actual IO.
    """

    def output(self, message: str) -> None:
        """Simulates output operation."""
        pass

    def input(self, prompt: str) -> str:
        """Simulates input operation."""
        return ""

    def get_point_winner(self, player_names: Sequence[str]) -> str:
        if player_names:
            return player_names[0]
        raise ValueError("No players to choose from.")


class TestIOInterface(IOInterface):
    """
    A test IO interface. Collects output messages and answers prompts from a queue.
    """

    __test__ = False

    def __init__(self):
        self.sent_messages = []
        self.input_responses = []
        self.prompts = []

    def output(self, message: str) -> None:
        self.sent_messages.append(message)

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.input_responses:
            return self.input_responses.pop(0)
        raise ValueError("No more responses left in TestIOInterface queue.")

    def add_response(self, response: str) -> None:
        """Add an answer to the queue of prompt responses."""
        self.input_responses.append(response)


class ConsoleIOInterface(IOInterface):
    """
    A console IO interface for interactive scoring.
    """

    def output(self, message: str) -> None:
        print(message)

    def input(self, prompt: str) -> str:
        return input(prompt)


class LoggingIOInterface(IOInterface):
    """
    A logging IO interface that appends every output message to a transcript file.

    Input is not read from the file; prompts are recorded and answered with an
    empty string.
    """

    def __init__(self, log_file_path: str):
        self.log_file_path = log_file_path

    def output(self, message: str) -> None:
        """Write an output message to the log file."""
        with open(self.log_file_path, "a", encoding="utf-8") as log_file:
            log_file.write(message + "\n")

    def input(self, prompt: str) -> str:
        """Log the prompt and return empty string."""
        self.output(f"[INPUT PROMPT] {prompt}")
        return ""

    async def output_async(self, message: str) -> None:
        """Async version of output."""
        async with aiofiles.open(
            self.log_file_path, mode="a", encoding="utf-8"
        ) as log_file:
            await log_file.write(message + "\n")


class TeeIOInterface(IOInterface):
    """
    Sends output to a primary interface and to a transcript, reads from the primary.
    """

    def __init__(self, primary: IOInterface, transcript: LoggingIOInterface):
        self.primary = primary
        self.transcript = transcript

    def output(self, message: str) -> None:
        self.primary.output(message)
        self.transcript.output(message)

    def input(self, prompt: str) -> str:
        answer = self.primary.input(prompt)
        self.transcript.output(f"{prompt}{answer}")
        return answer


class AsyncIOInterfaceWrapper:
    """
    Runs the blocking methods of an IOInterface in a thread pool so that they
    can be awaited from the engine's event loop.
    """

    def __init__(self, io_interface: IOInterface):
        self.io_interface = io_interface
        self.executor = ThreadPoolExecutor(max_workers=1)

    async def output(self, message: str) -> None:
        if isinstance(self.io_interface, LoggingIOInterface):
            await self.io_interface.output_async(message)
            return
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(self.executor, self.io_interface.output, message)

    async def input(self, prompt: str) -> str:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            self.executor, self.io_interface.input, prompt
        )

    async def get_point_winner(self, player_names: Sequence[str]) -> str:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            self.executor, self.io_interface.get_point_winner, player_names
        )

    def close(self) -> None:
        """Shut down the worker thread."""
        self.executor.shutdown(wait=False)
