"""
Command-line entry point.

Three modes:

- replay: ``python -m tennisgame -n Alice Bob -p Alice Alice Bob``
- simulation: ``python -m tennisgame -s 1000 --seed 7 --bias 55``
- interactive (no mode flag): type the winner of each point
"""

import argparse
import asyncio
import logging
import random
import sys
from collections import Counter
from typing import List, Optional

from tennisgame.adapters import CLIAdapter, DummyAdapter
from tennisgame.common.io_interface import (
    ConsoleIOInterface,
    DummyIOInterface,
    IOInterface,
    LoggingIOInterface,
    TeeIOInterface,
)
from tennisgame.engine import TennisEngine
from tennisgame.errors import TennisError
from tennisgame.events import EngineEventType

logger = logging.getLogger("tennisgame.cli")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tennisgame", description="Keep the score of a game of tennis."
    )
    parser.add_argument(
        "-n",
        "--names",
        nargs=2,
        default=["Alice", "Bob"],
        metavar=("PLAYER_A", "PLAYER_B"),
        help="names of the two players (default: Alice Bob)",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-p",
        "--points",
        nargs="+",
        metavar="NAME",
        help="replay the given point winners and print the score after each",
    )
    mode.add_argument(
        "-s",
        "--simulate",
        type=int,
        metavar="GAMES",
        help="play GAMES games with random point winners and print the tally",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="random seed for --simulate"
    )
    parser.add_argument(
        "--bias",
        type=int,
        default=50,
        help="chance in percent that the first player wins a point (default: 50)",
    )
    parser.add_argument(
        "--transcript",
        metavar="FILE",
        help="append every printed line to FILE",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="do not print to the console"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )

    args = parser.parse_args(argv)
    if args.simulate is not None and args.simulate < 1:
        parser.error("--simulate needs at least one game")
    if not 0 <= args.bias <= 100:
        parser.error("--bias must be between 0 and 100")
    if args.quiet and args.points is None and args.simulate is None:
        parser.error("--quiet needs --points or --simulate")
    return args


def build_io(args: argparse.Namespace) -> IOInterface:
    """Pick the IO interface matching the output options."""
    if args.transcript and args.quiet:
        return LoggingIOInterface(args.transcript)
    if args.quiet:
        return DummyIOInterface()
    if args.transcript:
        return TeeIOInterface(
            ConsoleIOInterface(), LoggingIOInterface(args.transcript)
        )
    return ConsoleIOInterface()


async def replay(args: argparse.Namespace, io_interface: IOInterface) -> str:
    """Score the listed points and return the final score."""
    engine = TennisEngine(CLIAdapter(io_interface))
    await engine.initialize()
    try:
        await engine.start_game(*args.names)
        for name in args.points:
            await engine.score_point(name)
        return engine.game.get_score()
    finally:
        await engine.shutdown()


async def interactive(args: argparse.Namespace, io_interface: IOInterface) -> str:
    """Ask for point winners until the game is decided and return the winner."""
    engine = TennisEngine(CLIAdapter(io_interface))
    await engine.initialize()
    try:
        await engine.start_game(*args.names)
        return await engine.play_game()
    finally:
        await engine.shutdown()


async def simulate(args: argparse.Namespace, io_interface: IOInterface) -> Counter:
    """Play random games and report how often each player won."""
    rng = random.Random(args.seed)
    player_a, player_b = args.names

    def biased_winner(player_names):
        return player_a if rng.randrange(100) < args.bias else player_b

    adapter = DummyAdapter(strategy_function=biased_winner, rng=rng)
    engine = TennisEngine(adapter, {"render_every_point": False})
    await engine.initialize()

    wins: Counter = Counter()
    try:
        for _ in range(args.simulate):
            await engine.start_game(player_a, player_b)
            wins[await engine.play_game()] += 1
            adapter.clear()
    finally:
        await engine.shutdown()

    engine.event_bus.emit(
        EngineEventType.SIMULATION_RESULT,
        {"games": args.simulate, "wins": dict(wins), "seed": args.seed},
    )

    io_interface.output(f"Finished playing {args.simulate} games.")
    for name in args.names:
        percentage = wins[name] / args.simulate * 100
        io_interface.output(f"{name} won {wins[name]} times ({percentage:.2f}%).")
    return wins


async def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    io_interface = build_io(args)

    try:
        if args.points is not None:
            await replay(args, io_interface)
        elif args.simulate is not None:
            await simulate(args, io_interface)
        else:
            await interactive(args, io_interface)
    except (TennisError, ValueError, EOFError) as e:
        logger.debug("Scoring failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
