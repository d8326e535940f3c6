"""
Platform adapters for the tennisgame engine.

This package provides adapters that translate between the score engine and
the platform a game is shown on (console, tests, simulations).
"""

from tennisgame.adapters.base import PlatformAdapter
from tennisgame.adapters.cli import CLIAdapter
from tennisgame.adapters.dummy import DummyAdapter

__all__ = ["PlatformAdapter", "CLIAdapter", "DummyAdapter"]
