"""
Score engines for tennisgame.

This package provides the engines that drive a game through a platform
adapter, independently of how the score is shown.
"""

from tennisgame.engine.base import ScoreEngine
from tennisgame.engine.tennis import DEFAULT_CONFIG, TennisEngine

__all__ = ["ScoreEngine", "TennisEngine", "DEFAULT_CONFIG"]
