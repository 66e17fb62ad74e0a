# -*- coding: utf-8 -*-
"""
Rules engine of the 2048 sliding-tile puzzle.

`GameEngine` owns the grid and the score and applies moves; `GameStateStore` wraps an engine and publishes a
`GameSnapshot` to its subscribers after every effective move. Rendering and input handling are left to the caller.
"""

from .config import GameConfig
from .core import Direction
from .engine import GameEngine, GameSnapshot, GameStateStore

__all__ = ["Direction", "GameConfig", "GameEngine", "GameSnapshot", "GameStateStore"]
__version__ = "0.1.0"
