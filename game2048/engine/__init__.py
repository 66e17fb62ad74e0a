# -*- coding: utf-8 -*-
"""
Stateful side of the 2048 rules engine.

This package provides the `GameEngine` class, which owns the grid and the score, and the `GameStateStore` class,
which publishes immutable `GameSnapshot` values to subscribers after every effective move.
"""

from .game import GameEngine
from .snapshot import GameSnapshot
from .store import GameStateStore

__all__ = ["GameEngine", "GameSnapshot", "GameStateStore"]
