# -*- coding: utf-8 -*-
"""
Pure board functions for the 2048 rules engine.

It includes the move directions, line compaction and merging, directional moves without spawning, tile spawning,
legal-move detection and terminal-state checks.
"""

from .gameboard import (
    TILE_PROBS,
    TILE_VALUES,
    empty_board,
    fill_cells,
    is_done,
    latent_state,
    make_generator,
    max_tile,
    merge_line,
    slide_and_merge,
)
from .gamemove import Direction, can_move, illegal_actions, legal_actions, legal_actions_mask

__all__ = [
    "Direction",
    "TILE_PROBS",
    "TILE_VALUES",
    "can_move",
    "empty_board",
    "fill_cells",
    "illegal_actions",
    "is_done",
    "latent_state",
    "legal_actions",
    "legal_actions_mask",
    "make_generator",
    "max_tile",
    "merge_line",
    "slide_and_merge",
]
