"""
Rules configuration for the 2048 engine.
"""

from dataclasses import dataclass, replace
from math import isclose

from game2048.core.gameboard import TILE_PROBS, TILE_VALUES


def _is_power_of_two(value: int) -> bool:
    return value > 0 and value & (value - 1) == 0


@dataclass(frozen=True)
class GameConfig:
    """
    Tunable rules of a game.

    Every field is validated on construction; an invalid value raises ``ValueError``.
    """

    # ##>: Board geometry.
    size: int = 4  # Side of the square grid

    # ##>: Win condition.
    win_tile: int = 2048  # Smallest tile that marks the game as won

    # ##>: Tile spawning.
    start_tiles: int = 2  # Tiles placed by reset
    tile_values: tuple[int, ...] = TILE_VALUES
    tile_probs: tuple[float, ...] = TILE_PROBS

    def __post_init__(self):
        if self.size < 2:
            raise ValueError(f'Grid size must be at least 2, got {self.size}')
        if not _is_power_of_two(self.win_tile) or self.win_tile < 4:
            raise ValueError(f'Win tile must be a power of two of at least 4, got {self.win_tile}')
        # ##>: At least one tile to play with and one empty cell, so a new game is never over.
        if not 1 <= self.start_tiles <= self.size * self.size - 1:
            raise ValueError(
                f'Start tiles must be between 1 and {self.size * self.size - 1} on a {self.size}x{self.size} grid, '
                f'got {self.start_tiles}'
            )
        if not self.tile_values or len(self.tile_values) != len(self.tile_probs):
            raise ValueError('Tile values and tile probabilities must be non-empty and of the same length')
        if not all(_is_power_of_two(value) and value >= 2 for value in self.tile_values):
            raise ValueError(f'Tile values must be powers of two, got {self.tile_values}')
        if any(prob < 0 for prob in self.tile_probs) or not isclose(sum(self.tile_probs), 1.0):
            raise ValueError(f'Tile probabilities must be non-negative and sum to 1, got {self.tile_probs}')

    def with_size(self, size: int) -> 'GameConfig':
        """Return a copy of this configuration for another grid size."""
        return replace(self, size=size)


default_config = GameConfig()
