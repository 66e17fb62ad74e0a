"""2048 rules engine owning the grid, the score and the game status."""

import logging

from numpy import ndarray, rot90
from numpy.random import Generator

from game2048.config import GameConfig, default_config
from game2048.core.gameboard import empty_board, fill_cells, is_done, latent_state, make_generator, max_tile
from game2048.core.gamemove import Direction, can_move, legal_actions
from game2048.engine.snapshot import GameSnapshot

_logger = logging.getLogger(__name__)


class GameEngine:
    """
    2048 game engine.

    The engine owns a square grid of tiles and applies directional moves to it. A move compacts every line toward
    the target edge, merges adjacent equal tiles once, compacts again, then spawns one random tile. The grid is
    never exposed by reference: ``get_grid`` always returns a copy.

    The game is won once a tile reaches ``config.win_tile`` and stays won until ``reset``. It is over when no move
    can change the grid; further moves are then no-ops.
    """

    def __init__(
        self,
        size: int | None = None,
        *,
        config: GameConfig | None = None,
        rng: Generator | None = None,
        seed: int | None = None,
    ):
        """
        Initialize the engine and seed the grid with the starting tiles.

        Parameters
        ----------
        size : int, optional
            The size of the square grid. Overrides ``config.size`` when given (default is 4).
        config : GameConfig, optional
            The rules of the game (default is ``default_config``).
        rng : Generator, optional
            Source of randomness for tile spawning. Takes precedence over ``seed``.
        seed : int, optional
            Seed used to build a generator when ``rng`` is not given.

        Raises
        ------
        ValueError
            If the grid size is smaller than 2.
        """
        config = config or default_config
        if size is not None and size != config.size:
            config = config.with_size(size)

        self._config = config
        self._rng = rng if rng is not None else make_generator(seed)
        self._grid: ndarray = empty_board(config.size)
        self._score = 0
        self._won = False

        self.reset()

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def size(self) -> int:
        return self._config.size

    @property
    def score(self) -> int:
        return self._score

    @property
    def won(self) -> bool:
        return self._won

    @property
    def game_over(self) -> bool:
        """
        Check if the game is over.

        Returns
        -------
        bool
            True when the grid is full and no two adjacent tiles share a value.
        """
        return is_done(self._grid)

    @property
    def max_tile(self) -> int:
        return max_tile(self._grid)

    @property
    def legal_moves(self) -> list[Direction]:
        """Directions that would change the grid."""
        return legal_actions(self._grid)

    def get_grid(self) -> ndarray:
        """Return a copy of the grid."""
        return self._grid.copy()

    def snapshot(self) -> GameSnapshot:
        """Freeze the current grid, score and status flags."""
        return GameSnapshot.from_board(self._grid, score=self._score, game_over=self.game_over, won=self._won)

    def reset(self) -> None:
        """
        Start a new game.

        Clears the grid, the score and the win flag, then places ``config.start_tiles`` random tiles.
        """
        self._grid = empty_board(self._config.size)
        self._score = 0
        self._won = False
        self._spawn(self._config.start_tiles)
        _logger.debug('New %dx%d game started', self._config.size, self._config.size)

    def move(self, direction: Direction | int | str) -> bool:
        """
        Slide the tiles in the given direction.

        Parameters
        ----------
        direction : Direction | int | str
            The move to apply (0: left, 1: up, 2: right, 3: down), or its name.

        Returns
        -------
        bool
            True if any tile slid or merged, False if the grid was left untouched.

        Raises
        ------
        ValueError
            If ``direction`` is not one of the four directions.

        Notes
        -----
        - When nothing moves, the score, the grid and the status flags are left untouched and no tile is spawned.
        - When the grid is full after the move, the spawn is skipped. This alone does not end the game.
        """
        direction = Direction.parse(direction)

        # ##: Nothing can slide or merge toward this edge.
        if not can_move(rot90(self._grid, k=int(direction))):
            return False

        updated, reward = latent_state(self._grid, direction)
        self._grid = updated
        self._score += reward

        # ##: Fill randomly one cell.
        self._spawn(1)

        if not self._won and self.max_tile >= self._config.win_tile:
            self._won = True
            _logger.info('Game won with a %d tile, score %d', self.max_tile, self._score)

        if self.game_over:
            _logger.info('Game over, final score %d, max tile %d', self._score, self.max_tile)

        return True

    def _spawn(self, number_tile: int) -> None:
        fill_cells(
            self._grid,
            number_tile=number_tile,
            rng=self._rng,
            values=self._config.tile_values,
            probs=self._config.tile_probs,
        )
