"""Immutable view of a game published to observers."""

from dataclasses import dataclass

from numpy import array, int64, ndarray


@dataclass(frozen=True)
class GameSnapshot:
    """
    Grid, score and status flags of a game at one point in time.

    Equality is structural: two snapshots are equal when their cells, score and flags are equal.
    """

    grid: tuple[tuple[int, ...], ...]
    score: int = 0
    game_over: bool = False
    won: bool = False

    @classmethod
    def from_board(cls, board: ndarray, score: int, game_over: bool, won: bool) -> 'GameSnapshot':
        """Freeze a board array into a snapshot."""
        return cls(
            grid=tuple(tuple(int(cell) for cell in row) for row in board.tolist()),
            score=int(score),
            game_over=bool(game_over),
            won=bool(won),
        )

    @property
    def size(self) -> int:
        return len(self.grid)

    def to_array(self) -> ndarray:
        """Return the grid as a new NumPy array."""
        return array(self.grid, dtype=int64)
