"""
Board manipulation for the 2048 rules engine: compaction and merging of lines, directional moves, tile spawning
and terminal-state detection.
"""

from collections.abc import Sequence

from numpy import all as np_all
from numpy import any as np_any
from numpy import argwhere, array, int64, ndarray, rot90, zeros, zeros_like
from numpy.random import PCG64DXSM, Generator, default_rng

from game2048.core.gamemove import Direction

# ##>: Spawned tile values and their probabilities (90% for 2, 10% for 4).
TILE_VALUES = (2, 4)
TILE_PROBS = (0.9, 0.1)


def make_generator(seed: int | None = None) -> Generator:
    """
    Build the random generator used for tile spawning.

    Parameters
    ----------
    seed : int, optional
        Seed for reproducible games. A fresh entropy source is used when omitted.

    Returns
    -------
    Generator
        A NumPy generator backed by PCG64DXSM.
    """
    return default_rng(PCG64DXSM(seed))


def empty_board(size: int) -> ndarray:
    """Return an all-zero ``size`` x ``size`` board."""
    return zeros((size, size), dtype=int64)


def merge_line(line: ndarray) -> tuple[int, ndarray]:
    """
    Compact a line toward index 0 and merge adjacent equal values.

    Parameters
    ----------
    line : ndarray
        A 1D array holding one row or column, ordered from the target edge inward.

    Returns
    -------
    score : int
        The sum of the values created by merges.
    merged_line : ndarray
        The non-zero values after merging, still ordered from the target edge.

    Notes
    -----
    - Zeros are removed before merging.
    - Merging proceeds from the target edge inward in a single pass.
    - A value produced by a merge never merges again in the same call.
    """
    non_zero = line[line != 0]
    if len(non_zero) <= 1:
        return 0, non_zero

    result = []
    score = 0

    i = 0
    while i < len(non_zero) - 1:
        if non_zero[i] == non_zero[i + 1]:
            merged = non_zero[i] * 2
            result.append(merged)
            score += int(merged)
            i += 2
        else:
            result.append(non_zero[i])
            i += 1

    if i == len(non_zero) - 1:
        result.append(non_zero[-1])

    return score, array(result, dtype=line.dtype)


def slide_and_merge(board: ndarray) -> tuple[int, ndarray]:
    """
    Slide every row of the board to the left, merge adjacent cells, and compute the score.

    Parameters
    ----------
    board : ndarray
        The game board as a 2D array.

    Returns
    -------
    score : int
        The total score obtained from all merges.
    updated_board : ndarray
        A new board after sliding and merging. The input is left untouched.

    Notes
    -----
    For other directions, rotate the board before calling this function.
    """
    result = zeros_like(board)
    score = 0

    for i, row in enumerate(board):
        score_row, merged_row = merge_line(row)
        score += score_row
        result[i, : len(merged_row)] = merged_row

    return score, result


def latent_state(state: ndarray, direction: Direction | int) -> tuple[ndarray, int]:
    """
    Compute the board after a move, without adding a new tile.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.
    direction : Direction | int
        The move to apply (0: left, 1: up, 2: right, 3: down).

    Returns
    -------
    new_state : ndarray
        A new board after applying the move.
    reward : int
        The score obtained from the merges of this move.
    """
    rotated_board = rot90(state, k=int(direction))
    reward, updated_board = slide_and_merge(rotated_board)
    return rot90(updated_board, k=-int(direction)).copy(), reward


def fill_cells(
    state: ndarray,
    number_tile: int,
    rng: Generator,
    values: Sequence[int] = TILE_VALUES,
    probs: Sequence[float] = TILE_PROBS,
) -> ndarray:
    """
    Fill empty cells with new tiles.

    Parameters
    ----------
    state : ndarray
        The current state of the game board. **Modified in-place.**
    number_tile : int
        Number of new tiles to add.
    rng : Generator
        Source of randomness for both the cell choice and the tile value.
    values : Sequence[int], optional
        Candidate tile values (default is 2 and 4).
    probs : Sequence[float], optional
        Probability of each candidate value (default is 0.9 and 0.1).

    Returns
    -------
    ndarray
        The same array reference with new tiles added.

    Notes
    -----
    - Cells are chosen uniformly among the empty ones, without replacement.
    - If there are fewer empty cells than requested, all of them are filled.
    - A full board is returned unchanged: placement is skipped, which is not a terminal condition by itself.
    """
    available_cells = argwhere(state == 0)
    number_tile = min(number_tile, len(available_cells))
    if number_tile <= 0:
        return state

    chosen_indices = rng.choice(len(available_cells), size=number_tile, replace=False)
    new_values = rng.choice(values, size=number_tile, p=probs)

    state[tuple(available_cells[chosen_indices].T)] = new_values
    return state


def is_done(state: ndarray) -> bool:
    """
    Check if the game has ended by determining if any moves are possible.

    The game is over when there are no empty cells and no adjacent cells share a value.
    """
    return bool(
        np_all(state != 0) and not np_any(state[:-1] == state[1:]) and not np_any(state[:, :-1] == state[:, 1:])
    )


def max_tile(state: ndarray) -> int:
    """Return the largest tile on the board, or 0 for an empty board."""
    return int(state.max()) if state.size else 0
