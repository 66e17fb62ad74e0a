"""
Move utilities for the 2048 rules engine: the direction enumeration and the vectorised checks that tell
which directions would change a board.
"""

from enum import IntEnum

from numpy import bool_, integer, ndarray


class Direction(IntEnum):
    """
    The four sliding directions.

    The value of each member is the number of counter-clockwise quarter turns (``numpy.rot90``) that brings the
    direction's target edge to the left of the board, so every move can be computed as a left slide.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @classmethod
    def parse(cls, value: 'Direction | int | str') -> 'Direction':
        """
        Convert a direction, an action index or a direction name into a ``Direction``.

        Parameters
        ----------
        value : Direction | int | str
            A member, its integer value (0: left, 1: up, 2: right, 3: down) or its case-insensitive name.

        Returns
        -------
        Direction
            The matching member.

        Raises
        ------
        ValueError
            If ``value`` does not name one of the four directions.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f'Unknown direction name: {value!r}') from None
        if isinstance(value, (int, integer)) and not isinstance(value, (bool, bool_)):
            try:
                return cls(int(value))
            except ValueError:
                pass
        raise ValueError(f'Unknown direction: {value!r}')


def _shifts_toward(near: ndarray, far: ndarray) -> bool:
    """
    Tell whether tiles in ``far`` can shift into ``near``.

    ``near`` and ``far`` are the same-shaped slices of neighbouring cells, ``near`` being the one closer to the
    target edge. A shift happens when a tile faces an empty cell or an equal tile.
    """
    return bool(((far != 0) & ((near == 0) | (near == far))).any())


def legal_actions_mask(state: ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask for all four directions.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask for (left, up, right, down) where True means the move would change the board.
    """
    west, east = state[:, :-1], state[:, 1:]
    north, south = state[:-1, :], state[1:, :]
    return (
        _shifts_toward(west, east),
        _shifts_toward(north, south),
        _shifts_toward(east, west),
        _shifts_toward(south, north),
    )


def illegal_actions(state: ndarray) -> list[Direction]:
    """
    Determine the directions that would leave the board unchanged.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Directions that are no-ops on this board.
    """
    mask = legal_actions_mask(state)
    return [direction for direction in Direction if not mask[direction]]


def legal_actions(state: ndarray) -> list[Direction]:
    """
    Determine the directions that would change the board.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Directions that slide or merge at least one tile.
    """
    mask = legal_actions_mask(state)
    return [direction for direction in Direction if mask[direction]]


def can_move(board: ndarray) -> bool:
    """
    Check if any tile can move left on the given board.

    For other directions, rotate the board before calling this function.
    """
    return _shifts_toward(board[:, :-1], board[:, 1:])
