# -*- coding: utf-8 -*-
"""
Play headless 2048 games with a random policy.

Usage:
    game2048-simulate --games 100 --seed 0
    python -m game2048.simulate --size 5 --verbose
"""
import logging
from argparse import ArgumentParser
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np
from tqdm import trange

from game2048.config import GameConfig
from game2048.core.gameboard import make_generator
from game2048.engine import GameEngine, GameStateStore

_logger = logging.getLogger(__name__)


@dataclass
class SimulationResults:
    """Container for the outcome of a batch of games."""

    scores: list[int] = field(default_factory=list)
    max_tiles: list[int] = field(default_factory=list)
    moves: list[int] = field(default_factory=list)
    wins: int = 0

    @property
    def games(self) -> int:
        return len(self.scores)

    @property
    def mean_score(self) -> float:
        return float(np.mean(self.scores)) if self.scores else 0.0

    @property
    def tile_frequency(self) -> dict[int, int]:
        return dict(sorted(Counter(self.max_tiles).items()))

    def summary(self) -> str:
        """Generate summary report."""
        lines = [
            '=' * 40,
            f'Games played:   {self.games:>8d}',
            f'Games won:      {self.wins:>8d}',
            f'Mean score:     {self.mean_score:>8.1f}',
            f'Best score:     {max(self.scores, default=0):>8d}',
            '-' * 40,
            'Max tile frequency:',
        ]
        lines.extend(f'  {tile:>6d}: {count}' for tile, count in self.tile_frequency.items())
        lines.append('=' * 40)
        return '\n'.join(lines)


def play_random_game(store: GameStateStore, rng: np.random.Generator) -> int:
    """
    Play one game to the end by choosing uniformly among the legal moves.

    Parameters
    ----------
    store : GameStateStore
        The store driving the game. It is not reset before playing.
    rng : Generator
        Source of randomness for the move choice.

    Returns
    -------
    int
        Number of moves played.
    """
    moves = 0
    while not store.state.game_over:
        legal = store.engine.legal_moves
        if not legal:
            break
        store.move(legal[rng.integers(len(legal))])
        moves += 1
    return moves


def simulate(games: int = 10, size: int = 4, seed: int | None = None, progress: bool = True) -> SimulationResults:
    """
    Play several random games.

    Parameters
    ----------
    games : int, optional
        Number of games to play (default is 10).
    size : int, optional
        Side of the square grid (default is 4).
    seed : int, optional
        Seed for both the tile spawns and the move choices.
    progress : bool, optional
        Whether to show a progress bar (default is True).

    Returns
    -------
    SimulationResults
        Scores, max tiles, move counts and wins of every game.
    """
    rng = make_generator(seed)
    store = GameStateStore(GameEngine(config=GameConfig(size=size), rng=rng))
    results = SimulationResults()

    with trange(games, disable=not progress) as period:
        for num in period:
            store.reset()
            moves = play_random_game(store, rng)

            state = store.state
            results.scores.append(state.score)
            results.max_tiles.append(store.engine.max_tile)
            results.moves.append(moves)
            results.wins += int(state.won)
            _logger.debug('Game %d finished after %d moves with score %d', num + 1, moves, state.score)

            # ##: Log.
            period.set_description(f'Simulation: {num + 1}')
            period.set_postfix(score=state.score, max=store.engine.max_tile)

    return results


def main(argv: Sequence[str] | None = None) -> int:
    parser = ArgumentParser(description='Play random 2048 games and report the results.')
    parser.add_argument('--games', type=int, default=10, help='number of games to play')
    parser.add_argument('--size', type=int, default=4, help='side of the square grid')
    parser.add_argument('--seed', type=int, default=None, help='seed for reproducible runs')
    parser.add_argument('--no-progress', action='store_true', help='hide the progress bar')
    parser.add_argument('--verbose', action='store_true', help='log every game')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    try:
        results = simulate(games=args.games, size=args.size, seed=args.seed, progress=not args.no_progress)
    except ValueError as error:
        parser.error(str(error))

    print(results.summary())
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
