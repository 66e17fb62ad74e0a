"""
Observable wrapper around a game engine.

The store forwards commands to one ``GameEngine`` and publishes a ``GameSnapshot`` to its listeners after every
command that changed the game. Listeners are called synchronously, in registration order.
"""

import logging
import threading
from collections.abc import Callable

from numpy.random import Generator

from game2048.config import GameConfig
from game2048.core.gamemove import Direction
from game2048.engine.game import GameEngine
from game2048.engine.snapshot import GameSnapshot

_logger = logging.getLogger(__name__)

Listener = Callable[[GameSnapshot], None]


class GameStateStore:
    """
    Hold the latest snapshot of a game and push new ones to subscribers.

    Parameters
    ----------
    engine : GameEngine, optional
        The engine to wrap. A new one is built from the remaining arguments when omitted.
    config : GameConfig, optional
        Rules used to build the engine.
    rng : Generator, optional
        Source of randomness used to build the engine.
    seed : int, optional
        Seed used to build the engine.

    Notes
    -----
    - A no-op move publishes nothing: observers can treat the absence of a new snapshot as a rejected move.
    - ``reset`` always publishes.
    - Each ``move`` or ``reset`` call runs under one lock, so the store can be driven from several threads.
    """

    def __init__(
        self,
        engine: GameEngine | None = None,
        *,
        config: GameConfig | None = None,
        rng: Generator | None = None,
        seed: int | None = None,
    ):
        self._engine = engine if engine is not None else GameEngine(config=config, rng=rng, seed=seed)
        self._lock = threading.RLock()
        self._listeners: list[Listener] = []
        self._state = self._engine.snapshot()

    @property
    def engine(self) -> GameEngine:
        return self._engine

    @property
    def state(self) -> GameSnapshot:
        """The latest published snapshot."""
        return self._state

    def subscribe(self, listener: Listener, replay: bool = False) -> Callable[[], None]:
        """
        Register a listener for new snapshots.

        Parameters
        ----------
        listener : Callable[[GameSnapshot], None]
            Called with every snapshot published after registration.
        replay : bool, optional
            Whether to deliver the current snapshot immediately (default is False).

        Returns
        -------
        Callable[[], None]
            A function that removes the listener. Calling it more than once has no effect.
        """
        with self._lock:
            self._listeners.append(listener)
            _logger.debug('Listener subscribed (%d active)', len(self._listeners))
            if replay:
                self._notify(listener, self._state)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)
                    _logger.debug('Listener unsubscribed (%d active)', len(self._listeners))

        return unsubscribe

    def move(self, direction: Direction | int | str) -> bool:
        """
        Apply a move and publish the new state if it changed the game.

        Returns
        -------
        bool
            Whether the move changed the game.
        """
        with self._lock:
            changed = self._engine.move(direction)
            if changed:
                self._publish()
            return changed

    def reset(self) -> None:
        """Start a new game and publish its initial state."""
        with self._lock:
            self._engine.reset()
            self._publish()

    def _publish(self) -> None:
        self._state = self._engine.snapshot()
        for listener in list(self._listeners):
            self._notify(listener, self._state)

    @staticmethod
    def _notify(listener: Listener, state: GameSnapshot) -> None:
        try:
            listener(state)
        except Exception:
            _logger.exception('Listener %r failed while handling a new game state', listener)
