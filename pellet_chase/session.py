"""Game session: the single owner of simulation state.

A :class:`GameSession` holds the current immutable ``State``, the injectable
random source, and the input buffer. Inputs (direction intents and restart)
may arrive from any thread at any time; they are only recorded here and are
consumed at the start of the next :meth:`GameSession.tick`. Every read and
write goes through one lock, so ticks never overlap and a restart is seen by
observers as a single atomic swap.
"""

import logging
import random
import threading
from typing import List, Optional

from pellet_chase.actions import Action, action_to_direction
from pellet_chase.components import Direction
from pellet_chase.config import DEFAULT_CONFIG, GameConfig
from pellet_chase.level import new_game
from pellet_chase.snapshot import Snapshot, make_snapshot
from pellet_chase.state import State
from pellet_chase.step import step
from pellet_chase.systems.terminal import restart_system
from pellet_chase.utils.terminal import is_terminal_state

logger = logging.getLogger(__name__)


class GameSession:
    """Owns one game and its buffered input.

    Args:
        config: Game settings; also used to rebuild the game on restart.
        rng: Random source for pellet generation and adversary redirection.
            Defaults to ``random.Random(config.seed)``.
    """

    def __init__(
        self, config: GameConfig = DEFAULT_CONFIG, rng: Optional[random.Random] = None
    ):
        self.config = config
        self.rng = rng if rng is not None else random.Random(config.seed)
        self._lock = threading.Lock()
        self._state: State = new_game(config, self.rng)
        self._pending_directions: List[Direction] = []
        self._restart_requested = False

    @property
    def state(self) -> State:
        with self._lock:
            return self._state

    def snapshot(self) -> Snapshot:
        """Snapshot of the current state (available before the first tick)."""
        with self._lock:
            return make_snapshot(self._state)

    def request_direction(self, direction: Direction) -> bool:
        """Buffer a direction intent for the next tick.

        Returns:
            bool: False if the intent was dropped because the game is over.
        """
        with self._lock:
            if is_terminal_state(self._state):
                logger.debug("Ignoring direction %s: game is over", direction)
                return False
            self._pending_directions.append(direction)
            return True

    def request_restart(self) -> None:
        """Buffer a restart; the next tick applies it if it is allowed then."""
        with self._lock:
            self._restart_requested = True

    def handle(self, action: Action) -> None:
        """Route an input ``Action`` to the matching request."""
        if action == Action.RESTART:
            self.request_restart()
        else:
            self.request_direction(action_to_direction(action))

    def tick(self) -> Snapshot:
        """Consume buffered input, advance one tick, and return its snapshot.

        A tick that applies a restart only swaps in the fresh game; movement
        resumes on the following tick so the first frame after a restart is
        the exact starting layout.
        """
        with self._lock:
            requests, self._pending_directions = self._pending_directions, []
            restart, self._restart_requested = self._restart_requested, False

            if restart:
                restarted = restart_system(self._state, self.config, self.rng)
                if restarted is not self._state:
                    logger.info(
                        "Game restarted (previous score %d)", self._state.score
                    )
                    self._state = restarted
                    return make_snapshot(self._state)
                logger.debug("Ignoring restart: game is still playing")

            previous = self._state
            self._state = step(previous, self.rng, requests)
            if self._state is not previous and is_terminal_state(self._state):
                logger.info(
                    "Game over after %d ticks: %s (score %d)",
                    self._state.turn,
                    self._state.message,
                    self._state.score,
                )
            return make_snapshot(self._state)
