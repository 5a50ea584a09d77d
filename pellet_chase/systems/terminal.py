"""Playing / game-over state machine.

``PLAYING -> GAME_OVER`` happens on a wall or adversary collision.
``GAME_OVER -> PLAYING`` happens only through a restart, which swaps in a
freshly built state. There are no other transitions.
"""

import random
from dataclasses import replace

from pellet_chase.config import GameConfig
from pellet_chase.level import new_game
from pellet_chase.state import State
from pellet_chase.types import GameStatus
from pellet_chase.utils.terminal import is_terminal_state


def game_over_system(state: State, message: str) -> State:
    """Move to ``GAME_OVER`` recording ``message`` (idempotent)."""
    if is_terminal_state(state):
        return state
    return replace(state, status=GameStatus.GAME_OVER, message=message)


def can_restart(state: State, config: GameConfig) -> bool:
    """Restart is accepted after game over, or any time if the config allows it."""
    return is_terminal_state(state) or config.allow_manual_restart


def restart_system(state: State, config: GameConfig, rng: random.Random) -> State:
    """Return a brand new game if a restart is allowed, else ``state`` unchanged.

    The new state is built from ``config`` alone: score 0, canonical player and
    adversaries, and a pellet field regenerated from ``rng``.
    """
    if not can_restart(state, config):
        return state
    return new_game(config, rng)
