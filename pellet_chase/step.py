"""Tick reducer.

This module wires the systems together in the order one tick requires. The
exported :func:`step` is the only entry point for gameplay progression and is
pure apart from the draws it takes from the supplied RNG: it returns a *new*
:class:`pellet_chase.state.State`.

Ordering:

1. Buffered direction requests, in arrival order, each guarded against the
    player's current cell.
2. Player move. A wall ahead ends the game and the tick stops here; the
    player keeps its last open cell and adversaries do not move.
3. Pellet collection and scoring at the player's new cell.
4. Adversary moves (with boundary redirection).
5. Adversary collision against the player's already updated cell.
6. Turn counter bump.
"""

import random
from dataclasses import replace
from typing import Iterable

from pellet_chase.components import Direction
from pellet_chase.state import State
from pellet_chase.systems.adversary import adversary_system
from pellet_chase.systems.collision import collision_system
from pellet_chase.systems.pellet import pellet_system
from pellet_chase.systems.player import direction_system, player_system
from pellet_chase.utils.terminal import is_terminal_state, is_valid_state


def step(
    state: State, rng: random.Random, requests: Iterable[Direction] = ()
) -> State:
    """Advance the simulation by one tick.

    Args:
        state (State): Previous immutable state.
        rng (random.Random): Source for adversary redirection draws.
        requests (Iterable[Direction]): Direction intents buffered since the
            last tick, oldest first.

    Returns:
        State: Next state. A game-over state is returned unchanged.

    Raises:
        ValueError: If ``state`` violates the engine invariants.
    """
    if is_terminal_state(state):
        return state
    if not is_valid_state(state):
        raise ValueError("State is not valid")

    for requested in requests:
        state = direction_system(state, requested)

    state = player_system(state)
    if is_terminal_state(state):
        return _after_step(state)

    state = pellet_system(state)
    state = adversary_system(state, rng)
    state = collision_system(state)
    return _after_step(state)


def _after_step(state: State) -> State:
    """Finalize a processed tick."""
    return replace(state, turn=state.turn + 1)
