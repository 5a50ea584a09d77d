"""Terminal condition and invariant helper predicates."""

from pellet_chase.state import State
from pellet_chase.types import GameStatus


def is_terminal_state(state: State) -> bool:
    """Return True once the game is over."""
    return state.status == GameStatus.GAME_OVER


def is_valid_state(state: State) -> bool:
    """Return True if ``state`` satisfies the engine invariants.

    While playing the player must be on an open cell; at all times the score
    is non-negative and every pellet sits on an open cell.
    """
    if state.score < 0:
        return False
    if state.is_playing and not state.world.is_interior(state.player.position):
        return False
    return all(state.world.is_interior(pos) for pos in state.pellets)
