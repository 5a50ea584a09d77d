"""Score tracking.

Points only ever accumulate during a game; the score returns to zero solely
through a restart, which builds a fresh state.
"""

from dataclasses import replace

from pellet_chase.state import State
from pellet_chase.types import Points


def add_score(state: State, points: Points) -> State:
    """Return ``state`` with ``points`` added to the score.

    Raises:
        ValueError: If ``points`` is negative.
    """
    if points < 0:
        raise ValueError(f"Score can only increase, got {points} points")
    if points == 0:
        return state
    return replace(state, score=state.score + points)


def reset_score(state: State) -> State:
    """Return ``state`` with the score back at zero.

    Restart does not call this: it builds a fresh state through
    :func:`pellet_chase.level.new_game`, which starts at zero anyway.
    """
    return replace(state, score=0)
