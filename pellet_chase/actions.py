"""Input actions.

Defines the string :class:`Action` used by the session input buffer and a
stable integer :class:`GymAction` mapping for Gymnasium compatibility.

``MOVE_ACTIONS`` is the canonical ordered list of direction intents; checks
like ``if action in MOVE_ACTIONS`` are preferred over enum name comparisons.
"""

from enum import IntEnum, StrEnum, auto

from pellet_chase.components import Direction


class Action(StrEnum):
    """String enum of player inputs.

    Members:
        UP, DOWN, LEFT, RIGHT: Direction intents (buffered until the next tick).
        RESTART: Reset the game to its starting configuration.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    RESTART = auto()


MOVE_ACTIONS = [Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT]


class GymAction(IntEnum):
    """Stable integer mapping for integration with Gymnasium ``Discrete`` spaces."""

    UP = 0  # start at 0 for explicitness
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


def action_to_direction(action: Action) -> Direction:
    """Return the :class:`Direction` a move action asks for.

    Raises:
        ValueError: If ``action`` is not one of ``MOVE_ACTIONS``.
    """
    if action not in MOVE_ACTIONS:
        raise ValueError(f"Action is not a direction: {action}")
    return Direction(action.value)
