"""Cardinal direction component.

Screen coordinates: ``y`` grows downward, so ``UP`` is ``(0, -1)``.
"""

from enum import StrEnum, auto
from typing import Tuple


class Direction(StrEnum):
    """Heading of a moving entity. There is no stopped state."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()

    @property
    def delta(self) -> Tuple[int, int]:
        """Unit vector ``(dx, dy)`` for this heading."""
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

# Fixed order for uniform random draws; changing it changes seeded runs.
ALL_DIRECTIONS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)
