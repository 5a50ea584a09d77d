"""Adversary component.

Adversaries walk in straight lines and pick a fresh random heading whenever a
step lands them on (or past) the wall ring. Their position is never clamped,
so they can sit on a wall cell for a tick before turning away.
"""

from dataclasses import dataclass

from pellet_chase.components.direction import Direction
from pellet_chase.components.position import Position


@dataclass(frozen=True)
class Adversary:
    """Wandering enemy.

    Attributes:
        position: Current cell; may be a wall cell or outside the grid.
        direction: Heading used for the next step.
    """

    position: Position
    direction: Direction
