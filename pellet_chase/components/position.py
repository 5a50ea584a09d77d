"""Position component.

Immutable integer grid coordinates shared by the player, adversaries and
pellets. Positions range over the whole grid, wall ring included.
"""

from dataclasses import dataclass

from pellet_chase.components.direction import Direction


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int

    def moved(self, direction: Direction) -> "Position":
        """Return the neighbouring position one step along ``direction``."""
        dx, dy = direction.delta
        return Position(self.x + dx, self.y + dy)
