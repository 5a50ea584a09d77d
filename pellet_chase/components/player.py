"""Player component."""

from dataclasses import dataclass

from pellet_chase.components.direction import Direction
from pellet_chase.components.position import Position


@dataclass(frozen=True)
class Player:
    """The avatar steered by direction intents.

    Attributes:
        position: Current cell; always an open cell while the game is playing.
        direction: Heading used for the next step.
    """

    position: Position
    direction: Direction = Direction.RIGHT
