"""pellet_chase.components
=========================

Value objects describing the entities on the grid. All of them are frozen
dataclasses (or enums) with no behavior beyond small derived helpers; the
``systems`` package holds the logic that produces new instances each tick.

Downstream code imports from this package directly::

    from pellet_chase.components import Adversary, Direction, Player, Position
"""

from .adversary import Adversary
from .direction import ALL_DIRECTIONS, Direction
from .player import Player
from .position import Position

__all__ = [
    "ALL_DIRECTIONS",
    "Adversary",
    "Direction",
    "Player",
    "Position",
]
