"""Common type aliases and enumerations.

``GameStatus`` is the two-state machine governing which updates a tick may
perform. ``SnapshotCallback`` is the render boundary: anything that accepts a
:class:`pellet_chase.snapshot.Snapshot`.
"""

from enum import StrEnum, auto
from typing import Callable, TYPE_CHECKING


if TYPE_CHECKING:
    from pellet_chase.snapshot import Snapshot


class GameStatus(StrEnum):
    """Playing until the player hits a wall or an adversary; then game over."""

    PLAYING = auto()
    GAME_OVER = auto()


SnapshotCallback = Callable[["Snapshot"], None]

Points = int
