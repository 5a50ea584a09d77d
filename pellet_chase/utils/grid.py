"""Grid rasterization helpers.

:func:`occupancy_grid` flattens a snapshot into a ``(size, size)`` array of
:class:`CellKind` codes, indexed ``[y, x]`` like an image. Later layers win:
walls, then pellets, then adversaries, then the player, so overlapping
entities show the one that matters most for play.
"""

from enum import IntEnum

import numpy as np
import numpy.typing as npt

from pellet_chase.snapshot import Snapshot
from pellet_chase.world import GridWorld

CellArray = npt.NDArray[np.uint8]


class CellKind(IntEnum):
    """Per-cell code used in occupancy grids."""

    EMPTY = 0
    WALL = 1
    PELLET = 2
    ADVERSARY = 3
    PLAYER = 4


def occupancy_grid(snapshot: Snapshot) -> CellArray:
    """Rasterize ``snapshot`` into a ``[y, x]`` array of ``CellKind`` codes.

    Adversaries outside the grid (they can wander past the wall ring for a
    tick) are simply not drawn.
    """
    size = snapshot.grid_size
    world = GridWorld(size)
    grid: CellArray = np.full((size, size), CellKind.EMPTY, dtype=np.uint8)
    grid[0, :] = grid[-1, :] = grid[:, 0] = grid[:, -1] = CellKind.WALL
    for pos in snapshot.pellets:
        grid[pos.y, pos.x] = CellKind.PELLET
    for adversary in snapshot.adversaries:
        pos = adversary.position
        if world.is_in_bounds(pos):
            grid[pos.y, pos.x] = CellKind.ADVERSARY
    player = snapshot.player.position
    grid[player.y, player.x] = CellKind.PLAYER
    return grid
