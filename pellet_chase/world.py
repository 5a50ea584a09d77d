"""Fixed square playfield.

A cell is a *wall* iff it lies on the outermost ring of the grid; every other
cell is *open* (interior). The world is immutable for the lifetime of a game.
"""

from dataclasses import dataclass
from functools import cached_property
from typing import Iterator

from pyrsistent import pset
from pyrsistent.typing import PSet

from pellet_chase.components import Position


@dataclass(frozen=True)
class GridWorld:
    """Square grid with a one-cell wall ring.

    Attributes:
        size: Side length in cells, wall ring included.
    """

    size: int

    def __post_init__(self) -> None:
        if self.size < 3:
            raise ValueError(f"Grid size must be at least 3, got {self.size}")

    def is_wall(self, pos: Position) -> bool:
        """Return True if ``pos`` is on the outer ring.

        Positions outside the grid are treated as walls as well, so anything
        that is not interior is a wall for collision purposes.
        """
        return not self.is_interior(pos)

    def is_interior(self, pos: Position) -> bool:
        """Return True if ``pos`` is an open cell."""
        return 0 < pos.x < self.size - 1 and 0 < pos.y < self.size - 1

    def is_in_bounds(self, pos: Position) -> bool:
        """Return True if ``pos`` lies on the grid (wall ring included)."""
        return 0 <= pos.x < self.size and 0 <= pos.y < self.size

    def open_cells(self) -> Iterator[Position]:
        """Yield interior cells column by column (x outer, y inner)."""
        for x in range(1, self.size - 1):
            for y in range(1, self.size - 1):
                yield Position(x, y)

    @property
    def open_cell_count(self) -> int:
        return (self.size - 2) ** 2

    @cached_property
    def walls(self) -> PSet[Position]:
        """Every wall cell of the ring, precomputed for renderers."""
        last = self.size - 1
        cells = set()
        for i in range(self.size):
            cells.update(
                (Position(i, 0), Position(i, last), Position(0, i), Position(last, i))
            )
        return pset(cells)
