"""Plain-text renderer."""

from typing import Dict

from pellet_chase.snapshot import Snapshot
from pellet_chase.utils.grid import CellKind, occupancy_grid

DEFAULT_GLYPHS: Dict[CellKind, str] = {
    CellKind.EMPTY: " ",
    CellKind.WALL: "#",
    CellKind.PELLET: ".",
    CellKind.ADVERSARY: "M",
    CellKind.PLAYER: "C",
}


def render_text(snapshot: Snapshot, glyphs: Dict[CellKind, str] = DEFAULT_GLYPHS) -> str:
    """Return the grid as lines of glyphs followed by a status line."""
    grid = occupancy_grid(snapshot)
    lines = ["".join(glyphs[CellKind(code)] for code in row) for row in grid]
    status = f"Score: {snapshot.score}"
    if snapshot.game_over:
        status += f"  GAME OVER ({snapshot.message})" if snapshot.message else "  GAME OVER"
    lines.append(status)
    return "\n".join(lines)
