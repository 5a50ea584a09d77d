"""Pillow frame renderer.

Draws a snapshot onto a square RGBA canvas: blue wall cells, small white
pellet dots, a yellow player with an open mouth facing its heading, and red
round adversaries. A translucent "GAME OVER" banner covers the board once the
game has ended.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from PIL import Image, ImageDraw

from pellet_chase.components import Direction
from pellet_chase.snapshot import Snapshot

DEFAULT_RESOLUTION = 600

Color = Tuple[int, int, int, int]

BACKGROUND_COLOR: Color = (0, 0, 0, 255)
WALL_COLOR: Color = (0, 0, 255, 255)
PELLET_COLOR: Color = (255, 255, 255, 255)
PLAYER_COLOR: Color = (255, 255, 0, 255)
ADVERSARY_COLOR: Color = (255, 0, 0, 255)
OVERLAY_COLOR: Color = (0, 0, 0, 160)

# Mouth opening in degrees, centered on the heading (PIL angles run clockwise
# from 3 o'clock).
MOUTH_DEGREES = 72
_HEADING_ANGLE: Dict[Direction, int] = {
    Direction.RIGHT: 0,
    Direction.DOWN: 90,
    Direction.LEFT: 180,
    Direction.UP: 270,
}


@dataclass(frozen=True)
class ImageRenderer:
    """Renders snapshots to ``resolution`` x ``resolution`` RGBA images."""

    resolution: int = DEFAULT_RESOLUTION

    def render(self, snapshot: Snapshot) -> Image.Image:
        cell = self.resolution / snapshot.grid_size
        img = Image.new("RGBA", (self.resolution, self.resolution), BACKGROUND_COLOR)
        draw = ImageDraw.Draw(img)

        for pos in snapshot.walls:
            draw.rectangle(self._cell_box(pos.x, pos.y, cell, 0.0), fill=WALL_COLOR)

        for pos in snapshot.pellets:
            draw.ellipse(self._cell_box(pos.x, pos.y, cell, 1 / 6), fill=PELLET_COLOR)

        player = snapshot.player
        heading = _HEADING_ANGLE[player.direction]
        draw.pieslice(
            self._cell_box(player.position.x, player.position.y, cell, 1 / 3),
            start=heading + MOUTH_DEGREES // 2,
            end=heading + 360 - MOUTH_DEGREES // 2,
            fill=PLAYER_COLOR,
        )

        for adversary in snapshot.adversaries:
            pos = adversary.position
            draw.ellipse(self._cell_box(pos.x, pos.y, cell, 1 / 3), fill=ADVERSARY_COLOR)

        if snapshot.game_over:
            img = self._draw_game_over(img, snapshot)
        return img

    @staticmethod
    def _cell_box(
        x: int, y: int, cell: float, radius: float
    ) -> Tuple[float, float, float, float]:
        """Bounding box of a cell, or of a centered circle of ``radius`` cells."""
        if radius == 0.0:
            return (x * cell, y * cell, (x + 1) * cell - 1, (y + 1) * cell - 1)
        cx, cy, r = (x + 0.5) * cell, (y + 0.5) * cell, radius * cell
        return (cx - r, cy - r, cx + r, cy + r)

    def _draw_game_over(self, img: Image.Image, snapshot: Snapshot) -> Image.Image:
        overlay = Image.new("RGBA", img.size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(overlay)
        third = self.resolution / 3
        draw.rectangle((0, third, self.resolution, 2 * third), fill=OVERLAY_COLOR)
        text = f"GAME OVER  Score: {snapshot.score}"
        left, top, right, bottom = draw.textbbox((0, 0), text)
        origin = (
            (self.resolution - (right - left)) / 2,
            (self.resolution - (bottom - top)) / 2,
        )
        draw.text(origin, text, fill=PELLET_COLOR)
        return Image.alpha_composite(img, overlay)
