import numpy as np

from pellet_chase.components import Direction, Position
from pellet_chase.renderer.image import (
    ADVERSARY_COLOR,
    PELLET_COLOR,
    PLAYER_COLOR,
    WALL_COLOR,
    ImageRenderer,
)
from pellet_chase.renderer.text import render_text
from pellet_chase.snapshot import make_snapshot
from pellet_chase.types import GameStatus
from pellet_chase.utils.grid import CellKind, occupancy_grid
from tests.test_utils import make_state


def sample_snapshot(**kwargs: object):  # type: ignore[no-untyped-def]
    state = make_state(
        player_pos=(4, 4),
        adversaries=[((10, 10), Direction.LEFT), ((20, 3), Direction.UP)],
        pellets=[(5, 5), (4, 4)],
        **kwargs,  # type: ignore[arg-type]
    )
    return make_snapshot(state)


def test_snapshot_mirrors_state() -> None:
    state = make_state(score=30, adversaries=[((10, 10), Direction.LEFT)])
    snapshot = make_snapshot(state)
    assert snapshot.grid_size == 20
    assert snapshot.walls == state.world.walls
    assert snapshot.pellets is state.pellets
    assert snapshot.player == state.player
    assert snapshot.adversaries == tuple(state.adversaries)
    assert snapshot.score == 30
    assert not snapshot.game_over
    assert snapshot.is_wall(Position(0, 0))
    assert not snapshot.is_wall(Position(1, 1))


def test_occupancy_grid_layers() -> None:
    grid = occupancy_grid(sample_snapshot())
    assert grid.shape == (20, 20)
    assert grid.dtype == np.uint8
    assert (grid[0, :] == CellKind.WALL).all()
    assert (grid[:, 19] == CellKind.WALL).all()
    assert grid[5, 5] == CellKind.PELLET
    assert grid[4, 4] == CellKind.PLAYER  # player drawn over pellet
    assert grid[10, 10] == CellKind.ADVERSARY
    assert grid[1, 1] == CellKind.EMPTY
    # The off-grid adversary at (20, 3) is skipped.
    assert grid[3, 19] == CellKind.WALL


def test_render_text() -> None:
    text = render_text(sample_snapshot(score=20))
    lines = text.splitlines()
    assert len(lines) == 21
    assert lines[0] == "#" * 20
    assert lines[4][4] == "C"
    assert lines[5][5] == "."
    assert lines[10][10] == "M"
    assert lines[-1] == "Score: 20"


def test_render_text_game_over_line() -> None:
    state = make_state(status=GameStatus.GAME_OVER, score=40)
    text = render_text(make_snapshot(state))
    assert text.splitlines()[-1] == "Score: 40  GAME OVER"


def test_image_renderer_draws_entities() -> None:
    img = ImageRenderer(resolution=200).render(sample_snapshot())
    assert img.size == (200, 200)
    assert img.mode == "RGBA"
    # 10 px cells.
    assert img.getpixel((5, 5)) == WALL_COLOR
    assert img.getpixel((55, 55)) == PELLET_COLOR
    assert img.getpixel((43, 45)) == PLAYER_COLOR  # behind the mouth
    assert img.getpixel((105, 105)) == ADVERSARY_COLOR


def test_image_renderer_game_over_overlay_darkens_board() -> None:
    playing = ImageRenderer(resolution=200).render(sample_snapshot())
    over = ImageRenderer(resolution=200).render(
        sample_snapshot(status=GameStatus.GAME_OVER)
    )
    assert playing.getpixel((5, 100)) == WALL_COLOR
    assert over.getpixel((5, 100)) != WALL_COLOR


def test_occupancy_grid_skips_adversaries_on_any_side_off_grid() -> None:
    state = make_state(
        adversaries=[
            ((-1, 5), Direction.LEFT),
            ((5, -1), Direction.UP),
            ((0, 5), Direction.LEFT),
        ]
    )
    grid = occupancy_grid(make_snapshot(state))
    assert grid.shape == (20, 20)
    # On the wall ring itself the adversary is drawn over the wall.
    assert grid[5, 0] == CellKind.ADVERSARY
    assert grid[0, 5] == CellKind.WALL
