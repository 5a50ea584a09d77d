"""Render boundary snapshot.

A :class:`Snapshot` is the immutable picture of one tick handed to external
renderers. It is derived from a ``State`` in one go, so it can never mix
entities from two different ticks (or from both sides of a restart).
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from pyrsistent.typing import PSet

from pellet_chase.components import Adversary, Player, Position
from pellet_chase.state import State
from pellet_chase.types import GameStatus


@dataclass(frozen=True)
class Snapshot:
    """Everything a renderer needs for one frame.

    Attributes:
        grid_size: Side length of the grid.
        walls: Precomputed wall cells.
        pellets: Remaining pellet cells.
        player: Player position and heading.
        adversaries: Adversaries in their stable order.
        score: Current score.
        status: Playing or game over.
        turn: Ticks processed so far.
        message: Why the game ended, if it has.
    """

    grid_size: int
    walls: PSet[Position]
    pellets: PSet[Position]
    player: Player
    adversaries: Tuple[Adversary, ...]
    score: int
    status: GameStatus
    turn: int = 0
    message: Optional[str] = None

    @property
    def game_over(self) -> bool:
        return self.status == GameStatus.GAME_OVER

    def is_wall(self, pos: Position) -> bool:
        return pos in self.walls


def make_snapshot(state: State) -> Snapshot:
    """Freeze ``state`` into a renderer-facing :class:`Snapshot`."""
    return Snapshot(
        grid_size=state.world.size,
        walls=state.world.walls,
        pellets=state.pellets,
        player=state.player,
        adversaries=tuple(state.adversaries),
        score=state.score,
        status=state.status,
        turn=state.turn,
        message=state.message,
    )
