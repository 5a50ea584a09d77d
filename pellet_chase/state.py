"""Core immutable game ``State`` dataclass.

This module defines the frozen :class:`State` object holding everything the
simulation knows at one tick. All systems are pure functions that take a
previous ``State`` and return a *new* ``State``; nothing is mutated in place.
The session swaps whole states atomically, so no observer can see a half
applied tick or a mix of pre- and post-restart entities.

Design notes:

* Collections are persistent (``pyrsistent``): pellets are a ``PSet`` of
    positions, adversaries an ordered ``PVector`` (order is stable so seeded
    runs are reproducible).
* ``status`` is the playing / game-over machine. The reducer short-circuits
    once it reads ``GAME_OVER``; only a restart leaves that state.
* ``message`` records why the game ended, for display next to the final score.
"""

from dataclasses import dataclass
from typing import Any, Optional

from pyrsistent import pmap, pset, pvector
from pyrsistent.typing import PMap, PSet, PVector

from pellet_chase.components import Adversary, Player, Position
from pellet_chase.types import GameStatus
from pellet_chase.world import GridWorld

_COLLECTION_TYPES = (type(pset()), type(pvector()))


@dataclass(frozen=True)
class State:
    """Immutable world state.

    Attributes:
        world (GridWorld): Playfield geometry.
        player (Player): Player position and heading.
        adversaries (PVector[Adversary]): Adversaries in a stable order.
        pellets (PSet[Position]): Collectible cells still on the board.
        score (int): Accumulated points; never decreases while playing.
        pellet_points (int): Points awarded per pellet collected.
        status (GameStatus): Playing or game over.
        turn (int): Number of ticks processed while playing.
        message (str | None): Reason the game ended, if it has.
        seed (int | None): Seed of the session RNG that built this game.
    """

    world: GridWorld
    player: Player
    adversaries: PVector[Adversary] = pvector()
    pellets: PSet[Position] = pset()

    score: int = 0
    pellet_points: int = 10
    status: GameStatus = GameStatus.PLAYING
    turn: int = 0
    message: Optional[str] = None

    seed: Optional[int] = None

    @property
    def is_playing(self) -> bool:
        return self.status == GameStatus.PLAYING

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of non-empty fields.

        Returns:
            PMap[str, Any]: Field name to value for every populated field;
            empty collections and ``None`` are skipped.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if value is None:
                continue
            # Skip empty persistent collections to keep output concise.
            if isinstance(value, _COLLECTION_TYPES) and len(value) == 0:
                continue
            description = description.set(field, value)
        return description
