"""Pellet Chase: a tick-driven grid arcade simulation.

The engine keeps the whole game in one immutable :class:`State` and advances
it with the pure :func:`pellet_chase.step.step` reducer. A
:class:`pellet_chase.session.GameSession` owns the current state and buffered
input, and a :class:`pellet_chase.scheduler.TickScheduler` drives ticks at a
fixed cadence, handing an immutable :class:`pellet_chase.snapshot.Snapshot`
to the renderer after each one.
"""

from pellet_chase.actions import Action
from pellet_chase.config import DEFAULT_CONFIG, GameConfig
from pellet_chase.scheduler import TickScheduler
from pellet_chase.session import GameSession
from pellet_chase.snapshot import Snapshot, make_snapshot
from pellet_chase.state import State
from pellet_chase.step import step
from pellet_chase.types import GameStatus

__all__ = [
    "Action",
    "DEFAULT_CONFIG",
    "GameConfig",
    "GameSession",
    "GameStatus",
    "Snapshot",
    "State",
    "TickScheduler",
    "make_snapshot",
    "step",
]
