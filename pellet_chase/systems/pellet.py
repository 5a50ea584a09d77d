"""Pellet field generation and collection.

The pellet field is a persistent set of interior positions. It is generated
once per game (and again on every restart) by an independent Bernoulli draw
per open cell, then only shrinks as the player eats pellets.
"""

import random
from dataclasses import replace
from typing import Tuple

from pyrsistent import pset
from pyrsistent.typing import PSet

from pellet_chase.components import Position
from pellet_chase.state import State
from pellet_chase.systems.score import add_score
from pellet_chase.world import GridWorld


def generate_pellets(
    world: GridWorld, probability: float, rng: random.Random
) -> PSet[Position]:
    """Scan every open cell once and keep it with chance ``probability``.

    Cells are visited column by column (x outer, y inner) so a seeded ``rng``
    always produces the same field for the same grid.
    """
    return pset(pos for pos in world.open_cells() if rng.random() < probability)


def collect_pellet(
    pellets: PSet[Position], pos: Position
) -> Tuple[PSet[Position], bool]:
    """Remove the pellet at ``pos`` if there is one.

    Returns:
        Tuple[PSet[Position], bool]: The remaining field and whether a pellet
        was collected. Collecting from an empty cell is a no-op.
    """
    if pos not in pellets:
        return pellets, False
    return pellets.remove(pos), True


def pellet_system(state: State) -> State:
    """Eat the pellet under the player, scoring ``state.pellet_points`` for it."""
    pellets, collected = collect_pellet(state.pellets, state.player.position)
    if not collected:
        return state
    state = replace(state, pellets=pellets)
    return add_score(state, state.pellet_points)
