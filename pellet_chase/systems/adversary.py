"""Adversary wandering.

Every tick each adversary takes one step along its heading, unconditionally.
If the step lands on the wall ring (or beyond it) the adversary draws a new
heading uniformly at random for the *following* ticks; the landing position
itself is kept as is. An adversary can therefore sit on a wall cell for a
tick, and a redraw that points outward again can carry it further out.
"""

import random
from dataclasses import replace

from pyrsistent import pvector

from pellet_chase.components import ALL_DIRECTIONS, Adversary
from pellet_chase.state import State
from pellet_chase.world import GridWorld


def step_adversary(
    adversary: Adversary, world: GridWorld, rng: random.Random
) -> Adversary:
    """Move one adversary a single cell, redrawing its heading at the boundary."""
    next_pos = adversary.position.moved(adversary.direction)
    moved = replace(adversary, position=next_pos)
    if world.is_interior(next_pos):
        return moved
    return replace(moved, direction=rng.choice(ALL_DIRECTIONS))


def adversary_system(state: State, rng: random.Random) -> State:
    """Advance all adversaries in order; draws are independent per adversary."""
    if not state.adversaries:
        return state
    adversaries = pvector(
        step_adversary(adversary, state.world, rng) for adversary in state.adversaries
    )
    return replace(state, adversaries=adversaries)
