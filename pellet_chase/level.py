"""Initial game construction.

:func:`new_game` is the single place a game starts from, both at session
start and on every restart: score 0, the configured player and adversaries,
and a pellet field freshly drawn from the session RNG.
"""

import random

from pyrsistent import pvector

from pellet_chase.components import Player
from pellet_chase.config import GameConfig
from pellet_chase.state import State
from pellet_chase.systems.pellet import generate_pellets


def new_game(config: GameConfig, rng: random.Random) -> State:
    """Build the canonical starting ``State`` for ``config``."""
    world = config.world
    return State(
        world=world,
        player=Player(position=config.player_start, direction=config.player_direction),
        adversaries=pvector(config.adversaries),
        pellets=generate_pellets(world, config.pellet_probability, rng),
        pellet_points=config.pellet_points,
        seed=config.seed,
    )
