"""Collision detection.

Two checks end a game: the player's next cell being a wall, and the player
sharing a cell with an adversary once both have moved in the same tick. Both
are exact integer comparisons; entities that swap cells in one tick pass
through each other.
"""

from typing import Iterable

from pellet_chase.components import Adversary, Position
from pellet_chase.state import State
from pellet_chase.systems.terminal import game_over_system
from pellet_chase.world import GridWorld

ADVERSARY_MESSAGE = "Caught by an adversary"


def wall_collision(next_pos: Position, world: GridWorld) -> bool:
    """Return True if moving to ``next_pos`` hits the wall ring."""
    return world.is_wall(next_pos)


def adversary_collision(player_pos: Position, adversaries: Iterable[Adversary]) -> bool:
    """Return True if any adversary occupies ``player_pos``."""
    return any(adversary.position == player_pos for adversary in adversaries)


def collision_system(state: State) -> State:
    """End the game if an adversary now stands on the player's cell."""
    if adversary_collision(state.player.position, state.adversaries):
        return game_over_system(state, ADVERSARY_MESSAGE)
    return state
