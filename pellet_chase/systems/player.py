"""Player movement.

The player advances one cell per tick along its heading. Direction requests
are accepted only while playing, and never toward a wall the player is
already adjacent to on that axis (turning into it would end the game on the
next tick). A step into the wall ring does not move the player; it ends the
game with the player left on its last open cell.
"""

from dataclasses import dataclass, replace

from pellet_chase.components import Direction, Player, Position
from pellet_chase.state import State
from pellet_chase.systems.collision import wall_collision
from pellet_chase.systems.terminal import game_over_system
from pellet_chase.world import GridWorld

WALL_MESSAGE = "Hit the wall"


@dataclass(frozen=True)
class PlayerStep:
    """Outcome of advancing the player one cell.

    Attributes:
        position: Cell the player stepped toward.
        hit_wall: True if that cell is a wall; the player did not move.
    """

    position: Position
    hit_wall: bool

    @property
    def moved(self) -> bool:
        return not self.hit_wall


def can_turn(state: State, direction: Direction) -> bool:
    """Return True if a request for ``direction`` would be honored now."""
    if not state.is_playing:
        return False
    pos = state.player.position
    last_open = state.world.size - 2
    return {
        Direction.UP: pos.y > 1,
        Direction.DOWN: pos.y < last_open,
        Direction.LEFT: pos.x > 1,
        Direction.RIGHT: pos.x < last_open,
    }[direction]


def direction_system(state: State, requested: Direction) -> State:
    """Apply a buffered direction request, silently ignoring refused ones."""
    if not can_turn(state, requested) or state.player.direction == requested:
        return state
    return replace(state, player=replace(state.player, direction=requested))


def player_step(world: GridWorld, player: Player) -> PlayerStep:
    """Compute the player's next cell and whether it is a wall."""
    next_pos = player.position.moved(player.direction)
    return PlayerStep(position=next_pos, hit_wall=wall_collision(next_pos, world))


def player_system(state: State) -> State:
    """Advance the player, or end the game if the step would hit a wall."""
    outcome = player_step(state.world, state.player)
    if outcome.hit_wall:
        return game_over_system(state, WALL_MESSAGE)
    return replace(state, player=replace(state.player, position=outcome.position))
