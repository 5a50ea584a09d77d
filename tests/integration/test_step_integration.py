import random

import pytest

from pellet_chase.components import Direction, Position
from pellet_chase.step import step
from pellet_chase.systems.collision import ADVERSARY_MESSAGE
from pellet_chase.systems.player import WALL_MESSAGE
from pellet_chase.types import GameStatus
from tests.test_utils import ScriptedRandom, adversary_positions, make_state

DEFAULT_ADVERSARIES = [((2, 2), Direction.RIGHT), ((15, 15), Direction.LEFT)]


def test_tick_moves_player_without_pellet() -> None:
    state = make_state(adversaries=DEFAULT_ADVERSARIES, pellets=[(6, 4)])
    state = step(state, random.Random(0))
    assert state.player.position == Position(5, 4)
    assert state.score == 0
    assert state.pellets == make_state(pellets=[(6, 4)]).pellets
    assert adversary_positions(state) == [(3, 2), (14, 15)]
    assert state.status == GameStatus.PLAYING
    assert state.turn == 1


def test_tick_collects_pellet_and_scores() -> None:
    state = make_state(adversaries=DEFAULT_ADVERSARIES, pellets=[(5, 4), (6, 4)])
    state = step(state, random.Random(0))
    assert state.player.position == Position(5, 4)
    assert Position(5, 4) not in state.pellets
    assert len(state.pellets) == 1
    assert state.score == 10


def test_score_tracks_pellets_over_many_ticks() -> None:
    pellets = [(x, 4) for x in range(5, 12)]
    state = make_state(pellets=pellets + [(10, 10)])
    rng = random.Random(0)
    for tick in range(1, 8):
        before = len(state.pellets)
        state = step(state, rng)
        eaten = before - len(state.pellets)
        assert eaten in (0, 1)
        assert state.score == 10 * tick
    assert state.pellets == make_state(pellets=[(10, 10)]).pellets


def test_wall_collision_ends_tick_before_anything_else() -> None:
    state = make_state(
        player_pos=(18, 4),
        adversaries=[((10, 10), Direction.UP)],
        pellets=[(18, 4)],
    )
    rng = ScriptedRandom()
    state = step(state, rng)  # type: ignore[arg-type]
    assert state.status == GameStatus.GAME_OVER
    assert state.message == WALL_MESSAGE
    assert state.player.position == Position(18, 4)
    assert adversary_positions(state) == [(10, 10)]
    assert Position(18, 4) in state.pellets
    assert state.turn == 1


def test_direction_request_applies_before_move() -> None:
    state = make_state(player_pos=(18, 4), direction=Direction.RIGHT)
    state = step(state, random.Random(0), [Direction.DOWN])
    assert state.status == GameStatus.PLAYING
    assert state.player.position == Position(18, 5)
    assert state.player.direction == Direction.DOWN


def test_requests_apply_in_order_last_accepted_wins() -> None:
    state = make_state(player_pos=(4, 4))
    state = step(state, random.Random(0), [Direction.DOWN, Direction.UP])
    assert state.player.position == Position(4, 3)


def test_refused_request_keeps_previous_heading() -> None:
    state = make_state(player_pos=(1, 1), direction=Direction.DOWN)
    state = step(state, random.Random(0), [Direction.LEFT])
    assert state.player.direction == Direction.DOWN
    assert state.player.position == Position(1, 2)


def test_adversary_moving_onto_player_ends_game_same_tick() -> None:
    state = make_state(
        player_pos=(4, 4),
        adversaries=[((6, 4), Direction.LEFT)],
        pellets=[(5, 4)],
    )
    state = step(state, random.Random(0))
    assert state.player.position == Position(5, 4)
    assert adversary_positions(state) == [(5, 4)]
    assert state.status == GameStatus.GAME_OVER
    assert state.message == ADVERSARY_MESSAGE
    # Pellet collection happens before the adversaries move.
    assert state.score == 10


def test_head_on_swap_passes_through() -> None:
    state = make_state(player_pos=(4, 4), adversaries=[((5, 4), Direction.LEFT)])
    state = step(state, random.Random(0))
    assert state.player.position == Position(5, 4)
    assert adversary_positions(state) == [(4, 4)]
    assert state.status == GameStatus.PLAYING


def test_adversary_on_wall_redirected_not_clamped() -> None:
    state = make_state(player_pos=(4, 4), adversaries=[((18, 10), Direction.RIGHT)])
    rng = ScriptedRandom([Direction.UP, Direction.LEFT])
    state = step(state, rng)  # type: ignore[arg-type]
    assert adversary_positions(state) == [(19, 10)]
    assert state.adversaries[0].direction == Direction.UP
    state = step(state, rng)  # type: ignore[arg-type]
    # (19, 9) is still on the ring, so another draw happens.
    assert adversary_positions(state) == [(19, 9)]
    assert state.adversaries[0].direction == Direction.LEFT
    assert rng.choice_calls == 2


def test_game_over_state_is_frozen() -> None:
    state = make_state(
        status=GameStatus.GAME_OVER,
        adversaries=DEFAULT_ADVERSARIES,
        pellets=[(5, 4)],
    )
    assert step(state, random.Random(0), [Direction.DOWN]) is state


def test_player_never_on_wall_while_playing() -> None:
    rng = random.Random(11)
    state = make_state(adversaries=DEFAULT_ADVERSARIES, pellets=[(5, 5)])
    directions = list(Direction)
    for _ in range(200):
        if state.status == GameStatus.GAME_OVER:
            break
        state = step(state, rng, [rng.choice(directions)])
        assert state.world.is_interior(state.player.position)
    assert state.world.is_interior(state.player.position)


def test_invalid_state_is_rejected() -> None:
    state = make_state(player_pos=(0, 4))
    with pytest.raises(ValueError):
        step(state, random.Random(0))
