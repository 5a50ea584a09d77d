"""Game configuration.

:class:`GameConfig` gathers the constants a game instance is built from: grid
size, tick cadence, pellet density and the canonical starting layout. They
never change during a game; restart rebuilds every entity from the same
config.

Example:

``config = GameConfig(grid_size=12, adversaries=(), seed=7)``
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

from pellet_chase.components import Adversary, Direction, Position
from pellet_chase.world import GridWorld


DEFAULT_GRID_SIZE = 20
DEFAULT_TICK_INTERVAL_MS = 150
DEFAULT_PELLET_PROBABILITY = 0.4
DEFAULT_PELLET_POINTS = 10
DEFAULT_PLAYER_START = Position(4, 4)
DEFAULT_PLAYER_DIRECTION = Direction.RIGHT
DEFAULT_ADVERSARIES: Tuple[Adversary, ...] = (
    Adversary(Position(2, 2), Direction.RIGHT),
    Adversary(Position(15, 15), Direction.LEFT),
)


@dataclass(frozen=True)
class GameConfig:
    """Immutable game settings.

    Attributes:
        grid_size: Side length of the square grid, wall ring included.
        tick_interval_ms: Scheduler period in milliseconds.
        pellet_probability: Chance that each open cell holds a pellet.
        pellet_points: Score awarded per pellet collected.
        player_start: Player cell at start and after restart.
        player_direction: Player heading at start and after restart.
        adversaries: Adversaries at start and after restart, in order.
        allow_manual_restart: Accept restart while still playing.
        seed: Seed for the session RNG; ``None`` draws from system entropy.
    """

    grid_size: int = DEFAULT_GRID_SIZE
    tick_interval_ms: int = DEFAULT_TICK_INTERVAL_MS
    pellet_probability: float = DEFAULT_PELLET_PROBABILITY
    pellet_points: int = DEFAULT_PELLET_POINTS
    player_start: Position = DEFAULT_PLAYER_START
    player_direction: Direction = DEFAULT_PLAYER_DIRECTION
    adversaries: Tuple[Adversary, ...] = field(default=DEFAULT_ADVERSARIES)
    allow_manual_restart: bool = False
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        # GridWorld validates the size itself.
        world = GridWorld(self.grid_size)
        if self.tick_interval_ms <= 0:
            raise ValueError(
                f"Tick interval must be positive, got {self.tick_interval_ms}"
            )
        if not 0.0 <= self.pellet_probability <= 1.0:
            raise ValueError(
                f"Pellet probability must be in [0, 1], got {self.pellet_probability}"
            )
        if self.pellet_points < 0:
            raise ValueError(
                f"Pellet points must be non-negative, got {self.pellet_points}"
            )
        if not world.is_interior(self.player_start):
            raise ValueError(
                f"Player must start on an open cell, got {self.player_start}"
            )
        # Accept any sequence but store a tuple so the config stays hashable.
        object.__setattr__(self, "adversaries", tuple(self.adversaries))

    @property
    def world(self) -> GridWorld:
        return GridWorld(self.grid_size)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "GameConfig":
        """Build a config from plain values (CLI arguments, JSON, ...).

        Positions may be given as ``(x, y)`` pairs, directions by name, and
        adversaries as ``{"position": (x, y), "direction": "left"}`` mappings.
        Keys that are absent (or ``None``) keep their defaults.

        Raises:
            ValueError: On unknown keys or invalid values.
        """
        known = set(cls.__dataclass_fields__)
        unknown = set(values) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")

        kwargs: dict[str, Any] = {k: v for k, v in values.items() if v is not None}
        if "player_start" in kwargs:
            kwargs["player_start"] = _to_position(kwargs["player_start"])
        if "player_direction" in kwargs:
            kwargs["player_direction"] = _to_direction(kwargs["player_direction"])
        if "adversaries" in kwargs:
            kwargs["adversaries"] = tuple(
                _to_adversary(entry) for entry in kwargs["adversaries"]
            )
        return cls(**kwargs)


def _to_position(value: Any) -> Position:
    if isinstance(value, Position):
        return value
    x, y = value
    return Position(int(x), int(y))


def _to_direction(value: Any) -> Direction:
    if isinstance(value, Direction):
        return value
    try:
        return Direction(str(value).lower())
    except ValueError:
        raise ValueError(f"Unknown direction: {value!r}") from None


def _to_adversary(value: Any) -> Adversary:
    if isinstance(value, Adversary):
        return value
    if isinstance(value, Mapping):
        return Adversary(
            position=_to_position(value["position"]),
            direction=_to_direction(value["direction"]),
        )
    position, direction = value  # (position, direction) pair
    return Adversary(_to_position(position), _to_direction(direction))


DEFAULT_CONFIG = GameConfig()

