"""Gymnasium environment wrapper for Pellet Chase.

Each environment step is one game tick: the chosen direction is buffered as a
direction intent (subject to the usual turn rule) and the session advances.
Observations pair a rendered RGBA frame with structured info dictionaries.
Reward is the score delta per tick. ``terminated`` is ``True`` on game over;
episodes are never truncated by the environment itself.

Observation schema:

``{"image": np.ndarray(H,W,4), "info": {"player": {...}, "adversaries": [...], "status": {...}, "config": {...}}}``

Usage:

``env = PelletChaseEnv(config=GameConfig(grid_size=12))``
"""

import random
import string
from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from PIL.Image import Image as PILImage

from pellet_chase.actions import GymAction
from pellet_chase.components import Direction
from pellet_chase.config import DEFAULT_CONFIG, GameConfig
from pellet_chase.renderer.image import DEFAULT_RESOLUTION, ImageRenderer
from pellet_chase.session import GameSession
from pellet_chase.snapshot import Snapshot

ObsType = Dict[str, Any]

NAME_CHARSET = string.ascii_uppercase + string.digits + "_"


def player_observation_dict(snapshot: Snapshot) -> Dict[str, Any]:
    """Player position and heading."""
    player = snapshot.player
    return {
        "x": int(player.position.x),
        "y": int(player.position.y),
        "direction": player.direction.name,
    }


def adversaries_observation_tuple(snapshot: Snapshot) -> Tuple[Dict[str, Any], ...]:
    """Adversary positions and headings, in their stable order.

    A tuple, since that is what ``spaces.Sequence`` accepts.
    """
    return tuple(
        {
            "x": int(adversary.position.x),
            "y": int(adversary.position.y),
            "direction": adversary.direction.name,
        }
        for adversary in snapshot.adversaries
    )


def status_observation_dict(snapshot: Snapshot) -> Dict[str, Any]:
    """Status portion of observation (score, phase, turn, pellets left)."""
    return {
        "score": int(snapshot.score),
        "phase": snapshot.status.name,
        "turn": int(snapshot.turn),
        "pellets": len(snapshot.pellets),
    }


def config_observation_dict(config: GameConfig) -> Dict[str, Any]:
    """Config portion of observation."""
    return {
        "grid_size": config.grid_size,
        "pellet_probability": float(config.pellet_probability),
        "seed": config.seed if config.seed is not None else -1,
    }


class PelletChaseEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` implementation for Pellet Chase.

    The action space is ``Discrete(len(GymAction))``; see
    :mod:`pellet_chase.actions`.
    """

    metadata = {"render_modes": ["human", "texture"]}

    def __init__(
        self,
        render_mode: str = "texture",
        render_resolution: int = DEFAULT_RESOLUTION,
        config: GameConfig = DEFAULT_CONFIG,
    ):
        """Create a new environment instance.

        Arguments:
            render_mode: "texture" to return PIL image frames, "human" to open window.
            render_resolution: Side length (pixels) of rendered frames.
            config: Game settings used for every episode.
        """
        from gymnasium import spaces

        self.config = config
        self.session: Optional[GameSession] = None
        self._render_mode = render_mode
        self._renderer = ImageRenderer(resolution=render_resolution)

        # Enum names such as "GAME_OVER" need the underscore.
        text_space_short = spaces.Text(max_length=32, charset=NAME_CHARSET)

        def int_box(low: int, high: int) -> spaces.Box:
            return spaces.Box(
                low=np.array(low, dtype=np.int64),
                high=np.array(high, dtype=np.int64),
                shape=(),
                dtype=np.int64,
            )

        # Adversaries may step past the wall ring, so coordinates are loose.
        entity_space = spaces.Dict(
            {
                "x": int_box(-1_000_000, 1_000_000),
                "y": int_box(-1_000_000, 1_000_000),
                "direction": text_space_short,
            }
        )

        self.observation_space = spaces.Dict(
            {
                "image": spaces.Box(
                    low=0,
                    high=255,
                    shape=(render_resolution, render_resolution, 4),
                    dtype=np.uint8,
                ),
                "info": spaces.Dict(
                    {
                        "player": entity_space,
                        "adversaries": spaces.Sequence(entity_space),
                        "status": spaces.Dict(
                            {
                                "score": int_box(0, 1_000_000_000),
                                "phase": text_space_short,  # "PLAYING" / "GAME_OVER"
                                "turn": int_box(0, 1_000_000_000),
                                "pellets": int_box(0, 1_000_000),
                            }
                        ),
                        "config": spaces.Dict(
                            {
                                "grid_size": int_box(3, 10_000),
                                "pellet_probability": spaces.Box(
                                    low=0.0, high=1.0, shape=(), dtype=np.float64
                                ),
                                "seed": int_box(-1_000_000_000, 1_000_000_000),
                            }
                        ),
                    }
                ),
            }
        )

        self.action_space = spaces.Discrete(len(GymAction))

        self.reset()

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new game.

        Arguments:
            seed: Seed for this episode's RNG; falls back to ``config.seed``.
            options: Gymnasium options (unused).
        """
        super().reset(seed=seed)
        episode_seed = seed if seed is not None else self.config.seed
        self.session = GameSession(self.config, rng=random.Random(episode_seed))
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Buffer the chosen direction and advance one tick.

        Arguments:
            action: Integer index into the ``GymAction`` enum.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.session is not None

        if not 0 <= int(action) < len(GymAction):
            raise ValueError(f"Invalid action: {action}")
        direction = Direction(GymAction(int(action)).name.lower())

        prev_score = self.session.state.score
        self.session.request_direction(direction)
        snapshot = self.session.tick()
        reward = float(snapshot.score - prev_score)
        obs = self._get_obs(snapshot)
        terminated = snapshot.game_over
        truncated = False
        return obs, reward, terminated, truncated, self._get_info()

    def render(self, mode: Optional[str] = None) -> Optional[PILImage]:  # type: ignore
        """Render the current state.

        Args:
            mode: "human" to display, "texture" to return PIL image. Defaults to
                instance's configured render mode.
        """
        assert self.session is not None
        render_mode = mode or self._render_mode
        img = self._renderer.render(self.session.snapshot())
        if render_mode == "human":
            img.show()
            return None
        elif render_mode == "texture":
            return img
        else:
            raise NotImplementedError(f"Render mode '{render_mode}' not supported.")

    def state_info(self, snapshot: Optional[Snapshot] = None) -> Dict[str, Any]:
        """Return structured ``info`` sub-dict used in observations."""
        assert self.session is not None
        if snapshot is None:
            snapshot = self.session.snapshot()
        return {
            "player": player_observation_dict(snapshot),
            "adversaries": adversaries_observation_tuple(snapshot),
            "status": status_observation_dict(snapshot),
            "config": config_observation_dict(self.config),
        }

    def _get_obs(self, snapshot: Optional[Snapshot] = None) -> ObsType:
        assert self.session is not None
        if snapshot is None:
            snapshot = self.session.snapshot()
        img_np = np.array(self._renderer.render(snapshot))
        return {"image": img_np, "info": self.state_info(snapshot)}

    def _get_info(self) -> Dict[str, object]:
        """Return the step info (empty placeholder for compatibility)."""
        return {}
