"""Headless command-line runner.

Plays one game with a random stream of direction intents (standing in for a
keyboard) and prints text frames. With ``--realtime`` the ticks come from the
timer scheduler at the configured cadence; otherwise they run back to back.

    python -m pellet_chase --ticks 200 --seed 3 --save-frame final.png
"""

import argparse
import logging
import random
import threading
from typing import List, Optional

from pellet_chase.components import ALL_DIRECTIONS
from pellet_chase.config import GameConfig
from pellet_chase.renderer.image import ImageRenderer
from pellet_chase.renderer.text import render_text
from pellet_chase.scheduler import TickScheduler
from pellet_chase.session import GameSession
from pellet_chase.snapshot import Snapshot

logger = logging.getLogger("pellet_chase")

# Chance per tick that the simulated player asks for a new direction.
TURN_CHANCE = 0.25

# How often the realtime loop checks that the scheduler is still alive.
POLL_INTERVAL_S = 0.1


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a headless Pellet Chase game.")
    parser.add_argument("--ticks", type=int, default=100, help="Maximum ticks to run.")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--grid-size", type=int, default=None)
    parser.add_argument("--pellet-probability", type=float, default=None)
    parser.add_argument("--tick-interval-ms", type=int, default=None)
    parser.add_argument(
        "--realtime",
        action="store_true",
        help="Tick on the timer scheduler instead of back to back.",
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only print the final frame."
    )
    parser.add_argument("--save-frame", default=None, help="Write final frame PNG.")
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = GameConfig.from_mapping(
        {
            "seed": args.seed,
            "grid_size": args.grid_size,
            "pellet_probability": args.pellet_probability,
            "tick_interval_ms": args.tick_interval_ms,
        }
    )
    session = GameSession(config)
    # Separate stream so the simulated input does not perturb game draws.
    input_rng = random.Random(args.seed)
    done = threading.Event()
    ticks_seen = 0

    def on_snapshot(snapshot: Snapshot) -> None:
        nonlocal ticks_seen
        if not args.quiet:
            print(render_text(snapshot), end="\n\n")
        if snapshot.game_over or ticks_seen >= args.ticks:
            done.set()
            return
        ticks_seen += 1
        if input_rng.random() < TURN_CHANCE:
            session.request_direction(input_rng.choice(ALL_DIRECTIONS))

    scheduler = TickScheduler(session, on_snapshot=on_snapshot)
    if args.realtime:
        scheduler.start()
        # A failed tick stops the scheduler without ever setting `done`.
        while not done.wait(timeout=POLL_INTERVAL_S) and scheduler.running:
            pass
        scheduler.stop()
        if not done.is_set():
            logger.error("Scheduler stopped before the game finished")
            return 1
    else:
        on_snapshot(session.snapshot())
        while not done.is_set():
            scheduler.tick()

    final = session.snapshot()
    if args.quiet:
        print(render_text(final))
    if args.save_frame:
        ImageRenderer().render(final).save(args.save_frame)
        logger.info("Saved final frame to %s", args.save_frame)
    print(f"Final score: {final.score} after {final.turn} ticks")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
