import threading
import time

import pytest

from pellet_chase.config import GameConfig
from pellet_chase.scheduler import TickScheduler
from pellet_chase.session import GameSession
from pellet_chase.snapshot import Snapshot


def make_session() -> GameSession:
    return GameSession(GameConfig(adversaries=(), seed=4))


def test_run_drives_ticks_and_delivers_snapshots() -> None:
    received: list[Snapshot] = []
    scheduler = TickScheduler(make_session(), on_snapshot=received.append)
    last = scheduler.run(5)
    assert [s.turn for s in received] == [1, 2, 3, 4, 5]
    assert last is received[-1]
    assert not scheduler.running


def test_run_zero_ticks_returns_current_snapshot() -> None:
    session = make_session()
    scheduler = TickScheduler(session)
    assert scheduler.run(0) == session.snapshot()


def test_interval_defaults_to_config() -> None:
    session = GameSession(GameConfig(tick_interval_ms=40))
    assert TickScheduler(session).interval_ms == 40
    assert TickScheduler(session, interval_ms=10).interval_ms == 10
    with pytest.raises(ValueError):
        TickScheduler(session, interval_ms=0)


def test_start_emits_initial_snapshot_then_ticks_until_stopped() -> None:
    received: list[Snapshot] = []
    enough = threading.Event()

    def on_snapshot(snapshot: Snapshot) -> None:
        received.append(snapshot)
        if len(received) >= 4:
            enough.set()

    scheduler = TickScheduler(make_session(), interval_ms=5, on_snapshot=on_snapshot)
    scheduler.start()
    assert scheduler.running
    assert enough.wait(timeout=5)
    scheduler.stop()
    assert not scheduler.running

    assert received[0].turn == 0
    assert [s.turn for s in received[:4]] == [0, 1, 2, 3]

    count = len(received)
    time.sleep(0.05)
    assert len(received) == count


def test_start_and_stop_are_idempotent() -> None:
    scheduler = TickScheduler(make_session(), interval_ms=1000)
    scheduler.stop()
    scheduler.start()
    scheduler.start()
    scheduler.stop()
    scheduler.stop()
    assert not scheduler.running


def test_callback_may_stop_scheduler() -> None:
    received: list[Snapshot] = []
    scheduler: TickScheduler

    def on_snapshot(snapshot: Snapshot) -> None:
        received.append(snapshot)
        if snapshot.turn == 2:
            scheduler.stop()

    scheduler = TickScheduler(make_session(), interval_ms=5, on_snapshot=on_snapshot)
    scheduler.start()
    deadline = time.monotonic() + 5
    while scheduler.running and time.monotonic() < deadline:
        time.sleep(0.01)
    time.sleep(0.05)
    assert not scheduler.running
    assert received[-1].turn == 2


def test_callback_error_stops_scheduler_and_propagates() -> None:
    def broken(snapshot: Snapshot) -> None:
        raise RuntimeError("renderer exploded")

    scheduler = TickScheduler(make_session(), on_snapshot=broken)
    with pytest.raises(RuntimeError):
        scheduler.tick()
    assert not scheduler.running

    with pytest.raises(RuntimeError):
        scheduler.start()
    assert not scheduler.running
