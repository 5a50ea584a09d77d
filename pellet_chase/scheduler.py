"""Fixed-cadence tick scheduler.

:class:`TickScheduler` fires :meth:`GameSession.tick` every
``interval_ms`` milliseconds on a daemon ``threading.Timer`` that re-arms
itself after each tick, and hands every snapshot to an optional renderer
callback. It keeps ticking after game over (those ticks change nothing) so a
buffered restart is picked up without outside help.

``stop()`` is idempotent: it cancels the pending timer and waits for an
in-flight tick, so once it returns no tick is running and none will fire.
"""

import logging
import threading
from typing import Callable, Optional

from pellet_chase.session import GameSession
from pellet_chase.snapshot import Snapshot
from pellet_chase.types import SnapshotCallback

logger = logging.getLogger(__name__)


class TickScheduler:
    """Drives a :class:`GameSession` at a fixed interval.

    Args:
        session: Session to advance.
        interval_ms: Tick period; defaults to the session config's cadence.
        on_snapshot: Renderer callback receiving every snapshot.
    """

    def __init__(
        self,
        session: GameSession,
        interval_ms: Optional[int] = None,
        on_snapshot: Optional[SnapshotCallback] = None,
    ):
        self.session = session
        self.interval_ms = (
            interval_ms if interval_ms is not None else session.config.tick_interval_ms
        )
        if self.interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {self.interval_ms}")
        self.on_snapshot = on_snapshot
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._running = False

    @property
    def running(self) -> bool:
        with self._lock:
            return self._running

    def start(self) -> None:
        """Emit the current snapshot and begin ticking (no-op if running)."""
        with self._lock:
            if self._running:
                return
            self._running = True
        logger.info("Scheduler started (interval %d ms)", self.interval_ms)
        self._guarded(lambda: self._emit(self.session.snapshot()))
        with self._lock:
            if self._running:
                self._schedule()

    def stop(self) -> None:
        """Stop ticking. Safe to call repeatedly and from the callback."""
        with self._lock:
            if not self._running:
                return
            self._running = False
            timer, self._timer = self._timer, None
        if timer is not None:
            timer.cancel()
            if timer is not threading.current_thread():
                timer.join()
        logger.info("Scheduler stopped")

    def tick(self) -> Snapshot:
        """Run exactly one tick synchronously and deliver its snapshot.

        Any error (from the session or the callback) is logged, stops the
        scheduler and propagates to the caller.
        """
        return self._guarded(lambda: self._emit(self.session.tick()))

    def run(self, ticks: int) -> Snapshot:
        """Run ``ticks`` ticks back to back without waiting (headless mode)."""
        snapshot = self.session.snapshot()
        for _ in range(ticks):
            snapshot = self.tick()
        return snapshot

    def _emit(self, snapshot: Snapshot) -> Snapshot:
        if self.on_snapshot is not None:
            self.on_snapshot(snapshot)
        return snapshot

    def _guarded(self, fn: Callable[[], Snapshot]) -> Snapshot:
        try:
            return fn()
        except Exception:
            logger.exception("Tick failed; stopping scheduler")
            self.stop()
            raise

    def _schedule(self) -> None:
        # Caller holds self._lock.
        self._timer = threading.Timer(self.interval_ms / 1000.0, self._on_timer)
        self._timer.daemon = True
        self._timer.start()

    def _on_timer(self) -> None:
        with self._lock:
            if not self._running:
                return
        self.tick()
        with self._lock:
            if self._running:
                self._schedule()
