"""Tick scheduler and the single serialized event stream feeding the engine"""
import logging
from collections import deque
from typing import Callable, Deque, List, Optional

from tetris_engine import TICK, GameState, Snapshot, new_game, reduce, snapshot
from tetris_piece import ShapeCatalog

logger = logging.getLogger(__name__)


class TickScheduler:
    """Accumulates elapsed milliseconds and reports how many ticks are due.

    Works like a fixed-timestep accumulator: feed it the frame delta and it
    returns one tick per whole period elapsed, carrying the remainder over.
    """
    def __init__(self, period_ms: int = 500):
        assert period_ms > 0, "tick period must be positive"
        self.period_ms = period_ms
        self.acc = 0.0

    def advance(self, dt_ms: float) -> int:
        self.acc += dt_ms
        fired = 0
        while self.acc >= self.period_ms:
            self.acc -= self.period_ms
            fired += 1
        return fired

    def reset(self):
        self.acc = 0.0


class Game:
    """Owns the one GameState and applies queued events to it in order."""
    def __init__(self, catalog: ShapeCatalog, width: int = 10, height: int = 20, tick_ms: int = 500):
        self.catalog = catalog
        self.width, self.height = width, height
        self.scheduler = TickScheduler(tick_ms)
        self.queue: Deque[object] = deque()
        self.subscribers: List[Callable[[Snapshot], None]] = []
        self.state: GameState = new_game(catalog, width, height)
        self.locked_pieces = 0

    def reset(self):
        self.queue.clear()
        self.scheduler.reset()
        self.state = new_game(self.catalog, self.width, self.height)
        logger.info("game reset")
        self.locked_pieces = 0
        self._publish()

    def subscribe(self, fn: Callable[[Snapshot], None]):
        self.subscribers.append(fn)

    def post(self, event: Optional[object]):
        if event is None:
            return
        self.queue.append(event)

    def update(self, dt_ms: float) -> int:
        """Enqueue the ticks due after dt_ms, then drain the queue."""
        for _ in range(self.scheduler.advance(dt_ms)):
            self.post(TICK)
        return self.process_pending()

    def process_pending(self) -> int:
        n = 0
        while self.queue:
            self.apply(self.queue.popleft())
            n += 1
        return n

    def apply(self, event: object) -> GameState:
        before = self.state
        after = reduce(before, event, self.catalog)
        if after.board is not before.board:
            self.locked_pieces += 1
        self.state = after
        self._publish()
        return after

    def snapshot(self) -> Snapshot:
        return snapshot(self.state, self.locked_pieces)

    def _publish(self):
        if not self.subscribers:
            return
        snap = self.snapshot()
        for fn in self.subscribers:
            fn(snap)
