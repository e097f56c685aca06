import pytest

from tetris_engine import Command
from tetris_events import Game, TickScheduler
from conftest import only


def test_scheduler_fires_once_per_period():
    t = TickScheduler(500)
    assert t.advance(499) == 0
    assert t.advance(1) == 1
    assert t.advance(1500) == 3
    assert t.advance(250) == 0


def test_scheduler_rejects_bad_period():
    with pytest.raises(AssertionError):
        TickScheduler(0)


def test_update_drives_gravity():
    g = Game(only("O"), 10, 20, tick_ms=500)
    g.update(1000)
    assert g.state.piece.y == 2


def test_events_apply_in_posted_order():
    g = Game(only("O"), 10, 20, tick_ms=500)
    seen = []
    g.subscribe(lambda s: seen.append(min(x for x, _ in s.piece_cells)))
    g.post(Command.LEFT)
    g.post(Command.LEFT)
    g.post(Command.RIGHT)
    assert g.process_pending() == 3
    assert seen == [3, 2, 3]
    assert not g.queue


def test_none_is_not_posted():
    g = Game(only("O"))
    g.post(None)
    assert g.process_pending() == 0


def test_lock_counter_and_game_over():
    g = Game(only("O"), 4, 4, tick_ms=100)
    # O spawns at x=1; each piece lands on the last, two fit before the top fills
    g.update(100 * 3)
    assert g.locked_pieces == 1
    g.update(100 * 2)
    assert g.locked_pieces == 2
    assert g.state.game_over
    snap = g.snapshot()
    g.post(Command.LEFT)
    g.update(1000)
    assert g.snapshot() == snap


def test_reset_starts_fresh():
    g = Game(only("O"), 4, 4, tick_ms=100)
    g.update(1000)
    assert g.state.game_over
    got = []
    g.subscribe(got.append)
    g.reset()
    assert not g.state.game_over
    assert g.state.board.occupied_count() == 0
    assert g.locked_pieces == 0
    assert len(got) == 1
