import pytest

from nibbles.timers import Scheduler


def test_callbacks_fire_once_in_deadline_order(clock):
    sched = Scheduler(clock)
    fired = []
    sched.call_later(300, lambda: fired.append("late"))
    sched.call_later(100, lambda: fired.append("early"))

    clock.advance(99)
    assert sched.run_due() == 0

    clock.advance(300)
    assert sched.run_due() == 2
    assert fired == ["early", "late"]
    assert sched.run_due() == 0
    assert sched.pending == 0


def test_cancelled_handle_never_fires(clock):
    sched = Scheduler(clock)
    fired = []
    handle = sched.call_later(10, lambda: fired.append(1))
    assert sched.pending == 1

    handle.cancel()
    assert handle.cancelled
    assert sched.pending == 0
    assert sched.run_due(now=1000) == 0
    assert fired == []


def test_run_due_accepts_explicit_time(clock):
    sched = Scheduler(clock)
    fired = []
    sched.call_later(50, lambda: fired.append(1))
    assert sched.run_due(now=50) == 1
    assert fired == [1]


def test_negative_delay_rejected(clock):
    with pytest.raises(ValueError):
        Scheduler(clock).call_later(-1, lambda: None)
