import time

import pytest

from mspot.timers import SteadyTimer, StopWatch, Timer


def test_steady_timer_grows_and_restarts():
    t = SteadyTimer()
    time.sleep(0.02)
    first = t.time()
    assert first >= 0.015
    t.start()
    assert t.time() < first


def test_stopwatch_elapsed():
    sw = StopWatch()
    sw.start()
    time.sleep(0.02)
    assert sw.elapsed() >= 15


def test_stopwatch_wall_time():
    sw = StopWatch()
    assert abs(sw.time() - time.time() * 1000) < 1000


def test_timer_reports_timeout_in_seconds():
    t = Timer(10, 3)
    assert t.timeout == 3
    assert t.running is False
    assert t.timer == 0


def test_timer_not_running_until_started():
    t = Timer(10, 1)
    t.clock(100)
    assert t.expired is False
    assert t.running is False


def test_timer_expires_after_timeout_ticks():
    t = Timer(10, 1)
    t.start()
    t.clock(9)
    assert t.expired is False
    t.clock()
    assert t.expired is True
    assert t.remaining == 0


def test_timer_counts_seconds():
    t = Timer(10, 5)
    t.start()
    t.clock(20)
    assert t.timer == 2


def test_zero_timeout_never_runs():
    t = Timer(10)
    t.start()
    assert t.running is False
    assert t.expired is False


def test_start_with_new_timeout():
    t = Timer(100)
    t.start(2)
    assert t.running is True
    assert t.timeout == 2


def test_set_zero_timeout_stops():
    t = Timer(10, 1)
    t.start()
    t.set_timeout(0)
    assert t.running is False
    assert t.timeout == 0


def test_stop():
    t = Timer(10, 1)
    t.start()
    t.stop()
    assert t.running is False
    assert t.remaining == 0


def test_remaining_decreases():
    t = Timer(10, 4)
    t.start()
    before = t.remaining
    t.clock(20)
    assert t.remaining < before


def test_milliseconds_timeout():
    t = Timer(1000, 0, 500)
    t.start()
    t.clock(499)
    assert t.expired is False
    t.clock()
    assert t.expired is True


def test_invalid_ticks_per_sec():
    with pytest.raises(ValueError):
        Timer(0)