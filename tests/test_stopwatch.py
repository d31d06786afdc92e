import pytest

from thorkit.stopwatch import StopWatch, Timer


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


def test_stopwatch_initially_stopped(clock):
    watch = StopWatch(clock)
    clock.advance(5)
    assert not watch.running
    assert watch.elapsed == 0.0


def test_stopwatch_accumulates_while_running(clock):
    watch = StopWatch(clock)
    watch.start()
    clock.advance(2)
    assert watch.running
    assert watch.elapsed == 2.0


def test_stopwatch_pause_and_resume(clock):
    watch = StopWatch(clock)
    watch.start()
    clock.advance(2)
    watch.stop()
    clock.advance(10)
    assert watch.elapsed == 2.0
    watch.start()
    clock.advance(3)
    assert watch.elapsed == 5.0


def test_stopwatch_double_start_does_not_restart(clock):
    watch = StopWatch(clock)
    watch.start()
    clock.advance(2)
    watch.start()
    clock.advance(1)
    assert watch.elapsed == 3.0


def test_stopwatch_reset_and_restart(clock):
    watch = StopWatch(clock)
    watch.start()
    clock.advance(4)
    watch.reset()
    assert watch.elapsed == 0.0
    assert not watch.running
    watch.restart()
    clock.advance(1)
    assert watch.running
    assert watch.elapsed == 1.0


def test_timer_without_limit_is_expired(clock):
    timer = Timer(clock)
    assert timer.expired
    assert timer.remaining == 0.0
    timer.start()
    assert not timer.running


def test_timer_counts_down(clock):
    timer = Timer(clock)
    timer.restart(5)
    clock.advance(2)
    assert timer.running
    assert not timer.expired
    assert timer.remaining == 3.0


def test_timer_expires(clock):
    timer = Timer(clock)
    timer.restart(5)
    clock.advance(7)
    assert timer.expired
    assert not timer.running
    assert timer.remaining == 0.0


def test_timer_stop_pauses_countdown(clock):
    timer = Timer(clock)
    timer.restart(5)
    clock.advance(1)
    timer.stop()
    clock.advance(100)
    assert timer.remaining == 4.0
    assert not timer.running


def test_timer_reset_stops(clock):
    timer = Timer(clock)
    timer.restart(5)
    clock.advance(1)
    timer.reset(10)
    clock.advance(3)
    assert timer.remaining == 10.0
    assert not timer.running


@pytest.mark.parametrize("limit", [0, -1.0])
def test_timer_rejects_non_positive_limit(clock, limit):
    with pytest.raises(ValueError):
        Timer(clock).reset(limit)