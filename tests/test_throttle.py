import math

from core.throttle import ApiThrottler


class FakeClock:
    def __init__(self, start=100.0):
        self.now = start
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


def _throttler(clock, delay=2.0):
    return ApiThrottler(min_delay=delay, name="test", clock=clock, sleep=clock.sleep)


def test_first_call_does_not_wait():
    clock = FakeClock()
    t = _throttler(clock)
    assert math.isinf(t.time_since_last_call)
    assert t.throttle() == 0.0
    assert clock.sleeps == []


def test_back_to_back_calls_are_spaced():
    clock = FakeClock()
    t = _throttler(clock)
    t.throttle()
    clock.now += 0.5
    assert t.throttle() == 1.5
    assert clock.sleeps == [1.5]
    assert t.time_since_last_call == 0.0


def test_no_wait_after_delay_elapsed():
    clock = FakeClock()
    t = _throttler(clock)
    t.throttle()
    clock.now += 5
    assert t.throttle() == 0.0
    assert clock.sleeps == []


def test_reset_forgets_last_call():
    clock = FakeClock()
    t = _throttler(clock)
    t.throttle()
    t.reset()
    assert t.throttle() == 0.0
    assert clock.sleeps == []
