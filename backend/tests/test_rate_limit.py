from portfolio.utils.rate_limit import SlidingWindowRateLimiter


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


def test_limit_is_enforced_within_the_window():
    clock = FakeClock()
    limiter = SlidingWindowRateLimiter(clock=clock)

    assert limiter.hit("1.2.3.4", 2, 10) == (True, 1, 10)
    clock.now = 4
    assert limiter.hit("1.2.3.4", 2, 10) == (True, 0, 6)
    assert limiter.hit("1.2.3.4", 2, 10) == (False, 0, 6)
    assert limiter.hit("5.6.7.8", 2, 10)[0]

    clock.now = 10.5
    allowed, remaining, _ = limiter.hit("1.2.3.4", 2, 10)
    assert allowed and remaining == 0


def test_idle_keys_are_swept():
    clock = FakeClock()
    limiter = SlidingWindowRateLimiter(clock=clock, sweep_interval=5)

    limiter.hit("a", 5, 10)
    limiter.hit("b", 5, 10)
    clock.now = 3
    limiter.hit("c", 5, 10)
    assert set(limiter._history) == {"a", "b", "c"}

    clock.now = 12
    limiter.hit("c", 5, 10)
    assert set(limiter._history) == {"c"}

    clock.now = 30
    limiter.hit("d", 5, 10)
    assert set(limiter._history) == {"d"}
