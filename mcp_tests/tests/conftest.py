import pytest


class DummyMCP:
    """Minimal FastMCP stand-in to capture tool registration."""

    def __init__(self) -> None:
        self.tools = {}

    def tool(self, *, name: str):
        def _decorator(fn):
            self.tools[name] = fn
            return fn
        return _decorator


class FakeClock:
    """Manually advanced clock, callable like time.monotonic."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


class ManualTimer:
    def __init__(self, when: float, callback) -> None:
        self.when = when
        self.callback = callback
        self.cancelled = False
        self.fired = False


class ManualScheduler:
    """Scheduler driven by a FakeClock; timers only fire on advance()."""

    def __init__(self, clock: FakeClock) -> None:
        self._clock = clock
        self.timers = []

    def schedule_after(self, delay, callback):
        timer = ManualTimer(self._clock.now + delay, callback)
        self.timers.append(timer)
        return timer

    def cancel(self, handle) -> None:
        handle.cancelled = True

    def pending(self):
        return [t for t in self.timers if not t.cancelled and not t.fired]

    def advance(self, seconds: float) -> None:
        self._clock.now += seconds
        for timer in sorted(self.pending(), key=lambda t: t.when):
            if timer.when <= self._clock.now and not timer.cancelled:
                timer.fired = True
                timer.callback()

    def advance_clock_only(self, seconds: float) -> None:
        # Moves time without firing timers (a late or stalled timer facility)
        self._clock.now += seconds


@pytest.fixture
def dummy_mcp():
    return DummyMCP()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    return ManualScheduler(clock)
