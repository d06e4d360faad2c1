import pytest
from swipe.resolver import Rect


class FakeClock:
    """Deterministic millisecond clock that advances on every read."""

    def __init__(self, step: int = 40, start: int = 0):
        self.now = start
        self.step = step

    def __call__(self) -> int:
        t = self.now
        self.now += self.step
        return t


@pytest.fixture
def key_rects():
    # A simple QWERTY-like key layout, 50x50 keys
    return {
        "q": Rect(0, 0, 50, 50),
        "w": Rect(50, 0, 100, 50),
        "e": Rect(100, 0, 150, 50),
        "r": Rect(150, 0, 200, 50),
        "t": Rect(200, 0, 250, 50),
        "a": Rect(0, 50, 50, 100),
        "s": Rect(50, 50, 100, 100),
        "d": Rect(100, 50, 150, 100),
    }


@pytest.fixture
def clock():
    return FakeClock()
