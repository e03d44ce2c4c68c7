import random

import pytest


class FrozenClock:
    """Clock stub returning a fixed millisecond reading until advanced."""

    def __init__(self, now: int = 1_600_000_000_000):
        self.now = now
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.now

    def advance(self, millis: int):
        self.now += millis


@pytest.fixture
def numeric_compare():
    return lambda a, b: a - b


@pytest.fixture
def frozen_clock():
    return FrozenClock()


@pytest.fixture
def rng():
    """Seeded RNG so randomized invariant tests are reproducible."""
    return random.Random(1337)
