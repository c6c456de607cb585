"""Shared fixtures. Nothing here opens a window."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest


class ScriptedRandom:
    """Random source that replays fixed values for random() and randrange()."""

    def __init__(self, randoms=(), ranges=()):
        self.randoms = list(randoms)
        self.ranges = list(ranges)

    def random(self):
        return self.randoms.pop(0)

    def randrange(self, stop):
        value = self.ranges.pop(0)
        assert 0 <= value < stop
        return value


class ConstantRandom:
    """Random source that always returns the same values."""

    def __init__(self, value=0.0, range_value=0):
        self.value = value
        self.range_value = range_value

    def random(self):
        return self.value

    def randrange(self, stop):
        return self.range_value % stop


@pytest.fixture
def scripted_rng():
    return ScriptedRandom


@pytest.fixture
def constant_rng():
    return ConstantRandom()
