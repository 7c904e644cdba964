import os

# Headless SDL; must be set before pygame initialises a display.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from chaosgame.config import GameConfig
from chaosgame.render.screen import ScreenRenderer


class RecordingCanvas:
    """Stands in for Canvas; remembers every plot call."""

    def __init__(self):
        self.plots = []
        self.clears = 0

    def clear(self):
        self.clears += 1

    def plot(self, x, y, size=2):
        self.plots.append((x, y, size))


class StubRNG:
    """Returns scripted rolls and records the requested ranges."""

    def __init__(self, rolls):
        self.rolls = list(rolls)
        self.ranges = []

    def roll(self, low, high):
        self.ranges.append((low, high))
        return self.rolls.pop(0)


@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture
def stub_rng():
    return StubRNG


@pytest.fixture
def renderer():
    cfg = GameConfig()
    r = ScreenRenderer(cfg.view_width, cfg.view_height, font_size=cfg.font_size)
    try:
        yield r
    finally:
        r.teardown()
