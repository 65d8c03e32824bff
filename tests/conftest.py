import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from snake_eater.game import SnakeEaterGame


class FakeTimer:
    def __init__(self):
        self.calls = []

    def start(self):
        self.calls.append("start")

    def stop(self):
        self.calls.append("stop")


@pytest.fixture
def timer():
    return FakeTimer()


@pytest.fixture
def game(timer):
    return SnakeEaterGame(rng=random.Random(1234), timer=timer)
