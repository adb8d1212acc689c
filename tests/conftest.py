import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import random

import pytest

from gridsnake.grid import Grid


@pytest.fixture
def grid():
    return Grid(20, 20)


@pytest.fixture
def rng():
    return random.Random(1234)
