"""Shared fixtures. Pygame runs headless for the whole test session."""

import os

os.environ["SDL_VIDEODRIVER"] = "dummy"
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np  # noqa: E402
import pytest  # noqa: E402

from flappy_rocket.config import GameConfig  # noqa: E402
from flappy_rocket.world import new_world  # noqa: E402


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def world(config, rng):
    """A world that is waiting for the first thrust, with nothing on screen yet."""
    return new_world(config, rng)


@pytest.fixture
def running_world(world):
    world.start()
    return world
