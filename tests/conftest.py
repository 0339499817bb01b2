import pytest

from flappy.config import GameConfig
from flappy.engine import GameEngine
from flappy.score_db import MemoryScoreStore


class FixedRandom:
    """random.Random stand-in that always returns the same sample."""

    def __init__(self, value: float = 0.5):
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def store():
    return MemoryScoreStore()


@pytest.fixture
def engine(config, store):
    # Gap top at 125, opening 125..275
    return GameEngine(config, store=store, rng=FixedRandom(0.5))


@pytest.fixture
def hover():
    """Pins the bird inside the fixed gap and runs one tick."""
    def step(engine, y=150.0):
        engine.bird.y = y
        engine.bird.velocity = 0.0
        return engine.tick()
    return step
