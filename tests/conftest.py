import random

import pytest

from neon_boost.data_models import GameSession, GameStatus, Obstacle, Player
from neon_boost.game_engine import GameEngine


class MemoryStore:
    """Score store stand-in that remembers every save."""
    def __init__(self, initial: int = 0):
        self.value = initial
        self.saves = []

    def load_high_score(self) -> int:
        return self.value

    def save_high_score(self, value: int):
        self.value = value
        self.saves.append(value)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def engine(store):
    return GameEngine(store=store, rng=random.Random(1234))


def playing_session(y=300.0, velocity=0.0, score=0, high_score=0, obstacles=None):
    return GameSession(
        high_score=high_score,
        status=GameStatus.PLAYING,
        player=Player(y=y, velocity=velocity),
        obstacles=obstacles or [],
        score=score,
    )


def obstacle(x, gap_y=300.0, gap_height=180.0, speed=3.0, passed=False):
    return Obstacle(x=x, gap_y=gap_y, gap_height=gap_height, speed=speed, passed=passed)
