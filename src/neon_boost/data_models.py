"""
data_models.py: Data structures for the game state and frame events.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union

from .constants import RESPAWN_Y


class GameStatus(Enum):
    START = "start"
    WAITING = "waiting"
    PLAYING = "playing"
    GAME_OVER = "gameOver"


@dataclass
class Player:
    """Ship kinematics. X is fixed, only the vertical axis moves."""
    y: float = RESPAWN_Y
    velocity: float = 0.0


@dataclass
class Obstacle:
    """An obstacle pair with a gap. Speed and gap are fixed at spawn time."""
    x: float
    gap_y: float
    gap_height: float
    speed: float
    passed: bool = False

    @property
    def gap_top(self) -> float:
        return self.gap_y - self.gap_height / 2

    @property
    def gap_bottom(self) -> float:
        return self.gap_y + self.gap_height / 2


@dataclass
class GameSession:
    """
    Everything the simulation owns for one game.
    Sessions are plain values: the caller keeps them and hands them to the engine.
    """
    high_score: int = 0
    status: GameStatus = GameStatus.START
    player: Player = field(default_factory=Player)
    obstacles: List[Obstacle] = field(default_factory=list)
    score: int = 0
    frame_count: int = 0

    # Captured once on the transition to GAME_OVER
    final_score: Optional[int] = None
    new_high_score: bool = False


@dataclass
class Particle:
    """Cosmetic particle; life counts down once per frame."""
    x: float
    y: float
    vx: float
    vy: float
    life: int
    max_life: int
    size: float
    color: Tuple[int, int, int]

    @property
    def alpha(self) -> float:
        return max(self.life, 0) / self.max_life


@dataclass
class Star:
    x: float
    y: float
    size: float
    speed: float
    brightness: float


# ---------- Frame Events ----------

@dataclass(frozen=True)
class StatusChanged:
    previous: GameStatus
    status: GameStatus


@dataclass(frozen=True)
class ScoreChanged:
    score: int


@dataclass(frozen=True)
class HighScoreChanged:
    high_score: int


@dataclass(frozen=True)
class ParticlesSpawned:
    """Request for the presentation layer to emit `count` particles of `kind`."""
    x: float
    y: float
    kind: str
    count: int


@dataclass(frozen=True)
class GameOver:
    final_score: int
    high_score: int
    new_high_score: bool


GameEvent = Union[StatusChanged, ScoreChanged, HighScoreChanged, ParticlesSpawned, GameOver]


@dataclass
class RenderSnapshot:
    """What the render sink draws for one frame."""
    player: Player
    obstacles: List[Obstacle]
    particles: List[Particle]
    stars: List[Star]
    score: int
    high_score: int
    difficulty_label: str
    status: GameStatus
    frame_count: int
    final_score: Optional[int] = None
    new_high_score: bool = False
