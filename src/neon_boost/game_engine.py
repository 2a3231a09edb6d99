"""
game_engine.py: The per-frame simulation and the game state machine.

The engine holds no game state of its own. Callers own a GameSession, hand it
to `handle_boost()` for every input event and to `advance()` once per frame,
and get back the events the presentation layer should react to.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Protocol

from .constants import (
    WORLD_WIDTH, SPAWN_SPACING, GAP_MARGIN, RESPAWN_Y,
    BOOST_PARTICLES, EXPLOSION_PARTICLES, TRAIL_EVERY_N_FRAMES
)
from .data_models import (
    GameSession, GameStatus, Obstacle, Player, GameEvent,
    StatusChanged, ScoreChanged, HighScoreChanged, ParticlesSpawned, GameOver
)
from .difficulty import gap_height, obstacle_speed
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


class ScoreStore(Protocol):
    def load_high_score(self) -> int: ...

    def save_high_score(self, value: int) -> None: ...


@dataclass
class GameEngine:
    """
    Runs sessions: physics, obstacle spawning, scoring and state transitions.
    Passing a seeded `rng` makes a run fully deterministic.
    """
    core: PhysicsCore = field(default_factory=PhysicsCore)
    store: Optional[ScoreStore] = None
    rng: random.Random = field(default_factory=random.Random)
    world_width: float = WORLD_WIDTH
    spawn_spacing: float = SPAWN_SPACING

    # ---------- Session lifecycle ----------

    def new_session(self) -> GameSession:
        """A session on the start screen, with the persisted best score loaded."""
        high_score = self.store.load_high_score() if self.store else 0
        return GameSession(high_score=high_score)

    def reset(self, session: GameSession) -> List[GameEvent]:
        """Puts the session into a fresh WAITING state. The best score survives."""
        previous = session.status
        session.player = Player(y=RESPAWN_Y, velocity=0.0)
        session.obstacles = []
        session.score = 0
        session.frame_count = 0
        session.final_score = None
        session.new_high_score = False
        session.status = GameStatus.WAITING
        logger.info("Session reset (%s -> waiting)", previous.value)
        return [StatusChanged(previous, GameStatus.WAITING), ScoreChanged(0)]

    # ---------- Input ----------

    def handle_boost(self, session: GameSession) -> List[GameEvent]:
        """
        Applies one boost input. Every call is handled on its own, so several
        inputs between two frames each take effect.
        """
        if session.status in (GameStatus.START, GameStatus.GAME_OVER):
            return self.reset(session)

        events: List[GameEvent] = []
        if session.status is GameStatus.WAITING:
            session.status = GameStatus.PLAYING
            events.append(StatusChanged(GameStatus.WAITING, GameStatus.PLAYING))
            logger.info("Run started")

        session.player.velocity = self.core.boost()
        events.append(self._particles(session, "boost", BOOST_PARTICLES,
                                      x=self.core.player_x - self.core.player_radius))
        return events

    # ---------- Frame ----------

    def advance(self, session: GameSession) -> List[GameEvent]:
        """
        One simulation step. Only PLAYING sessions move; the frame counter,
        which drives background scrolling, ticks in every state.
        """
        session.frame_count += 1
        if session.status is not GameStatus.PLAYING:
            return []

        events: List[GameEvent] = []
        player = session.player

        # 1. Integrate the ship
        self.core.step_player(player)
        if session.frame_count % TRAIL_EVERY_N_FRAMES == 0:
            events.append(self._particles(session, "trail", 1,
                                          x=self.core.player_x - self.core.player_radius))

        # 2. Spawn and move obstacles, awarding passes
        self._spawn_if_needed(session)
        for obstacle in session.obstacles:
            obstacle.x -= obstacle.speed
            if not obstacle.passed and self.core.has_passed(obstacle):
                obstacle.passed = True
                events.extend(self._award_point(session))

        # 3. Collisions
        if self.core.out_of_bounds(player.y):
            logger.info("Ship left the world at y=%.2f", player.y)
            events.extend(self._game_over(session))
        elif self.core.find_collision(player.y, session.obstacles) is not None:
            logger.info("Ship hit an obstacle at y=%.2f", player.y)
            events.extend(self._game_over(session))

        # 4. Prune obstacles that have left the screen
        session.obstacles = [o for o in session.obstacles if not self.core.is_off_screen(o)]
        return events

    # ---------- Internals ----------

    def _spawn_if_needed(self, session: GameSession):
        obstacles = session.obstacles
        if obstacles and obstacles[-1].x >= self.world_width - self.spawn_spacing:
            return

        gap = gap_height(session.score)
        speed = obstacle_speed(session.score)
        free_space = self.core.world_height - gap - 2 * GAP_MARGIN
        gap_y = self.rng.random() * free_space + GAP_MARGIN + gap / 2
        obstacles.append(Obstacle(x=float(self.world_width), gap_y=gap_y,
                                  gap_height=gap, speed=speed))
        logger.debug("Spawned obstacle gap_y=%.1f gap=%.1f speed=%.2f", gap_y, gap, speed)

    def _award_point(self, session: GameSession) -> List[GameEvent]:
        session.score += 1
        events: List[GameEvent] = [ScoreChanged(session.score)]
        if session.score > session.high_score:
            session.high_score = session.score
            if self.store:
                self.store.save_high_score(session.high_score)
            events.append(HighScoreChanged(session.high_score))
        return events

    def _game_over(self, session: GameSession) -> List[GameEvent]:
        session.status = GameStatus.GAME_OVER
        session.final_score = session.score
        session.new_high_score = session.score == session.high_score and session.score > 0
        logger.info("Game over: score=%d best=%d new_best=%s",
                    session.score, session.high_score, session.new_high_score)
        return [
            self._particles(session, "explosion", EXPLOSION_PARTICLES, x=self.core.player_x),
            StatusChanged(GameStatus.PLAYING, GameStatus.GAME_OVER),
            GameOver(session.score, session.high_score, session.new_high_score),
        ]

    @staticmethod
    def _particles(session: GameSession, kind: str, count: int, x: float) -> ParticlesSpawned:
        return ParticlesSpawned(x=x, y=session.player.y, kind=kind, count=count)
