"""
Visual Effects
==============
Particles and the scrolling star field. Purely cosmetic: the simulation
only asks for particles through ParticlesSpawned events.
"""

import random
from typing import Iterable, List, Optional

from .constants import WORLD_WIDTH, WORLD_HEIGHT, STAR_COUNT
from .data_models import (
    Particle, Star, GameStatus, GameEvent, ParticlesSpawned, StatusChanged
)

NEON_CYAN = (0, 255, 255)
NEON_MAGENTA = (255, 0, 255)
NEON_YELLOW = (255, 255, 0)

PARTICLE_COLORS = {
    "boost": [NEON_CYAN, (0, 204, 255), (0, 153, 255)],
    "trail": [NEON_MAGENTA, (204, 0, 255), (255, 0, 153)],
    "explosion": [NEON_YELLOW, (255, 153, 0), (255, 0, 102)],
}


def create_particle(x: float, y: float, kind: str, rng: random.Random) -> Particle:
    """A single particle drifting left, explosions spread wider and live longer."""
    explosion = kind == "explosion"
    spread_x = 8 if explosion else 3
    spread_y = 8 if explosion else 2
    life = 40 if explosion else 20

    return Particle(
        x=x, y=y,
        vx=(rng.random() - 0.5) * spread_x - 2,
        vy=(rng.random() - 0.5) * spread_y,
        life=life,
        max_life=life,
        size=rng.random() * (6 if explosion else 4) + 2,
        color=rng.choice(PARTICLE_COLORS[kind]),
    )


def create_stars(rng: random.Random, count: int = STAR_COUNT,
                 width: float = WORLD_WIDTH, height: float = WORLD_HEIGHT) -> List[Star]:
    return [
        Star(
            x=rng.random() * width,
            y=rng.random() * height,
            size=rng.random() * 2 + 0.5,
            speed=rng.random() * 1 + 0.5,
            brightness=rng.random() * 0.5 + 0.5,
        )
        for _ in range(count)
    ]


class Effects:
    """Owns the live particles and stars and reacts to simulation events."""

    def __init__(self, rng: Optional[random.Random] = None,
                 width: float = WORLD_WIDTH, height: float = WORLD_HEIGHT):
        self.rng = rng or random.Random()
        self.width = width
        self.height = height
        self.particles: List[Particle] = []
        self.stars: List[Star] = create_stars(self.rng, width=width, height=height)

    def emit(self, kind: str, x: float, y: float, count: int):
        for _ in range(count):
            self.particles.append(create_particle(x, y, kind, self.rng))

    def handle_events(self, events: Iterable[GameEvent]):
        for event in events:
            if isinstance(event, ParticlesSpawned):
                self.emit(event.kind, event.x, event.y, event.count)
            elif isinstance(event, StatusChanged) and event.status is GameStatus.WAITING:
                # Fresh run, fresh sky
                self.particles = []
                self.stars = create_stars(self.rng, width=self.width, height=self.height)

    def update(self):
        """Scrolls stars and ages particles. Runs in every game state."""
        for star in self.stars:
            star.x -= star.speed
            if star.x < 0:
                star.x = self.width
                star.y = self.rng.random() * self.height

        alive = []
        for p in self.particles:
            p.x += p.vx
            p.y += p.vy
            p.life -= 1
            if p.life > 0:
                alive.append(p)
        self.particles = alive
