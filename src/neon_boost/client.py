#!/usr/bin/env python3
"""
client.py

Pygame front end: input wiring, the frame loop and neon rendering.
The simulation lives in game_engine; this module only feeds it inputs and
draws the snapshots it produces.
"""

import argparse
import logging
import math
from typing import List, Optional, Sequence

import pygame

from .constants import (
    WORLD_WIDTH, WORLD_HEIGHT, PLAYER_X, PLAYER_SIZE, OBSTACLE_WIDTH,
    RENDER_FPS, GRID_SPACING, GRID_SCROLL_SPEED, HIGHSCORE_DB_FILE
)
from .data_models import GameSession, GameStatus, Obstacle, RenderSnapshot
from .difficulty import difficulty_label
from .effects import Effects, NEON_CYAN, NEON_MAGENTA
from .game_engine import GameEngine
from .score_db import HighScoreStore

logger = logging.getLogger(__name__)

BOOST_KEYS = (pygame.K_SPACE, pygame.K_UP, pygame.K_w)

BACKGROUND = (5, 5, 16)
WHITE = (255, 255, 255)
HOT_PINK = (255, 0, 102)


def is_boost_event(event: pygame.event.Event) -> bool:
    """Space/Up/W, a mouse click or a finger touch each count as one boost."""
    if event.type == pygame.KEYDOWN:
        return event.key in BOOST_KEYS
    if event.type == pygame.MOUSEBUTTONDOWN:
        # Touches also arrive as emulated mouse clicks; count them once
        return not getattr(event, "touch", False)
    return event.type == pygame.FINGERDOWN


def is_quit_event(event: pygame.event.Event) -> bool:
    return event.type == pygame.QUIT or (
        event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE)


def build_snapshot(session: GameSession, effects: Effects) -> RenderSnapshot:
    return RenderSnapshot(
        player=session.player,
        obstacles=list(session.obstacles),
        particles=list(effects.particles),
        stars=list(effects.stars),
        score=session.score,
        high_score=session.high_score,
        difficulty_label=difficulty_label(session.score),
        status=session.status,
        frame_count=session.frame_count,
        final_score=session.final_score,
        new_high_score=session.new_high_score,
    )


def _rotate(points: Sequence[tuple], degrees: float, cx: float, cy: float) -> List[tuple]:
    rad = math.radians(degrees)
    cos_a, sin_a = math.cos(rad), math.sin(rad)
    return [(cx + x * cos_a - y * sin_a, cy + x * sin_a + y * cos_a) for x, y in points]


# ----------------- Renderer -----------------

class NeonRenderer:
    """Draws a RenderSnapshot. Never feeds anything back into the simulation."""

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self.fx = pygame.Surface((WORLD_WIDTH, WORLD_HEIGHT), pygame.SRCALPHA)
        self.scanlines = self._build_scanlines()
        self.large_font = pygame.font.Font(None, 64)
        self.font = pygame.font.Font(None, 32)
        self.small_font = pygame.font.Font(None, 24)

    @staticmethod
    def _build_scanlines() -> pygame.Surface:
        surf = pygame.Surface((WORLD_WIDTH, WORLD_HEIGHT), pygame.SRCALPHA)
        for y in range(0, WORLD_HEIGHT, 4):
            surf.fill((0, 0, 0, 8), (0, y, WORLD_WIDTH, 2))
        return surf

    def draw(self, snap: RenderSnapshot):
        self.screen.fill(BACKGROUND)
        self.fx.fill((0, 0, 0, 0))

        self._draw_stars(snap)
        self._draw_grid(snap.frame_count)
        self._draw_particles(snap)
        for obstacle in snap.obstacles:
            self._draw_obstacle(obstacle)
        if snap.status is not GameStatus.GAME_OVER:
            self._draw_player(snap.player.y, snap.player.velocity)

        self.screen.blit(self.fx, (0, 0))

        if snap.status is GameStatus.WAITING:
            self._center_text("PRESS SPACE OR CLICK TO START", self.font,
                              NEON_CYAN, WORLD_HEIGHT - 50)
        self._draw_hud(snap)
        if snap.status is GameStatus.START:
            self._draw_start_overlay()
        elif snap.status is GameStatus.GAME_OVER:
            self._draw_game_over_overlay(snap)

        self.screen.blit(self.scanlines, (0, 0))
        pygame.display.flip()

    def _draw_stars(self, snap: RenderSnapshot):
        for star in snap.stars:
            alpha = int(255 * star.brightness)
            pygame.draw.circle(self.fx, (255, 255, 255, alpha),
                               (int(star.x), int(star.y)), max(1, round(star.size)))

    def _draw_grid(self, frame_count: int):
        color = (0, 255, 255, 13)
        offset = (frame_count * GRID_SCROLL_SPEED) % GRID_SPACING
        for x in range(-offset, WORLD_WIDTH, GRID_SPACING):
            pygame.draw.line(self.fx, color, (x, 0), (x, WORLD_HEIGHT))
        for y in range(0, WORLD_HEIGHT, GRID_SPACING):
            pygame.draw.line(self.fx, color, (0, y), (WORLD_WIDTH, y))

    def _draw_particles(self, snap: RenderSnapshot):
        for p in snap.particles:
            alpha = p.alpha
            radius = p.size * alpha
            if radius < 0.5:
                continue
            pygame.draw.circle(self.fx, (*p.color, int(255 * alpha)),
                               (int(p.x), int(p.y)), round(radius))

    def _draw_obstacle(self, obstacle: Obstacle):
        x = int(obstacle.x)
        top = int(obstacle.gap_top)
        bottom = int(obstacle.gap_bottom)

        # Glow halo, then the solid columns
        for rect in ((x, 0, OBSTACLE_WIDTH, top),
                     (x, bottom, OBSTACLE_WIDTH, WORLD_HEIGHT - bottom)):
            pygame.draw.rect(self.fx, (255, 0, 255, 40), pygame.Rect(rect).inflate(12, 0))
            pygame.draw.rect(self.fx, (*HOT_PINK, 255), rect)
            pygame.draw.rect(self.fx, (*NEON_MAGENTA, 255),
                             (x + OBSTACLE_WIDTH // 4, rect[1], OBSTACLE_WIDTH // 2, rect[3]))

        # Edge glow
        pygame.draw.line(self.fx, (*WHITE, 255), (x, top), (x + OBSTACLE_WIDTH, top), 2)
        pygame.draw.line(self.fx, (*WHITE, 255), (x, bottom), (x + OBSTACLE_WIDTH, bottom), 2)

        # Decorative lines
        line = (255, 255, 255, 77)
        for y in range(0, top, 20):
            pygame.draw.line(self.fx, line, (x + 10, y), (x + OBSTACLE_WIDTH - 10, y))
        for y in range(bottom + 20, WORLD_HEIGHT, 20):
            pygame.draw.line(self.fx, line, (x + 10, y), (x + OBSTACLE_WIDTH - 10, y))

    def _draw_player(self, y: float, velocity: float):
        tilt = max(-30.0, min(30.0, velocity * 3))
        s = PLAYER_SIZE

        # Glow
        for radius, alpha in ((s, 30), (s * 0.6, 70), (s * 0.3, 150)):
            pygame.draw.circle(self.fx, (*NEON_CYAN, alpha), (PLAYER_X, int(y)), int(radius))

        body = [(s / 2 + 5, 0), (-s / 2, -s / 3), (-s / 3, 0), (-s / 2, s / 3)]
        inner = [(s / 4, 0), (-s / 4, -s / 6), (-s / 6, 0), (-s / 4, s / 6)]
        pygame.draw.polygon(self.fx, (*NEON_CYAN, 255), _rotate(body, tilt, PLAYER_X, y))
        pygame.draw.polygon(self.fx, (*WHITE, 255), _rotate(inner, tilt, PLAYER_X, y))

        # Engine glow while rising
        if velocity < 0:
            (ex, ey), = _rotate([(-s / 2 - 10, 0)], tilt, PLAYER_X, y)
            for radius, alpha in ((15, 60), (9, 140), (4, 255)):
                pygame.draw.circle(self.fx, (*NEON_MAGENTA, alpha), (int(ex), int(ey)), radius)

    def _center_text(self, text: str, font: pygame.font.Font, color, y: float):
        surf = font.render(text, True, color)
        self.screen.blit(surf, (WORLD_WIDTH // 2 - surf.get_width() // 2, int(y)))

    def _draw_hud(self, snap: RenderSnapshot):
        score = self.font.render(f"SCORE {snap.score}", True, NEON_CYAN)
        best = self.font.render(f"BEST {snap.high_score}", True, NEON_MAGENTA)
        level = self.small_font.render(snap.difficulty_label.upper(), True, WHITE)
        self.screen.blit(score, (20, 16))
        self.screen.blit(best, (WORLD_WIDTH - best.get_width() - 20, 16))
        self.screen.blit(level, (WORLD_WIDTH // 2 - level.get_width() // 2, 20))

    def _dim(self):
        shade = pygame.Surface((WORLD_WIDTH, WORLD_HEIGHT), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 170))
        self.screen.blit(shade, (0, 0))

    def _draw_start_overlay(self):
        self._dim()
        self._center_text("NEON BOOST", self.large_font, NEON_CYAN, WORLD_HEIGHT // 2 - 80)
        self._center_text("Space / Up / W / Click = Boost", self.font, WHITE, WORLD_HEIGHT // 2)
        self._center_text("Press any boost key to begin", self.small_font,
                          NEON_MAGENTA, WORLD_HEIGHT // 2 + 40)

    def _draw_game_over_overlay(self, snap: RenderSnapshot):
        self._dim()
        mid = WORLD_HEIGHT // 2
        self._center_text("GAME OVER", self.large_font, HOT_PINK, mid - 100)
        self._center_text(f"Score: {snap.final_score}", self.font, WHITE, mid - 30)
        self._center_text(f"Best: {snap.high_score}", self.font, WHITE, mid + 5)
        if snap.new_high_score:
            self._center_text("NEW HIGH SCORE!", self.font, NEON_CYAN, mid + 45)
        self._center_text("Boost to play again", self.small_font, NEON_MAGENTA, mid + 90)


# ----------------- Game Client (input / loop) -----------------

class NeonBoostClient:
    def __init__(self, db_file: str = HIGHSCORE_DB_FILE):
        pygame.init()
        self.screen = pygame.display.set_mode((WORLD_WIDTH, WORLD_HEIGHT))
        pygame.display.set_caption("Neon Boost")

        self.store = HighScoreStore(db_file)
        self.engine = GameEngine(store=self.store)
        self.session = self.engine.new_session()
        self.effects = Effects()
        self.renderer = NeonRenderer(self.screen)
        self.clock = pygame.time.Clock()
        logger.info("Loaded best score %d from %s", self.session.high_score, db_file)

    def run(self):
        """The main client execution loop: one simulation step per rendered frame."""
        running = True
        while running:
            self.clock.tick(RENDER_FPS)

            for event in pygame.event.get():
                if is_quit_event(event):
                    running = False
                elif is_boost_event(event):
                    self.effects.handle_events(self.engine.handle_boost(self.session))

            self.effects.handle_events(self.engine.advance(self.session))
            self.effects.update()
            self.renderer.draw(build_snapshot(self.session, self.effects))

        self.store.close()
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None):
    parser = argparse.ArgumentParser(description="Neon Boost arcade game")
    parser.add_argument("--db", default=HIGHSCORE_DB_FILE, help="high score database file")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    NeonBoostClient(db_file=args.db).run()


if __name__ == "__main__":
    main()
