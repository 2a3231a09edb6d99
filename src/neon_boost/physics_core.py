"""
physics_core.py: Deterministic per-frame kinematics and collision logic.
"""

from typing import Iterable, Optional

from .constants import (
    GRAVITY, BOOST_POWER, WORLD_HEIGHT, PLAYER_X, PLAYER_RADIUS,
    PLAYER_HIT_RADIUS_Y, OBSTACLE_WIDTH
)
from .data_models import Player, Obstacle


class PhysicsCore:
    """
    Frame-stepped physics for the ship.
    All comparisons are strict, so touching an edge exactly is safe.
    """

    def __init__(self, gravity=GRAVITY, boost_power=BOOST_POWER,
                 world_height=WORLD_HEIGHT, player_x=PLAYER_X,
                 player_radius=PLAYER_RADIUS, hit_radius_y=PLAYER_HIT_RADIUS_Y,
                 obstacle_width=OBSTACLE_WIDTH):
        self.gravity = gravity
        self.boost_power = boost_power
        self.world_height = world_height
        self.player_x = player_x
        self.player_radius = player_radius
        self.hit_radius_y = hit_radius_y
        self.obstacle_width = obstacle_width

    def apply_gravity_and_movement(self, y: float, velocity: float) -> tuple[float, float]:
        """Gravity first, then displacement with the new velocity."""
        velocity += self.gravity
        y += velocity
        return y, velocity

    def boost(self) -> float:
        """Returns the velocity after a boost. Boosts replace velocity, they don't add."""
        return self.boost_power

    def step_player(self, player: Player):
        player.y, player.velocity = self.apply_gravity_and_movement(
            player.y, player.velocity)

    def out_of_bounds(self, y: float) -> bool:
        """Ceiling/floor check. Leaving the band is fatal, never clamped."""
        return y < self.player_radius or y > self.world_height - self.player_radius

    def overlaps_horizontally(self, obstacle: Obstacle) -> bool:
        return (self.player_x + self.player_radius > obstacle.x and
                self.player_x - self.player_radius < obstacle.x + self.obstacle_width)

    def hits_obstacle(self, y: float, obstacle: Obstacle) -> bool:
        if not self.overlaps_horizontally(obstacle):
            return False
        return (y - self.hit_radius_y < obstacle.gap_top or
                y + self.hit_radius_y > obstacle.gap_bottom)

    def find_collision(self, y: float, obstacles: Iterable[Obstacle]) -> Optional[Obstacle]:
        """Returns the first obstacle the ship is inside, if any."""
        for obstacle in obstacles:
            if self.hits_obstacle(y, obstacle):
                return obstacle
        return None

    def has_passed(self, obstacle: Obstacle) -> bool:
        """Trailing edge strictly left of the ship's fixed X."""
        return obstacle.x + self.obstacle_width < self.player_x

    def is_off_screen(self, obstacle: Obstacle) -> bool:
        return obstacle.x + self.obstacle_width <= 0
