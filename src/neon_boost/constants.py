"""
constants.py: Centralized configuration for the simulation, effects and client.
"""

import os

# -------- Game World Config --------
WORLD_WIDTH = 800
WORLD_HEIGHT = 600
PLAYER_X = 120                  # Fixed ship X position
RESPAWN_Y = WORLD_HEIGHT / 2

# -------- Physics Config (Pixels / Frame / Frame) --------
# One physics step per frame, no time scaling
GRAVITY = 0.35                  # Vertical acceleration (pixels/frame^2)
BOOST_POWER = -8.0              # Velocity assigned on boost (pixels/frame)
PLAYER_SIZE = 30
PLAYER_RADIUS = PLAYER_SIZE / 2         # Horizontal hit-box and world bounds
PLAYER_HIT_RADIUS_Y = PLAYER_SIZE / 3   # Vertical hit-box, narrower than the ship

# -------- Obstacle Config --------
OBSTACLE_WIDTH = 60
SPAWN_SPACING = 300             # Spawn once the last obstacle is this far in
GAP_MARGIN = 50                 # Gap never closer than this to top/bottom

# -------- Difficulty Config --------
BASE_GAP_HEIGHT = 180
MIN_GAP_HEIGHT = 120
GAP_SHRINK_PER_TIER = 10
BASE_OBSTACLE_SPEED = 3.0
MAX_OBSTACLE_SPEED = 7.0
SPEED_GAIN_PER_TIER = 0.5
SCORE_PER_STEP = 5              # Tier rises every 5 points
TIER_STEP = 0.2
DIFFICULTY_LABELS = ("Easy", "Normal", "Hard", "Extreme", "Insane")
DIFFICULTY_FALLBACK_LABEL = "Legendary"

# -------- Effects Config --------
STAR_COUNT = 100
BOOST_PARTICLES = 5
EXPLOSION_PARTICLES = 30
TRAIL_EVERY_N_FRAMES = 2

# -------- Client Config --------
RENDER_FPS = 60
GRID_SPACING = 50
GRID_SCROLL_SPEED = 2           # Grid offset per frame (pixels)

# -------- Storage Config --------
HIGHSCORE_KEY = "neonBoostHighScore"
HIGHSCORE_DB_FILE = os.environ.get("NEON_BOOST_DB", "neon_boost.db")
