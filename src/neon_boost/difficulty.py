"""
difficulty.py: Difficulty curve derived from the current score.

Nothing here is cached; every value is recomputed from the score so the curve
can never drift from it.
"""

import math

from .constants import (
    BASE_GAP_HEIGHT, MIN_GAP_HEIGHT, GAP_SHRINK_PER_TIER,
    BASE_OBSTACLE_SPEED, MAX_OBSTACLE_SPEED, SPEED_GAIN_PER_TIER,
    SCORE_PER_STEP, TIER_STEP, DIFFICULTY_LABELS, DIFFICULTY_FALLBACK_LABEL
)


def difficulty_tier(score: int) -> float:
    """1.0 at the start, +0.2 for every five points."""
    return 1 + math.floor(score / SCORE_PER_STEP) * TIER_STEP


def gap_height(score: int) -> float:
    tier = difficulty_tier(score)
    return max(BASE_GAP_HEIGHT - (tier - 1) * GAP_SHRINK_PER_TIER, MIN_GAP_HEIGHT)


def obstacle_speed(score: int) -> float:
    tier = difficulty_tier(score)
    return min(BASE_OBSTACLE_SPEED + (tier - 1) * SPEED_GAIN_PER_TIER, MAX_OBSTACLE_SPEED)


def difficulty_label(score: int) -> str:
    # The index is clamped to the last label, so the fallback is never returned.
    index = min(math.floor(difficulty_tier(score)) - 1, len(DIFFICULTY_LABELS) - 1)
    if 0 <= index < len(DIFFICULTY_LABELS):
        return DIFFICULTY_LABELS[index]
    return DIFFICULTY_FALLBACK_LABEL
