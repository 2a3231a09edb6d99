import pytest

from neon_boost.difficulty import difficulty_tier, gap_height, obstacle_speed, difficulty_label


def test_tier_steps_every_five_points():
    assert difficulty_tier(0) == 1
    assert difficulty_tier(4) == 1
    assert difficulty_tier(5) == pytest.approx(1.2)
    assert difficulty_tier(24) == pytest.approx(1.8)
    assert difficulty_tier(25) == pytest.approx(2.0)


def test_label_needs_a_full_tier():
    assert difficulty_label(0) == "Easy"
    assert difficulty_label(24) == "Easy"
    assert difficulty_label(25) == "Normal"
    assert difficulty_label(50) == "Hard"


def test_label_clamps_to_last_entry():
    assert difficulty_label(100) == "Insane"
    assert difficulty_label(10_000) == "Insane"


def test_gap_and_speed_formulas():
    assert gap_height(0) == 180
    assert obstacle_speed(0) == 3
    assert gap_height(25) == pytest.approx(170)
    assert obstacle_speed(25) == pytest.approx(3.5)


def test_gap_and_speed_saturate():
    assert gap_height(10_000) == 120
    assert obstacle_speed(10_000) == 7


def test_curve_is_bounded_and_monotonic():
    gaps = [gap_height(s) for s in range(500)]
    speeds = [obstacle_speed(s) for s in range(500)]

    assert all(120 <= g <= 180 for g in gaps)
    assert all(3 <= s <= 7 for s in speeds)
    assert all(a >= b for a, b in zip(gaps, gaps[1:]))
    assert all(a <= b for a, b in zip(speeds, speeds[1:]))
