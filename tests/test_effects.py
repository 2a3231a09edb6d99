import random

from neon_boost.data_models import GameStatus, ParticlesSpawned, StatusChanged, Star
from neon_boost.effects import Effects, PARTICLE_COLORS, create_particle


def test_particle_ranges():
    rng = random.Random(5)
    for _ in range(200):
        boost = create_particle(105.0, 300.0, "boost", rng)
        assert boost.life == boost.max_life == 20
        assert -3.5 <= boost.vx <= -0.5
        assert -1 <= boost.vy <= 1
        assert 2 <= boost.size <= 6
        assert boost.color in PARTICLE_COLORS["boost"]

        blast = create_particle(120.0, 300.0, "explosion", rng)
        assert blast.life == 40
        assert -6 <= blast.vx <= 2
        assert 2 <= blast.size <= 8


def test_events_spawn_particles():
    fx = Effects(rng=random.Random(1))
    fx.handle_events([ParticlesSpawned(x=105.0, y=200.0, kind="boost", count=5),
                      ParticlesSpawned(x=120.0, y=200.0, kind="explosion", count=30)])
    assert len(fx.particles) == 35


def test_particles_expire():
    fx = Effects(rng=random.Random(1))
    fx.emit("trail", 105.0, 300.0, 3)
    for _ in range(19):
        fx.update()
    assert len(fx.particles) == 3
    assert all(p.alpha == 1 / 20 for p in fx.particles)
    fx.update()
    assert fx.particles == []


def test_new_run_clears_particles_and_reseeds_stars():
    fx = Effects(rng=random.Random(1))
    fx.emit("explosion", 120.0, 300.0, 30)
    old_stars = [(s.x, s.y) for s in fx.stars]

    fx.handle_events([StatusChanged(GameStatus.GAME_OVER, GameStatus.WAITING)])

    assert fx.particles == []
    assert len(fx.stars) == 100
    assert [(s.x, s.y) for s in fx.stars] != old_stars


def test_stars_scroll_and_wrap():
    fx = Effects(rng=random.Random(1))
    fx.stars = [Star(x=0.2, y=10.0, size=1.0, speed=0.5, brightness=1.0),
                Star(x=400.0, y=10.0, size=1.0, speed=1.0, brightness=1.0)]
    fx.update()

    assert fx.stars[0].x == 800
    assert 0 <= fx.stars[0].y <= 600
    assert fx.stars[1].x == 399.0
    assert fx.stars[1].y == 10.0
