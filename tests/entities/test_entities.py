"""
test_entities.py
----------------
Regression tests for the Bullet, Enemy and Particle update contracts.

Covers:
- Movement per tick
- Deletion flag conditions
- Collision box insets
"""

import pytest

from cosmic_defender.entities.bullet import Bullet
from cosmic_defender.entities.enemy import Enemy
from cosmic_defender.entities.entity_state import LifecycleState
from cosmic_defender.entities.particle import Particle
from cosmic_defender.systems.collision.collision_hitbox import Bounds


# ===========================================================
# Bullet
# ===========================================================

class TestBullet:

    def test_uses_config_size_and_speed(self, config):
        bullet = Bullet(0, 0, config)
        assert (bullet.width, bullet.height) == (4, 15)
        assert bullet.speed == 800
        assert bullet.color == "#ffff00"

    def test_moves_up_and_dies_above_top_edge(self, config):
        bullet = Bullet(0, 100, config)
        bullet.update(1.0)
        assert bullet.y == -700
        assert bullet.death_state == LifecycleState.DEAD
        assert not bullet.alive

    def test_partially_visible_bullet_stays_alive(self, config):
        bullet = Bullet(0, -10, config)
        bullet.update(0.0)
        assert bullet.alive  # -10 + 15 >= 0

    def test_dead_bullet_does_not_move(self, config):
        bullet = Bullet(0, 50, config)
        bullet.mark_dead()
        bullet.update(1.0)
        assert bullet.y == 50

    def test_bounds_match_visual_box(self, config):
        assert Bullet(10, 20, config).get_bounds() == Bounds(10, 14, 20, 35)


# ===========================================================
# Enemy
# ===========================================================

class TestEnemy:

    @pytest.mark.parametrize("difficulty, speed", [(0.0, 150.0), (2.0, 170.0), (10.0, 250.0)])
    def test_speed_scales_with_difficulty(self, config, difficulty, speed):
        assert Enemy(0, 0, config, difficulty).speed == pytest.approx(speed)

    def test_speed_fixed_at_spawn(self, config):
        enemy = Enemy(0, 0, config, difficulty=1.0)
        enemy.update(1.0, world_height=600)
        assert enemy.y == pytest.approx(160.0)

    def test_stays_alive_inside_cleanup_margin(self, config):
        enemy = Enemy(0, 640, config)
        enemy.update(0.0, world_height=600)
        assert enemy.alive

    def test_dies_past_bottom_margin(self, config):
        enemy = Enemy(0, 640, config)
        enemy.update(0.1, world_height=600)  # y = 655 > 650
        assert not enemy.alive

    def test_bounds_are_inset_by_two(self, config):
        assert Enemy(10, 20, config).get_bounds() == Bounds(12, 43, 22, 53)

    def test_center(self, config):
        assert Enemy(0, 0, config).center == (17.5, 17.5)


# ===========================================================
# Particle
# ===========================================================

class TestParticle:

    def test_moves_and_fades(self):
        p = Particle(0, 0, vx=10, vy=-20, size=3, decay=2, color="#ffffff")
        p.update(0.25)
        assert (p.x, p.y) == (2.5, -5.0)
        assert p.life == 0.5
        assert p.alive

    def test_dies_when_life_reaches_zero(self):
        p = Particle(0, 0, vx=0, vy=0, size=3, decay=2, color="#ffffff")
        p.update(0.25)
        p.update(0.25)
        assert p.life <= 0
        assert not p.alive

    def test_alpha_is_clamped(self):
        p = Particle(0, 0, vx=0, vy=0, size=3, decay=10, color="#ffffff")
        assert p.alpha == 1.0
        p.update(1.0)
        assert p.alpha == 0.0

    def test_size_is_square(self):
        p = Particle(0, 0, vx=0, vy=0, size=4, decay=1, color="#ffffff")
        assert p.size == p.width == p.height == 4
