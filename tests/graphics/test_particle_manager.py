"""
test_particle_manager.py
------------------------
Tests for explosion bursts.
"""

import math
import random

import pytest

from cosmic_defender.entities.particle import Particle
from cosmic_defender.graphics.particles.particle_manager import EXPLOSION_PRESET, ParticleEmitter


def test_burst_uses_configured_count(config, rng):
    particles = ParticleEmitter(config, rng).burst(100, 200, "#ff3366")
    assert len(particles) == config.explosion_particles == 15
    assert all(isinstance(p, Particle) for p in particles)


def test_burst_explicit_count(config, rng):
    assert len(ParticleEmitter(config, rng).burst(0, 0, "#ffffff", count=3)) == 3


def test_particles_start_at_origin_with_full_life(config, rng):
    for p in ParticleEmitter(config, rng).burst(100, 200, "#ff3366"):
        assert (p.x, p.y) == (100, 200)
        assert p.life == 1.0
        assert p.color == "#ff3366"


def test_particle_ranges(config, rng):
    lo_size, hi_size = EXPLOSION_PRESET["size_range"]
    lo_speed, hi_speed = EXPLOSION_PRESET["speed_range"]
    lo_decay, hi_decay = EXPLOSION_PRESET["decay_range"]

    for p in ParticleEmitter(config, rng).burst(0, 0, "#ffffff", count=200):
        assert lo_size <= p.size < hi_size
        assert lo_decay <= p.decay < hi_decay
        speed = math.hypot(p.vx, p.vy)
        assert lo_speed - 1e-9 <= speed < hi_speed + 1e-9


def test_seeded_bursts_are_identical(config):
    a = ParticleEmitter(config, random.Random(42)).burst(0, 0, "#ffffff")
    b = ParticleEmitter(config, random.Random(42)).burst(0, 0, "#ffffff")
    assert [(p.vx, p.vy, p.size, p.decay) for p in a] == \
           [(p.vx, p.vy, p.size, p.decay) for p in b]


def test_custom_preset(config, rng):
    preset = {"size_range": (1.0, 1.0), "speed_range": (10.0, 10.0), "decay_range": (1.0, 1.0)}
    p = ParticleEmitter(config, rng, preset=preset).emit(0, 0, "#ffffff")
    assert p.size == 1.0
    assert p.decay == 1.0
    assert math.hypot(p.vx, p.vy) == pytest.approx(10.0)
