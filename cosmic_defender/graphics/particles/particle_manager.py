"""
particle_manager.py
-------------------
Explosion bursts built from cosmetic particles.

Usage:
    emitter = ParticleEmitter(config, rng)
    particles.extend(emitter.burst(x, y, config.enemy_color))

Each particle gets a random direction, speed, size and fade rate. All
randomness comes from the injected random.Random.
"""

import math
import random
from typing import List, Optional

from cosmic_defender.core.debug.debug_logger import DebugLogger
from cosmic_defender.core.runtime.game_settings import GameConfig
from cosmic_defender.entities.particle import Particle


# ===========================================================
# Burst Presets
# ===========================================================

EXPLOSION_PRESET = {
    "size_range": (2.0, 5.0),
    "speed_range": (50.0, 150.0),
    "decay_range": (2.0, 5.0),
}


# ===========================================================
# Particle Emitter
# ===========================================================

class ParticleEmitter:
    """Creates bursts of particles radiating from a point."""

    def __init__(self, config: GameConfig, rng: Optional[random.Random] = None,
                 preset: Optional[dict] = None):
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.preset = preset or EXPLOSION_PRESET

    def _uniform(self, key: str) -> float:
        lo, hi = self.preset[key]
        return self.rng.random() * (hi - lo) + lo

    def emit(self, x: float, y: float, color: str) -> Particle:
        """Create a single particle at (x, y) moving in a random direction."""
        size = self._uniform("size_range")
        speed = self._uniform("speed_range")
        angle = self.rng.random() * math.pi * 2
        decay = self._uniform("decay_range")
        return Particle(
            x, y,
            math.cos(angle) * speed,
            math.sin(angle) * speed,
            size, decay, color
        )

    def burst(self, x: float, y: float, color: str, count: Optional[int] = None) -> List[Particle]:
        """
        Create an explosion.

        Args:
            x, y: Burst origin
            color: Particle color
            count: Number of particles (defaults to config.explosion_particles)
        """
        if count is None:
            count = self.config.explosion_particles
        particles = [self.emit(x, y, color) for _ in range(count)]
        DebugLogger.trace(f"Burst of {count} at ({x:.1f}, {y:.1f})", category="particles")
        return particles
