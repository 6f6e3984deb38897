"""
Particle system exports.
"""

from cosmic_defender.graphics.particles.particle_manager import ParticleEmitter, EXPLOSION_PRESET

__all__ = [
    'ParticleEmitter',
    'EXPLOSION_PRESET',
]
