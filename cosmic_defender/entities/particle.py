"""
particle.py
-----------
Cosmetic explosion fragment. Never takes part in collisions.
"""

from cosmic_defender.entities.base_entity import BaseEntity
from cosmic_defender.entities.entity_types import EntityCategory


class Particle(BaseEntity):
    """Square fragment drifting outward while its life fades from 1 to 0."""

    CATEGORY = EntityCategory.PARTICLE

    __slots__ = ('vx', 'vy', 'life', 'decay')

    def __init__(self, x: float, y: float, vx: float, vy: float,
                 size: float, decay: float, color: str):
        super().__init__(x, y, size, size, color)
        self.vx = vx
        self.vy = vy
        self.life = 1.0
        self.decay = decay

    @property
    def size(self) -> float:
        return self.width

    @property
    def alpha(self) -> float:
        """Opacity in [0, 1] for rendering."""
        return max(0.0, min(1.0, self.life))

    def update(self, dt: float):
        if not self.alive:
            return
        self.x += self.vx * dt
        self.y += self.vy * dt
        self.life -= self.decay * dt
        if self.life <= 0:
            self.mark_dead()
