"""
bullet.py
---------
Player projectile travelling straight up.

Responsibilities
----------------
- Move upward at a constant speed.
- Flag itself dead once it is fully above the top edge.
"""

from cosmic_defender.core.runtime.game_settings import GameConfig
from cosmic_defender.entities.base_entity import BaseEntity
from cosmic_defender.entities.entity_types import EntityCategory


class Bullet(BaseEntity):
    """Straight upward bullet. Collision box equals its visual box."""

    HITBOX_INSET = 0.0
    CATEGORY = EntityCategory.PROJECTILE

    __slots__ = ('speed',)

    def __init__(self, x: float, y: float, config: GameConfig):
        super().__init__(x, y, config.bullet_width, config.bullet_height, config.bullet_color)
        self.speed = config.bullet_speed

    def update(self, dt: float):
        """Move up and mark dead when fully off the top of the screen."""
        if not self.alive:
            return
        self.y -= self.speed * dt
        if self.y + self.height < 0:
            self.mark_dead()
