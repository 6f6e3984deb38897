"""
enemy.py
--------
Falling enemy block.

Responsibilities
----------------
- Fall at a speed fixed when spawned (base speed plus difficulty bonus).
- Flag itself dead once it passes the bottom edge plus a cleanup margin.
"""

from cosmic_defender.core.runtime.game_settings import GameConfig
from cosmic_defender.entities.base_entity import BaseEntity
from cosmic_defender.entities.entity_types import EntityCategory


class Enemy(BaseEntity):
    """Square enemy moving straight down."""

    HITBOX_INSET = 2.0
    CATEGORY = EntityCategory.ENEMY

    __slots__ = ('speed', 'detail_color', 'cleanup_margin')

    def __init__(self, x: float, y: float, config: GameConfig, difficulty: float = 0.0):
        """
        Args:
            x, y: Top-left spawn position
            config: Gameplay config (size, colors, speeds)
            difficulty: Current difficulty; scales speed linearly
        """
        super().__init__(x, y, config.enemy_size, config.enemy_size, config.enemy_color)
        self.speed = Enemy.speed_for(config, difficulty)
        self.detail_color = config.enemy_detail_color
        self.cleanup_margin = config.enemy_cleanup_margin

    @staticmethod
    def speed_for(config: GameConfig, difficulty: float) -> float:
        return config.enemy_base_speed + difficulty * config.enemy_speed_per_difficulty

    def update(self, dt: float, world_height: float):
        """
        Move down and mark dead once below the visible area.

        Args:
            dt: Delta time in seconds
            world_height: Current viewport height
        """
        if not self.alive:
            return
        self.y += self.speed * dt
        if self.y > world_height + self.cleanup_margin:
            self.mark_dead()
