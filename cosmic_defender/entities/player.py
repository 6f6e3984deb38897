"""
player.py
---------
Player ship: lateral movement, screen clamping and fire control.

Responsibilities
----------------
- Translate the input record into horizontal movement.
- Keep the ship inside the current viewport width.
- Enforce the fire cooldown and hand freshly fired bullets back to the caller.

The player is created once per World and only ever repositioned via reset().
"""

from typing import Optional

from cosmic_defender.core.runtime.game_settings import GameConfig
from cosmic_defender.entities.base_entity import BaseEntity
from cosmic_defender.entities.bullet import Bullet
from cosmic_defender.entities.entity_types import EntityCategory
from cosmic_defender.systems.collision.collision_hitbox import clamp


class Player(BaseEntity):
    """Triangular ship anchored near the bottom of the screen."""

    HITBOX_INSET = 5.0
    CATEGORY = EntityCategory.PLAYER

    __slots__ = ('config', 'cooldown_timer')

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, config: GameConfig):
        super().__init__(0.0, 0.0, config.player_width, config.player_height, config.player_color)
        self.config = config
        self.cooldown_timer = 0.0

    def reset(self, world_width: float, world_height: float):
        """Center the ship horizontally and park it above the bottom edge."""
        self.x = world_width / 2 - self.width / 2
        self.y = world_height - self.height - self.config.player_bottom_margin
        self.cooldown_timer = 0.0

    # ===========================================================
    # Update Logic
    # ===========================================================

    def update(self, dt: float, input_state, world_width: float) -> Optional[Bullet]:
        """
        Move, clamp and maybe fire.

        Args:
            dt: Delta time in seconds
            input_state: Record with move_left / move_right / fire flags
            world_width: Current viewport width

        Returns:
            Bullet: The bullet fired this tick, or None.
        """
        speed = self.config.player_speed
        if input_state.move_left:
            self.x -= speed * dt
        if input_state.move_right:
            self.x += speed * dt

        self.clamp_to_screen(world_width)

        if self.cooldown_timer > 0:
            self.cooldown_timer -= dt

        if input_state.fire and self.can_shoot:
            return self.shoot()
        return None

    def clamp_to_screen(self, world_width: float):
        self.x = clamp(self.x, 0.0, max(0.0, world_width - self.width))

    def keep_inside(self, world_width: float, world_height: float):
        """Pull the ship back on screen after a viewport resize."""
        self.clamp_to_screen(world_width)
        self.y = world_height - self.height - self.config.player_bottom_margin

    # ===========================================================
    # Combat
    # ===========================================================

    @property
    def can_shoot(self) -> bool:
        return self.cooldown_timer <= 0

    def shoot(self) -> Bullet:
        """Spawn a bullet at the top-center of the ship and restart the cooldown."""
        bx = self.x + self.width / 2 - self.config.bullet_width / 2
        self.cooldown_timer = self.config.bullet_cooldown
        return Bullet(bx, self.y, self.config)

    # ===========================================================
    # Rendering Helpers
    # ===========================================================

    def triangle(self):
        """Return (apex, bottom_right, bottom_left) of the ship silhouette."""
        return (
            (self.x + self.width / 2, self.y),
            (self.x + self.width, self.y + self.height),
            (self.x, self.y + self.height),
        )
