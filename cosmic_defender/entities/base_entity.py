"""
base_entity.py
--------------
Foundational class for all in-game entities (Player, Enemy, Bullet, Particle).

Coordinate System
-----------------
All entities use top-left coordinates:
- (x, y) is the top-left corner of the visual box
- width/height is the visual size
- get_bounds() derives the collision box, shrunk by HITBOX_INSET

Entities never reference the World. Anything they need from it (viewport
size, difficulty, config) is passed into their methods.
"""

from cosmic_defender.entities.entity_state import LifecycleState
from cosmic_defender.entities.entity_types import EntityCategory
from cosmic_defender.systems.collision.collision_hitbox import Bounds


class BaseEntity:
    """
    Base class for all game entities.

    Subclassed by Player, Enemy, Bullet and Particle.
    """

    HITBOX_INSET = 0.0
    CATEGORY = EntityCategory.PARTICLE

    __slots__ = ('x', 'y', 'width', 'height', 'color', 'death_state')

    # ===================================================================
    # Initialization
    # ===================================================================

    def __init__(self, x: float, y: float, width: float, height: float, color: str):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.color = color
        self.death_state = LifecycleState.ALIVE

    # ===================================================================
    # Properties
    # ===================================================================

    @property
    def alive(self) -> bool:
        return self.death_state == LifecycleState.ALIVE

    @property
    def center(self):
        return self.x + self.width / 2, self.y + self.height / 2

    @property
    def category(self) -> str:
        return self.CATEGORY

    # ===================================================================
    # Lifecycle
    # ===================================================================

    def update(self, dt: float, *args, **kwargs):
        """Advance the entity by dt seconds. Overridden by subclasses."""
        raise NotImplementedError

    def mark_dead(self):
        """Flag the entity for removal at the next compaction."""
        self.death_state = LifecycleState.DEAD

    # ===================================================================
    # Collision
    # ===================================================================

    def get_bounds(self) -> Bounds:
        """Return the current collision box."""
        return Bounds.from_rect(self.x, self.y, self.width, self.height, self.HITBOX_INSET)

    def __repr__(self) -> str:
        state = self.death_state.name
        return f"<{type(self).__name__} pos=({self.x:.1f},{self.y:.1f}) {state}>"
