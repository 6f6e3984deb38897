"""
Collision exports: bounds, the overlap test and the two-pass resolver.
"""

from cosmic_defender.systems.collision.collision_hitbox import Bounds, intersects, clamp
from cosmic_defender.systems.collision.collision_manager import CollisionManager, CollisionReport

__all__ = [
    'Bounds',
    'intersects',
    'clamp',
    'CollisionManager',
    'CollisionReport',
]
