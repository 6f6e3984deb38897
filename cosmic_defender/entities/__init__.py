"""
cosmic_defender/entities/__init__.py
------------------------------------
Entity module exports.

Exports:
    LifecycleState  - Entity life/death progression (ALIVE, DEAD)
    EntityCategory  - Logical entity groupings (PLAYER, ENEMY, ...)
"""

from cosmic_defender.entities.entity_state import LifecycleState
from cosmic_defender.entities.entity_types import EntityCategory

__all__ = [
    'LifecycleState',
    'EntityCategory',
]
