"""
entity_state.py
---------------
Runtime lifecycle state for all entity types.
"""

from enum import IntEnum


class LifecycleState(IntEnum):
    """
    Tracks the life/death progression of an entity.

    DEAD is the deletion flag: the owning pool drops the entity at its next
    compaction.
    """
    ALIVE = 0
    DEAD = 1
