"""
Entity management system exports.

Provides arena storage and timed enemy spawning.
"""

from cosmic_defender.systems.entity_management.entity_pool import EntityPool
from cosmic_defender.systems.entity_management.spawn_manager import SpawnManager

__all__ = [
    'EntityPool',
    'SpawnManager',
]
