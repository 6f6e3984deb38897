"""
Runtime configuration exports.

Provides game-wide constants, the gameplay config and the session state
enum. World and MainLoop are imported from their own modules.
"""

from cosmic_defender.core.runtime.game_settings import (
    Display,
    Physics,
    Debug,
    GameConfig,
    DEFAULT_CONFIG,
)
from cosmic_defender.core.runtime.game_state import GameState

__all__ = [
    'Display',
    'Physics',
    'Debug',
    'GameConfig',
    'DEFAULT_CONFIG',
    'GameState',
]
