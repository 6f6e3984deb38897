"""
game_state.py
-------------
Session state enumeration for the World state machine.

    MENU ──start()──> PLAYING ──player hit──> GAMEOVER ──restart()──> PLAYING
"""

from enum import IntEnum


class GameState(IntEnum):
    """Top-level session state."""
    MENU = 0
    PLAYING = 1
    GAMEOVER = 2
