"""
input_state.py
--------------
The input record the simulation reads once per tick.

Written by an input collaborator (InputManager, a test, a bot), read by
Player.update(). Each flag is an independent boolean.
"""

from dataclasses import dataclass


@dataclass
class InputState:
    move_left: bool = False
    move_right: bool = False
    fire: bool = False

    def clear(self):
        self.move_left = False
        self.move_right = False
        self.fire = False
