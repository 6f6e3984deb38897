"""
input_manager.py
----------------
pygame input collaborator.

Provides:
- Keyboard bindings for movement, fire and session commands
- Touch / mouse support: press on the left half moves left, right half
  moves right, and any press fires; releasing stops everything
- Translation of pygame events into the shared InputState record
"""

import pygame

from cosmic_defender.core.debug.debug_logger import DebugLogger
from cosmic_defender.core.services.input_state import InputState


# ===========================================================
# Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "move_left": [pygame.K_LEFT, pygame.K_a],
    "move_right": [pygame.K_RIGHT, pygame.K_d],
    "fire": [pygame.K_SPACE],
    "start": [pygame.K_RETURN],
    "quit": [pygame.K_ESCAPE],
}

HELD_ACTIONS = ("move_left", "move_right", "fire")
COMMAND_ACTIONS = ("start", "quit")


def key_code(name):
    """Return the pygame key code for a key name such as "space" or "left shift", or None."""
    if not pygame.get_init():
        pygame.init()
    try:
        return pygame.key.key_code(str(name).lower())
    except ValueError:
        return None


def bindings_from_names(controls) -> dict:
    """
    Convert a {action: [key name, ...]} mapping into pygame key codes.

    Key names are the ones pygame.key.name() reports. Unknown names are
    logged and skipped; actions missing from ``controls`` or left empty
    keep their default keys. A single name may be given without a list.
    """
    bindings = {action: list(keys) for action, keys in DEFAULT_KEY_BINDINGS.items()}
    for action, names in (controls or {}).items():
        if names is None:
            continue
        if isinstance(names, str):
            names = [names]
        if action not in bindings:
            DebugLogger.warn(f"Unknown input action '{action}' ignored", category="input")
            continue
        codes = []
        for name in names:
            code = key_code(name)
            if code is None:
                DebugLogger.warn(f"Unknown key name '{name}' for '{action}'", category="input")
                continue
            codes.append(code)
        if codes:
            bindings[action] = codes
    return bindings


class InputManager:
    """
    Maps pygame events onto an InputState.

    Usage:
        command = input_manager.handle_event(event)
        if command == "start":
            world.start()
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, key_bindings=None, state: InputState = None):
        """
        Args:
            key_bindings: {action: [key codes]} (uses DEFAULT_KEY_BINDINGS if None)
            state: Record to write into (a fresh InputState if None)
        """
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self.state = state if state is not None else InputState()
        self._key_to_action = {}
        for action, keys in self.key_bindings.items():
            for key in keys:
                self._key_to_action[key] = action

        DebugLogger.init_entry("InputManager")

    # ===========================================================
    # Event Handling
    # ===========================================================

    def handle_event(self, event, screen_width=None):
        """
        Apply one pygame event to the input record.

        Args:
            event: pygame event
            screen_width: Width used to split touch/mouse presses into halves

        Returns:
            str: "start" or "quit" for session commands, otherwise None.
                 A primary press (left button or finger) also reports "start".
        """
        if event.type == pygame.QUIT:
            return "quit"

        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            return self._handle_key(event.key, event.type == pygame.KEYDOWN)

        if event.type == pygame.FINGERDOWN:
            # Finger coordinates are normalized to [0, 1]
            self._press_at(event.x, 1.0)
            return "start"
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            width = screen_width or pygame.display.get_surface().get_width()
            self._press_at(event.pos[0], width)
            return "start"
        elif event.type in (pygame.FINGERUP, pygame.MOUSEBUTTONUP):
            self.state.clear()

        return None

    def _handle_key(self, key, pressed: bool):
        action = self._key_to_action.get(key)
        if action is None:
            return None

        if action in HELD_ACTIONS:
            setattr(self.state, action, pressed)
            DebugLogger.trace(f"{action} -> {pressed}", category="input")
            return None

        if pressed and action in COMMAND_ACTIONS:
            DebugLogger.action(f"Command '{action}'", category="input")
            return action
        return None

    def _press_at(self, x: float, width: float):
        """Touch-style press: choose a side and fire."""
        on_left = x < width / 2
        self.state.move_left = on_left
        self.state.move_right = not on_left
        self.state.fire = True
