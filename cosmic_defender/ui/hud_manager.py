"""
hud_manager.py
--------------
Score readout plus the start and game-over overlays.

Responsibilities
----------------
- Track score, visible screen and final score from session events.
- Draw the score while playing, a start prompt in the menu and the
  game-over panel after a hit.

The HUD only listens; it never calls back into the World.
"""

import pygame

from cosmic_defender.core.debug.debug_logger import DebugLogger
from cosmic_defender.core.services.event_manager import (
    GameOverEvent,
    GameStartedEvent,
    ScoreChangedEvent,
)


TEXT_COLOR = (255, 255, 255)
ACCENT_COLOR = (0, 255, 136)
DANGER_COLOR = (255, 51, 102)
OVERLAY_COLOR = (0, 0, 0, 170)


class HUDManager:
    """Event-driven HUD and screen overlays."""

    SCREEN_START = "start"
    SCREEN_GAME_OVER = "game_over"

    def __init__(self, events, font_name=None):
        """
        Args:
            events: EventManager to subscribe to
            font_name: Font passed to pygame.font.SysFont (default font if None)
        """
        self.score = 0
        self.final_score = None
        self.screen = self.SCREEN_START
        self.font_name = font_name
        self._fonts = {}

        events.subscribe(GameStartedEvent, self.on_start)
        events.subscribe(ScoreChangedEvent, self.on_score)
        events.subscribe(GameOverEvent, self.on_game_over)

        DebugLogger.init_entry("HUDManager")

    # ===========================================================
    # Event Handlers
    # ===========================================================

    def on_start(self, event):
        self.screen = None
        self.final_score = None
        DebugLogger.state("Overlays hidden", category="ui")

    def on_score(self, event):
        self.score = event.score

    def on_game_over(self, event):
        self.final_score = event.final_score
        self.screen = self.SCREEN_GAME_OVER
        DebugLogger.state(f"Game over screen (score {event.final_score})", category="ui")

    # ===========================================================
    # Rendering
    # ===========================================================

    def _font(self, size):
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.SysFont(self.font_name, size)
        return self._fonts[size]

    def _blit_centered(self, surface, text, size, color, y):
        label = self._font(size).render(text, True, color)
        rect = label.get_rect(center=(surface.get_width() // 2, y))
        surface.blit(label, rect)

    def draw(self, surface):
        if self.screen != self.SCREEN_START:
            label = self._font(28).render(f"SCORE {self.score}", True, TEXT_COLOR)
            surface.blit(label, (16, 12))

        if self.screen is None:
            return

        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        overlay.fill(OVERLAY_COLOR)
        surface.blit(overlay, (0, 0))

        mid = surface.get_height() // 2
        if self.screen == self.SCREEN_START:
            self._blit_centered(surface, "COSMIC DEFENDER", 56, ACCENT_COLOR, mid - 60)
            self._blit_centered(surface, "Arrows / A D to move, Space to fire", 24, TEXT_COLOR, mid + 10)
            self._blit_centered(surface, "Press Enter or tap to start", 24, TEXT_COLOR, mid + 50)
        else:
            self._blit_centered(surface, "GAME OVER", 56, DANGER_COLOR, mid - 60)
            self._blit_centered(surface, f"Final score: {self.final_score}", 32, TEXT_COLOR, mid + 10)
            self._blit_centered(surface, "Press Enter or tap to restart", 24, TEXT_COLOR, mid + 50)
