"""
draw_manager.py
---------------
Render adapter: draws the current World state with flat pygame shapes.

Responsibilities:
- Clear the frame and sprinkle the occasional starfield speck
- Draw the player triangle, bullets, enemies and fading particles
- Optional hitbox overlay for debugging

No game logic lives here; the World is only read.
"""

import random

import pygame

from cosmic_defender.core.debug.debug_logger import DebugLogger
from cosmic_defender.core.runtime.game_settings import Debug, Display
from cosmic_defender.core.runtime.game_state import GameState


STAR_CHANCE = 0.2
STAR_SIZE = 2
STAR_COLOR = (255, 255, 255, 128)
ENEMY_DETAIL_INSET = 8


def to_rect(x, y, width, height) -> pygame.Rect:
    return pygame.Rect(int(x), int(y), max(1, int(width)), max(1, int(height)))


# ===========================================================
# Pre-rendered Sprite Cache
# ===========================================================

class SpriteCache:
    """Caches small square surfaces used for alpha-blended particles."""

    _cache = {}

    @classmethod
    def get_square(cls, color, size: int) -> pygame.Surface:
        key = (color, size)
        if key not in cls._cache:
            surf = pygame.Surface((size, size), pygame.SRCALPHA)
            surf.fill(pygame.Color(color))
            cls._cache[key] = surf
        return cls._cache[key]

    @classmethod
    def clear(cls):
        cls._cache.clear()


# ===========================================================
# Draw Manager
# ===========================================================

class DrawManager:
    """Draws entities as flat rectangles and triangles."""

    def __init__(self, background=Display.BACKGROUND, rng=None):
        """
        Args:
            background: Clear color
            rng: Random source for starfield specks (cosmetic only)
        """
        self.background = pygame.Color(background)
        self.rng = rng if rng is not None else random.Random()
        self.show_hitboxes = Debug.HITBOX_VISIBLE
        self._star = None
        DebugLogger.init_entry("DrawManager")

    def toggle_hitboxes(self):
        self.show_hitboxes = not self.show_hitboxes
        DebugLogger.state(f"Hitbox overlay → {'ON' if self.show_hitboxes else 'OFF'}", category="render")

    # ===========================================================
    # Frame Rendering
    # ===========================================================

    def render(self, surface, world):
        """
        Draw one frame of the given World onto surface.

        In MENU only the background is drawn; the HUD covers the rest.
        """
        surface.fill(self.background)
        if world.state == GameState.MENU:
            return

        self._draw_starfield(surface, world.width, world.height)
        self.draw_player(surface, world.player)
        for bullet in world.bullets:
            self.draw_bullet(surface, bullet)
        for enemy in world.enemies:
            self.draw_enemy(surface, enemy)
        for particle in world.particles:
            self.draw_particle(surface, particle)

        if self.show_hitboxes:
            self._draw_hitboxes(surface, world)

    def _draw_starfield(self, surface, width, height):
        if self.rng.random() >= STAR_CHANCE:
            return
        if self._star is None:
            self._star = pygame.Surface((STAR_SIZE, STAR_SIZE), pygame.SRCALPHA)
            self._star.fill(STAR_COLOR)
        pos = (int(self.rng.random() * width), int(self.rng.random() * height))
        surface.blit(self._star, pos)

    # ===========================================================
    # Entity Drawing
    # ===========================================================

    def draw_player(self, surface, player):
        pygame.draw.polygon(surface, pygame.Color(player.color), player.triangle())

    def draw_bullet(self, surface, bullet):
        pygame.draw.rect(surface, pygame.Color(bullet.color),
                         to_rect(bullet.x, bullet.y, bullet.width, bullet.height))

    def draw_enemy(self, surface, enemy):
        pygame.draw.rect(surface, pygame.Color(enemy.color),
                         to_rect(enemy.x, enemy.y, enemy.width, enemy.height))
        inner_w = enemy.width - ENEMY_DETAIL_INSET * 2
        inner_h = enemy.height - ENEMY_DETAIL_INSET * 2
        if inner_w > 0 and inner_h > 0:
            pygame.draw.rect(surface, pygame.Color(enemy.detail_color),
                             to_rect(enemy.x + ENEMY_DETAIL_INSET, enemy.y + ENEMY_DETAIL_INSET,
                                     inner_w, inner_h))

    def draw_particle(self, surface, particle):
        sprite = SpriteCache.get_square(particle.color, max(1, int(particle.size)))
        sprite.set_alpha(int(255 * particle.alpha))
        surface.blit(sprite, (int(particle.x), int(particle.y)))

    # ===========================================================
    # Debug Overlay
    # ===========================================================

    def _draw_hitboxes(self, surface, world):
        color = pygame.Color(Debug.HITBOX_COLOR)
        entities = [world.player, *world.bullets, *world.enemies]
        for entity in entities:
            pygame.draw.rect(surface, color, to_rect(*entity.get_bounds().as_rect()), 1)
