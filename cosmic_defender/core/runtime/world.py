"""
world.py
--------
Simulation controller for one game of Cosmic Defender.

Responsibilities:
- Own the player, entity pools and per-session counters
- Drive the MENU -> PLAYING -> GAMEOVER state machine
- Advance physics, spawning and collision resolution once per tick
- Publish session events (start, score, game over) for UI collaborators

The World never draws and never reads pygame. Rendering and input are
supplied from outside: the input record is read once per tick and the
renderer reads the public entity pools after update() returns.
"""

import random
from typing import Optional

from cosmic_defender.core.debug.debug_logger import DebugLogger
from cosmic_defender.core.runtime.game_settings import DEFAULT_CONFIG, Display, GameConfig
from cosmic_defender.core.runtime.game_state import GameState
from cosmic_defender.core.runtime.session_stats import SessionStats
from cosmic_defender.core.services.event_manager import (
    EnemyDestroyedEvent,
    EventManager,
    GameOverEvent,
    GameStartedEvent,
    ScoreChangedEvent,
)
from cosmic_defender.core.services.input_state import InputState
from cosmic_defender.entities.player import Player
from cosmic_defender.graphics.particles.particle_manager import ParticleEmitter
from cosmic_defender.systems.collision.collision_manager import CollisionManager
from cosmic_defender.systems.entity_management.entity_pool import EntityPool
from cosmic_defender.systems.entity_management.spawn_manager import SpawnManager


class World:
    """
    Owns all gameplay state and advances it by explicit time steps.

    Usage:
        world = World(config, width=480, height=720, rng=random.Random(7))
        world.start()
        world.input.fire = True
        world.update(1 / 60)
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, config: GameConfig = DEFAULT_CONFIG,
                 width: float = Display.WIDTH, height: float = Display.HEIGHT,
                 input_state: Optional[InputState] = None,
                 events: Optional[EventManager] = None,
                 rng: Optional[random.Random] = None):
        """
        Args:
            config: Immutable gameplay configuration
            width, height: Initial viewport size
            input_state: Shared input record (a fresh one if None)
            events: Event channel for session notifications
            rng: Random source for spawns and particles; seed it for replays
        """
        self.config = config
        self.width = width
        self.height = height
        self.input = input_state if input_state is not None else InputState()
        self.events = events if events is not None else EventManager()
        self.rng = rng if rng is not None else random.Random()

        self.state = GameState.MENU
        self.difficulty = 0.0
        self.stats = SessionStats()

        self.player = Player(config)
        self.player.reset(width, height)

        self.bullets = EntityPool("bullets")
        self.enemies = EntityPool("enemies")
        self.particles = EntityPool("particles")

        self.spawner = SpawnManager(config, self.rng)
        self.emitter = ParticleEmitter(config, self.rng)
        self.collisions = CollisionManager()

        DebugLogger.init_entry("World")
        DebugLogger.init_sub(f"Viewport {width}x{height}")

    # ===========================================================
    # Properties
    # ===========================================================

    @property
    def score(self) -> int:
        return self.stats.score

    @property
    def spawn_timer(self) -> float:
        return self.spawner.timer

    @property
    def is_playing(self) -> bool:
        return self.state == GameState.PLAYING

    # ===========================================================
    # Session Commands
    # ===========================================================

    def start(self):
        """Begin a new session from any state. Fully resets the simulation."""
        self.state = GameState.PLAYING
        self.difficulty = 0.0
        self.stats.reset()
        self.spawner.reset()

        self.bullets.clear()
        self.enemies.clear()
        self.particles.clear()

        self.player.reset(self.width, self.height)

        DebugLogger.state("Session started → PLAYING")
        self.events.dispatch(GameStartedEvent())
        self.events.dispatch(ScoreChangedEvent(self.score))

    def restart(self):
        """Start again after a game over."""
        self.start()

    def game_over(self):
        self.state = GameState.GAMEOVER
        DebugLogger.state(
            f"GAME OVER → score={self.score} kills={self.stats.enemies_killed} "
            f"time={self.stats.run_time:.1f}s"
        )
        self.events.dispatch(GameOverEvent(self.score))

    def resize(self, width: float, height: float):
        """
        Update the viewport size.

        Spawn positions and the player clamp always use the current size.
        Outside the menu the player is pulled back inside the new bounds.
        """
        self.width = width
        self.height = height
        if self.state != GameState.MENU:
            self.player.keep_inside(width, height)
        DebugLogger.system(f"Viewport resized to {width}x{height}", category="display")

    # ===========================================================
    # Simulation
    # ===========================================================

    def update(self, dt: float):
        """
        Advance the simulation by dt seconds.

        Does nothing outside PLAYING, for non-positive dt, or while the
        viewport has no area.
        """
        if self.state != GameState.PLAYING:
            return
        if dt <= 0:
            return
        if self.width <= 0 or self.height <= 0:
            return

        self.difficulty += dt * self.config.difficulty_rate
        self.stats.add_time(dt)

        self._update_entities(dt)
        self._update_spawning(dt)
        self._resolve_collisions()

    def _update_entities(self, dt: float):
        bullet = self.player.update(dt, self.input, self.width)
        if bullet is not None:
            self.bullets.spawn(bullet)
            self.stats.add_shot()

        self.bullets.update(dt)
        self.enemies.update(dt, self.height)
        self.particles.update(dt)

    def _update_spawning(self, dt: float):
        enemy = self.spawner.update(dt, self.difficulty, self.width)
        if enemy is not None:
            self.enemies.spawn(enemy)
            self.stats.add_spawn()

    def _resolve_collisions(self):
        report = self.collisions.resolve(self.player, self.enemies, self.bullets)

        if report.player_hit:
            self.explode(*self.player.center, self.config.player_color)
            self.game_over()
            return

        for _, enemy in report.kills:
            self.explode(*enemy.center, self.config.enemy_color)
            self.stats.add_score(self.config.score_per_kill)
            self.stats.add_kill()
            self.events.dispatch(EnemyDestroyedEvent(enemy.center))
            self.events.dispatch(ScoreChangedEvent(self.score))

        if report.kills:
            self.bullets.compact()
            self.enemies.compact()

    def explode(self, x: float, y: float, color: str):
        """Spawn an explosion burst at (x, y)."""
        self.particles.extend(self.emitter.burst(x, y, color))

    # ===========================================================
    # Debug
    # ===========================================================

    def snapshot(self) -> dict:
        """Plain-data view of the session, used for replays and debugging."""
        return {
            "state": self.state.name,
            "score": self.score,
            "difficulty": self.difficulty,
            "spawn_timer": self.spawn_timer,
            "player": (self.player.x, self.player.y),
            "bullets": len(self.bullets),
            "enemies": [(e.x, e.y) for e in self.enemies],
            "particles": len(self.particles),
        }
