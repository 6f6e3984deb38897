"""
spawn_manager.py
----------------
Timer-driven enemy spawner.

Responsibilities
----------------
- Accumulate elapsed time and compare it against a difficulty-scaled interval.
- Produce one enemy at a random x above the top edge when the interval passes.
- Draw all randomness from an injected random.Random so runs can be replayed.
"""

import random
from typing import Optional

from cosmic_defender.core.debug.debug_logger import DebugLogger
from cosmic_defender.core.runtime.game_settings import GameConfig
from cosmic_defender.entities.enemy import Enemy
from cosmic_defender.systems.collision.collision_hitbox import clamp


class SpawnManager:
    """Decides when and where the next enemy appears."""

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, config: GameConfig, rng: Optional[random.Random] = None):
        """
        Args:
            config: Gameplay config (spawn rates, enemy size)
            rng: Random source for spawn positions
        """
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.timer = 0.0

    def reset(self):
        self.timer = 0.0

    # ===========================================================
    # Spawn Logic
    # ===========================================================
    def spawn_interval(self, difficulty: float) -> float:
        """Seconds between spawns: shrinks linearly with difficulty down to a floor."""
        cfg = self.config
        return max(cfg.spawn_rate_min, cfg.spawn_rate_initial - difficulty * cfg.spawn_rate_decay)

    def update(self, dt: float, difficulty: float, world_width: float) -> Optional[Enemy]:
        """
        Advance the spawn timer.

        The timer resets to exactly zero on spawn; any excess over the
        interval is discarded.

        Args:
            dt: Delta time in seconds
            difficulty: Current difficulty
            world_width: Current viewport width

        Returns:
            Enemy: The enemy spawned this tick, or None.
        """
        self.timer += dt
        if self.timer <= self.spawn_interval(difficulty):
            return None

        self.timer = 0.0
        return self.spawn(difficulty, world_width)

    def spawn(self, difficulty: float, world_width: float) -> Enemy:
        """Create one enemy just above the top edge at a random x."""
        size = self.config.enemy_size
        max_x = max(0.0, world_width - size)
        x = clamp(self.rng.random() * max_x, 0.0, max_x)
        enemy = Enemy(x, -size, self.config, difficulty)

        DebugLogger.trace(
            f"Spawned Enemy at ({x:.1f}, {-size:.1f}) | Speed={enemy.speed:.1f}",
            category="entity_spawn"
        )
        return enemy
