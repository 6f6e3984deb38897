"""
collision_manager.py
--------------------
Two-pass AABB collision resolution between the player, enemies and bullets.

Responsibilities
----------------
- Detect the first enemy touching the player (terminal hit).
- Pair each live bullet with at most one live enemy and flag both dead.
- Report what happened; the World applies score, explosions and state changes.

Pass order
----------
1. Player vs enemies. On the first hit the report is returned at once and
   the bullet pass does not run.
2. Bullets vs enemies, both in spawn order. An enemy already flagged dead
   earlier in this pass is skipped, so it can be scored only once.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from cosmic_defender.core.debug.debug_logger import DebugLogger
from cosmic_defender.systems.collision.collision_hitbox import intersects


@dataclass
class CollisionReport:
    """Outcome of one collision pass."""
    player_hit_by: Optional[object] = None
    kills: List[Tuple[object, object]] = field(default_factory=list)  # (bullet, enemy)

    @property
    def player_hit(self) -> bool:
        return self.player_hit_by is not None


class CollisionManager:
    """Detects collisions and flags the entities involved."""

    def __init__(self):
        self.checks = 0

    # ===========================================================
    # Resolution
    # ===========================================================
    def resolve(self, player, enemies, bullets) -> CollisionReport:
        """
        Run both passes for the current tick.

        Args:
            player: The player entity
            enemies: Iterable of enemies in spawn order
            bullets: Iterable of bullets in spawn order

        Returns:
            CollisionReport
        """
        report = CollisionReport()

        hit = self.check_player(player, enemies)
        if hit is not None:
            report.player_hit_by = hit
            return report

        report.kills = self.check_bullets(bullets, enemies)
        return report

    def check_player(self, player, enemies):
        """Return the first live enemy overlapping the player, or None."""
        player_bounds = player.get_bounds()
        for enemy in enemies:
            if not enemy.alive:
                continue
            self.checks += 1
            if intersects(player_bounds, enemy.get_bounds()):
                DebugLogger.state(f"Player hit by {enemy!r}", category="collision")
                return enemy
        return None

    def check_bullets(self, bullets, enemies):
        """
        Pair bullets with enemies. Each bullet destroys at most one enemy.

        Returns:
            list[tuple]: (bullet, enemy) pairs, both already flagged dead.
        """
        kills = []
        enemy_list = list(enemies)

        for bullet in bullets:
            if not bullet.alive:
                continue
            bullet_bounds = bullet.get_bounds()

            for enemy in enemy_list:
                if not enemy.alive:
                    continue
                self.checks += 1
                if intersects(bullet_bounds, enemy.get_bounds()):
                    bullet.mark_dead()
                    enemy.mark_dead()
                    kills.append((bullet, enemy))
                    DebugLogger.trace(f"{bullet!r} destroyed {enemy!r}", category="collision")
                    break

        return kills
