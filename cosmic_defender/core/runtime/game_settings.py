"""
game_settings.py
----------------
Centralized constants for all game systems.

Static window/timing constants live on plain classes. Gameplay tuning lives
on the immutable GameConfig, which is built once at startup and handed to
the World.
"""

from dataclasses import dataclass, fields, replace


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 480
    HEIGHT: int = 720
    FPS: int = 60
    CAPTION: str = "Cosmic Defender"
    BACKGROUND: str = "#050508"


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Frame timing."""
    MAX_FRAME_TIME: float = 0.1


# ===========================================================
# Debug Display
# ===========================================================

class Debug:
    """Visual debug toggles -- not related to logging."""
    HITBOX_VISIBLE: bool = False
    HITBOX_COLOR: str = "#00ffff"


# ===========================================================
# Gameplay Configuration
# ===========================================================

@dataclass(frozen=True)
class GameConfig:
    """Gameplay tuning values. Speeds are pixels per second."""

    # Player
    player_speed: float = 400.0
    player_width: float = 40.0
    player_height: float = 40.0
    player_color: str = "#00ff88"
    player_bottom_margin: float = 20.0

    # Bullets
    bullet_speed: float = 800.0
    bullet_width: float = 4.0
    bullet_height: float = 15.0
    bullet_color: str = "#ffff00"
    bullet_cooldown: float = 0.15

    # Enemies
    enemy_base_speed: float = 150.0
    enemy_size: float = 35.0
    enemy_color: str = "#ff3366"
    enemy_detail_color: str = "#aa0033"
    enemy_cleanup_margin: float = 50.0
    enemy_speed_per_difficulty: float = 10.0

    # Spawning & difficulty
    spawn_rate_initial: float = 1.2
    spawn_rate_min: float = 0.3
    spawn_rate_decay: float = 0.05
    difficulty_rate: float = 0.1

    # Scoring & effects
    score_per_kill: int = 10
    explosion_particles: int = 15

    # Loop
    max_frame_time: float = Physics.MAX_FRAME_TIME

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if f.type is str:
                if not isinstance(value, str):
                    raise ValueError(f"GameConfig.{f.name} must be a string, got {value!r}")
            elif isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"GameConfig.{f.name} must be a number, got {value!r}")

        positive = (
            "player_speed", "player_width", "player_height",
            "bullet_speed", "bullet_width", "bullet_height",
            "enemy_size", "spawn_rate_initial", "spawn_rate_min",
            "max_frame_time",
        )
        for name in positive:
            if getattr(self, name) <= 0:
                raise ValueError(f"GameConfig.{name} must be positive, got {getattr(self, name)!r}")

        non_negative = (
            "bullet_cooldown", "enemy_base_speed", "spawn_rate_decay",
            "difficulty_rate", "score_per_kill", "explosion_particles",
        )
        for name in non_negative:
            if getattr(self, name) < 0:
                raise ValueError(f"GameConfig.{name} must not be negative, got {getattr(self, name)!r}")

    @classmethod
    def field_names(cls):
        return {f.name for f in fields(cls)}

    @classmethod
    def from_dict(cls, data: dict) -> "GameConfig":
        """Build a config from a flat dict, ignoring unknown keys."""
        known = cls.field_names()
        return cls(**{k: v for k, v in data.items() if k in known})

    def with_overrides(self, **overrides) -> "GameConfig":
        """Return a copy with some values replaced."""
        return replace(self, **overrides)


DEFAULT_CONFIG = GameConfig()
