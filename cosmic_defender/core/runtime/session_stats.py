"""
session_stats.py
----------------
Tracks statistics for the current play session.
Separated from entity management and the state machine.
"""


# ===========================================================
# Session Stats
# ===========================================================

class SessionStats:
    """Container for run-specific statistics. Reset when a session starts."""

    def __init__(self):
        self.score = 0
        self.enemies_killed = 0
        self.shots_fired = 0
        self.enemies_spawned = 0
        self.run_time = 0.0

    # ===========================================================
    # Core Stats
    # ===========================================================

    def add_score(self, amount: int):
        """Add to current score. Score never decreases within a session."""
        if amount < 0:
            raise ValueError(f"Score increment must not be negative, got {amount}")
        self.score += amount

    def add_kill(self):
        self.enemies_killed += 1

    def add_shot(self):
        self.shots_fired += 1

    def add_spawn(self):
        self.enemies_spawned += 1

    def add_time(self, dt: float):
        """Add elapsed play time."""
        self.run_time += dt

    @property
    def accuracy(self) -> float:
        """Fraction of fired bullets that destroyed an enemy."""
        if self.shots_fired == 0:
            return 0.0
        return self.enemies_killed / self.shots_fired

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def reset(self):
        """Reset all stats for a new session."""
        self.score = 0
        self.enemies_killed = 0
        self.shots_fired = 0
        self.enemies_spawned = 0
        self.run_time = 0.0

    def snapshot(self) -> dict:
        return {
            "score": self.score,
            "enemies_killed": self.enemies_killed,
            "shots_fired": self.shots_fired,
            "enemies_spawned": self.enemies_spawned,
            "run_time": self.run_time,
        }
