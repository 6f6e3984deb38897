"""Entity types."""


class EntityCategory:
    """High-level logical grouping for entities, used by logs and rendering."""
    PLAYER = "player"
    ENEMY = "enemy"
    PROJECTILE = "projectile"
    PARTICLE = "particle"
