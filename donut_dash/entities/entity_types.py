"""Entity types."""


class EntityCategory:
    """High-level logical grouping for entities."""
    PLAYER = "player"
    ENEMY = "enemy"
    BOSS = "boss"
    PROJECTILE = "projectile"  # Used for both player and boss shots
    SCENERY = "scenery"


# ===========================================================
# Collision Tag Constants
# ===========================================================
class CollisionTags:
    """
    Standard collision tags for entity.collision_tag.
    Prevents typos and enables IDE autocomplete.
    """
    NEUTRAL = "neutral"

    PLAYER = "player"
    PLAYER_BULLET = "player_bullet"

    ENEMY = "enemy"
    ENEMY_BULLET = "enemy_bullet"
