"""
projectile.py
-------------
Straight-line shot fired by either the player or the boss.

Responsibilities
----------------
- Move at constant velocity (no gravity, no drag).
- Flag itself for removal once strictly outside the play surface.
- Collide as the bounding square of its circle.
"""

from donut_dash.core.runtime.game_settings import Display, Layers, ProjectileSettings
from donut_dash.entities.base_entity import BaseEntity
from donut_dash.entities.entity_types import EntityCategory, CollisionTags
from donut_dash.systems.collision.hitbox import circle_bounds


class Projectile(BaseEntity):
    """Circular bullet. (x, y) is the circle centre, not a corner."""

    __slots__ = ('radius', 'is_enemy', 'color')

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, x, y, vx, vy, is_enemy=False, radius=None):
        """
        Args:
            x, y: Centre position
            vx, vy: Velocity per tick
            is_enemy: True for boss shots, False for player shots
            radius: Circle radius (defaults to ProjectileSettings.RADIUS)
        """
        radius = radius if radius is not None else ProjectileSettings.RADIUS
        super().__init__(x, y, radius * 2, radius * 2, vx, vy)

        self.radius = radius
        self.is_enemy = is_enemy
        self.color = ProjectileSettings.ENEMY_COLOR if is_enemy else ProjectileSettings.PLAYER_COLOR

        self.category = EntityCategory.PROJECTILE
        self.collision_tag = CollisionTags.ENEMY_BULLET if is_enemy else CollisionTags.PLAYER_BULLET
        self.layer = Layers.BULLETS

    # ===========================================================
    # Properties
    # ===========================================================
    @property
    def rect(self):
        return circle_bounds(self.x, self.y, self.radius)

    # ===========================================================
    # Update Logic
    # ===========================================================
    def update(self):
        self.x += self.vx
        self.y += self.vy

        if self.is_offscreen():
            self.mark_dead()

    def is_offscreen(self) -> bool:
        """True when the centre is strictly outside the surface."""
        return (
            self.x > Display.WIDTH or self.x < 0 or
            self.y > Display.HEIGHT or self.y < 0
        )

    # ===========================================================
    # Rendering
    # ===========================================================
    def draw(self, draw_manager):
        draw_manager.draw_circle((self.x, self.y), self.radius, self.color)
