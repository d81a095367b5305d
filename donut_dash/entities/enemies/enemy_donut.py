"""
enemy_donut.py
--------------
Rolling donut: the only regular enemy type.

Responsibilities
----------------
- Spawn just past the right edge, resting on the ground line.
- Roll left at a randomized constant speed, spinning cosmetically.
- Flag itself for removal once fully past the left edge.
"""

import random

from donut_dash.core.debug.debug_logger import DebugLogger
from donut_dash.core.runtime.game_settings import Display, Layers, World, EnemySettings
from donut_dash.entities.base_entity import BaseEntity
from donut_dash.entities.entity_types import EntityCategory, CollisionTags


class EnemyDonut(BaseEntity):
    """Ground enemy moving straight left."""

    __slots__ = ('speed', 'angle', 'color')

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, rng=None, x=None, y=None, speed=None):
        """
        Args:
            rng: random.Random-like source (module random if None)
            x, y: Position override (randomized spawn x / ground y if None)
            speed: Leftward speed override (randomized if None)
        """
        rng = rng or random
        width, height = EnemySettings.WIDTH, EnemySettings.HEIGHT

        if x is None:
            x = Display.WIDTH + rng.random() * EnemySettings.SPAWN_OFFSET_RANGE
        if y is None:
            y = World.GROUND_Y - height
        if speed is None:
            speed = rng.random() * EnemySettings.SPEED_RANGE + EnemySettings.MIN_SPEED

        super().__init__(x, y, width, height, vx=-speed)

        self.speed = speed
        self.angle = 0.0
        self.color = EnemySettings.COLOR

        self.category = EntityCategory.ENEMY
        self.collision_tag = CollisionTags.ENEMY
        self.layer = Layers.ENEMIES

        DebugLogger.trace(
            f"Spawned EnemyDonut at ({x:.1f}, {y:.1f}) | Speed={speed:.2f}",
            category="entity_spawn"
        )

    # ===========================================================
    # Update Logic
    # ===========================================================
    def update(self):
        self.x -= self.speed
        self.angle += EnemySettings.SPIN

        if self.x + self.width < 0:
            self.mark_dead()

    # ===========================================================
    # Rendering
    # ===========================================================
    def draw(self, draw_manager):
        """Spinning sprite; the fallback fill is drawn unrotated."""
        draw_manager.draw_image("donut", self.rect, self.color, angle=self.angle)
