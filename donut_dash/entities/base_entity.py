"""
base_entity.py
--------------
Foundational record shared by every moving entity (Player, Projectile,
Enemy, Boss).

Coordinate System
-----------------
All entities use top-left coordinates in logical surface units:
- (x, y) is the top-left corner of the bounding rectangle
- (vx, vy) is the per-tick velocity
- rect is rebuilt on access, so it never drifts from x/y

Projectiles override rect to return their circle's bounding square.
"""

from donut_dash.core.debug.debug_logger import DebugLogger
from donut_dash.core.runtime.game_settings import Layers
from donut_dash.entities.entity_state import LifecycleState
from donut_dash.entities.entity_types import EntityCategory, CollisionTags
from donut_dash.systems.collision.hitbox import Rect


class BaseEntity:
    """
    Base class for all game entities.

    Subclassed by Player, Projectile, Enemy and Boss. Holds only the shared
    spatial record and the removal flag; behaviour lives in subclasses.
    """

    # ===================================================================
    # Memory Layout
    # ===================================================================

    __slots__ = (
        'x', 'y', 'width', 'height', 'vx', 'vy',
        'death_state', 'layer', 'category', 'collision_tag',
    )

    # ===================================================================
    # Initialization
    # ===================================================================

    def __init__(self, x: float, y: float, width: float, height: float,
                 vx: float = 0.0, vy: float = 0.0):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.vx = vx
        self.vy = vy

        self.death_state = LifecycleState.ALIVE
        self.layer = Layers.ENEMIES
        self.category = EntityCategory.SCENERY
        self.collision_tag = CollisionTags.NEUTRAL

    # ===================================================================
    # Properties
    # ===================================================================

    @property
    def rect(self) -> Rect:
        """Bounding rectangle used by the collision test."""
        return Rect(self.x, self.y, self.width, self.height)

    @property
    def alive(self) -> bool:
        return self.death_state == LifecycleState.ALIVE

    # ===================================================================
    # Core Update Loop
    # ===================================================================

    def update(self):
        """Per-tick update. Override in subclasses."""
        pass

    def draw(self, draw_manager):
        """Emit draw primitives. Override in subclasses."""
        pass

    # ===================================================================
    # Lifecycle
    # ===================================================================

    def mark_dead(self):
        """Flag entity for removal at the next compaction."""
        if self.death_state == LifecycleState.DEAD:
            return

        self.death_state = LifecycleState.DEAD
        DebugLogger.trace(f"[{self.category}] {type(self).__name__} -> DEAD", category="entity_spawn")

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} "
            f"pos=({self.x:.1f}, {self.y:.1f}) "
            f"tag={self.collision_tag} "
            f"state={self.death_state.name}>"
        )


def compact(entities):
    """Drop flagged entities in place, preserving order."""
    entities[:] = [e for e in entities if e.alive]
    return entities
