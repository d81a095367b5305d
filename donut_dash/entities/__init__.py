"""
donut_dash/entities/__init__.py
-------------------------------
Entity module exports.

Provides core entity states and type constants used across all game entities.
These are lightweight enums and constants with no heavy dependencies.

Exports:
    LifecycleState  - Entity removal flag (ALIVE, DEAD)
    BossPhase       - Boss script states (ENTERING, IDLE, ATTACK)
    EntityCategory  - Logical entity groupings (PLAYER, ENEMY, PROJECTILE, etc.)
    CollisionTags   - Collision tag constants (PLAYER, ENEMY_BULLET, etc.)
"""

from donut_dash.entities.entity_state import LifecycleState, BossPhase
from donut_dash.entities.entity_types import EntityCategory, CollisionTags

__all__ = [
    # States
    'LifecycleState',
    'BossPhase',
    # Types
    'EntityCategory',
    'CollisionTags',
]
