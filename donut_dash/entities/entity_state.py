"""
entity_state.py
---------------
Defines runtime state enumerations for all entity types.
Contains only states that change over time during gameplay.
"""

from enum import Enum, IntEnum


class LifecycleState(IntEnum):
    """
    Tracks whether an entity is still part of the simulation.

    Entities are flagged DEAD during update or collision resolution and
    removed from their collection when the owner compacts it.
    """
    ALIVE = 0
    DEAD = 1


class BossPhase(Enum):
    """
    Scripted boss behaviour.

    ENTERING -> IDLE -> ATTACK -> IDLE -> ...
    ATTACK only marks the tick a shot was fired.
    """
    ENTERING = "entering"
    IDLE = "idle"
    ATTACK = "attack"
