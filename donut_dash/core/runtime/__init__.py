"""
Runtime configuration exports.

Provides game-wide constants and settings. All exports are lightweight
class constants with no initialization overhead.
"""

from donut_dash.core.runtime.game_settings import (
    Display,
    World,
    PlayerSettings,
    ProjectileSettings,
    EnemySettings,
    BossSettings,
    BackgroundSettings,
    Progression,
    Combat,
    Layers,
    Assets,
    Debug,
)

__all__ = [
    # Display & Rendering
    'Display',
    'Layers',
    'Assets',
    # Simulation
    'World',
    'PlayerSettings',
    'ProjectileSettings',
    'EnemySettings',
    'BossSettings',
    'BackgroundSettings',
    'Progression',
    'Combat',
    # Debug
    'Debug',
]
