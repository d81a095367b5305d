"""
spawn_manager.py
----------------
Probabilistic enemy spawning for the running phase.

Every SPAWN_INTERVAL ticks (on frames where frame % interval == 0) one donut
spawns with probability SPAWN_CHANCE. The random source is injectable so
tests and seeded runs are deterministic.
"""

import random

from donut_dash.core.debug.debug_logger import DebugLogger
from donut_dash.core.runtime.game_settings import EnemySettings
from donut_dash.entities.enemies.enemy_donut import EnemyDonut


class SpawnManager:
    """Decides when to spawn donuts and builds them."""

    def __init__(self, rng=None, spawn_chance=None, interval=None):
        """
        Args:
            rng: random.Random-like source (a fresh Random if None)
            spawn_chance: Probability of a spawn on an eligible frame
            interval: Ticks between eligible frames
        """
        self.rng = rng or random.Random()
        self.spawn_chance = EnemySettings.SPAWN_CHANCE if spawn_chance is None else spawn_chance
        self.interval = EnemySettings.SPAWN_INTERVAL if interval is None else interval

        if self.interval <= 0:
            raise ValueError(f"Spawn interval must be positive, got {self.interval}")

    def maybe_spawn(self, frame):
        """
        Roll for a spawn on this frame.

        Args:
            frame: Session frame counter

        Returns:
            EnemyDonut | None
        """
        if frame % self.interval != 0:
            return None
        if self.rng.random() >= self.spawn_chance:
            return None

        enemy = EnemyDonut(rng=self.rng)
        DebugLogger.trace(f"Frame {frame}: spawned {enemy!r}", category="entity_spawn")
        return enemy
