"""
enemy_boss.py
-------------
The single scripted boss encounter.

State Machine
-------------
ENTERING : slide in from the right at ENTRY_SPEED until target_x is reached
IDLE     : hover on a sine of the frame counter, count the attack cooldown
ATTACK   : marks the tick an aimed shot was fired, returns to IDLE next tick

The boss never returns to ENTERING and is never removed; victory simply ends
the session. update() is a no-op until the session activates the boss.
"""

import math

from donut_dash.core.debug.debug_logger import DebugLogger
from donut_dash.core.runtime.game_settings import Display, Layers, World, BossSettings
from donut_dash.entities.base_entity import BaseEntity
from donut_dash.entities.bullets.projectile import Projectile
from donut_dash.entities.entity_state import BossPhase
from donut_dash.entities.entity_types import EntityCategory, CollisionTags


class EnemyBoss(BaseEntity):
    """
    Boss entity with a three-state script.

    Damage Flow:
    1. Player projectiles overlapping the boss remove 10 health each
    2. Health may dip below zero for the tick it dies
    3. The session declares victory when health <= 0 while active
    """

    __slots__ = (
        'health', 'max_health', 'active', 'phase', 'attack_timer',
        'target_x', 'baseline_y', 'color',
    )

    # ===================================================================
    # Initialization
    # ===================================================================
    def __init__(self):
        width, height = BossSettings.WIDTH, BossSettings.HEIGHT
        baseline_y = World.GROUND_Y - height - BossSettings.HOVER_LIFT

        super().__init__(Display.WIDTH + BossSettings.SPAWN_OFFSET, baseline_y, width, height)

        self.baseline_y = baseline_y
        self.target_x = Display.WIDTH - BossSettings.TARGET_OFFSET

        self.health = BossSettings.MAX_HEALTH
        self.max_health = BossSettings.MAX_HEALTH
        self.active = False
        self.phase = BossPhase.ENTERING
        self.attack_timer = 0
        self.color = BossSettings.COLOR

        self.category = EntityCategory.BOSS
        self.collision_tag = CollisionTags.ENEMY
        self.layer = Layers.BOSS

    # ===================================================================
    # Activation
    # ===================================================================
    def activate(self):
        """Bring the boss into play. Safe to call more than once."""
        if self.active:
            return
        self.active = True
        DebugLogger.state(f"Boss activated | HP={self.health}/{self.max_health}", category="boss")

    # ===================================================================
    # Update Logic
    # ===================================================================
    def update(self, player, frame):
        """
        Advance the script by one tick.

        Args:
            player: Target for aimed shots
            frame: Session frame counter, drives the hover sine

        Returns:
            Projectile | None: Shot fired this tick, if any
        """
        if not self.active:
            return None

        if self.phase == BossPhase.ENTERING:
            self._update_entering()
            return None

        if self.phase == BossPhase.IDLE:
            return self._update_idle(player, frame)

        # ATTACK lasts exactly one evaluation
        self._set_phase(BossPhase.IDLE)
        return None

    def _update_entering(self):
        if self.x > self.target_x:
            self.x -= BossSettings.ENTRY_SPEED
        else:
            self._set_phase(BossPhase.IDLE)

    def _update_idle(self, player, frame):
        self.y = self.baseline_y + math.sin(frame * BossSettings.HOVER_FREQUENCY) * BossSettings.HOVER_AMPLITUDE

        self.attack_timer += 1
        if self.attack_timer > BossSettings.ATTACK_COOLDOWN:
            self._set_phase(BossPhase.ATTACK)
            self.attack_timer = 0
            return self.shoot_at(player)
        return None

    def _set_phase(self, phase):
        DebugLogger.trace(f"Boss {self.phase.name} -> {phase.name}", category="boss")
        self.phase = phase

    # ===================================================================
    # Combat
    # ===================================================================
    def shoot_at(self, player):
        """Fire one shot from the boss's left-middle toward the player's corner."""
        dx = player.x - self.x
        dy = player.y - self.y
        angle = math.atan2(dy, dx)
        speed = BossSettings.SHOT_SPEED

        return Projectile(
            self.x,
            self.y + self.height / 2,
            math.cos(angle) * speed,
            math.sin(angle) * speed,
            is_enemy=True,
        )

    def take_damage(self, amount: int):
        self.health -= amount
        DebugLogger.trace(f"Boss hit for {amount} -> HP={self.health}", category="boss")

    @property
    def health_percent(self) -> float:
        """Remaining health as a percentage, clamped to [0, 100]."""
        if self.max_health <= 0:
            return 0.0
        pct = self.health / self.max_health * 100
        return max(0.0, min(100.0, pct))

    @property
    def defeated(self) -> bool:
        return self.active and self.health <= 0

    # ===================================================================
    # Rendering
    # ===================================================================
    def draw(self, draw_manager):
        if not self.active:
            return
        draw_manager.draw_image("boss", self.rect, self.color)
