"""
player.py
---------
Defines the Player entity and its core update logic.

Responsibilities
----------------
- Maintain player position, velocity, grounded and health state.
- Apply run / jump input, gravity and ground contact every tick.
- Stay within the horizontal screen bounds.
- Fire one shot per press of the shoot action (edge-triggered).
- Own and advance the player's projectiles.
"""

from donut_dash.core.debug.debug_logger import DebugLogger
from donut_dash.core.runtime.game_settings import Display, Layers, World, PlayerSettings
from donut_dash.core.runtime.game_state import NO_INPUT
from donut_dash.entities.base_entity import BaseEntity, compact
from donut_dash.entities.bullets.projectile import Projectile
from donut_dash.entities.entity_types import EntityCategory, CollisionTags


# ===========================================================
# Player Entity Class
# ===========================================================
class Player(BaseEntity):
    """Represents the controllable runner."""

    __slots__ = (
        'speed', 'jump_power', 'grounded', 'health', 'max_health',
        'can_shoot', 'projectiles', 'color',
    )

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, x=None, y=None):
        """
        Create the runner standing on the ground line.

        Args:
            x (float | None): Optional x-coordinate (defaults to START_X).
            y (float | None): Optional y-coordinate (defaults to resting on the ground).
        """
        width, height = PlayerSettings.WIDTH, PlayerSettings.HEIGHT
        x = PlayerSettings.START_X if x is None else x
        y = World.GROUND_Y - height if y is None else y
        super().__init__(x, y, width, height)

        self.speed = PlayerSettings.SPEED
        self.jump_power = PlayerSettings.JUMP_POWER
        self.grounded = True
        self.health = PlayerSettings.MAX_HEALTH
        self.max_health = PlayerSettings.MAX_HEALTH

        self.can_shoot = True
        self.projectiles = []
        self.color = PlayerSettings.COLOR

        self.category = EntityCategory.PLAYER
        self.collision_tag = CollisionTags.PLAYER
        self.layer = Layers.PLAYER

        DebugLogger.trace(
            f"Initialized Player at ({x:.1f}, {y:.1f}) | Speed={self.speed} | HP={self.health}",
            category="entity_spawn"
        )

    # ===========================================================
    # Update Logic
    # ===========================================================
    def update(self, controls=NO_INPUT):
        """
        Advance one tick of movement, physics, shooting and projectiles.

        Args:
            controls (Controls): Held actions for this tick.
        """
        self._update_movement(controls)
        self._update_shooting(controls)
        self._update_projectiles()

    # -------------------------------------------------------
    # Movement
    # -------------------------------------------------------
    def _update_movement(self, controls):
        """Run input, jump impulse, gravity, integration and ground contact."""
        # Left is checked first, so holding both runs left
        if controls.left:
            self.vx = -self.speed
        elif controls.right:
            self.vx = self.speed
        else:
            self.vx = 0

        if controls.up and self.grounded:
            self.vy = self.jump_power
            self.grounded = False

        self.vy += World.GRAVITY
        self.x += self.vx
        self.y += self.vy

        self._clamp_to_screen()

        if self.y + self.height > World.GROUND_Y:
            self.y = World.GROUND_Y - self.height
            self.vy = 0
            self.grounded = True

    # -------------------------------------------------------
    # Shooting
    # -------------------------------------------------------
    def _update_shooting(self, controls):
        """Fire once per press; arm_trigger() re-enables on release."""
        if controls.shoot and self.can_shoot:
            self.shoot()
            self.can_shoot = False

    def shoot(self):
        """Spawn a forward shot from the player's leading edge."""
        projectile = Projectile(
            self.x + self.width,
            self.y + self.height / 2,
            PlayerSettings.SHOT_SPEED,
            0,
        )
        self.projectiles.append(projectile)
        DebugLogger.trace(f"Player fired ({len(self.projectiles)} active)", category="entity_spawn")
        return projectile

    def arm_trigger(self):
        """Called by the input layer on the shoot action's release edge."""
        self.can_shoot = True

    def _update_projectiles(self):
        for projectile in self.projectiles:
            projectile.update()
        self.prune_projectiles()

    def prune_projectiles(self):
        """Drop flagged projectiles in place."""
        compact(self.projectiles)

    # =======================================================
    # Damage
    # =======================================================
    def take_damage(self, amount: int, source: str = "unknown"):
        """Reduce health. Health may go below zero; the HUD clamps it."""
        self.health -= amount
        DebugLogger.state(f"Took {amount} from {source} -> HP={self.health}", category="collision")

    @property
    def display_health(self) -> int:
        return int(max(0, self.health))

    # =======================================================
    # Rendering
    # =======================================================
    def draw(self, draw_manager):
        """Draw projectiles first, then the runner on top."""
        for projectile in self.projectiles:
            projectile.draw(draw_manager)

        draw_manager.draw_image("runner", self.rect, self.color)

    # =======================================================
    # Utility
    # =======================================================
    def _clamp_to_screen(self):
        """Keep the runner horizontally inside the surface."""
        if self.x < 0:
            self.x = 0
        if self.x + self.width > Display.WIDTH:
            self.x = Display.WIDTH - self.width
