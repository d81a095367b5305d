"""
collision_manager.py
--------------------
Pairwise collision resolver run once per tick after every entity update.

Responsibilities
----------------
- Cross-check the player, enemies, boss and both projectile collections.
- Apply damage, removal flags and score in a fixed order.
- Never prune collections; flagged entities stay in place (and keep taking
  part in this pass) until the session compacts them.

Order
-----
1. Player            vs each Enemy             -> player -20, enemy flagged
2. Player            vs each enemy Projectile  -> player -10, shot flagged
3. player Projectile vs Boss (active only)     -> boss -10, shot flagged
4. player Projectile vs each Enemy             -> both flagged, score +100
"""

from dataclasses import dataclass

from donut_dash.core.debug.debug_logger import DebugLogger
from donut_dash.core.runtime.game_settings import Combat, Debug
from donut_dash.systems.collision.hitbox import overlaps


@dataclass
class CollisionReport:
    """Outcome of one resolve() pass."""
    score_gained: int = 0
    player_hits: int = 0
    boss_hits: int = 0
    enemies_destroyed: int = 0

    @property
    def any(self) -> bool:
        return bool(self.player_hits or self.boss_hits or self.enemies_destroyed)


class CollisionManager:
    """Detects overlaps and applies their gameplay effects."""

    # ===========================================================
    # Collision Resolution
    # ===========================================================
    def resolve(self, player, enemies, enemy_projectiles, boss):
        """
        Run all four checks in order.

        Args:
            player: Player (owns player projectiles)
            enemies: List of enemies
            enemy_projectiles: List of boss-fired projectiles
            boss: Boss entity

        Returns:
            CollisionReport: Totals for this pass
        """
        report = CollisionReport()
        player_rect = player.rect

        # 1) Player vs Enemies
        for enemy in enemies:
            if overlaps(player_rect, enemy.rect):
                player.take_damage(Combat.ENEMY_CONTACT_DAMAGE, source="enemy")
                enemy.mark_dead()
                report.player_hits += 1

        # 2) Player vs enemy Projectiles
        for projectile in enemy_projectiles:
            if overlaps(player_rect, projectile.rect):
                player.take_damage(Combat.ENEMY_SHOT_DAMAGE, source="enemy_bullet")
                projectile.mark_dead()
                report.player_hits += 1

        # 3 + 4) player Projectiles vs Boss, then vs Enemies
        for projectile in player.projectiles:
            shot_rect = projectile.rect

            if boss.active and overlaps(boss.rect, shot_rect):
                boss.take_damage(Combat.PLAYER_SHOT_DAMAGE)
                projectile.mark_dead()
                report.boss_hits += 1

            for enemy in enemies:
                if overlaps(enemy.rect, shot_rect):
                    enemy.mark_dead()
                    projectile.mark_dead()
                    report.score_gained += Combat.ENEMY_KILL_SCORE
                    report.enemies_destroyed += 1

        if report.any:
            DebugLogger.trace(
                f"Collisions: player_hits={report.player_hits} boss_hits={report.boss_hits} "
                f"kills={report.enemies_destroyed}",
                category="collision"
            )

        return report

    # ===========================================================
    # Debug Visualization
    # ===========================================================
    def draw_debug(self, draw_manager, entities):
        """Outline every bounding rectangle when Debug.HITBOX_VISIBLE is on."""
        if not Debug.HITBOX_VISIBLE:
            return
        for entity in sorted(entities, key=lambda e: e.layer):
            draw_manager.outline_rect(entity.rect, Debug.HITBOX_COLOR)
