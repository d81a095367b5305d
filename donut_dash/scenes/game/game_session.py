"""
game_session.py
---------------
Owns one play session: every entity collection, the counters and the phase
state machine.

Phases
------
START -> PLAYING -> BOSS -> GAMEOVER | VICTORY
Any phase -> PLAYING through start() (full reset).
ERROR is entered through fail() when a frame raises.

Tick order (update)
-------------------
background, player, distance/score, boss trigger, spawn (PLAYING) or boss
(BOSS), enemies, enemy projectiles, collisions, outcome, compaction, HUD
snapshot, frame counter.
"""

from donut_dash.core.debug.debug_logger import DebugLogger
from donut_dash.core.runtime.game_settings import Display, Progression
from donut_dash.core.runtime.game_state import (
    GamePhase,
    HudSnapshot,
    NO_INPUT,
    screen_for_phase,
)
from donut_dash.entities.base_entity import compact
from donut_dash.entities.bosses.enemy_boss import EnemyBoss
from donut_dash.entities.player import Player
from donut_dash.graphics.background_manager import Background
from donut_dash.systems.collision.collision_manager import CollisionManager
from donut_dash.systems.entity_management.spawn_manager import SpawnManager


class GameSession:
    """Explicit aggregate for the single in-flight game."""

    CLEAR_COLOR = (0, 0, 0)

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, hud=None, spawn_manager=None, collision_manager=None):
        """
        Args:
            hud: UI sink exposing push(HudSnapshot) and show_error(str)
            spawn_manager: Enemy spawner (default SpawnManager())
            collision_manager: Collision resolver (default CollisionManager())
        """
        self.hud = hud
        self.spawn_manager = spawn_manager or SpawnManager()
        self.collision_manager = collision_manager or CollisionManager()

        self.phase = GamePhase.START
        self.last_error = None
        self.reset()

        DebugLogger.init_entry("GameSession")

    # ===========================================================
    # Lifecycle
    # ===========================================================
    def reset(self):
        """Recreate all entities and zero every counter."""
        self.player = Player()
        self.background = Background()
        self.boss = EnemyBoss()
        self.enemies = []
        self.enemy_projectiles = []

        self.score = 0.0
        self.distance = 0
        self.frames = 0
        self.boss_triggered = False
        self.last_error = None

        self.push_hud()

    def start(self):
        """Full reset, then enter PLAYING. Used for start and restart."""
        self.reset()
        self._set_phase(GamePhase.PLAYING)
        self.push_hud()
        DebugLogger.state("Session started", category="session")

    def fail(self, error):
        """Enter ERROR and surface the failure on the HUD."""
        self.last_error = error
        self._set_phase(GamePhase.ERROR)
        if self.hud is not None:
            self.hud.show_error(f"Game Loop Error: {error}")
        self.push_hud()

    @property
    def is_active(self) -> bool:
        return self.phase.is_active

    def _set_phase(self, phase):
        if phase == self.phase:
            return
        DebugLogger.state(f"Phase {self.phase.name} -> {phase.name}", category="session")
        self.phase = phase

    # ===========================================================
    # Input
    # ===========================================================
    def handle_action_released(self, action):
        """Release edges arrive between ticks; re-arm the trigger on shoot."""
        if action == "shoot":
            self.player.arm_trigger()

    # ===========================================================
    # Tick
    # ===========================================================
    def update(self, controls=NO_INPUT):
        """
        Advance the simulation one tick. No-op outside PLAYING and BOSS.

        Args:
            controls: Held input actions for this tick
        """
        if not self.is_active:
            return

        self.background.update(scrolling=self.phase == GamePhase.PLAYING)
        self.player.update(controls)

        self.distance += 1
        self.score += Progression.SCORE_PER_TICK
        self._check_boss_trigger()

        if self.phase == GamePhase.PLAYING:
            enemy = self.spawn_manager.maybe_spawn(self.frames)
            if enemy is not None:
                self.enemies.append(enemy)
        elif self.phase == GamePhase.BOSS:
            shot = self.boss.update(self.player, self.frames)
            if shot is not None:
                self.enemy_projectiles.append(shot)

        self._update_group(self.enemies)
        self._update_group(self.enemy_projectiles)

        report = self.collision_manager.resolve(
            self.player, self.enemies, self.enemy_projectiles, self.boss
        )
        self.score += report.score_gained
        self._check_outcome()

        self._compact()
        self.push_hud()
        self.frames += 1

    def _check_boss_trigger(self):
        """Latch: fires once per session when distance passes the threshold."""
        if self.boss_triggered or self.distance <= Progression.BOSS_DISTANCE:
            return

        self.boss_triggered = True
        self.boss.activate()
        self._set_phase(GamePhase.BOSS)
        DebugLogger.state(f"Boss triggered at distance {self.distance}", category="boss")

    def _check_outcome(self):
        """Defeat is checked first, so mutual lethality ends in GAMEOVER."""
        if self.player.health <= 0:
            self._set_phase(GamePhase.GAMEOVER)
        elif self.boss.defeated:
            self._set_phase(GamePhase.VICTORY)

    @staticmethod
    def _update_group(entities):
        for entity in entities:
            entity.update()
        compact(entities)

    def _compact(self):
        self.player.prune_projectiles()
        compact(self.enemies)
        compact(self.enemy_projectiles)

    # ===========================================================
    # HUD
    # ===========================================================
    def snapshot(self) -> HudSnapshot:
        return HudSnapshot(
            score=int(self.score),
            health=self.player.display_health,
            boss_health_percent=self.boss.health_percent,
            screen_visible=screen_for_phase(self.phase),
            boss_bar_visible=self.boss.active,
        )

    def push_hud(self):
        if self.hud is not None:
            self.hud.push(self.snapshot())

    # ===========================================================
    # Rendering
    # ===========================================================
    def draw(self, draw_manager):
        """Emit the frame back to front."""
        draw_manager.clear(self.CLEAR_COLOR)

        self.background.draw(draw_manager)
        self.player.draw(draw_manager)

        for enemy in self.enemies:
            enemy.draw(draw_manager)
        for projectile in self.enemy_projectiles:
            projectile.draw(draw_manager)

        if self.boss.active:
            self.boss.draw(draw_manager)

        self.collision_manager.draw_debug(draw_manager, self.entities())

    def entities(self):
        """Every collidable entity currently in play."""
        active = [self.player, *self.player.projectiles, *self.enemies, *self.enemy_projectiles]
        if self.boss.active:
            active.append(self.boss)
        return active

    def __repr__(self) -> str:
        return (
            f"<GameSession phase={self.phase.name} score={int(self.score)} "
            f"distance={self.distance} frames={self.frames} surface={Display.WIDTH}x{Display.HEIGHT}>"
        )
