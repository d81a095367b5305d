"""
test_game_session.py
--------------------
Phase machine, tick order effects, boss latch and HUD pushes.
"""

from unittest.mock import patch

import pytest

from donut_dash.core.runtime.game_settings import Progression
from donut_dash.core.runtime.game_state import Controls, GamePhase, ScreenVisibility
from donut_dash.entities.bosses.enemy_boss import EnemyBoss
from donut_dash.entities.bullets.projectile import Projectile
from donut_dash.entities.enemies.enemy_donut import EnemyDonut
from donut_dash.entities.player import Player
from donut_dash.scenes.game.game_session import GameSession
from donut_dash.systems.entity_management.spawn_manager import SpawnManager


def trigger_boss(session):
    session.distance = Progression.BOSS_DISTANCE
    session.update()
    assert session.phase == GamePhase.BOSS


class TestLifecycle:

    def test_new_session_waits_on_start_screen(self, recording_hud):
        session = GameSession(hud=recording_hud)
        assert session.phase == GamePhase.START
        assert not session.is_active
        assert recording_hud.last.screen_visible == ScreenVisibility.START
        assert not recording_hud.last.boss_bar_visible

    def test_update_before_start_is_noop(self, recording_hud):
        session = GameSession(hud=recording_hud)
        session.update()
        assert session.frames == 0
        assert session.distance == 0

    def test_start_enters_playing(self, quiet_session, recording_hud):
        assert quiet_session.phase == GamePhase.PLAYING
        assert recording_hud.last.screen_visible == ScreenVisibility.NONE

    def test_restart_is_full_reset(self, quiet_session):
        for _ in range(30):
            quiet_session.update(Controls(right=True, shoot=True))
        quiet_session.player.health = 0
        quiet_session.update()
        assert quiet_session.phase == GamePhase.GAMEOVER

        quiet_session.start()

        assert quiet_session.phase == GamePhase.PLAYING
        assert quiet_session.score == 0
        assert quiet_session.distance == 0
        assert quiet_session.frames == 0
        assert quiet_session.player.health == 100
        assert quiet_session.player.projectiles == []
        assert not quiet_session.boss.active
        assert not quiet_session.boss_triggered

    def test_fail_enters_error_and_surfaces_message(self, quiet_session, recording_hud):
        quiet_session.fail(RuntimeError("boom"))
        assert quiet_session.phase == GamePhase.ERROR
        assert recording_hud.errors == ["Game Loop Error: boom"]
        assert recording_hud.last.screen_visible == ScreenVisibility.ERROR


class TestTick:

    def test_distance_score_and_frames_advance(self, quiet_session):
        for _ in range(10):
            quiet_session.update()
        assert quiet_session.distance == 10
        assert quiet_session.frames == 10
        assert quiet_session.score == pytest.approx(10 * Progression.SCORE_PER_TICK)

    def test_hud_pushed_every_tick(self, quiet_session, recording_hud):
        before = len(recording_hud.snapshots)
        for _ in range(3):
            quiet_session.update()
        assert len(recording_hud.snapshots) == before + 3

    def test_sixty_one_ticks_spawn_two_enemies(self, recording_hud, make_rng):
        session = GameSession(
            hud=recording_hud,
            spawn_manager=SpawnManager(rng=make_rng(0.5), spawn_chance=1.0),
        )
        session.start()
        for _ in range(61):
            session.update()
        assert len(session.enemies) == 2

    def test_enemy_contact_reaches_hud(self, quiet_session, recording_hud):
        quiet_session.player = Player(400, 316)
        quiet_session.enemies.append(EnemyDonut(x=400, y=330, speed=4))

        quiet_session.update()

        assert quiet_session.player.health == 80
        assert quiet_session.enemies == []
        assert recording_hud.last.health == 80

    def test_kill_adds_score(self, quiet_session):
        quiet_session.enemies.append(EnemyDonut(x=500, y=330, speed=0))
        quiet_session.player.projectiles.append(Projectile(510, 350, 0, 0))
        quiet_session.update()
        assert int(quiet_session.score) == 100

    def test_release_rearms_trigger(self, quiet_session):
        quiet_session.update(Controls(shoot=True))
        quiet_session.update(Controls(shoot=True))
        assert len(quiet_session.player.projectiles) == 1

        quiet_session.handle_action_released("shoot")
        quiet_session.update(Controls(shoot=True))
        assert len(quiet_session.player.projectiles) == 2

    def test_other_releases_ignored(self, quiet_session):
        quiet_session.player.can_shoot = False
        quiet_session.handle_action_released("left")
        assert not quiet_session.player.can_shoot


class TestBossPhase:

    def test_trigger_past_threshold(self, quiet_session, recording_hud):
        trigger_boss(quiet_session)
        assert quiet_session.boss.active
        assert recording_hud.last.boss_bar_visible
        assert recording_hud.last.boss_health_percent == 100.0

    def test_not_triggered_at_threshold(self, quiet_session):
        quiet_session.distance = Progression.BOSS_DISTANCE - 1
        quiet_session.update()
        assert quiet_session.phase == GamePhase.PLAYING

    def test_boss_activates_exactly_once(self, quiet_session):
        with patch.object(EnemyBoss, "activate", autospec=True) as activate:
            quiet_session.distance = Progression.BOSS_DISTANCE
            for _ in range(5):
                quiet_session.update()
        activate.assert_called_once()

    def test_no_spawning_during_boss(self, recording_hud, make_rng):
        session = GameSession(
            hud=recording_hud,
            spawn_manager=SpawnManager(rng=make_rng(0.0), spawn_chance=1.0),
        )
        session.start()
        session.enemies.clear()
        session.frames = 1
        trigger_boss(session)
        for _ in range(120):
            session.update()
        assert session.enemies == []

    def test_background_freezes_during_boss(self, quiet_session):
        trigger_boss(quiet_session)
        x = quiet_session.background.x
        quiet_session.update()
        assert quiet_session.background.x == x

    def test_victory_when_boss_health_hits_zero(self, quiet_session, recording_hud):
        trigger_boss(quiet_session)
        quiet_session.boss.health = 0
        quiet_session.update()
        assert quiet_session.phase == GamePhase.VICTORY
        assert recording_hud.last.screen_visible == ScreenVisibility.VICTORY
        assert recording_hud.last.boss_health_percent == 0.0

    def test_mutual_lethality_is_game_over(self, quiet_session):
        trigger_boss(quiet_session)
        quiet_session.boss.health = 0
        quiet_session.player.health = 0
        quiet_session.update()
        assert quiet_session.phase == GamePhase.GAMEOVER

    def test_terminal_phase_stops_ticking(self, quiet_session):
        quiet_session.player.health = 0
        quiet_session.update()
        frames = quiet_session.frames
        quiet_session.update()
        assert quiet_session.frames == frames


class TestDraw:

    def test_draw_order(self, quiet_session, draw_manager):
        quiet_session.enemies.append(EnemyDonut(x=500, speed=3))
        quiet_session.draw(draw_manager)

        commands = draw_manager.commands
        assert commands[0][0] == "clear"
        # background fill, player sprite, enemy fallback
        assert [c[0] for c in commands[1:]] == ["rect", "rect", "rect"]
        assert commands[2][2] == quiet_session.player.color
        assert commands[3][2] == quiet_session.enemies[0].color

    def test_boss_drawn_only_when_active(self, quiet_session, draw_manager):
        quiet_session.draw(draw_manager)
        count_before = len(draw_manager.commands)

        trigger_boss(quiet_session)
        quiet_session.draw(draw_manager)

        assert len(draw_manager.commands) == count_before + 1
        assert draw_manager.commands[-1][2] == quiet_session.boss.color
