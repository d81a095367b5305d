"""
test_enemy_boss.py
------------------
Boss script timing, aimed shots and health reporting.
"""

import math

import pytest

from donut_dash.core.runtime.game_settings import BossSettings, Display
from donut_dash.entities.bosses.enemy_boss import EnemyBoss
from donut_dash.entities.entity_state import BossPhase
from donut_dash.entities.player import Player


@pytest.fixture
def boss():
    b = EnemyBoss()
    b.activate()
    return b


@pytest.fixture
def player():
    return Player()


def enter_fully(boss, player):
    """Run the entry slide plus the tick that switches to IDLE."""
    ticks = (Display.WIDTH + BossSettings.SPAWN_OFFSET - boss.target_x) // BossSettings.ENTRY_SPEED
    for frame in range(ticks + 1):
        boss.update(player, frame)
    return ticks + 1


class TestActivation:

    def test_inactive_boss_does_nothing(self, player):
        boss = EnemyBoss()
        assert boss.update(player, 0) is None
        assert boss.x == Display.WIDTH + BossSettings.SPAWN_OFFSET

    def test_inactive_boss_is_not_drawn(self, mock_draw_manager):
        EnemyBoss().draw(mock_draw_manager)
        mock_draw_manager.draw_image.assert_not_called()


class TestScript:

    def test_entering_slides_to_target(self, boss, player):
        for frame in range(150):
            boss.update(player, frame)
        assert boss.x == boss.target_x
        assert boss.phase == BossPhase.ENTERING

        boss.update(player, 150)
        assert boss.phase == BossPhase.IDLE

    def test_idle_hovers_on_sine(self, boss, player):
        frame = enter_fully(boss, player)
        boss.update(player, frame)
        expected = boss.baseline_y + math.sin(frame * BossSettings.HOVER_FREQUENCY) * BossSettings.HOVER_AMPLITUDE
        assert boss.y == pytest.approx(expected)

    def test_fires_after_cooldown_then_returns_to_idle(self, boss, player):
        frame = enter_fully(boss, player)

        shots = [boss.update(player, frame + i) for i in range(BossSettings.ATTACK_COOLDOWN)]
        assert shots == [None] * BossSettings.ATTACK_COOLDOWN

        shot = boss.update(player, frame + BossSettings.ATTACK_COOLDOWN)
        assert shot is not None
        assert shot.is_enemy
        assert boss.phase == BossPhase.ATTACK
        assert boss.attack_timer == 0

        assert boss.update(player, frame + BossSettings.ATTACK_COOLDOWN + 1) is None
        assert boss.phase == BossPhase.IDLE

    def test_shot_aims_at_player(self, boss, player):
        boss.x, boss.y = 600, 200
        shot = boss.shoot_at(player)

        angle = math.atan2(player.y - boss.y, player.x - boss.x)
        assert shot.vx == pytest.approx(math.cos(angle) * BossSettings.SHOT_SPEED)
        assert shot.vy == pytest.approx(math.sin(angle) * BossSettings.SHOT_SPEED)
        assert (shot.x, shot.y) == (600, 200 + boss.height / 2)


class TestHealth:

    def test_percent_is_clamped(self, boss):
        boss.take_damage(400)
        assert boss.health_percent == pytest.approx(50.0)
        boss.take_damage(410)
        assert boss.health == -10
        assert boss.health_percent == 0.0

    def test_defeated_only_when_active(self):
        boss = EnemyBoss()
        boss.health = 0
        assert not boss.defeated
        boss.activate()
        assert boss.defeated
