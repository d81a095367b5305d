"""
test_frame_scheduler.py
-----------------------
Continuation control and fault containment.
"""

from unittest.mock import MagicMock

import pytest

from donut_dash.core.runtime.frame_scheduler import FrameScheduler
from donut_dash.core.runtime.game_state import GamePhase
from donut_dash.scenes.game.game_session import GameSession


@pytest.fixture
def scheduler(quiet_session, draw_manager):
    sched = FrameScheduler(quiet_session, draw_manager)
    sched.request_frame()
    return sched


class TestScheduling:

    def test_no_frame_without_request(self, quiet_session, draw_manager):
        sched = FrameScheduler(quiet_session, draw_manager)
        assert sched.run_frame() is False
        assert quiet_session.frames == 0

    def test_frame_runs_tick_and_draw(self, scheduler, quiet_session, draw_manager):
        assert scheduler.run_frame() is True
        assert quiet_session.frames == 1
        assert draw_manager.commands[0][0] == "clear"

    def test_keeps_requesting_while_active(self, scheduler, quiet_session):
        for _ in range(5):
            assert scheduler.run_frame()
        assert scheduler.pending
        assert quiet_session.frames == 5

    def test_stops_after_terminal_phase(self, scheduler, quiet_session):
        quiet_session.player.health = 0

        assert scheduler.run_frame() is True
        assert quiet_session.phase == GamePhase.GAMEOVER
        assert not scheduler.pending
        assert scheduler.run_frame() is False

    def test_inactive_session_consumes_request(self, recording_hud, draw_manager):
        session = GameSession(hud=recording_hud)
        sched = FrameScheduler(session, draw_manager)
        sched.request_frame()

        assert sched.run_frame() is False
        assert not sched.pending

    def test_start_cancels_and_resets(self, scheduler, quiet_session):
        for _ in range(3):
            scheduler.run_frame()
        quiet_session.player.health = 0
        scheduler.run_frame()

        scheduler.start()

        assert scheduler.pending
        assert quiet_session.phase == GamePhase.PLAYING
        assert quiet_session.frames == 0


class TestFaults:

    def test_tick_error_moves_session_to_error(self, recording_hud, draw_manager):
        spawner = MagicMock()
        spawner.maybe_spawn.side_effect = RuntimeError("boom")
        session = GameSession(hud=recording_hud, spawn_manager=spawner)
        sched = FrameScheduler(session, draw_manager)
        sched.start()

        assert sched.run_frame() is False

        assert session.phase == GamePhase.ERROR
        assert recording_hud.errors == ["Game Loop Error: boom"]
        assert not sched.pending
        assert draw_manager.commands == []

    def test_draw_error_is_contained(self, scheduler, quiet_session):
        scheduler.draw_manager = MagicMock()
        scheduler.draw_manager.clear.side_effect = ValueError("bad color")

        assert scheduler.run_frame() is False
        assert quiet_session.phase == GamePhase.ERROR
        assert scheduler.run_frame() is False

    def test_restart_after_error(self, scheduler, quiet_session):
        quiet_session.fail(RuntimeError("x"))
        scheduler.cancel()

        scheduler.start()

        assert scheduler.run_frame() is True
        assert quiet_session.phase == GamePhase.PLAYING
