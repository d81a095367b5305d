"""
frame_scheduler.py
------------------
Per-frame continuation control for the session.

The host display loop calls run_frame() once per refresh. A frame only runs
when one has been requested, and a new one is requested only while the
session stays in PLAYING or BOSS. Any exception raised during the tick or
the draw is caught here, logged, and moves the session to ERROR; no further
frames are requested until start() is called again.
"""

from donut_dash.core.debug.debug_logger import DebugLogger
from donut_dash.core.runtime.game_state import NO_INPUT


class FrameScheduler:
    """Cooperative, single-threaded frame driver."""

    def __init__(self, session, draw_manager):
        """
        Args:
            session: GameSession to tick and draw
            draw_manager: Render adapter handed to session.draw()
        """
        self.session = session
        self.draw_manager = draw_manager
        self._pending = False

    # ===========================================================
    # Scheduling
    # ===========================================================
    @property
    def pending(self) -> bool:
        return self._pending

    def request_frame(self):
        self._pending = True

    def cancel(self):
        self._pending = False

    def start(self):
        """Cancel any pending frame, reset the session and schedule fresh."""
        self.cancel()
        self.session.start()
        self.request_frame()
        DebugLogger.state("Frame scheduling started", category="session")

    # ===========================================================
    # Frame Execution
    # ===========================================================
    def run_frame(self, controls=NO_INPUT) -> bool:
        """
        Run one tick + draw if a frame is pending and the session is active.

        Args:
            controls: Held input for this tick

        Returns:
            bool: True if a frame ran to completion
        """
        if not self._pending:
            return False
        self._pending = False

        if not self.session.is_active:
            return False

        try:
            self.session.update(controls)
            self.session.draw(self.draw_manager)
        except Exception as e:
            DebugLogger.fail(f"Frame {self.session.frames} failed: {type(e).__name__}: {e}", category="session")
            self.session.fail(e)
            return False

        if self.session.is_active:
            self.request_frame()
        else:
            DebugLogger.state(f"Scheduling stopped in {self.session.phase.name}", category="session")

        return True
