"""
game_state.py
-------------
Plain value types passed between the session, the input layer and the HUD.

Nothing here imports pygame, so the simulation can run headless.
"""

from dataclasses import dataclass
from enum import Enum


# ===========================================================
# Session Phase
# ===========================================================
class GamePhase(Enum):
    """Top-level session mode controlling which subsystems run."""
    START = "start"
    PLAYING = "playing"
    BOSS = "boss"
    GAMEOVER = "gameover"
    VICTORY = "victory"
    ERROR = "error"

    @property
    def is_active(self) -> bool:
        """True while frames should keep being scheduled."""
        return self in (GamePhase.PLAYING, GamePhase.BOSS)


class ScreenVisibility(Enum):
    """Which full-screen overlay the HUD shows."""
    NONE = "none"
    START = "start"
    GAMEOVER = "gameover"
    VICTORY = "victory"
    ERROR = "error"


_PHASE_SCREENS = {
    GamePhase.START: ScreenVisibility.START,
    GamePhase.GAMEOVER: ScreenVisibility.GAMEOVER,
    GamePhase.VICTORY: ScreenVisibility.VICTORY,
    GamePhase.ERROR: ScreenVisibility.ERROR,
}


def screen_for_phase(phase: GamePhase) -> ScreenVisibility:
    return _PHASE_SCREENS.get(phase, ScreenVisibility.NONE)


# ===========================================================
# Input Snapshot
# ===========================================================
@dataclass(frozen=True)
class Controls:
    """Held state of every gameplay action for one tick."""
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    shoot: bool = False


NO_INPUT = Controls()


# ===========================================================
# HUD Snapshot
# ===========================================================
@dataclass(frozen=True)
class HudSnapshot:
    """
    Everything the HUD needs to redraw itself.

    Attributes:
        score: Floored score
        health: Player health clamped at 0
        boss_health_percent: Boss health in [0, 100]
        screen_visible: Overlay screen to show
        boss_bar_visible: Whether the boss health bar is revealed
    """
    score: int
    health: int
    boss_health_percent: float
    screen_visible: ScreenVisibility = ScreenVisibility.NONE
    boss_bar_visible: bool = False
