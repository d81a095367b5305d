"""
main_loop.py
------------
pygame host loop: the display's per-frame callback.

Responsibilities:
- Initialize pygame, the window and every core system
- Pump events (quit, input, start/restart commands)
- Ask the FrameScheduler to run the pending frame
- Composite the game surface and the HUD, then flip at Display.FPS
- Warn about slow frames (throttled)
"""

import time

import pygame

from donut_dash.core.debug.debug_logger import DebugLogger
from donut_dash.core.runtime.frame_scheduler import FrameScheduler
from donut_dash.core.runtime.game_settings import Assets, Debug, Display
from donut_dash.core.runtime.game_state import GamePhase
from donut_dash.core.services.input_manager import InputManager
from donut_dash.graphics.draw_manager import DrawManager
from donut_dash.scenes.game.game_session import GameSession
from donut_dash.ui.hud_manager import HudManager
from donut_dash.ui.ui_loader import UILoader


class GameInitError(RuntimeError):
    """Fatal start-up fault: the session never starts."""


# Phases in which the start action or a click (re)starts the session
START_PHASES = (GamePhase.START, GamePhase.GAMEOVER, GamePhase.VICTORY, GamePhase.ERROR)


class MainLoop:
    """
    Owns the window and wires the session to pygame.

    Frames only advance while the scheduler has one pending; on terminal
    screens the last rendered game frame stays on screen under the overlay.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, spawn_manager=None, hud_layout="hud.yaml"):
        """
        Args:
            spawn_manager: Optional SpawnManager (e.g. seeded from the CLI)
            hud_layout: HUD layout filename under config/ui

        Raises:
            GameInitError: Display or HUD layout could not be created
        """
        DebugLogger.section("Initializing MainLoop")

        self._init_pygame()
        self._init_core_systems(hud_layout)
        self._init_session(spawn_manager)

    def _init_pygame(self):
        """Initialize pygame subsystems and window."""
        try:
            pygame.init()
            pygame.font.init()
            self.screen = pygame.display.set_mode((Display.WIDTH, Display.HEIGHT))
        except pygame.error as e:
            raise GameInitError(f"Error initializing game: {e}") from e

        pygame.display.set_caption(Display.CAPTION)
        self._set_window_icon()
        self.game_surface = pygame.Surface((Display.WIDTH, Display.HEIGHT))

        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"Window {Display.WIDTH}x{Display.HEIGHT} @ {Display.FPS} FPS")

    def _set_window_icon(self):
        try:
            icon = pygame.image.load(Assets.ICON)
            pygame.display.set_icon(icon)
        except (FileNotFoundError, pygame.error):
            DebugLogger.warn("Missing icon image", category="loading")

    def _init_core_systems(self, hud_layout):
        """Drawing, input and HUD."""
        self.draw_manager = DrawManager()
        self.draw_manager.load_assets()

        try:
            layout = UILoader().load(hud_layout)
        except (FileNotFoundError, ValueError) as e:
            raise GameInitError(f"Error initializing game: {e}") from e
        self.hud = HudManager(layout)

        self.input_manager = InputManager()

    def _init_session(self, spawn_manager):
        self.session = GameSession(hud=self.hud, spawn_manager=spawn_manager)
        self.scheduler = FrameScheduler(self.session, self.draw_manager)
        self.input_manager.on_release(self.session.handle_action_released)

        self.clock = pygame.time.Clock()
        self.running = True
        self._last_perf_warn_time = 0.0

        DebugLogger.init_entry("Main Loop Runtime")
        DebugLogger.init_sub("Game Clock Initialized", level=1)

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self):
        """Run until the window closes. Each iteration is one display refresh."""
        DebugLogger.section("Game Loop")

        while self.running:
            start = time.perf_counter()

            self._handle_events()
            if not self.running:
                break

            if self.scheduler.run_frame(self.input_manager.controls()):
                self.draw_manager.render(self.game_surface)

            self._present()
            self.input_manager.end_frame()

            self._check_slow_frame((time.perf_counter() - start) * 1000)
            self.clock.tick(Display.FPS)

        pygame.quit()
        DebugLogger.system("Pygame terminated")

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        clicked = False

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received", category="system")
                return

            if event.type == pygame.MOUSEBUTTONDOWN:
                clicked = True
            elif event.type == pygame.WINDOWFOCUSLOST:
                self.input_manager.reset()
            else:
                self.input_manager.handle_event(event)

        if self._start_requested(clicked):
            self.scheduler.start()

    def _start_requested(self, clicked: bool) -> bool:
        """The start action, or a mouse click, while a start/terminal screen is up."""
        if self.session.phase not in START_PHASES:
            return False
        return clicked or self.input_manager.action_pressed("start")

    # ===========================================================
    # Rendering
    # ===========================================================

    def _present(self):
        self.screen.blit(self.game_surface, (0, 0))
        self.hud.draw(self.screen)
        pygame.display.flip()

    def _check_slow_frame(self, frame_time_ms: float):
        """Log warning for slow frames (throttled to 1/second)."""
        if frame_time_ms <= Debug.FRAME_TIME_WARNING:
            return

        now = time.perf_counter()
        if now - self._last_perf_warn_time > 1.0:
            self._last_perf_warn_time = now
            DebugLogger.warn(f"Slow frame: {frame_time_ms:.2f}ms", category="performance")
