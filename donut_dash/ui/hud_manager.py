"""
hud_manager.py
--------------
UI sink for the session: score, health, boss bar and full-screen overlays.

Responsibilities
----------------
- Receive HudSnapshot pushes (once per tick and on reset/start).
- Hold the error message surfaced when a frame fails.
- Draw the HUD on top of the game surface using the YAML layout.
"""

import pygame

from donut_dash.core.debug.debug_logger import DebugLogger
from donut_dash.core.runtime.game_settings import Display
from donut_dash.core.runtime.game_state import HudSnapshot, ScreenVisibility


class HudManager:
    """Keeps the latest snapshot and renders it each display frame."""

    def __init__(self, layout):
        """
        Args:
            layout (dict): Parsed hud.yaml (see UILoader)
        """
        self.layout = layout
        self.snapshot = HudSnapshot(score=0, health=0, boss_health_percent=100.0,
                                    screen_visible=ScreenVisibility.START)
        self.error_message = None
        self._fonts = {}

        DebugLogger.init_entry("HudManager")

    # ===========================================================
    # Sink API
    # ===========================================================

    def push(self, snapshot: HudSnapshot):
        if snapshot.screen_visible != self.snapshot.screen_visible:
            DebugLogger.state(f"Screen -> {snapshot.screen_visible.name}", category="ui")
        if snapshot.screen_visible != ScreenVisibility.ERROR:
            self.error_message = None
        self.snapshot = snapshot

    def show_error(self, message: str):
        self.error_message = message
        DebugLogger.state("Showing error screen", category="ui")

    @property
    def overlay_visible(self) -> bool:
        return self.snapshot.screen_visible != ScreenVisibility.NONE

    def boss_fill_width(self) -> int:
        """Pixel width of the boss bar fill for the current snapshot."""
        width = self.layout["boss_bar"]["rect"][2]
        return int(width * self.snapshot.boss_health_percent / 100)

    # ===========================================================
    # Rendering
    # ===========================================================

    def draw(self, surface):
        """Draw counters, the boss bar and any overlay screen."""
        snap = self.snapshot
        colors = self.layout["colors"]

        self._text(surface, f"{self.layout['score']['label']}: {snap.score}",
                   self.layout["score"]["pos"], colors["text"])
        self._text(surface, f"{self.layout['health']['label']}: {snap.health}",
                   self.layout["health"]["pos"], colors["text"])

        if snap.boss_bar_visible:
            self._draw_boss_bar(surface)

        if self.overlay_visible:
            self._draw_screen(surface, snap.screen_visible)

    def _draw_boss_bar(self, surface):
        cfg = self.layout["boss_bar"]
        colors = self.layout["colors"]
        x, y, w, h = cfg["rect"]

        pygame.draw.rect(surface, colors["boss_bar_back"], pygame.Rect(x, y, w, h))
        pygame.draw.rect(surface, colors["boss_bar_fill"], pygame.Rect(x, y, self.boss_fill_width(), h))
        pygame.draw.rect(surface, colors["boss_bar_frame"], pygame.Rect(x, y, w, h), 2)
        self._text(surface, cfg["label"], (x + w + 10, y - 4), colors["text"])

    def _draw_screen(self, surface, screen):
        screen_cfg = self.layout["screens"].get(screen.value, {})
        colors = self.layout["colors"]
        width, height = Display.WIDTH, Display.HEIGHT

        shade = pygame.Surface((width, height), pygame.SRCALPHA)
        shade.fill(colors["overlay"])
        surface.blit(shade, (0, 0))

        center_x = width // 2
        self._text(surface, screen_cfg.get("title", ""), (center_x, height // 2 - 60),
                   colors["text"], size_key="title_size", centered=True)
        self._text(surface, screen_cfg.get("subtitle", ""), (center_x, height // 2 + 10),
                   colors["text"], centered=True)

        hint = screen_cfg.get("hint")
        if hint:
            self._text(surface, hint, (center_x, height // 2 + 50), colors["text"], centered=True)

        if screen == ScreenVisibility.ERROR and self.error_message:
            self._text(surface, self.error_message, (center_x, height // 2 + 50),
                       colors["error"], centered=True)

    def _text(self, surface, text, pos, color, size_key="size", centered=False):
        if not text:
            return
        font = self._font(size_key)
        rendered = font.render(str(text), True, color)
        if centered:
            rect = rendered.get_rect(center=(int(pos[0]), int(pos[1])))
            surface.blit(rendered, rect)
        else:
            surface.blit(rendered, (int(pos[0]), int(pos[1])))

    def _font(self, size_key):
        if size_key not in self._fonts:
            font_cfg = self.layout["font"]
            self._fonts[size_key] = pygame.font.Font(font_cfg.get("name"), font_cfg[size_key])
        return self._fonts[size_key]
