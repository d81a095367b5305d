"""
background_manager.py
---------------------
Horizontally scrolling backdrop.

Provides:
- Constant-speed leftward scroll, paused on request
- Seamless tiling by drawing the image twice side by side
- Solid fill when the background image is unavailable

Purely cosmetic: the background never takes part in collisions.
"""

from donut_dash.core.runtime.game_settings import Display, BackgroundSettings


class Background:
    """Single scrolling background layer."""

    __slots__ = ("x", "width", "height", "speed")

    def __init__(self, width=None, speed=None):
        """
        Args:
            width: Tile width (defaults to the surface width)
            speed: Scroll speed per tick
        """
        self.x = 0
        self.width = width if width is not None else Display.WIDTH
        self.height = Display.HEIGHT
        self.speed = speed if speed is not None else BackgroundSettings.SCROLL_SPEED

    def update(self, scrolling=True):
        """
        Scroll one tick.

        Args:
            scrolling: False freezes the backdrop (e.g. during the boss fight)
        """
        if not scrolling:
            return

        self.x -= self.speed
        if self.x <= -self.width:
            self.x = 0

    def draw(self, draw_manager):
        """Tile the image twice, or fill the whole surface if it is missing."""
        if draw_manager.has_image("bg"):
            draw_manager.draw_image("bg", (self.x, 0, self.width, self.height))
            draw_manager.draw_image("bg", (self.x + self.width, 0, self.width, self.height))
        else:
            draw_manager.fill_rect((0, 0, Display.WIDTH, Display.HEIGHT), BackgroundSettings.FALLBACK_COLOR)
