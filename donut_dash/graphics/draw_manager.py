"""
draw_manager.py
---------------
Render adapter between the simulation and a pygame surface.

Responsibilities:
- Load and cache images; remember which assets are unavailable
- Queue draw primitives in emission order during session.draw()
- Render the queue onto a target surface
- Fall back to solid fills when an image is missing

Colors are RGB tuples (lists from config files are accepted).
Rectangles are anything indexable as (x, y, width, height).
"""

import math

import pygame

from donut_dash.core.debug.debug_logger import DebugLogger
from donut_dash.core.runtime.game_settings import Assets


def asset_paths():
    """Image keys drawn by the entities, resolved at call time."""
    return {
        "runner": Assets.RUNNER,
        "donut": Assets.DONUT,
        "boss": Assets.BOSS,
        "bg": Assets.BACKGROUND,
    }


class DrawManager:
    """Queues draw commands for one frame and renders them in order."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self):
        """Initialize draw manager with an empty queue."""
        self.images = {}
        self.commands = []
        DebugLogger.init_entry("DrawManager")

    # ===========================================================
    # Image Loading
    # ===========================================================

    def load_image(self, key, path):
        """
        Load and cache an image. A failed load is cached as None so every
        later draw of that key takes the solid-fill path.

        Args:
            key: Cache identifier
            path: File path to image

        Returns:
            bool: True if the image is available
        """
        try:
            img = pygame.image.load(path)
            if pygame.display.get_surface() is not None:
                img = img.convert_alpha()
        except (FileNotFoundError, pygame.error) as e:
            DebugLogger.warn(f"Missing image '{key}' at {path}: {e}", category="loading")
            img = None

        self.images[key] = img
        return img is not None

    def load_assets(self, paths=None):
        """Load every entity image. Returns the number actually available."""
        paths = paths or asset_paths()
        loaded = sum(1 for key, path in paths.items() if self.load_image(key, path))
        DebugLogger.init_sub(f"Assets ready: {loaded}/{len(paths)}")
        return loaded

    def has_image(self, key) -> bool:
        return self.images.get(key) is not None

    # ===========================================================
    # Queue Management
    # ===========================================================

    def clear(self, color=(0, 0, 0)):
        """Start a new frame: drop queued commands and clear to color."""
        self.commands.clear()
        self.commands.append(("clear", _color(color)))

    def fill_rect(self, rect, color):
        self.commands.append(("rect", _rect(rect), _color(color), 0))

    def outline_rect(self, rect, color, width=1):
        self.commands.append(("rect", _rect(rect), _color(color), width))

    def draw_circle(self, center, radius, color):
        self.commands.append(("circle", (center[0], center[1]), radius, _color(color)))

    def draw_image(self, key, rect, fallback_color=None, angle=0.0):
        """
        Queue an image scaled to rect, optionally rotated about its centre.

        Args:
            key: Image cache key
            rect: Target (x, y, width, height)
            fallback_color: Solid fill used (unrotated) when the image is missing
            angle: Clockwise rotation in radians
        """
        rect = _rect(rect)
        if not self.has_image(key):
            if fallback_color is not None:
                self.fill_rect(rect, fallback_color)
            return
        self.commands.append(("image", key, rect, angle))

    # ===========================================================
    # Rendering
    # ===========================================================

    def render(self, target_surface):
        """
        Execute the queued commands onto target_surface in order.

        Args:
            target_surface: pygame.Surface to draw on
        """
        for command in self.commands:
            kind = command[0]

            if kind == "clear":
                target_surface.fill(command[1])

            elif kind == "rect":
                _, (x, y, w, h), color, width = command
                pygame.draw.rect(target_surface, color, pygame.Rect(int(x), int(y), int(w), int(h)), width)

            elif kind == "circle":
                _, (cx, cy), radius, color = command
                pygame.draw.circle(target_surface, color, (int(cx), int(cy)), int(radius))

            elif kind == "image":
                _, key, rect, angle = command
                self._blit_image(target_surface, self.images[key], rect, angle)

            else:
                DebugLogger.warn(f"Unknown draw command: {kind}", category="render")

    def _blit_image(self, target_surface, image, rect, angle):
        x, y, w, h = rect
        scaled = pygame.transform.scale(image, (int(w), int(h)))

        if not angle:
            target_surface.blit(scaled, (int(x), int(y)))
            return

        # pygame rotates counter-clockwise in degrees
        rotated = pygame.transform.rotate(scaled, -math.degrees(angle))
        center = (x + w / 2, y + h / 2)
        target_surface.blit(rotated, rotated.get_rect(center=(int(center[0]), int(center[1]))))


# ===========================================================
# Normalization
# ===========================================================

def _rect(rect):
    return (rect[0], rect[1], rect[2], rect[3])


def _color(color):
    return tuple(color)
