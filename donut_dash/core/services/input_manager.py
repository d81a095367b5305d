"""
input_manager.py
----------------
Event-driven keyboard input with named actions and edge detection.

Provides:
- Named actions (left, right, up, down, shoot, start) bound to key lists
- Held state snapshot for the simulation (Controls)
- Pressed edges for the current frame (the start command reads these)
- Release callbacks fired on the KEYUP event itself, between ticks
"""

import pygame

from donut_dash.core.debug.debug_logger import DebugLogger
from donut_dash.core.runtime.game_state import Controls


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "left": [pygame.K_LEFT, pygame.K_a],
    "right": [pygame.K_RIGHT, pygame.K_d],
    "up": [pygame.K_UP, pygame.K_w],
    "down": [pygame.K_DOWN, pygame.K_s],
    "shoot": [pygame.K_SPACE],
    "start": [pygame.K_RETURN],
}


class InputManager:
    """
    Tracks which actions are held and which changed this frame.

    Usage:
        input_manager.on_release(session.handle_action_released)

        for event in pygame.event.get():
            input_manager.handle_event(event)

        session.update(input_manager.controls())
        input_manager.end_frame()
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, key_bindings=None):
        """
        Args:
            key_bindings: {action: [key, ...]} (uses DEFAULT_KEY_BINDINGS if None)
        """
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS

        self._key_to_action = {}
        for action, keys in self.key_bindings.items():
            for key in keys:
                self._key_to_action[key] = action

        self._held_keys = {action: set() for action in self.key_bindings}
        self._pressed = set()
        self._release_listeners = []

        DebugLogger.init_entry("InputManager")

    def on_release(self, callback):
        """Register callback(action) invoked on every release edge."""
        self._release_listeners.append(callback)

    # ===========================================================
    # Event Handling
    # ===========================================================

    def handle_event(self, event) -> bool:
        """
        Feed one pygame event.

        Returns:
            bool: True if the event mapped to a bound action
        """
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return False

        action = self._key_to_action.get(event.key)
        if action is None:
            return False

        if event.type == pygame.KEYDOWN:
            self._press(action, event.key)
        else:
            self._release(action, event.key)
        return True

    def _press(self, action, key):
        keys = self._held_keys[action]
        if not keys:
            self._pressed.add(action)
            DebugLogger.action(f"{action} pressed")
        keys.add(key)

    def _release(self, action, key):
        keys = self._held_keys[action]
        if key not in keys:
            return
        keys.discard(key)

        # An action stays held while any of its keys is down
        if keys:
            return

        DebugLogger.action(f"{action} released")
        for callback in self._release_listeners:
            callback(action)

    # ===========================================================
    # Public API: Action Queries
    # ===========================================================

    def action_held(self, action: str) -> bool:
        return bool(self._held_keys.get(action))

    def action_pressed(self, action: str) -> bool:
        """Rising edge since the last end_frame()."""
        return action in self._pressed

    def controls(self) -> Controls:
        """Snapshot of held gameplay actions for one tick."""
        return Controls(
            left=self.action_held("left"),
            right=self.action_held("right"),
            up=self.action_held("up"),
            down=self.action_held("down"),
            shoot=self.action_held("shoot"),
        )

    # ===========================================================
    # Frame Boundaries
    # ===========================================================

    def end_frame(self):
        """Clear this frame's press edges. Held state persists."""
        self._pressed.clear()

    def reset(self):
        """
        Release every held key, e.g. when the window loses focus.

        The KEYUP for those keys never arrives, so release listeners are
        notified here instead.
        """
        for action, keys in self._held_keys.items():
            for key in list(keys):
                self._release(action, key)
        self.end_frame()
