"""
conftest.py
-----------
Shared pytest configuration and fixtures for Donut Dash tests.

Contains:
- A global pygame mock so the suite runs headless
- Session, HUD and random-source fixtures
- Pytest configuration and hooks
"""

import os
import sys
from unittest.mock import MagicMock

import pytest

# Add the repo root to the path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Mock pygame globally before any imports that might use it
mock_pygame = MagicMock()
sys.modules["pygame"] = mock_pygame


class MockPygameError(Exception):
    """Stands in for pygame.error so `except pygame.error` works."""


mock_pygame.error = MockPygameError

# Mock pygame constants
mock_pygame.QUIT = 256
mock_pygame.KEYDOWN = 768
mock_pygame.KEYUP = 769
mock_pygame.MOUSEBUTTONDOWN = 1025
mock_pygame.WINDOWFOCUSLOST = 32784
mock_pygame.SRCALPHA = 65536

mock_pygame.K_RETURN = 13
mock_pygame.K_SPACE = 32
mock_pygame.K_a = 97
mock_pygame.K_d = 100
mock_pygame.K_s = 115
mock_pygame.K_w = 119
mock_pygame.K_RIGHT = 1073741903
mock_pygame.K_LEFT = 1073741904
mock_pygame.K_DOWN = 1073741905
mock_pygame.K_UP = 1073741906


from donut_dash.graphics.draw_manager import DrawManager  # noqa: E402
from donut_dash.scenes.game.game_session import GameSession  # noqa: E402
from donut_dash.systems.entity_management.spawn_manager import SpawnManager  # noqa: E402


# ===========================================================
# Test Doubles
# ===========================================================

class FixedRandom:
    """random.Random stand-in that always returns the same value."""

    def __init__(self, value=0.5):
        self.value = value

    def random(self):
        return self.value


class RecordingHud:
    """UI sink that keeps every push for later assertions."""

    def __init__(self):
        self.snapshots = []
        self.errors = []

    def push(self, snapshot):
        self.snapshots.append(snapshot)

    def show_error(self, message):
        self.errors.append(message)

    @property
    def last(self):
        return self.snapshots[-1]


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture
def make_rng():
    """Factory for fixed random sources: make_rng(0.25).random() == 0.25."""
    return FixedRandom


@pytest.fixture
def recording_hud():
    return RecordingHud()


@pytest.fixture
def draw_manager():
    """Real DrawManager with no images loaded; its queue is inspectable."""
    return DrawManager()


@pytest.fixture
def quiet_session(recording_hud):
    """Started session that never spawns enemies."""
    spawner = SpawnManager(rng=FixedRandom(0.5), spawn_chance=0.0)
    session = GameSession(hud=recording_hud, spawn_manager=spawner)
    session.start()
    return session


@pytest.fixture
def mock_draw_manager():
    """Mock for DrawManager with no images available."""
    draw_manager = MagicMock()
    draw_manager.has_image.return_value = False
    return draw_manager


@pytest.fixture
def key_event():
    """Factory for keyboard events: key_event(pygame.KEYDOWN, pygame.K_LEFT)."""
    def _make(event_type, key):
        event = MagicMock()
        event.type = event_type
        event.key = key
        return event
    return _make


# ===========================================================
# Pytest configuration
# ===========================================================

def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Anything not marked integration counts as a unit test."""
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)
