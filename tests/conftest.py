"""
conftest.py
-----------
Shared pytest configuration and fixtures for Cosmic Defender tests.

Contains:
- Headless SDL setup so pygame surfaces work without a display
- Common fixtures: config, seeded RNG, event recorder, started World
- Small helpers for placing entities at exact positions
"""

import os
import random

# Must be set before pygame is first imported
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from cosmic_defender.core.runtime.game_settings import GameConfig
from cosmic_defender.core.runtime.world import World
from cosmic_defender.core.services.event_manager import (
    EnemyDestroyedEvent,
    EventManager,
    GameOverEvent,
    GameStartedEvent,
    ScoreChangedEvent,
)
from cosmic_defender.core.services.input_state import InputState
from cosmic_defender.entities.bullet import Bullet
from cosmic_defender.entities.enemy import Enemy


WORLD_WIDTH = 400
WORLD_HEIGHT = 600


# ===========================================================
# Core Fixtures
# ===========================================================

@pytest.fixture
def config():
    """Default gameplay configuration."""
    return GameConfig()


@pytest.fixture
def rng():
    """Seeded random source for reproducible spawns and particles."""
    return random.Random(1234)


@pytest.fixture
def input_state():
    return InputState()


class EventRecorder:
    """Subscribes to every session event and keeps them in order."""

    EVENT_TYPES = (GameStartedEvent, ScoreChangedEvent, EnemyDestroyedEvent, GameOverEvent)

    def __init__(self, events: EventManager):
        self.received = []
        for event_type in self.EVENT_TYPES:
            events.subscribe(event_type, self.received.append)

    def of_type(self, event_type):
        return [e for e in self.received if isinstance(e, event_type)]


@pytest.fixture
def events():
    return EventManager()


@pytest.fixture
def recorder(events):
    return EventRecorder(events)


@pytest.fixture
def world(config, rng, input_state, events):
    """A 400x600 World still in the MENU state."""
    return World(config, width=WORLD_WIDTH, height=WORLD_HEIGHT,
                 input_state=input_state, events=events, rng=rng)


@pytest.fixture
def playing_world(world):
    """A 400x600 World with a freshly started session."""
    world.start()
    return world


# ===========================================================
# Test Helpers
# ===========================================================

def _place_enemy(world, x, y, difficulty=0.0):
    return world.enemies.spawn(Enemy(x, y, world.config, difficulty))


def _place_bullet(world, x, y):
    return world.bullets.spawn(Bullet(x, y, world.config))


@pytest.fixture
def place_enemy():
    """Append an enemy to a World at an exact position."""
    return _place_enemy


@pytest.fixture
def place_bullet():
    """Append a bullet to a World at an exact position."""
    return _place_bullet


# ===========================================================
# Pytest configuration
# ===========================================================

def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line("markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')")
    config.addinivalue_line("markers", "integration: marks tests that drive a whole World")
    config.addinivalue_line("markers", "render: marks tests that draw with pygame")
