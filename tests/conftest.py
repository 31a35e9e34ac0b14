"""Shared pytest fixtures for countdown-hud tests."""

from __future__ import annotations

import pytest

from countdown_hud.core.event_bus import EventBus
from countdown_hud.core.models.config import DisplayConfig, HudConfig
from countdown_hud.mock.memory_display import InMemoryDisplay


@pytest.fixture
async def event_bus():
    """Provide a started EventBus that is stopped after the test."""
    bus = EventBus(queue_size=100)
    await bus.start()
    yield bus
    await bus.stop()


@pytest.fixture(scope="session")
def hud_config() -> HudConfig:
    """Session-scoped default config (no file I/O)."""
    return HudConfig()


@pytest.fixture
def display_config() -> DisplayConfig:
    """Display defaults with hex colours, so the reverse path is translatable."""
    return DisplayConfig(timer_color="#FFFFFF", low_time_color="#FF0000")


@pytest.fixture
def display() -> InMemoryDisplay:
    return InMemoryDisplay()
