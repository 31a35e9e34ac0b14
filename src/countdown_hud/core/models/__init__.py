"""Pydantic models for configuration, events, and countdown state."""
from countdown_hud.core.models.config import CreditsConfig, DisplayConfig, HudConfig, SystemConfig
from countdown_hud.core.models.event import Event
from countdown_hud.core.models.state import CountdownFrame, TimerOptions, TimerPhase

__all__ = [
    "HudConfig",
    "DisplayConfig",
    "CreditsConfig",
    "SystemConfig",
    "Event",
    "CountdownFrame",
    "TimerOptions",
    "TimerPhase",
]
