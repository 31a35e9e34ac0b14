"""Core services: colour translation, countdown state, event plumbing."""

from countdown_hud.core.colors import ComponentColor, to_component_color, to_display_color
from countdown_hud.core.countdown import CountdownTimer
from countdown_hud.core.event_bus import EventBus
from countdown_hud.core.host_bridge import HostBridge

__all__ = [
    "ComponentColor",
    "CountdownTimer",
    "EventBus",
    "HostBridge",
    "to_component_color",
    "to_display_color",
]
