"""Display test double."""

from countdown_hud.mock.memory_display import InMemoryDisplay

__all__ = ["InMemoryDisplay"]
