"""Abstract interfaces for the rendering boundary."""

from countdown_hud.core.interfaces.display import DisplayInterface

__all__ = ["DisplayInterface"]
