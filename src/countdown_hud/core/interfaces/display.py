"""Display abstraction (ABC).

The NiceGUI widget and the in-memory test double both implement this, so
the host bridge never depends on a UI toolkit.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from countdown_hud.core.models.state import CountdownFrame


class DisplayInterface(ABC):
    """Rendering surface for the countdown label.

    Implementations receive fully-resolved frames: the colour is already a
    CSS string produced by the colour translator.
    """

    @abstractmethod
    def show_frame(self, frame: CountdownFrame) -> None:
        """Show *frame*'s text in its colour, toggling the critical style."""

    @abstractmethod
    def reset_animation(self) -> None:
        """Drop the critical style so its animation restarts from scratch."""

    @abstractmethod
    def clear(self) -> None:
        """Blank the label."""
