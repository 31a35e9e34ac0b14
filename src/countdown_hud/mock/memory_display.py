"""In-memory display implementation for testing and headless runs.

Stores the last rendered frame so tests can assert on it without
requiring NiceGUI or any UI event loop.
"""

from __future__ import annotations

from countdown_hud.core.interfaces.display import DisplayInterface
from countdown_hud.core.models.state import CountdownFrame


class InMemoryDisplay(DisplayInterface):
    """A lightweight display that records calls in memory.

    Attributes:
        last_frame: The last frame passed to :meth:`show_frame`, or ``None``.
        critical_class: Whether the critical style is currently applied.
        animation_resets: How many times :meth:`reset_animation` was called.
        call_log: Ordered list of ``(method_name, args)`` tuples.
    """

    def __init__(self) -> None:
        self.last_frame: CountdownFrame | None = None
        self.critical_class: bool = False
        self.animation_resets: int = 0
        self.call_log: list[tuple[str, dict[str, object]]] = []

    @property
    def text(self) -> str | None:
        return self.last_frame.text if self.last_frame else None

    @property
    def color(self) -> str | None:
        return self.last_frame.color if self.last_frame else None

    def show_frame(self, frame: CountdownFrame) -> None:
        self.last_frame = frame
        self.critical_class = frame.critical
        self.call_log.append(("show_frame", {"frame": frame}))

    def reset_animation(self) -> None:
        self.critical_class = False
        self.animation_resets += 1
        self.call_log.append(("reset_animation", {}))

    def clear(self) -> None:
        self.last_frame = None
        self.critical_class = False
        self.call_log.append(("clear", {}))
