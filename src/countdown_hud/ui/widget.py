"""NiceGUIDisplay — renders countdown frames into NiceGUI labels.

Frames are applied on the NiceGUI event loop (the event bus dispatches
there), so no cross-thread marshalling is needed.  Every connected client
binds its own label; all bound labels show the same frame.
"""

from __future__ import annotations

import logging
from typing import Any

from countdown_hud.core.interfaces.display import DisplayInterface
from countdown_hud.core.models.state import CountdownFrame

_log = logging.getLogger(__name__)

CRITICAL_CLASS = "critical"


class NiceGUIDisplay(DisplayInterface):
    """Applies frames to every bound ``ui.label``.

    The last frame is remembered so a client that connects mid-countdown
    immediately shows the current state.

    Typical lifecycle::

        display = NiceGUIDisplay()
        # Later, inside @ui.page('/'):
        label = ui.label().classes("hud-label")
        display.bind_label(label)
    """

    def __init__(self) -> None:
        self._labels: set[Any] = set()
        self._last_frame: CountdownFrame | None = None

    @property
    def label_count(self) -> int:
        return len(self._labels)

    def bind_label(self, label: Any) -> None:
        """Bind a client's label and render the current frame into it."""
        self._labels.add(label)
        if self._last_frame is not None:
            self._apply(label, self._last_frame)
        _log.debug("NiceGUIDisplay bound label (total=%d)", len(self._labels))

    def unbind_label(self, label: Any) -> None:
        """Remove a label binding (call on client disconnect)."""
        self._labels.discard(label)
        _log.debug("NiceGUIDisplay unbound label (total=%d)", len(self._labels))

    # ------------------------------------------------------------------
    # DisplayInterface implementation
    # ------------------------------------------------------------------

    def show_frame(self, frame: CountdownFrame) -> None:
        self._last_frame = frame
        self._for_each(lambda label: self._apply(label, frame))

    def reset_animation(self) -> None:
        self._for_each(lambda label: label.classes(remove=CRITICAL_CLASS))

    def clear(self) -> None:
        self._last_frame = None

        def _blank(label: Any) -> None:
            label.text = ""
            label.classes(remove=CRITICAL_CLASS)

        self._for_each(_blank)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _apply(label: Any, frame: CountdownFrame) -> None:
        label.text = frame.text
        label.style(f"color: {frame.color}")
        if frame.critical:
            label.classes(add=CRITICAL_CLASS)
        else:
            label.classes(remove=CRITICAL_CLASS)

    def _for_each(self, action: Any) -> None:
        for label in list(self._labels):
            try:
                action(label)
            except RuntimeError:
                # Client already gone.
                self._labels.discard(label)
