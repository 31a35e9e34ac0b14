"""HostBridge — wires host events to one countdown timer and its display.

Every host call (start / update / stop) arrives as an event on the bus.
The bridge applies it to the :class:`CountdownTimer`, pushes the resulting
frame to the display, and announces it with ``output.hud.rendered``.
"""

from __future__ import annotations

import logging as _logging

from countdown_hud.core import events
from countdown_hud.core.countdown import CountdownTimer
from countdown_hud.core.event_bus import EventBus
from countdown_hud.core.interfaces.display import DisplayInterface
from countdown_hud.core.models.event import Event
from countdown_hud.log_config.logger import ContextualLogger

_log = _logging.getLogger(__name__)


class HostBridge:
    """Translates host events into countdown state changes and frames.

    Constructing the bridge shows the waiting placeholder and resets the
    critical animation, mirroring a fresh page load.

    Args:
        event_bus: The global event bus.
        timer: The countdown state holder this widget owns.
        display: Where frames are rendered.
        name: Widget name used as logging context.
    """

    def __init__(
        self,
        event_bus: EventBus,
        timer: CountdownTimer,
        display: DisplayInterface,
        name: str = "countdown",
    ) -> None:
        self._bus = event_bus
        self._timer = timer
        self._display = display
        self._log = ContextualLogger(_log, widget=name)

        self._sub_ids = [
            self._bus.subscribe(events.COUNTDOWN_START, self._on_start),
            self._bus.subscribe(events.COUNTDOWN_UPDATE, self._on_update),
            self._bus.subscribe(events.COUNTDOWN_STOP, self._on_stop),
            self._bus.subscribe(events.COLORS_REQUESTED, self._on_colors_requested),
        ]

        self._display.reset_animation()
        self._display.show_frame(self._timer.render())

    @property
    def timer(self) -> CountdownTimer:
        return self._timer

    def close(self) -> None:
        """Unsubscribe from the bus."""
        for sub_id in self._sub_ids:
            self._bus.unsubscribe(sub_id)
        self._sub_ids.clear()

    # ------------------------------------------------------------------
    # Event handlers (run on the event loop)
    # ------------------------------------------------------------------

    async def _on_start(self, event: Event) -> None:
        self._timer.start(event.payload.get("duration"), event.payload.get("options"))
        self._log.info(
            "Countdown started: %s",
            self._timer.render().text,
        )
        self._display.reset_animation()
        await self._push_frame()

    async def _on_update(self, event: Event) -> None:
        self._timer.update(event.payload.get("seconds"))
        self._log.debug("Host update: %s", event.payload.get("seconds"))
        await self._push_frame()

    async def _on_stop(self, _event: Event) -> None:
        self._timer.stop()
        self._log.info("Countdown stopped")

    async def _on_colors_requested(self, _event: Event) -> None:
        colors = self._timer.component_colors()
        await self._bus.publish(
            events.COLORS_REPORTED,
            {key: color.model_dump() for key, color in colors.items()},
        )

    async def _push_frame(self) -> None:
        frame = self._timer.render()
        self._display.show_frame(frame)
        await self._bus.publish(events.FRAME_RENDERED, frame.model_dump(mode="json"))
