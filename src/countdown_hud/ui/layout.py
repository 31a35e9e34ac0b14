"""Widget page — the surface the engine host embeds in its web browser.

Provides the ``@ui.page('/')`` route with:
* Transparent background, one centred countdown label
* ``window.startCountdown`` / ``window.updateTimer`` / ``window.stopCountdown``
  JS entry points that forward host calls to Python via ``emitEvent``
* Optional host-simulation controls in dev mode

and the ``@ui.page('/credits')`` route: a CSS-only scrolling credits roll
whose animation restarts every time the page loads.
"""

from __future__ import annotations

import logging as _logging
from typing import Any

from nicegui import ui

from countdown_hud.core import events
from countdown_hud.core.event_bus import EventBus
from countdown_hud.core.models.config import HudConfig
from countdown_hud.ui.widget import CRITICAL_CLASS, NiceGUIDisplay

_log = _logging.getLogger(__name__)

# NiceGUI event name → bus event type.
HOST_EVENTS: dict[str, str] = {
    "startCountdown": events.COUNTDOWN_START,
    "updateTimer": events.COUNTDOWN_UPDATE,
    "stopCountdown": events.COUNTDOWN_STOP,
    "requestColors": events.COLORS_REQUESTED,
}

_HEAD_STYLE = """
<style>
  body { background: transparent; margin: 0; overflow: hidden; }
  .hud-label { font-family: 'Courier New', monospace; font-weight: bold;
               text-shadow: 0 0 8px rgba(0, 0, 0, 0.8); }
  .hud-label.%(critical)s { animation: hud-pulse 1s ease-in-out infinite; }
  @keyframes hud-pulse {
    0%%, 100%% { transform: scale(1); opacity: 1; }
    50%% { transform: scale(1.1); opacity: 0.7; }
  }
</style>
"""

_HEAD_SCRIPT = """
<script>
  window.startCountdown = function (duration, optionsJson) {
    emitEvent('startCountdown', {duration: duration, options: optionsJson ?? null});
  };
  window.updateTimer = function (seconds) {
    emitEvent('updateTimer', {seconds: seconds});
  };
  window.stopCountdown = function () {
    emitEvent('stopCountdown', {});
  };
  window.requestColors = function () {
    emitEvent('requestColors', {});
  };
</script>
"""


_CREDITS_STYLE = """
<style>
  body { background: black; margin: 0; overflow: hidden; }
  .credits-viewport { position: fixed; inset: 0; overflow: hidden; color: white;
                      font-family: 'Courier New', monospace; }
  .credits-scroll { position: absolute; width: 100%%; text-align: center;
                    font-size: %(font_size)dpx;
                    animation: credits-scroll %(seconds)gs linear forwards; }
  .credits-title { font-size: 1.5em; font-weight: bold; margin-bottom: 1em; }
  @keyframes credits-scroll {
    from { transform: translateY(100vh); }
    to { transform: translateY(-100%%); }
  }
</style>
"""

CREDITS_ELEMENT_ID = "scroll-content"

# Clearing the animation and reading offsetHeight forces a reflow, so the
# roll starts from the bottom again when the page is reloaded.
CREDITS_RESET_JS = """
const content = document.getElementById('%s');
if (content) {
  content.style.animation = 'none';
  content.offsetHeight;
  content.style.animation = null;
}
console.log('Credits Loaded');
""" % CREDITS_ELEMENT_ID


def head_html() -> str:
    """Style + host entry-point shims injected into the page head."""
    return _HEAD_STYLE % {"critical": CRITICAL_CLASS} + _HEAD_SCRIPT


def credits_head_html(scroll_seconds: float, font_size: int = 32) -> str:
    """Style for the credits roll; one pass takes *scroll_seconds*."""
    return _CREDITS_STYLE % {"seconds": scroll_seconds, "font_size": font_size}


def event_payload(args: Any) -> dict[str, Any]:
    """Normalise ``emitEvent`` arguments into a bus payload dict."""
    if isinstance(args, dict):
        return args
    if isinstance(args, list) and args and isinstance(args[0], dict):
        return args[0]
    return {}


class HudLayout:
    """Builds the widget page and forwards host calls to the event bus.

    Args:
        display: The NiceGUI display to bind each client's label into.
        event_bus: The global event bus.
        config: Widget configuration.
    """

    def __init__(
        self,
        display: NiceGUIDisplay,
        event_bus: EventBus,
        config: HudConfig,
    ) -> None:
        self._display = display
        self._bus = event_bus
        self._config = config

    def setup_page(self) -> None:
        """Register the ``/`` and ``/credits`` routes."""

        @ui.page("/")
        def index():
            self._build_page()

        @ui.page("/credits")
        async def credits():
            await self._build_credits_page()

    def _build_page(self) -> None:
        ui.add_head_html(head_html())

        for js_name, event_type in HOST_EVENTS.items():
            ui.on(js_name, self._forwarder(js_name, event_type))

        with ui.column().classes("w-full items-center justify-center").style(
            "min-height: 100vh;"
        ):
            label = ui.label(self._config.display.waiting_text).classes("hud-label").style(
                f"font-size: {self._config.display.font_size}px;"
            )
            if self._config.system.dev_mode:
                self._build_dev_controls()

        self._display.bind_label(label)
        ui.context.client.on_disconnect(lambda: self._display.unbind_label(label))

    async def _build_credits_page(self) -> None:
        credits = self._config.credits
        ui.add_head_html(credits_head_html(credits.scroll_seconds, credits.font_size))

        with ui.element("div").classes("credits-viewport"):
            with ui.element("div").classes("credits-scroll").props(f"id={CREDITS_ELEMENT_ID}"):
                ui.label(credits.title).classes("credits-title")
                for line in credits.lines:
                    ui.label(line)

        await ui.context.client.connected()
        ui.run_javascript(CREDITS_RESET_JS)
        _log.info("Credits loaded (%d lines)", len(credits.lines))

    def _build_dev_controls(self) -> None:
        """Host-simulation controls for running without the engine."""
        with ui.row().classes("items-center"):
            seconds = ui.number("Seconds", value=self._config.display.default_duration_seconds)
            options = ui.input("Options JSON")
            ui.button(
                "Start",
                on_click=lambda: self._bus.publish(
                    events.COUNTDOWN_START,
                    {"duration": seconds.value, "options": options.value or None},
                ),
            )
            ui.button(
                "Update",
                on_click=lambda: self._bus.publish(
                    events.COUNTDOWN_UPDATE, {"seconds": seconds.value}
                ),
            )
            ui.button("Stop", on_click=lambda: self._bus.publish(events.COUNTDOWN_STOP))

    def _forwarder(self, js_name: str, event_type: str):
        async def _forward(e: Any) -> None:
            payload = event_payload(getattr(e, "args", None))
            _log.debug("Host call %s(%s)", js_name, payload)
            await self._bus.publish(event_type, payload)

        return _forward
