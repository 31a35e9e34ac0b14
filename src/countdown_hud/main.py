"""countdown-hud — application entry point (NiceGUI composition root).

Wires together: Config → EventBus → CountdownTimer → HostBridge → UI.
NiceGUI owns the event loop; ``app.on_startup`` / ``app.on_shutdown``
handle lifecycle.
"""

from __future__ import annotations

import logging as _logging

from nicegui import app, ui

from countdown_hud.config.config_manager import load_config
from countdown_hud.core.countdown import CountdownTimer
from countdown_hud.core.event_bus import EventBus
from countdown_hud.core.host_bridge import HostBridge
from countdown_hud.log_config.logger import setup_logging
from countdown_hud.ui.layout import HudLayout
from countdown_hud.ui.widget import NiceGUIDisplay

_log = _logging.getLogger(__name__)


def main() -> None:
    """Synchronous entry point — bootstraps and starts NiceGUI."""

    setup_logging(log_dir=None)
    config = load_config()
    setup_logging(config.system.log_level, config.system.log_dir)
    _log.info("Starting countdown-hud")

    bus = EventBus(queue_size=config.system.event_bus_queue_size)
    display = NiceGUIDisplay()
    timer = CountdownTimer(config.display)

    layout = HudLayout(display=display, event_bus=bus, config=config)
    layout.setup_page()

    bridge: HostBridge | None = None

    async def on_startup() -> None:
        nonlocal bridge
        await bus.start()
        bridge = HostBridge(bus, timer, display)
        _log.info("countdown-hud running on http://localhost:%d", config.system.webui_port)

    async def on_shutdown() -> None:
        await bus.drain()
        if bridge is not None:
            bridge.close()
        await bus.stop()
        _log.info("countdown-hud stopped")

    app.on_startup(on_startup)
    app.on_shutdown(on_shutdown)

    ui.run(
        port=config.system.webui_port,
        title="Countdown HUD",
        reload=False,
        show=False,
    )


if __name__ == "__main__":
    main()
