"""Well-known event type constants.

Defined centrally so the UI shims, the host bridge, and any observers
reference the same strings.
"""

# --- Host calls (engine → widget) -----------------------------------------

COUNTDOWN_START = "host.countdown.start"
COUNTDOWN_UPDATE = "host.countdown.update"
COUNTDOWN_STOP = "host.countdown.stop"
COLORS_REQUESTED = "host.colors.requested"

# --- Output events (widget → display / host) ------------------------------

FRAME_RENDERED = "output.hud.rendered"
COLORS_REPORTED = "output.hud.colors"

