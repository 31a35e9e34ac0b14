"""CountdownTimer — host-driven countdown state.

The host owns the clock: it calls :meth:`CountdownTimer.start` once, then
:meth:`CountdownTimer.update` every tick with the authoritative remaining
time.  The timer never schedules anything itself; the most recent
``update`` always wins.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from countdown_hud.core.colors import ComponentColor, to_component_color, to_display_color
from countdown_hud.core.models.config import DisplayConfig
from countdown_hud.core.models.state import CountdownFrame, TimerOptions, TimerPhase

_log = logging.getLogger(__name__)

_OPTION_ALIASES = ("lowTimeThreshold", "timerColor", "lowTimeColor")


def _to_seconds(value: Any) -> float:
    """Coerce a host-supplied number; anything unparsable becomes NaN."""
    if isinstance(value, bool):
        return math.nan
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        return math.nan


def format_mmss(seconds: float) -> str:
    """Format *seconds* as ``MM:SS``, clamping negatives (and NaN/inf) to zero."""
    t = seconds if math.isfinite(seconds) and seconds > 0 else 0.0
    minutes = math.floor(t / 60)
    secs = math.floor(t % 60)
    return f"{minutes:02d}:{secs:02d}"


class CountdownTimer:
    """State holder for one countdown widget.

    Args:
        display_config: Initial threshold, colours and default duration.
            Host options passed to :meth:`start` override them.
    """

    def __init__(self, display_config: DisplayConfig | None = None) -> None:
        cfg = display_config or DisplayConfig()
        self._default_duration = cfg.default_duration_seconds
        self._waiting_text = cfg.waiting_text

        self.low_time_threshold: float = cfg.low_time_threshold
        self.normal_color: str = to_display_color(cfg.timer_color)
        self.low_color: str = to_display_color(cfg.low_time_color)

        self._time_left: float | None = None
        self._phase = TimerPhase.IDLE
        # Set by update(), cleared by start(); stop() leaves it alone.
        self._has_update = False

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def phase(self) -> TimerPhase:
        return self._phase

    @property
    def is_running(self) -> bool:
        return self._phase is TimerPhase.LIVE

    @property
    def time_left(self) -> float | None:
        """Raw remaining time as last pushed (not clamped)."""
        return self._time_left

    @property
    def is_critical(self) -> bool:
        """``time_left <= low_time_threshold`` once the host has pushed a value.

        A fresh :meth:`start` clears it until the next :meth:`update`.
        """
        if not self._has_update or self._time_left is None:
            return False
        return self._time_left <= self.low_time_threshold

    @property
    def active_color(self) -> str:
        return self.low_color if self.is_critical else self.normal_color

    # ------------------------------------------------------------------
    # Host entry points
    # ------------------------------------------------------------------

    def start(self, duration: Any, options_payload: str | dict[str, Any] | None = None) -> None:
        """Arm the countdown with *duration* seconds and optional JSON options.

        A non-numeric, non-finite or non-positive duration falls back to the
        configured default.  A malformed options payload is logged and
        ignored; the previous configuration stays in effect.  Within a
        well-formed payload each field is applied on its own, so one badly
        typed field does not discard the others.
        """
        self.stop()

        seconds = _to_seconds(duration)
        if not math.isfinite(seconds) or seconds <= 0:
            seconds = self._default_duration
        self._time_left = seconds
        self._has_update = False

        if options_payload:
            self._apply_options(options_payload)

        self._phase = TimerPhase.ARMED
        _log.debug("Countdown armed: %.1fs (threshold=%s)", seconds, self.low_time_threshold)

    def update(self, seconds: Any) -> None:
        """Overwrite the remaining time with the host's value."""
        self._time_left = _to_seconds(seconds)
        self._has_update = True
        self._phase = TimerPhase.LIVE

    def stop(self) -> None:
        """Mark the countdown as no longer running.

        The last value, colour and critical state stay as they are.
        """
        if self._phase is not TimerPhase.IDLE:
            _log.debug("Countdown stopped in phase %s", self._phase.value)
        self._phase = TimerPhase.IDLE

    # ------------------------------------------------------------------
    # Display projection
    # ------------------------------------------------------------------

    def render(self) -> CountdownFrame:
        """Project the current state into a :class:`CountdownFrame`."""
        if self._time_left is None:
            text = self._waiting_text
        else:
            text = format_mmss(self._time_left)
        return CountdownFrame(
            text=text,
            color=self.active_color,
            critical=self.is_critical,
            phase=self._phase,
        )

    def component_colors(self) -> dict[str, ComponentColor]:
        """Current colours in host-native form (for reporting back to the host)."""
        return {
            "timerColor": to_component_color(self.normal_color),
            "lowTimeColor": to_component_color(self.low_color),
        }

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _apply_options(self, payload: Any) -> None:
        try:
            raw = json.loads(payload) if isinstance(payload, (str, bytes)) else payload
        except ValueError as exc:
            _log.error("Invalid countdown options %r: %s", payload, exc)
            return
        if not isinstance(raw, Mapping):
            _log.error("Invalid countdown options %r: expected a JSON object", payload)
            return

        for alias in _OPTION_ALIASES:
            if alias not in raw:
                continue
            try:
                opts = TimerOptions.model_validate({alias: raw[alias]})
            except (ValidationError, OverflowError) as exc:
                _log.error("Ignoring countdown option %s=%r: %s", alias, raw[alias], exc)
                continue
            self._apply_option(alias, opts)

    def _apply_option(self, alias: str, opts: TimerOptions) -> None:
        if alias == "lowTimeThreshold":
            # An explicit null moves the threshold down to zero.
            threshold = opts.low_time_threshold
            self.low_time_threshold = 0.0 if threshold is None else threshold
        elif alias == "timerColor":
            if opts.timer_color not in (None, ""):
                self.normal_color = to_display_color(opts.timer_color)
        elif opts.low_time_color not in (None, ""):
            self.low_color = to_display_color(opts.low_time_color)
