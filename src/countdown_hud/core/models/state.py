"""Countdown state models: phase enum, host options, rendered frame."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TimerPhase(str, Enum):
    """Lifecycle of the countdown widget.

    There is no internal clock, so no phase ever expires on its own; every
    transition is caused by a host call.
    """

    IDLE = "idle"
    ARMED = "armed"
    LIVE = "live"


class TimerOptions(BaseModel):
    """Options document the host may send with ``startCountdown``.

    Field names follow the host's camelCase.  Unknown keys are ignored;
    colours stay raw here and are normalised by the countdown timer.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    low_time_threshold: float | None = Field(default=None, alias="lowTimeThreshold")
    timer_color: Any = Field(default=None, alias="timerColor")
    low_time_color: Any = Field(default=None, alias="lowTimeColor")


class CountdownFrame(BaseModel):
    """What the display should show right now."""

    text: str
    color: str
    critical: bool = False
    phase: TimerPhase = TimerPhase.IDLE
