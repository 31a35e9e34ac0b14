"""Configuration Pydantic models: HudConfig, DisplayConfig, CreditsConfig, SystemConfig."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DisplayConfig(BaseModel):
    """Countdown widget defaults, used until the host sends its own options.

    Colour fields accept any host colour format; they are normalised by the
    colour translator when a :class:`CountdownTimer` is built.
    """

    model_config = ConfigDict(extra="forbid")

    default_duration_seconds: float = Field(
        default=60.0, gt=0, description="Duration used when the host sends none / garbage"
    )
    low_time_threshold: float = Field(
        default=30.0, description="At or below this many seconds the timer turns critical"
    )
    timer_color: str = Field(default="white", description="Normal label colour")
    low_time_color: str = Field(default="red", description="Critical label colour")
    waiting_text: str = Field(
        default="WAITING FOR HOST...", description="Shown before the first start"
    )
    font_size: int = Field(default=96, description="Label font size in px")


class CreditsConfig(BaseModel):
    """Content and pacing of the scrolling credits page."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(default="CREDITS", description="Heading at the top of the roll")
    lines: list[str] = Field(default_factory=list, description="One entry per credits line")
    scroll_seconds: float = Field(
        default=30.0, gt=0, description="Time for the roll to pass the screen once"
    )
    font_size: int = Field(default=32, description="Credits line font size in px")


class SystemConfig(BaseModel):
    """Non-display runtime settings."""

    model_config = ConfigDict(extra="forbid")

    log_level: str = Field(default="INFO", description="Root log level")
    log_dir: str = Field(default="logs", description="Directory for rotating log files")
    event_bus_queue_size: int = Field(default=1000, description="Max queued events")
    webui_port: int = Field(default=8080, description="NiceGUI listen port")
    dev_mode: bool = Field(default=False, description="Show host-simulation controls")


class HudConfig(BaseModel):
    """Top-level configuration loaded from ``hud_config.json``."""

    model_config = ConfigDict(extra="forbid")

    display: DisplayConfig = Field(default_factory=DisplayConfig)
    credits: CreditsConfig = Field(default_factory=CreditsConfig)
    system: SystemConfig = Field(default_factory=SystemConfig)
