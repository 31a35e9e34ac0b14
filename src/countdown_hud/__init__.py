"""countdown-hud — host-driven countdown widget with engine colour translation."""

__version__ = "1.0.0"
