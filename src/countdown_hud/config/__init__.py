"""Configuration: config manager and the shipped ``hud_config.json``."""

from countdown_hud.config.config_manager import load_config

__all__ = ["load_config"]
