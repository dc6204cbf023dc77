"""Configuration loading for formatter defaults."""

from readout.config.settings import (
    get_config,
    get_config_loaded_sources,
    get_setting,
    load_config,
    reload_config,
)

__all__ = [
    "load_config",
    "get_config",
    "reload_config",
    "get_config_loaded_sources",
    "get_setting",
]
