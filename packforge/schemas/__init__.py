"""Schema definitions for asset configuration."""

from .config import AppConfig, FlatpakOptions, load_config

__all__ = [
    "AppConfig",
    "FlatpakOptions",
    "load_config",
]
