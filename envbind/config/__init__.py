"""
Configuration Management

Library settings from ENVBIND_* variables and the YAML loader.
"""

from envbind.config.settings import EnvBindSettings, get_settings, reset_settings
from envbind.config.loader import ConfigLoader

__all__ = [
    "EnvBindSettings",
    "get_settings",
    "reset_settings",
    "ConfigLoader",
]
