"""Module de configuration."""

from ordered_ini.config.loader import ConfigLoader, FileConfigLoader
from ordered_ini.config.settings import IniSettings, load_settings

__all__ = [
    "ConfigLoader",
    "FileConfigLoader",
    "IniSettings",
    "load_settings",
]
