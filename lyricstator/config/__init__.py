"""
Configuration management for Lyricstator.

This module handles application settings, defaults, and persistence.
"""

from .defaults import APPLICATION_NAME, DEFAULT_SETTINGS, ConfigKey
from .store import ConfigStore
from .values import ConfigValue, ValueKind

__all__ = [
    "APPLICATION_NAME",
    "ConfigKey",
    "ConfigStore",
    "ConfigValue",
    "DEFAULT_SETTINGS",
    "ValueKind",
]
