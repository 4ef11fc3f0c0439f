"""
Default settings for Lyricstator.

These are the default values used when no user configuration exists.
"""

from enum import Enum
from types import MappingProxyType
from typing import Dict

from .values import Scalar

APPLICATION_NAME = "Lyricstator"
CONFIG_EXTENSION = ".ini"


class ConfigKey(Enum):
    """Known settings, each with its key string and default value."""

    # Audio
    AUDIO_DEVICE = ("audio/device", "default")
    AUDIO_SAMPLE_RATE = ("audio/sample_rate", 44100)
    AUDIO_CHANNELS = ("audio/channels", 2)
    AUDIO_BUFFER_SIZE = ("audio/buffer_size", 1024)
    AUDIO_VOLUME = ("audio/volume", 1.0)

    # Display
    DISPLAY_WIDTH = ("display/width", 1280)
    DISPLAY_HEIGHT = ("display/height", 720)
    DISPLAY_FULLSCREEN = ("display/fullscreen", False)
    DISPLAY_THEME = ("display/theme", "default")

    # Features
    MIDI_ENABLED = ("midi/enabled", True)
    PITCH_DETECTION_ENABLED = ("pitch_detection/enabled", True)

    # General
    LANGUAGE = ("general/language", "en")
    AUTOSAVE_ENABLED = ("general/autosave_enabled", True)
    AUTOSAVE_INTERVAL = ("general/autosave_interval", 300)  # seconds

    @property
    def key(self) -> str:
        return self.value[0]

    @property
    def default(self) -> Scalar:
        return self.value[1]


DEFAULT_SETTINGS = MappingProxyType({item.key: item.default for item in ConfigKey})


def build_default_table() -> Dict[str, Scalar]:
    """Return a fresh, mutable copy of the default settings."""
    return dict(DEFAULT_SETTINGS)
