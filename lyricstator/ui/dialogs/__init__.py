"""Dialog windows for Lyricstator."""

from .preferences_dialog import PreferencesDialog

__all__ = ["PreferencesDialog"]
