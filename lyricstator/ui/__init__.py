"""
User interface components for Lyricstator.
"""

from .dialogs import PreferencesDialog

__all__ = ["PreferencesDialog"]
