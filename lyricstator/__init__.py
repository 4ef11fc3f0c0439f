"""
Lyricstator - settings store and preferences for the Lyricstator karaoke player.
"""

__version__ = "0.9.0"
