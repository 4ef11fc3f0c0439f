#!/usr/bin/env python3
"""
Lyricstator - Main entry point.

Launches the preferences dialog.
"""

import sys

from lyricstator.main import main


if __name__ == "__main__":
    sys.exit(main())
