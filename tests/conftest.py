"""Shared pytest configuration.

Widgets are created without a display server.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
