"""Shared pytest configuration."""

import os

# Qt widgets are created without a display server
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
