"""Doodle - version constants.

Keep this module tiny and dependency-free. It is imported by core, bindings
and the demo app and must not have side effects.
"""

APP_NAME = "Doodle"
APP_SHORT = "doodle"

APP_VERSION = "0.1.0"

# Defaults (device pixels)
# NOTE: keep these stable; settings fall back to them on invalid input.
DEFAULT_CANVAS_PX = (640, 480)
DEFAULT_BACKGROUND = "white"
# 24 frames per second, as a fixed delay between frames.
DEFAULT_FRAME_INTERVAL_MS = 1000 // 24
